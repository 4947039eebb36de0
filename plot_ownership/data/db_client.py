"""Database client providing Redis access for plot membership lookups."""

import logging
from typing import Optional

import redis

from plot_ownership.config import settings

logger = logging.getLogger(__name__)


class DBClient:
    """Lazy-initialized client for the plot host's Redis."""

    _redis_instance: Optional[redis.Redis] = None

    @classmethod
    def get_redis(cls) -> redis.Redis:
        """Return a singleton Redis client configured from ``PLOT_CONFIG``."""

        if cls._redis_instance is None:
            conf = settings.PLOT_CONFIG["redis"]
            try:
                client = redis.Redis(
                    host=conf["host"],
                    port=conf["port"],
                    password=conf["password"],
                    db=conf["db"],
                    decode_responses=True,
                    socket_timeout=2,
                )
                client.ping()
                logger.info("Redis 连接成功 %s:%s", conf["host"], conf["port"])
            except redis.exceptions.RedisError as exc:
                logger.error("Redis 连接失败: %s", exc)
                raise
            cls._redis_instance = client
        return cls._redis_instance
