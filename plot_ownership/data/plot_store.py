"""Read-only plot membership backed by Redis sets.

Key layout (prefix from ``PLOT_CONFIG["redis"]["key_prefix"]``)::

    plot:<plot_id>:owners
    plot:<plot_id>:trusted
    plot:<plot_id>:members
    plot:<plot_id>:denied
"""

import logging
from typing import Set

from plot_ownership.config import settings
from plot_ownership.core.plot import is_added_to
from plot_ownership.data.db_client import DBClient

logger = logging.getLogger(__name__)

MEMBERSHIP_ROLES = ("owners", "trusted", "members", "denied")


class RedisPlotView:
    """``PlotView`` over the host's Redis mirror. Never writes."""

    def __init__(self, plot_id: str, redis_client=None):
        self.plot_id = plot_id
        self.redis = redis_client if redis_client is not None else DBClient.get_redis()
        self.key_prefix = settings.PLOT_CONFIG["redis"]["key_prefix"]

    def _get_key(self, role: str) -> str:
        return f"{self.key_prefix}{self.plot_id}:{role}"

    def _members_of(self, role: str) -> Set[str]:
        return set(self.redis.smembers(self._get_key(role)))

    def exists(self) -> bool:
        keys = [self._get_key(role) for role in MEMBERSHIP_ROLES]
        return self.redis.exists(*keys) > 0

    def get_owners(self) -> Set[str]:
        return self._members_of("owners")

    def get_trusted(self) -> Set[str]:
        return self._members_of("trusted")

    def get_members(self) -> Set[str]:
        return self._members_of("members")

    def get_denied(self) -> Set[str]:
        return self._members_of("denied")

    def is_owner(self, player_id: str) -> bool:
        return bool(self.redis.sismember(self._get_key("owners"), player_id))

    def is_added(self, player_id: str) -> bool:
        return is_added_to(
            player_id,
            self.get_owners(),
            self.get_trusted(),
            self.get_members(),
            self.get_denied(),
        )


def plot_exists(plot_id: str, redis_client=None) -> bool:
    """True when the host has mirrored any membership set for the plot."""
    view = RedisPlotView(plot_id, redis_client)
    found = view.exists()
    if not found:
        logger.debug("地块不存在: %s", plot_id)
    return found
