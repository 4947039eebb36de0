"""Global configuration values for the plot ownership tiers."""

import os

PLOT_CONFIG = {
    "ownership": {
        # 配置文件/命令里写的层级名 (leader / trusted / member / any / all)
        "tier": os.getenv("PLOT_OWNERSHIP_TIER", "any"),
    },
    "redis": {
        "host": os.getenv("PLOT_REDIS_HOST", "localhost"),
        "port": int(os.getenv("PLOT_REDIS_PORT", "6379")),
        "password": os.getenv("PLOT_REDIS_PASSWORD"),
        "db": int(os.getenv("PLOT_REDIS_DB", "0")),
        "key_prefix": os.getenv("PLOT_REDIS_PREFIX", "plot:"),
    },
}
