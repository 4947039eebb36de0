"""Resolve configured / typed tier names into ``OwnershipType`` values."""

import logging

from plot_ownership.config import settings
from plot_ownership.core.ownership import OwnershipType, all_names, match

logger = logging.getLogger(__name__)


class UnknownOwnershipTypeError(ValueError):
    """Raised when a tier name from config or a command is not recognized."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Unrecognized tier name '{name}'. Valid names: {', '.join(all_names())}"
        )


def resolve_tier(name: str) -> OwnershipType:
    ownership_type = match(name)
    if ownership_type is None:
        raise UnknownOwnershipTypeError(name)
    return ownership_type


def get_configured_tier() -> OwnershipType:
    """读取配置中的归属层级 (PLOT_OWNERSHIP_TIER)。"""
    name = settings.PLOT_CONFIG["ownership"]["tier"]
    try:
        return resolve_tier(name)
    except UnknownOwnershipTypeError:
        logger.error("配置中的归属层级无效: %s", name)
        raise


def describe_tiers() -> str:
    """Help text, one tier per line with its aliases."""
    lines = []
    for ownership_type in OwnershipType:
        lines.append(f"{ownership_type.canonical_name:<10} {' / '.join(ownership_type.aliases)}")
    return "\n".join(lines)
