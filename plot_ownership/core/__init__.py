from .ownership import OwnershipType, match, all_names
from .plot import Plot, PlotView, EVERYONE
from .tier_config import UnknownOwnershipTypeError, resolve_tier, get_configured_tier

__all__ = [
    "OwnershipType",
    "match",
    "all_names",
    "Plot",
    "PlotView",
    "EVERYONE",
    "UnknownOwnershipTypeError",
    "resolve_tier",
    "get_configured_tier",
]
