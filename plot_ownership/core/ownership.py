"""
Ownership Types - 地块归属层级

Types of ownership / membership of a plot, from strictest to loosest:

- LEADER  : plot owners only
- TRUSTED : owners + trusted players
- MEMBER  : owners + trusted + members
- ANY     : anyone the plot considers "added"

Trusted players can use a plot even while its owners are offline, members
cannot, so TRUSTED sits above MEMBER.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Set, Tuple

from plot_ownership.core.plot import PlotView


class OwnershipType(Enum):
    """归属层级。每个成员的值是它在配置文件中可用的别名 (第一个为规范名)。"""

    LEADER = ("leader",)
    TRUSTED = ("trusted",)
    MEMBER = ("member",)
    ANY = ("any", "all")

    def __init__(self, *aliases: str):
        self.aliases: Tuple[str, ...] = aliases

    @property
    def canonical_name(self) -> str:
        return self.aliases[0]

    def is_valid_plot_for_player(self, player_id: str, plot: PlotView) -> bool:
        return is_valid_plot_for_player(self, player_id, plot)

    def get_applicable_players(self, plot: PlotView) -> Set[str]:
        return get_applicable_players(self, plot)


def is_valid_plot_for_player(
    ownership_type: OwnershipType,
    player_id: str,
    plot: PlotView,
) -> bool:
    """Does the given player have the required type of ownership in the plot?"""
    if ownership_type is OwnershipType.LEADER:
        return plot.is_owner(player_id)
    if ownership_type is OwnershipType.TRUSTED:
        return plot.is_owner(player_id) or player_id in plot.get_trusted()
    if ownership_type is OwnershipType.MEMBER:
        return (
            plot.is_owner(player_id)
            or player_id in plot.get_trusted()
            or player_id in plot.get_members()
        )
    if ownership_type is OwnershipType.ANY:
        return plot.is_added(player_id)
    raise TypeError(f"Unknown ownership type: {ownership_type!r}")


def get_applicable_players(ownership_type: OwnershipType, plot: PlotView) -> Set[str]:
    """
    Gets a set of all players who meet the ownership criteria.

    These players may not currently be online. The returned set is a fresh
    copy owned by the caller.
    """
    players: Set[str] = set(plot.get_owners())
    if ownership_type is OwnershipType.LEADER:
        return players

    players.update(plot.get_trusted())
    if ownership_type is OwnershipType.TRUSTED:
        return players

    players.update(plot.get_members())
    if ownership_type in (OwnershipType.MEMBER, OwnershipType.ANY):
        # TODO: ANY 还应包含所有未被 deny 的玩家 (is_added 的通配规则), 这里暂未展开
        return players
    raise TypeError(f"Unknown ownership type: {ownership_type!r}")


# =========================================================================
# 🔎 别名索引 (Alias Index)
# =========================================================================

@dataclass(frozen=True)
class AliasIndex:
    """Read-only lookup table from alias to ownership type."""

    names: Tuple[str, ...]
    by_alias: Mapping[str, OwnershipType]

    def match(self, name: Optional[str]) -> Optional[OwnershipType]:
        if not name:
            return None
        return self.by_alias.get(name.upper())


def build_alias_index(types: Iterable[OwnershipType]) -> AliasIndex:
    """Build the alias index, keeping declaration order for ``names``.

    Keys of ``by_alias`` are upper-cased aliases.
    """
    names = []
    by_alias = {}
    for ownership_type in types:
        for alias in ownership_type.aliases:
            key = alias.upper()
            existing = by_alias.get(key)
            if existing is not None and existing is not ownership_type:
                raise ValueError(
                    f"Alias '{alias}' is declared by both {existing.name} and {ownership_type.name}"
                )
            names.append(alias)
            by_alias[key] = ownership_type
    return AliasIndex(names=tuple(names), by_alias=MappingProxyType(by_alias))


# 模块导入时构建一次，之后只读
_ALIAS_INDEX = build_alias_index(OwnershipType)


def get_alias_index() -> AliasIndex:
    return _ALIAS_INDEX


def match(name: Optional[str]) -> Optional[OwnershipType]:
    """
    Gets the ownership type with the given name or alias.

    Lookup is case-insensitive. Returns ``None`` if it can't be found.
    """
    return _ALIAS_INDEX.match(name)


def all_names() -> Tuple[str, ...]:
    """All valid names for ownership types, in declaration order."""
    return _ALIAS_INDEX.names
