"""
Plot view - 宿主提供的地块成员信息

The classifier never owns plot data. It only needs the five read operations
declared by ``PlotView``; ``Plot`` is the in-memory implementation used by the
console and the tests.
"""

import uuid
from dataclasses import dataclass, field
from typing import Iterable, Protocol, Set, Union

# 通配身份: 出现在 trusted / members 中时，所有未被 deny 的玩家都算 "added"
EVERYONE = "00000000-0000-0000-0000-000000000000"


def normalize_player_id(player_id: Union[str, uuid.UUID]) -> str:
    """Player ids are stored as lower-case UUID text."""
    return str(player_id).strip().lower()


class PlotView(Protocol):
    """Read-only plot membership, as exposed by the plot host."""

    def get_owners(self) -> Set[str]:
        ...

    def get_trusted(self) -> Set[str]:
        ...

    def get_members(self) -> Set[str]:
        ...

    def is_owner(self, player_id: str) -> bool:
        ...

    def is_added(self, player_id: str) -> bool:
        ...


def is_added_to(
    player_id: str,
    owners: Set[str],
    trusted: Set[str],
    members: Set[str],
    denied: Set[str],
) -> bool:
    """Broad "any association" rule shared by every plot view.

    Explicit owner / trusted / member entries always count; denied only
    blocks the EVERYONE wildcard.
    """
    if player_id in owners or player_id in trusted or player_id in members:
        return True
    if player_id in denied:
        return False
    return EVERYONE in trusted or EVERYONE in members


@dataclass
class Plot:
    """In-memory plot membership."""

    plot_id: str
    owners: Set[str] = field(default_factory=set)
    trusted: Set[str] = field(default_factory=set)
    members: Set[str] = field(default_factory=set)
    denied: Set[str] = field(default_factory=set)

    @classmethod
    def from_ids(
        cls,
        plot_id: str,
        owners: Iterable = (),
        trusted: Iterable = (),
        members: Iterable = (),
        denied: Iterable = (),
    ) -> "Plot":
        return cls(
            plot_id=plot_id,
            owners={normalize_player_id(p) for p in owners},
            trusted={normalize_player_id(p) for p in trusted},
            members={normalize_player_id(p) for p in members},
            denied={normalize_player_id(p) for p in denied},
        )

    def get_owners(self) -> Set[str]:
        return set(self.owners)

    def get_trusted(self) -> Set[str]:
        return set(self.trusted)

    def get_members(self) -> Set[str]:
        return set(self.members)

    def is_owner(self, player_id: str) -> bool:
        return player_id in self.owners

    def is_added(self, player_id: str) -> bool:
        return is_added_to(player_id, self.owners, self.trusted, self.members, self.denied)
