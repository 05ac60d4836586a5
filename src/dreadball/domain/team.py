"""Team rosters for the two Dreadball team-building modes.

A roster maps 1-based positions to units.  Positions can be sparse: a
team with players at 1 and 3 has a gap at 2 that the next automatic
insert fills.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar

from .errors import InvalidPositionError, require
from .models import AdvancementPlayer, AffinityGroup, Sponsor, SponsorPlayer, TeamType

logger = logging.getLogger(__name__)

U = TypeVar("U")


@dataclass(eq=False, kw_only=True)
class Team(Generic[U]):
    """Roster plus the counters shared by every team."""

    cheerleaders: int = 0
    coaching_dice: int = 0
    _roster: dict[int, U] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        require(self.cheerleaders, "cheerleaders")
        require(self.coaching_dice, "coaching dice")

    @property
    def players(self) -> Mapping[int, U]:
        """Read-only view of the roster, ordered by position."""

        return MappingProxyType(dict(sorted(self._roster.items())))

    def add_player(self, player: U, position: int | None = None) -> int:
        """Place a player on the roster and return the position used.

        Without a position the lowest free one is taken.  An explicit
        position replaces whoever was there.
        """

        require(player, "player")
        if position is None:
            position = self._first_free_position()
        elif position <= 0:
            raise InvalidPositionError(position)

        if position in self._roster:
            logger.debug("replacing player at position %d", position)
        else:
            logger.debug("added player at position %d", position)
        self._roster[position] = player
        return position

    def remove_player(self, position: int) -> None:
        if self._roster.pop(position, None) is not None:
            logger.debug("removed player at position %d", position)

    def remove_unit(self, player: U) -> int | None:
        """Remove ``player`` from the roster, returning its former position.

        The same object is looked for first; failing that, the first equal
        unit by position order is removed.  Returns ``None`` when nothing
        matched.
        """

        position = self.position_of(player)
        if position is not None:
            self.remove_player(position)
        return position

    def position_of(self, player: U) -> int | None:
        require(player, "player")
        ordered = sorted(self._roster.items())
        for position, candidate in ordered:
            if candidate is player:
                return position
        for position, candidate in ordered:
            if candidate == player:
                return position
        return None

    def _first_free_position(self) -> int:
        position = 1
        while position in self._roster:
            position += 1
        return position


@dataclass(eq=False, kw_only=True)
class AdvancementTeam(Team[AdvancementPlayer]):
    """DBO team that gains experience and assets across a season."""

    team_type: TeamType
    valoration_calculator: Callable[[AdvancementTeam], int] = field(repr=False)
    name: str = ""
    cash: int = 0
    dreadball_cards: int = 0
    offensive_coaching_staff: bool = False
    defensive_coaching_staff: bool = False
    support_coaching_staff: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        require(self.team_type, "team type")
        require(self.valoration_calculator, "valoration calculator")
        require(self.name, "name")
        require(self.cash, "cash")
        require(self.dreadball_cards, "dreadball cards")

    @property
    def total_valoration(self) -> int:
        return self.valoration_calculator(self)


@dataclass(eq=False, kw_only=True)
class SponsorTeam(Team[SponsorPlayer]):
    """DBX team hired by a sponsor for a single event."""

    sponsor: Sponsor
    valoration_calculator: Callable[[SponsorTeam], int] = field(repr=False)
    rank_cost_calculator: Callable[[SponsorTeam], int] = field(repr=False)
    medibots: int = 0
    sabotage_cards: int = 0
    special_move_cards: int = 0
    wagers: int = 0
    additional_affinity_groups: list[AffinityGroup] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        require(self.sponsor, "sponsor")
        require(self.valoration_calculator, "valoration calculator")
        require(self.rank_cost_calculator, "rank cost calculator")
        for name in ("medibots", "sabotage_cards", "special_move_cards", "wagers"):
            require(getattr(self, name), name.replace("_", " "))

    def add_additional_affinity_group(self, affinity: AffinityGroup) -> None:
        self.additional_affinity_groups.append(require(affinity, "affinity group"))

    def clear_additional_affinity_groups(self) -> None:
        self.additional_affinity_groups.clear()

    @property
    def total_valoration(self) -> int:
        return self.valoration_calculator(self)

    @property
    def rank_cost(self) -> int:
        return self.rank_cost_calculator(self)

    @property
    def base_rank(self) -> int:
        return self.sponsor.rank

    @property
    def current_rank(self) -> int:
        """Sponsor rank left after paying for the team's assets."""

        return self.base_rank - self.rank_cost
