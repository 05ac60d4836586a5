"""Availability records: what a team type or sponsor may buy, and at what cost.

These mirror the tables printed in the rulebooks.  They are plain catalog
entries; nothing here enforces them on a roster.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .errors import require, require_all
from .models import AffinityGroup, TeamType, Unit


def _require_fields(record: object) -> None:
    for item in fields(record):
        require(getattr(record, item.name), item.name.replace("_", " "))


@dataclass(frozen=True, slots=True)
class SponsorAssetsCosts:
    """Rank cost of every asset a DBX sponsor can buy."""

    die_cost: int
    sabotage_card_cost: int
    special_move_card_cost: int
    cheerleader_cost: int
    affinity_group_cost: int
    medibot_cost: int
    wager_cost: int

    def __post_init__(self) -> None:
        _require_fields(self)


@dataclass(frozen=True, slots=True)
class TeamTypeAssetsAvailability:
    """Asset prices, starting amounts and limits for a DBO team type."""

    team_type: TeamType
    cheerleader_cost: int
    cheerleaders_initial: int
    cheerleaders_max: int
    die_cost: int
    dice_initial: int
    dice_max: int
    card_cost: int
    cards_initial: int
    cards_max: int
    coaching_staff_cost: int
    starts_with_offensive_staff: bool = False
    starts_with_defensive_staff: bool = False
    starts_with_support_staff: bool = False

    def __post_init__(self) -> None:
        _require_fields(self)


@dataclass(frozen=True, slots=True)
class SponsorAffinityGroupAvailability:
    """A bundle of affinity groups a sponsor can pick at creation."""

    name: str
    affinity_groups: frozenset[AffinityGroup] = field(default=frozenset(), compare=False)
    includes_rank_increase: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        require(self.name, "name")
        require(self.includes_rank_increase, "rank increase flag")
        object.__setattr__(
            self,
            "affinity_groups",
            frozenset(require_all(self.affinity_groups, "affinity groups")),
        )


@dataclass(frozen=True, slots=True)
class TeamTypeSeason:
    """Season in which a team type was released."""

    team_type: TeamType
    season: int

    def __post_init__(self) -> None:
        _require_fields(self)


@dataclass(frozen=True, slots=True)
class UnitAvailability:
    """How many copies of a unit a team type starts with and may hold."""

    team_type: TeamType
    unit: Unit = field(compare=False)
    initial: int = field(compare=False)
    maximum: int = field(compare=False)
    template_name: str = field(init=False)

    def __post_init__(self) -> None:
        require(self.team_type, "team type")
        require(self.unit, "unit")
        require(self.initial, "initial number of units")
        require(self.maximum, "maximum number of units")
        if self.initial < 0:
            raise ValueError(f"initial number of units must not be negative, got {self.initial}")
        if self.maximum < self.initial:
            raise ValueError(
                f"maximum number of units ({self.maximum}) is below the initial ({self.initial})"
            )
        object.__setattr__(self, "template_name", self.unit.template_name)


@dataclass(frozen=True, slots=True)
class TeamTypeMvpAvailability:
    """MVP a team type may hire."""

    team_type: TeamType
    unit: Unit = field(compare=False)
    template_name: str = field(init=False)

    def __post_init__(self) -> None:
        require(self.team_type, "team type")
        require(self.unit, "unit")
        object.__setattr__(self, "template_name", self.unit.template_name)
