"""Cost and valoration calculators.

Each factory takes the per-asset costs of a ruleset and returns a plain
function from a team (or unit) to its integer total.  Teams and units
hold on to the function and call it every time their total is read;
nothing is cached.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from .errors import require

if TYPE_CHECKING:
    from .models import AdvancementUnit
    from .team import AdvancementTeam, SponsorTeam

T = TypeVar("T")

CostCalculator = Callable[[T], int]


def advancement_unit_valoration(rank_cost_increase: int) -> CostCalculator[AdvancementUnit]:
    """Valoration of a unit: its cost, its implant and its ranks."""

    require(rank_cost_increase, "rank cost increase")

    def calculate(unit: AdvancementUnit) -> int:
        require(unit, "unit")
        return unit.cost + unit.grafted_implant.cost + unit.rank * rank_cost_increase

    return calculate


def advancement_team_valoration(
    die_cost: int,
    card_cost: int,
    cheerleader_cost: int,
    coaching_cost: int,
) -> CostCalculator[AdvancementTeam]:
    """Valoration of a DBO team.

    Cash in hand, every player's valoration, the purchased assets, and the
    coaching cost once for each coaching staff member present.
    """

    require(die_cost, "die cost")
    require(card_cost, "card cost")
    require(cheerleader_cost, "cheerleader cost")
    require(coaching_cost, "coaching staff cost")

    def calculate(team: AdvancementTeam) -> int:
        require(team, "team")
        valoration = team.cash
        for player in team.players.values():
            valoration += player.valoration
        valoration += team.coaching_dice * die_cost
        valoration += team.dreadball_cards * card_cost
        valoration += team.cheerleaders * cheerleader_cost
        if team.defensive_coaching_staff:
            valoration += coaching_cost
        if team.offensive_coaching_staff:
            valoration += coaching_cost
        if team.support_coaching_staff:
            valoration += coaching_cost
        return valoration

    return calculate


def sponsor_team_rank_cost(
    die_cost: int,
    sabotage_cost: int,
    special_move_cost: int,
    cheerleader_cost: int,
    wager_cost: int,
    medibot_cost: int,
) -> CostCalculator[SponsorTeam]:
    """Sponsor rank spent on a DBX team's assets."""

    _require_sponsor_costs(
        die_cost, sabotage_cost, special_move_cost, cheerleader_cost, wager_cost, medibot_cost
    )

    def calculate(team: SponsorTeam) -> int:
        require(team, "team")
        cost = team.coaching_dice * die_cost
        cost += team.sabotage_cards * sabotage_cost
        cost += team.special_move_cards * special_move_cost
        cost += team.cheerleaders * cheerleader_cost
        cost += team.wagers * wager_cost
        cost += team.medibots * medibot_cost
        return cost

    return calculate


def sponsor_team_valoration(
    die_cost: int,
    sabotage_cost: int,
    special_move_cost: int,
    cheerleader_cost: int,
    wager_cost: int,
    medibot_cost: int,
) -> CostCalculator[SponsorTeam]:
    """Valoration of a DBX team: players' costs plus its assets."""

    assets_cost = sponsor_team_rank_cost(
        die_cost, sabotage_cost, special_move_cost, cheerleader_cost, wager_cost, medibot_cost
    )

    def calculate(team: SponsorTeam) -> int:
        require(team, "team")
        return sum(player.cost for player in team.players.values()) + assets_cost(team)

    return calculate


def _require_sponsor_costs(
    die_cost: int,
    sabotage_cost: int,
    special_move_cost: int,
    cheerleader_cost: int,
    wager_cost: int,
    medibot_cost: int,
) -> None:
    require(die_cost, "die cost")
    require(sabotage_cost, "sabotage card cost")
    require(special_move_cost, "special move card cost")
    require(cheerleader_cost, "cheerleader cost")
    require(wager_cost, "wager cost")
    require(medibot_cost, "medibot cost")
