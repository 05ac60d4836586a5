"""Factory functions wiring calculators into teams and units.

Use these when building teams from catalog data, so every team of a given
type or sponsor prices its assets the same way.  Tests can still build the
dataclasses directly and inject any callable as calculator.

Example:
    assets = catalog.team_type_assets["Marauders"]
    team = create_advancement_team(assets, name="Greenfield Grinders")
    team.add_player(create_advancement_unit(catalog.units["Goblin Jack"]))
    team.total_valoration
"""

from __future__ import annotations

import logging
from dataclasses import replace

from dreadball import config

from .availability import SponsorAssetsCosts, TeamTypeAssetsAvailability
from .enums import AffinityLevel
from .errors import require
from .models import AdvancementUnit, AffinityUnit, Sponsor, Unit
from .rules_config import RulesConfig
from .team import AdvancementTeam, SponsorTeam
from .valoration import (
    CostCalculator,
    advancement_team_valoration,
    advancement_unit_valoration,
    sponsor_team_rank_cost,
    sponsor_team_valoration,
)

logger = logging.getLogger(__name__)


def advancement_team_calculator(
    assets: TeamTypeAssetsAvailability,
) -> CostCalculator[AdvancementTeam]:
    """Build the team valoration calculator for a team type's prices."""

    require(assets, "team type assets")
    return advancement_team_valoration(
        die_cost=assets.die_cost,
        card_cost=assets.card_cost,
        cheerleader_cost=assets.cheerleader_cost,
        coaching_cost=assets.coaching_staff_cost,
    )


def sponsor_costs_from_rules(rules: RulesConfig | None = None) -> SponsorAssetsCosts:
    sponsor = _rules(rules).sponsor
    return SponsorAssetsCosts(
        die_cost=sponsor.die_cost,
        sabotage_card_cost=sponsor.sabotage_card_cost,
        special_move_card_cost=sponsor.special_move_card_cost,
        cheerleader_cost=sponsor.cheerleader_cost,
        affinity_group_cost=sponsor.affinity_group_cost,
        medibot_cost=sponsor.medibot_cost,
        wager_cost=sponsor.wager_cost,
    )


def sponsor_calculators(
    costs: SponsorAssetsCosts,
) -> tuple[CostCalculator[SponsorTeam], CostCalculator[SponsorTeam]]:
    """Return the ``(valoration, rank cost)`` calculators for sponsor prices."""

    require(costs, "sponsor asset costs")
    prices = (
        costs.die_cost,
        costs.sabotage_card_cost,
        costs.special_move_card_cost,
        costs.cheerleader_cost,
        costs.wager_cost,
        costs.medibot_cost,
    )
    return sponsor_team_valoration(*prices), sponsor_team_rank_cost(*prices)


def create_advancement_team(
    assets: TeamTypeAssetsAvailability, *, name: str = ""
) -> AdvancementTeam:
    """Create a DBO team stocked with its team type's starting assets."""

    team = AdvancementTeam(
        team_type=assets.team_type,
        valoration_calculator=advancement_team_calculator(assets),
        name=name,
        cheerleaders=assets.cheerleaders_initial,
        coaching_dice=assets.dice_initial,
        dreadball_cards=assets.cards_initial,
        offensive_coaching_staff=assets.starts_with_offensive_staff,
        defensive_coaching_staff=assets.starts_with_defensive_staff,
        support_coaching_staff=assets.starts_with_support_staff,
    )
    logger.debug("created %s team %r", assets.team_type.name, name)
    return team


def create_sponsor_team(
    sponsor: Sponsor,
    costs: SponsorAssetsCosts | None = None,
    *,
    rules: RulesConfig | None = None,
) -> SponsorTeam:
    """Create an empty DBX team for ``sponsor``.

    Prices come from ``costs`` when given, otherwise from ``rules``, which
    defaults to the rules built from the library settings.
    """

    if costs is None:
        costs = sponsor_costs_from_rules(rules)
    valoration, rank_cost = sponsor_calculators(costs)
    return SponsorTeam(
        sponsor=sponsor,
        valoration_calculator=valoration,
        rank_cost_calculator=rank_cost,
    )


def create_advancement_unit(
    template: Unit,
    *,
    name: str = "",
    rules: RulesConfig | None = None,
) -> AdvancementUnit:
    """Hire a fresh copy of ``template`` as a rank 0 advancement unit."""

    require(template, "unit template")
    rules = _rules(rules)
    return AdvancementUnit(
        base=replace(template, name=name),
        valoration_calculator=advancement_unit_valoration(rules.advancement.rank_cost_increase),
    )


def create_affinity_unit(
    template: AffinityUnit,
    level: AffinityLevel = AffinityLevel.UNSET,
    *,
    name: str = "",
) -> AffinityUnit:
    """Hire a fresh copy of an affinity unit template at the given level."""

    require(template, "unit template")
    return replace(template, base=replace(template.base, name=name), cost_selection=level)


def _rules(rules: RulesConfig | None) -> RulesConfig:
    if rules is None:
        return config.get_settings().rules_config()
    return rules
