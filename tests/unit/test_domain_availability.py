"""Tests for availability records and cost tables."""

from __future__ import annotations

import pytest

from dreadball.domain import availability as av
from dreadball.domain import models as dm
from dreadball.domain.enums import Role
from dreadball.domain.rules_config import DEFAULT_RULES

MARAUDERS = dm.TeamType("Marauders")


def _unit() -> dm.Unit:
    return dm.Unit(
        template_name="Goblin Jack",
        cost=9,
        role=Role.JACK,
        attributes=dm.Attributes.zero(),
    )


def test_sponsor_assets_costs_reject_none():
    with pytest.raises(ValueError, match="medibot cost must not be None"):
        av.SponsorAssetsCosts(
            die_cost=1,
            sabotage_card_cost=1,
            special_move_card_cost=2,
            cheerleader_cost=1,
            affinity_group_cost=5,
            medibot_cost=None,
            wager_cost=1,
        )


def test_team_type_assets_defaults_to_no_staff():
    assets = av.TeamTypeAssetsAvailability(
        team_type=MARAUDERS,
        cheerleader_cost=10,
        cheerleaders_initial=0,
        cheerleaders_max=16,
        die_cost=10,
        dice_initial=4,
        dice_max=16,
        card_cost=10,
        cards_initial=2,
        cards_max=16,
        coaching_staff_cost=15,
    )
    assert not assets.starts_with_offensive_staff
    assert not assets.starts_with_defensive_staff
    assert not assets.starts_with_support_staff


def test_sponsor_affinity_group_availability_deduplicates():
    availability = av.SponsorAffinityGroupAvailability(
        name="Mercenary",
        affinity_groups=[dm.AffinityGroup("Greedy"), dm.AffinityGroup("Greedy")],
    )
    assert availability.affinity_groups == {dm.AffinityGroup("Greedy")}
    assert availability == av.SponsorAffinityGroupAvailability(name="Mercenary")


def test_unit_availability_range():
    availability = av.UnitAvailability(team_type=MARAUDERS, unit=_unit(), initial=2, maximum=6)
    assert availability.template_name == "Goblin Jack"

    with pytest.raises(ValueError, match="below the initial"):
        av.UnitAvailability(team_type=MARAUDERS, unit=_unit(), initial=3, maximum=2)
    with pytest.raises(ValueError, match="must not be negative"):
        av.UnitAvailability(team_type=MARAUDERS, unit=_unit(), initial=-1, maximum=2)


def test_unit_availability_equality_by_team_type_and_template():
    first = av.UnitAvailability(team_type=MARAUDERS, unit=_unit(), initial=2, maximum=6)
    second = av.UnitAvailability(team_type=MARAUDERS, unit=_unit(), initial=0, maximum=1)
    assert first == second
    assert len({first, second}) == 1


def test_mvp_availability_rejects_none_unit():
    with pytest.raises(ValueError, match="unit must not be None"):
        av.TeamTypeMvpAvailability(team_type=MARAUDERS, unit=None)


def test_team_type_season():
    season = av.TeamTypeSeason(team_type=MARAUDERS, season=1)
    assert season == av.TeamTypeSeason(team_type=dm.TeamType("Marauders"), season=1)


def test_default_rules():
    assert DEFAULT_RULES.advancement.rank_cost_increase == 5
    assert DEFAULT_RULES.sponsor.affinity_group_cost == 5
