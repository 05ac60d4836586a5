"""Tests for the factory functions."""

from __future__ import annotations

from dataclasses import replace

from dreadball.config import get_settings
from dreadball.domain import availability as av
from dreadball.domain import builders
from dreadball.domain import models as dm
from dreadball.domain.enums import AffinityLevel, Role
from dreadball.domain.rules_config import DEFAULT_RULES, AdvancementRules

TEMPLATE = dm.Unit(
    template_name="Orc Guard",
    cost=12,
    role=Role.GUARD,
    attributes=dm.Attributes(armor=3, movement=5, skill=5, speed=5, strength=3),
    abilities=[dm.Ability("Steady")],
)


def _assets(**overrides) -> av.TeamTypeAssetsAvailability:
    values = {
        "team_type": dm.TeamType("Marauders"),
        "cheerleader_cost": 3,
        "cheerleaders_initial": 1,
        "cheerleaders_max": 16,
        "die_cost": 1,
        "dice_initial": 2,
        "dice_max": 16,
        "card_cost": 2,
        "cards_initial": 4,
        "cards_max": 16,
        "coaching_staff_cost": 4,
        "starts_with_offensive_staff": True,
    }
    values.update(overrides)
    return av.TeamTypeAssetsAvailability(**values)


def test_create_advancement_team_seeds_starting_assets():
    team = builders.create_advancement_team(_assets(), name="Greenfield Grinders")

    assert team.name == "Greenfield Grinders"
    assert team.team_type == dm.TeamType("Marauders")
    assert team.cheerleaders == 1
    assert team.coaching_dice == 2
    assert team.dreadball_cards == 4
    assert team.offensive_coaching_staff
    assert not team.defensive_coaching_staff
    # 2 dice + 4 cards*2 + 1 cheerleader*3 + offensive coach
    assert team.total_valoration == 2 + 8 + 3 + 4


def test_create_advancement_unit_copies_template():
    unit = builders.create_advancement_unit(TEMPLATE, name="Grok")

    assert unit.name == "Grok"
    assert TEMPLATE.name == ""
    assert unit.base is not TEMPLATE
    assert unit.abilities == {dm.Ability("Steady")}
    assert unit.valoration == 12

    unit.rank = 2
    assert unit.valoration == 12 + 2 * DEFAULT_RULES.advancement.rank_cost_increase


def test_create_advancement_unit_uses_rules():
    rules = replace(DEFAULT_RULES, advancement=AdvancementRules(rank_cost_increase=7))
    unit = builders.create_advancement_unit(TEMPLATE, rules=rules)
    unit.rank = 1
    assert unit.valoration == 19


def test_create_affinity_unit_copies_template():
    template = dm.AffinityUnit(
        base=replace(TEMPLATE, cost=0), ally_cost=1, friend_cost=2, stranger_cost=3
    )
    unit = builders.create_affinity_unit(template, AffinityLevel.ALLY, name="Ann")

    assert unit.cost == 1
    assert unit.name == "Ann"
    assert template.name == ""
    assert template.cost_selection is AffinityLevel.UNSET


def test_create_sponsor_team_with_default_rules():
    sponsor = dm.Sponsor(name="Zee", rank=20)
    team = builders.create_sponsor_team(sponsor)
    team.coaching_dice = 1
    team.special_move_cards = 1
    team.medibots = 1
    team.add_player(TEMPLATE)

    sponsor_rules = DEFAULT_RULES.sponsor
    expected = (
        sponsor_rules.die_cost + sponsor_rules.special_move_card_cost + sponsor_rules.medibot_cost
    )
    assert team.rank_cost == expected
    assert team.total_valoration == expected + 12
    assert team.current_rank == 20 - expected


def test_create_sponsor_team_with_explicit_costs():
    costs = av.SponsorAssetsCosts(
        die_cost=1,
        sabotage_card_cost=2,
        special_move_card_cost=3,
        cheerleader_cost=4,
        affinity_group_cost=0,
        medibot_cost=6,
        wager_cost=5,
    )
    team = builders.create_sponsor_team(dm.Sponsor(name="Zee"), costs)
    team.coaching_dice = 2
    team.sabotage_cards = 4
    team.special_move_cards = 5
    team.cheerleaders = 1
    team.wagers = 3
    team.medibots = 2

    assert team.rank_cost == 56


def test_sponsor_costs_from_rules():
    costs = builders.sponsor_costs_from_rules()
    assert costs.wager_cost == DEFAULT_RULES.sponsor.wager_cost
    assert costs.affinity_group_cost == DEFAULT_RULES.sponsor.affinity_group_cost


def test_builders_default_to_settings_rules(monkeypatch):
    monkeypatch.setenv("DREADBALL_RANK_COST_INCREASE", "8")
    get_settings.cache_clear()
    try:
        unit = builders.create_advancement_unit(TEMPLATE)
        unit.rank = 1
        assert unit.valoration == 12 + 8
    finally:
        get_settings.cache_clear()


def test_explicit_rules_win_over_settings(monkeypatch):
    monkeypatch.setenv("DREADBALL_RANK_COST_INCREASE", "8")
    get_settings.cache_clear()
    try:
        unit = builders.create_advancement_unit(TEMPLATE, rules=DEFAULT_RULES)
        unit.rank = 1
        assert unit.valoration == 12 + DEFAULT_RULES.advancement.rank_cost_increase
    finally:
        get_settings.cache_clear()


def test_create_advancement_unit_leaves_template_alone():
    first = builders.create_advancement_unit(TEMPLATE, rules=DEFAULT_RULES)
    second = builders.create_advancement_unit(TEMPLATE, rules=DEFAULT_RULES)

    first.name = "Grok"

    assert second.name == ""
    assert TEMPLATE.name == ""
