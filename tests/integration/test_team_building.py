"""End-to-end team building from the sample catalog."""

from __future__ import annotations

import pytest

from dreadball.domain import builders
from dreadball.domain import models as dm
from dreadball.domain.enums import AffinityLevel
from dreadball.domain.errors import AffinityCostNotSelectedError
from dreadball.domain.rules_config import DEFAULT_RULES
from dreadball.schemas import load_catalog


@pytest.fixture
def catalog(catalog_path):
    return load_catalog(catalog_path)


def test_build_and_progress_advancement_team(catalog):
    assets = catalog.team_type_assets["Marauders"]
    team = builders.create_advancement_team(assets, name="Greenfield Grinders")

    for entry in catalog.units_for("Marauders"):
        for _ in range(entry.initial):
            team.add_player(builders.create_advancement_unit(entry.unit))

    assert list(team.players) == [1, 2, 3, 4]
    starting = team.total_valoration
    # 2 jacks at 9, 2 guards at 12, 4 dice, 2 cards, offensive coach
    assert starting == 2 * 9 + 2 * 12 + 4 * 10 + 2 * 10 + 15

    veteran = team.players[1]
    veteran.rank = 2
    veteran.grafted_implant = catalog.components["Grav Gloves"]
    veteran.add_ability(dm.Ability("Steady"))
    increase = 2 * DEFAULT_RULES.advancement.rank_cost_increase + 5
    assert team.total_valoration == starting + increase

    team.remove_player(2)
    troll = builders.create_advancement_unit(catalog.mvp_availabilities[0].unit, name="Grunt")
    assert team.add_player(troll) == 2
    assert team.total_valoration == starting + increase - 9 + 40


def test_build_sponsor_team(catalog):
    sponsor = dm.Sponsor(name="Zee Promotions", rank=60)
    sponsor.set_affinity_groups(catalog.sponsor_affinity_groups["Mercenary"].affinity_groups)
    team = builders.create_sponsor_team(sponsor, catalog.sponsor_assets)

    striker = builders.create_affinity_unit(catalog.affinity_units["Human Striker"], name="Ann")
    team.add_player(striker)
    team.add_player(dm.Unit(**_copy_fields(catalog.units["Orc Guard"])))
    team.coaching_dice = 2
    team.wagers = 1

    with pytest.raises(AffinityCostNotSelectedError):
        _ = team.total_valoration

    striker.set_cost_for_friend()
    assert striker.cost_selection is AffinityLevel.FRIEND
    assert team.rank_cost == 2 * 1 + 1 * 1
    assert team.total_valoration == 13 + 12 + 3
    assert team.current_rank == 57


def _copy_fields(unit: dm.Unit) -> dict:
    return {
        "template_name": unit.template_name,
        "cost": unit.cost,
        "role": unit.role,
        "attributes": unit.attributes,
        "abilities": unit.abilities,
    }
