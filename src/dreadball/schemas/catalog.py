"""Pydantic schema for Dreadball catalog files.

A catalog is the rulebook data a roster is built from: team types and
their prices, unit templates, components, and which units each team type
may field.  Entries refer to each other by name; :meth:`Catalog.to_domain`
resolves those names into domain objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field, model_validator

from dreadball.config import get_settings
from dreadball.domain import availability as av
from dreadball.domain import models as dm
from dreadball.domain.enums import Role
from dreadball.domain.errors import CatalogError

logger = logging.getLogger(__name__)


class AttributesSchema(BaseModel):
    armor: int = Field(0, ge=0)
    movement: int = Field(0, ge=0)
    skill: int = Field(0, ge=0)
    speed: int = Field(0, ge=0)
    strength: int = Field(0, ge=0)

    def to_domain(self) -> dm.Attributes:
        return dm.Attributes(**self.model_dump())


class TeamTypeSchema(BaseModel):
    name: str = Field(..., min_length=1, description="Team type name")
    rules: list[str] = Field(default_factory=list, description="Special rule names")

    def to_domain(self) -> dm.TeamType:
        return dm.TeamType(name=self.name, rules=frozenset(dm.TeamRule(r) for r in self.rules))


class UnitSchema(BaseModel):
    template_name: str = Field(..., min_length=1)
    cost: int = Field(..., ge=0)
    role: Role
    attributes: AttributesSchema
    abilities: list[str] = Field(default_factory=list)
    mvp: bool = False
    giant: bool = False

    def to_domain(self) -> dm.Unit:
        return dm.Unit(
            template_name=self.template_name,
            cost=self.cost,
            role=self.role,
            attributes=self.attributes.to_domain(),
            abilities=frozenset(dm.Ability(a) for a in self.abilities),
            mvp=self.mvp,
            giant=self.giant,
        )


class AffinityUnitSchema(BaseModel):
    template_name: str = Field(..., min_length=1)
    role: Role
    attributes: AttributesSchema
    abilities: list[str] = Field(default_factory=list)
    mvp: bool = False
    giant: bool = False
    ally_cost: int = Field(..., ge=0)
    friend_cost: int = Field(..., ge=0)
    stranger_cost: int = Field(..., ge=0)
    affinity_groups: list[str] = Field(default_factory=list)
    hated_affinity_groups: list[str] = Field(default_factory=list)

    def to_domain(self) -> dm.AffinityUnit:
        base = dm.Unit(
            template_name=self.template_name,
            cost=0,
            role=self.role,
            attributes=self.attributes.to_domain(),
            abilities=frozenset(dm.Ability(a) for a in self.abilities),
            mvp=self.mvp,
            giant=self.giant,
        )
        return dm.AffinityUnit(
            base=base,
            ally_cost=self.ally_cost,
            friend_cost=self.friend_cost,
            stranger_cost=self.stranger_cost,
            affinity_groups=frozenset(dm.AffinityGroup(g) for g in self.affinity_groups),
            hated_affinity_groups=frozenset(
                dm.AffinityGroup(g) for g in self.hated_affinity_groups
            ),
        )


class ComponentSchema(BaseModel):
    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    cost: int = Field(..., ge=0)
    roles: list[Role] = Field(default_factory=list)
    attributes: AttributesSchema = Field(default_factory=AttributesSchema)
    abilities: list[str] = Field(default_factory=list)

    def to_domain(self) -> dm.Component:
        return dm.Component(
            name=self.name,
            location=dm.ComponentLocation(self.location),
            cost=self.cost,
            roles=frozenset(self.roles),
            attributes=self.attributes.to_domain(),
            abilities=frozenset(dm.Ability(a) for a in self.abilities),
        )


class TeamTypeAssetsSchema(BaseModel):
    team_type: str = Field(..., description="Name of a team type in the catalog")
    cheerleader_cost: int = Field(..., ge=0)
    cheerleaders_initial: int = Field(0, ge=0)
    cheerleaders_max: int = Field(..., ge=0)
    die_cost: int = Field(..., ge=0)
    dice_initial: int = Field(0, ge=0)
    dice_max: int = Field(..., ge=0)
    card_cost: int = Field(..., ge=0)
    cards_initial: int = Field(0, ge=0)
    cards_max: int = Field(..., ge=0)
    coaching_staff_cost: int = Field(..., ge=0)
    starts_with_offensive_staff: bool = False
    starts_with_defensive_staff: bool = False
    starts_with_support_staff: bool = False


class SponsorAssetsCostsSchema(BaseModel):
    die_cost: int = Field(..., ge=0)
    sabotage_card_cost: int = Field(..., ge=0)
    special_move_card_cost: int = Field(..., ge=0)
    cheerleader_cost: int = Field(..., ge=0)
    affinity_group_cost: int = Field(..., ge=0)
    medibot_cost: int = Field(..., ge=0)
    wager_cost: int = Field(..., ge=0)

    def to_domain(self) -> av.SponsorAssetsCosts:
        return av.SponsorAssetsCosts(**self.model_dump())


class SponsorAffinityGroupSchema(BaseModel):
    name: str = Field(..., min_length=1)
    affinity_groups: list[str] = Field(default_factory=list)
    includes_rank_increase: bool = False

    def to_domain(self) -> av.SponsorAffinityGroupAvailability:
        return av.SponsorAffinityGroupAvailability(
            name=self.name,
            affinity_groups=frozenset(dm.AffinityGroup(g) for g in self.affinity_groups),
            includes_rank_increase=self.includes_rank_increase,
        )


class TeamTypeSeasonSchema(BaseModel):
    team_type: str
    season: int = Field(..., ge=1)


class UnitAvailabilitySchema(BaseModel):
    team_type: str
    unit: str = Field(..., description="Template name of a unit in the catalog")
    initial: int = Field(0, ge=0)
    maximum: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if self.maximum < self.initial:
            raise ValueError("maximum must not be lower than initial")
        return self


class MvpAvailabilitySchema(BaseModel):
    team_type: str
    unit: str


@dataclass(slots=True)
class CatalogData:
    """Catalog entries resolved into domain objects, keyed by name.

    Units here are templates: hire copies of them through
    :mod:`dreadball.domain.builders` rather than adding them to a roster.
    """

    team_types: dict[str, dm.TeamType] = field(default_factory=dict)
    team_type_seasons: list[av.TeamTypeSeason] = field(default_factory=list)
    team_type_assets: dict[str, av.TeamTypeAssetsAvailability] = field(default_factory=dict)
    sponsor_assets: av.SponsorAssetsCosts | None = None
    sponsor_affinity_groups: dict[str, av.SponsorAffinityGroupAvailability] = field(
        default_factory=dict
    )
    units: dict[str, dm.Unit] = field(default_factory=dict)
    affinity_units: dict[str, dm.AffinityUnit] = field(default_factory=dict)
    components: dict[str, dm.Component] = field(default_factory=dict)
    unit_availabilities: list[av.UnitAvailability] = field(default_factory=list)
    mvp_availabilities: list[av.TeamTypeMvpAvailability] = field(default_factory=list)

    def units_for(self, team_type: str) -> list[av.UnitAvailability]:
        return [entry for entry in self.unit_availabilities if entry.team_type.name == team_type]


class Catalog(BaseModel):
    """Top-level catalog document."""

    team_types: list[TeamTypeSchema] = Field(default_factory=list)
    team_type_seasons: list[TeamTypeSeasonSchema] = Field(default_factory=list)
    team_type_assets: list[TeamTypeAssetsSchema] = Field(default_factory=list)
    sponsor_assets: SponsorAssetsCostsSchema | None = None
    sponsor_affinity_groups: list[SponsorAffinityGroupSchema] = Field(default_factory=list)
    units: list[UnitSchema] = Field(default_factory=list)
    affinity_units: list[AffinityUnitSchema] = Field(default_factory=list)
    components: list[ComponentSchema] = Field(default_factory=list)
    unit_availabilities: list[UnitAvailabilitySchema] = Field(default_factory=list)
    mvp_availabilities: list[MvpAvailabilitySchema] = Field(default_factory=list)

    def to_domain(self) -> CatalogData:
        """Resolve every name reference and build the domain objects.

        Raises:
            CatalogError: If an entry names a team type or unit that the
                catalog does not define.
        """

        data = CatalogData(
            team_types={t.name: t.to_domain() for t in self.team_types},
            units={u.template_name: u.to_domain() for u in self.units},
            affinity_units={u.template_name: u.to_domain() for u in self.affinity_units},
            components={c.name: c.to_domain() for c in self.components},
            sponsor_affinity_groups={
                g.name: g.to_domain() for g in self.sponsor_affinity_groups
            },
        )
        if self.sponsor_assets is not None:
            data.sponsor_assets = self.sponsor_assets.to_domain()

        for season in self.team_type_seasons:
            data.team_type_seasons.append(
                av.TeamTypeSeason(
                    team_type=_lookup(data.team_types, season.team_type, "team type"),
                    season=season.season,
                )
            )
        for assets in self.team_type_assets:
            values = assets.model_dump(exclude={"team_type"})
            data.team_type_assets[assets.team_type] = av.TeamTypeAssetsAvailability(
                team_type=_lookup(data.team_types, assets.team_type, "team type"), **values
            )
        for entry in self.unit_availabilities:
            data.unit_availabilities.append(
                av.UnitAvailability(
                    team_type=_lookup(data.team_types, entry.team_type, "team type"),
                    unit=_lookup(data.units, entry.unit, "unit"),
                    initial=entry.initial,
                    maximum=entry.maximum,
                )
            )
        for entry in self.mvp_availabilities:
            data.mvp_availabilities.append(
                av.TeamTypeMvpAvailability(
                    team_type=_lookup(data.team_types, entry.team_type, "team type"),
                    unit=_lookup(data.units, entry.unit, "unit"),
                )
            )
        return data


def _lookup(entries: dict, name: str, kind: str):
    try:
        return entries[name]
    except KeyError:
        raise CatalogError(f"unknown {kind} {name!r} referenced in catalog") from None


def load_catalog(path: Path | None = None) -> CatalogData:
    """Read a JSON catalog and resolve it into domain objects.

    When ``path`` is omitted the ``catalog_path`` setting is used.
    """

    if path is None:
        path = get_settings().catalog_path
    if path is None:
        raise CatalogError("no catalog path given and DREADBALL_CATALOG_PATH is not set")

    catalog = Catalog.model_validate_json(Path(path).read_bytes())
    data = catalog.to_domain()
    logger.info(
        "loaded catalog %s: %d team types, %d units, %d affinity units",
        path,
        len(data.team_types),
        len(data.units),
        len(data.affinity_units),
    )
    return data
