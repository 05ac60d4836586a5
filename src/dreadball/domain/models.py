"""Dataclasses describing the Dreadball roster entities.

Value records (attributes, abilities, affinity groups, rules, components)
are frozen and compare by their identifying field, so building a set out
of them collapses duplicates the same way the game treats them: two
"Jump" abilities are the same ability.

Units are built by composition.  The base :class:`Unit` carries the
template statline; :class:`AffinityUnit` and :class:`AdvancementUnit`
wrap one and add pricing or progression state, and the composite
variants wrap those again with the list of parts the unit was assembled
from.  Reads that a wrapper does not change are forwarded to the wrapped
unit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from .enums import AffinityLevel, Role
from .errors import AffinityCostNotSelectedError, require, require_all

# --- Value records ---------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Attributes:
    """Statline shared by units and components."""

    armor: int
    movement: int
    skill: int
    speed: int
    strength: int

    def __post_init__(self) -> None:
        for name in ("armor", "movement", "skill", "speed", "strength"):
            require(getattr(self, name), name)

    @classmethod
    def zero(cls) -> Attributes:
        return cls(armor=0, movement=0, skill=0, speed=0, strength=0)


@dataclass(frozen=True, slots=True)
class Ability:
    """Special ability a unit may have (e.g. "Jump", "Steady")."""

    name: str

    def __post_init__(self) -> None:
        require(self.name, "name")


@dataclass(frozen=True, slots=True)
class AffinityGroup:
    """Tag used to price units for a sponsor."""

    name: str

    def __post_init__(self) -> None:
        require(self.name, "name")


@dataclass(frozen=True, slots=True)
class TeamRule:
    """Special rule applied to every team of a team type."""

    name: str

    def __post_init__(self) -> None:
        require(self.name, "name")


@dataclass(frozen=True, slots=True)
class ComponentLocation:
    """Where a component is fitted on a composite unit (head, arm, ...)."""

    name: str

    def __post_init__(self) -> None:
        require(self.name, "name")


@dataclass(frozen=True, slots=True)
class Component:
    """Part a composite unit is assembled from."""

    name: str
    location: ComponentLocation = field(compare=False)
    cost: int = field(compare=False)
    roles: frozenset[Role] = field(default=frozenset(), compare=False)
    attributes: Attributes = field(default_factory=Attributes.zero, compare=False)
    abilities: frozenset[Ability] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        require(self.name, "name")
        require(self.location, "location")
        require(self.cost, "cost")
        require(self.attributes, "attributes")
        object.__setattr__(self, "roles", frozenset(require_all(self.roles, "roles")))
        object.__setattr__(
            self, "abilities", frozenset(require_all(self.abilities, "abilities"))
        )


NO_IMPLANT = Component(name="none", location=ComponentLocation("none"), cost=0)
"""Placeholder implant carried by advancement units that have none grafted."""


@dataclass(slots=True, unsafe_hash=True)
class AffinityComponent:
    """Component priced by the sponsor's affinity with it.

    Starts on the stranger cost, the most expensive case.
    """

    name: str
    location: ComponentLocation = field(compare=False)
    ally_cost: int = field(compare=False)
    friend_cost: int = field(compare=False)
    stranger_cost: int = field(compare=False)
    roles: frozenset[Role] = field(default=frozenset(), compare=False)
    attributes: Attributes = field(default_factory=Attributes.zero, compare=False)
    abilities: frozenset[Ability] = field(default=frozenset(), compare=False)
    cost_selection: AffinityLevel = field(default=AffinityLevel.STRANGER, compare=False)

    def __post_init__(self) -> None:
        require(self.name, "name")
        require(self.location, "location")
        require(self.ally_cost, "ally cost")
        require(self.friend_cost, "friend cost")
        require(self.stranger_cost, "stranger cost")
        require(self.attributes, "attributes")
        self.roles = frozenset(require_all(self.roles, "roles"))
        self.abilities = frozenset(require_all(self.abilities, "abilities"))

    @property
    def cost(self) -> int:
        return _cost_for(self, "component")

    def set_cost_for_ally(self) -> None:
        self.cost_selection = AffinityLevel.ALLY

    def set_cost_for_friend(self) -> None:
        self.cost_selection = AffinityLevel.FRIEND

    def set_cost_for_stranger(self) -> None:
        self.cost_selection = AffinityLevel.STRANGER


# --- Units -----------------------------------------------------------------------


@dataclass(slots=True)
class Unit:
    """Team player built from a unit template.

    Two units are equal when they share template and display name.
    """

    template_name: str
    cost: int = field(compare=False)
    role: Role = field(compare=False)
    attributes: Attributes = field(compare=False)
    abilities: frozenset[Ability] = field(default=frozenset(), compare=False)
    mvp: bool = field(default=False, compare=False)
    giant: bool = field(default=False, compare=False)
    name: str = ""

    def __post_init__(self) -> None:
        require(self.template_name, "template name")
        require(self.cost, "cost")
        require(self.role, "role")
        require(self.attributes, "attributes")
        require(self.mvp, "mvp flag")
        require(self.giant, "giant flag")
        require(self.name, "name")
        self.abilities = frozenset(require_all(self.abilities, "abilities"))


@dataclass(slots=True)
class AffinityUnit:
    """Unit whose cost depends on its affinity with the hiring sponsor.

    The wrapped unit is stored as a copy with a cost of zero; the effective cost is
    whichever of the three affinity costs was last selected.
    """

    base: Unit
    ally_cost: int = field(compare=False)
    friend_cost: int = field(compare=False)
    stranger_cost: int = field(compare=False)
    affinity_groups: frozenset[AffinityGroup] = field(default=frozenset(), compare=False)
    hated_affinity_groups: frozenset[AffinityGroup] = field(
        default=frozenset(), compare=False
    )
    cost_selection: AffinityLevel = field(default=AffinityLevel.UNSET, compare=False)

    def __post_init__(self) -> None:
        require(self.base, "base unit")
        require(self.ally_cost, "ally cost")
        require(self.friend_cost, "friend cost")
        require(self.stranger_cost, "stranger cost")
        require(self.cost_selection, "cost selection")
        self.affinity_groups = frozenset(require_all(self.affinity_groups, "affinities"))
        self.hated_affinity_groups = frozenset(
            require_all(self.hated_affinity_groups, "hated affinities")
        )
        self.base = replace(self.base, cost=0)

    @property
    def cost(self) -> int:
        return _cost_for(self, f"unit {self.template_name!r}")

    def set_cost_for_ally(self) -> None:
        self.cost_selection = AffinityLevel.ALLY

    def set_cost_for_friend(self) -> None:
        self.cost_selection = AffinityLevel.FRIEND

    def set_cost_for_stranger(self) -> None:
        self.cost_selection = AffinityLevel.STRANGER

    @property
    def name(self) -> str:
        return self.base.name

    @name.setter
    def name(self, value: str) -> None:
        self.base.name = require(value, "name")

    @property
    def template_name(self) -> str:
        return self.base.template_name

    @property
    def role(self) -> Role:
        return self.base.role

    @property
    def attributes(self) -> Attributes:
        return self.base.attributes

    @property
    def abilities(self) -> frozenset[Ability]:
        return self.base.abilities

    @property
    def mvp(self) -> bool:
        return self.base.mvp

    @property
    def giant(self) -> bool:
        return self.base.giant


UnitValorationCalculator = Callable[["AdvancementUnit"], int]


@dataclass(slots=True)
class AdvancementUnit:
    """Unit that gains rank, experience, abilities and implants over a season.

    The wrapped unit is copied on construction. The ability set is seeded
    from it and evolves on its own afterwards.
    """

    base: Unit
    valoration_calculator: UnitValorationCalculator = field(compare=False, repr=False)
    rank: int = field(default=0, compare=False)
    unspent_experience: int = field(default=0, compare=False)
    grafted_implant: Component = field(default=NO_IMPLANT, compare=False)
    attributes: Attributes = field(init=False, compare=False)
    abilities: set[Ability] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        require(self.base, "base unit")
        require(self.valoration_calculator, "valoration calculator")
        require(self.rank, "rank")
        require(self.unspent_experience, "experience")
        require(self.grafted_implant, "grafted implant")
        self.base = replace(self.base)
        self.attributes = self.base.attributes
        self.abilities = set(self.base.abilities)

    def add_ability(self, ability: Ability) -> None:
        self.abilities.add(require(ability, "ability"))

    def remove_ability(self, ability: Ability) -> None:
        self.abilities.discard(ability)

    def set_abilities(self, abilities: Iterable[Ability]) -> None:
        self.abilities = set(require_all(abilities, "abilities"))

    @property
    def valoration(self) -> int:
        return self.valoration_calculator(self)

    @property
    def cost(self) -> int:
        return self.base.cost

    @property
    def name(self) -> str:
        return self.base.name

    @name.setter
    def name(self, value: str) -> None:
        self.base.name = require(value, "name")

    @property
    def template_name(self) -> str:
        return self.base.template_name

    @property
    def role(self) -> Role:
        return self.base.role

    @property
    def mvp(self) -> bool:
        return self.base.mvp

    @property
    def giant(self) -> bool:
        return self.base.giant


@dataclass(slots=True)
class CompositeAdvancementUnit:
    """Advancement unit assembled from components.

    The components are kept for display; cost and statline still come from
    the wrapped unit.
    """

    unit: AdvancementUnit
    components: frozenset[Component] = frozenset()

    def __post_init__(self) -> None:
        require(self.unit, "unit")
        self.components = frozenset(require_all(self.components, "components"))

    @property
    def valoration(self) -> int:
        return self.unit.valoration

    @property
    def cost(self) -> int:
        return self.unit.cost

    @property
    def rank(self) -> int:
        return self.unit.rank

    @property
    def unspent_experience(self) -> int:
        return self.unit.unspent_experience

    @property
    def grafted_implant(self) -> Component:
        return self.unit.grafted_implant

    @property
    def name(self) -> str:
        return self.unit.name

    @name.setter
    def name(self, value: str) -> None:
        self.unit.name = value

    @property
    def template_name(self) -> str:
        return self.unit.template_name

    @property
    def role(self) -> Role:
        return self.unit.role

    @property
    def attributes(self) -> Attributes:
        return self.unit.attributes

    @property
    def abilities(self) -> set[Ability]:
        return self.unit.abilities

    @property
    def mvp(self) -> bool:
        return self.unit.mvp

    @property
    def giant(self) -> bool:
        return self.unit.giant


@dataclass(slots=True)
class CompositeAffinityUnit:
    """Affinity unit assembled from components."""

    unit: AffinityUnit
    components: frozenset[Component | AffinityComponent] = frozenset()

    def __post_init__(self) -> None:
        require(self.unit, "unit")
        self.components = frozenset(require_all(self.components, "components"))

    @property
    def cost(self) -> int:
        return self.unit.cost

    @property
    def cost_selection(self) -> AffinityLevel:
        return self.unit.cost_selection

    def set_cost_for_ally(self) -> None:
        self.unit.set_cost_for_ally()

    def set_cost_for_friend(self) -> None:
        self.unit.set_cost_for_friend()

    def set_cost_for_stranger(self) -> None:
        self.unit.set_cost_for_stranger()

    @property
    def ally_cost(self) -> int:
        return self.unit.ally_cost

    @property
    def friend_cost(self) -> int:
        return self.unit.friend_cost

    @property
    def stranger_cost(self) -> int:
        return self.unit.stranger_cost

    @property
    def affinity_groups(self) -> frozenset[AffinityGroup]:
        return self.unit.affinity_groups

    @property
    def hated_affinity_groups(self) -> frozenset[AffinityGroup]:
        return self.unit.hated_affinity_groups

    @property
    def name(self) -> str:
        return self.unit.name

    @name.setter
    def name(self, value: str) -> None:
        self.unit.name = value

    @property
    def template_name(self) -> str:
        return self.unit.template_name

    @property
    def role(self) -> Role:
        return self.unit.role

    @property
    def attributes(self) -> Attributes:
        return self.unit.attributes

    @property
    def abilities(self) -> frozenset[Ability]:
        return self.unit.abilities

    @property
    def mvp(self) -> bool:
        return self.unit.mvp

    @property
    def giant(self) -> bool:
        return self.unit.giant


AdvancementPlayer = AdvancementUnit | CompositeAdvancementUnit
SponsorPlayer = Unit | AffinityUnit | CompositeAffinityUnit
TeamPlayer = (
    Unit | AffinityUnit | AdvancementUnit | CompositeAdvancementUnit | CompositeAffinityUnit
)


def _cost_for(priced: AffinityUnit | AffinityComponent, label: str) -> int:
    selection = priced.cost_selection
    if selection is AffinityLevel.ALLY:
        return priced.ally_cost
    if selection is AffinityLevel.FRIEND:
        return priced.friend_cost
    if selection is AffinityLevel.STRANGER:
        return priced.stranger_cost
    raise AffinityCostNotSelectedError(f"no affinity cost selected for {label}")


# --- Factions --------------------------------------------------------------------


@dataclass(slots=True)
class Sponsor:
    """Owner of a DBX team, holding cash, rank and affinities."""

    name: str = ""
    cash: int = field(default=0, compare=False)
    rank: int = field(default=0, compare=False)
    affinity_groups: set[AffinityGroup] = field(default_factory=set, compare=False)

    def __post_init__(self) -> None:
        require(self.name, "name")
        require(self.cash, "cash")
        require(self.rank, "rank")
        self.affinity_groups = set(require_all(self.affinity_groups, "affinity groups"))

    def add_affinity_group(self, affinity: AffinityGroup) -> None:
        self.affinity_groups.add(require(affinity, "affinity group"))

    def remove_affinity_group(self, affinity: AffinityGroup) -> None:
        self.affinity_groups.discard(affinity)

    def set_affinity_groups(self, affinities: Iterable[AffinityGroup]) -> None:
        self.affinity_groups = set(require_all(affinities, "affinity groups"))


@dataclass(frozen=True, slots=True)
class TeamType:
    """DBO faction archetype and the special rules its teams follow."""

    name: str
    rules: frozenset[TeamRule] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        require(self.name, "name")
        object.__setattr__(self, "rules", frozenset(require_all(self.rules, "rules")))
