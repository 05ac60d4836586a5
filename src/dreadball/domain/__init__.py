"""Domain model for Dreadball team building.

The package exposes:

* Dataclasses for units, components, sponsors and team types (see :mod:`models`).
* Team rosters for DBO advancement teams and DBX sponsor teams (:mod:`team`).
* Calculator factories for unit and team valoration (:mod:`valoration`).
* Availability records and cost tables (:mod:`availability`, :mod:`rules_config`).
* Builders wiring the above together (:mod:`builders`).

Everything operates in memory; loading catalogs from disk lives in
:mod:`dreadball.schemas`.
"""

from . import (
    availability,
    builders,
    enums,
    errors,
    models,
    rules_config,
    team,
    valoration,
)

__all__ = [
    "availability",
    "builders",
    "enums",
    "errors",
    "models",
    "rules_config",
    "team",
    "valoration",
]
