from .catalog import (
    AffinityUnitSchema,
    Catalog,
    CatalogData,
    ComponentSchema,
    SponsorAssetsCostsSchema,
    TeamTypeAssetsSchema,
    TeamTypeSchema,
    UnitAvailabilitySchema,
    UnitSchema,
    load_catalog,
)

__all__ = [
    "AffinityUnitSchema",
    "Catalog",
    "CatalogData",
    "ComponentSchema",
    "SponsorAssetsCostsSchema",
    "TeamTypeAssetsSchema",
    "TeamTypeSchema",
    "UnitAvailabilitySchema",
    "UnitSchema",
    "load_catalog",
]
