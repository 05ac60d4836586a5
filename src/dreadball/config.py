"""Settings for the Dreadball roster tools."""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dreadball.domain.rules_config import DEFAULT_RULES, RulesConfig


class Settings(BaseSettings):
    """Library settings, read from ``DREADBALL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DREADBALL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    catalog_path: Path | None = Field(
        default=None, description="JSON catalog loaded when no path is given explicitly"
    )
    rank_cost_increase: int = Field(
        default=DEFAULT_RULES.advancement.rank_cost_increase,
        description="Valoration added to an advancement unit per rank",
        ge=0,
    )

    def rules_config(self) -> RulesConfig:
        """Default rules with the overrides from these settings applied."""

        advancement = replace(DEFAULT_RULES.advancement, rank_cost_increase=self.rank_cost_increase)
        return replace(DEFAULT_RULES, advancement=advancement)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
