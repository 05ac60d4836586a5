"""Declarative cost tables for the two team-building modes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AdvancementRules:
    """DBO league costs, in Mega Credits."""

    rank_cost_increase: int = 5
    die_cost: int = 10
    card_cost: int = 10
    cheerleader_cost: int = 10
    coaching_staff_cost: int = 15


@dataclass(frozen=True, slots=True)
class SponsorRules:
    """DBX sponsor costs, in rank points."""

    die_cost: int = 1
    sabotage_card_cost: int = 1
    special_move_card_cost: int = 2
    cheerleader_cost: int = 1
    affinity_group_cost: int = 5
    medibot_cost: int = 2
    wager_cost: int = 1


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container."""

    advancement: AdvancementRules = AdvancementRules()
    sponsor: SponsorRules = SponsorRules()


DEFAULT_RULES = RulesConfig()
