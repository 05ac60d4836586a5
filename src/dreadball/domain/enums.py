"""Enumerations used across the Dreadball domain."""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Positions a player can fill on the pitch."""

    GUARD = "guard"
    JACK = "jack"
    KEEPER = "keeper"
    STRIKER = "striker"


class AffinityLevel(StrEnum):
    """Relationship between an affinity unit and the sponsor hiring it."""

    UNSET = "unset"
    ALLY = "ally"
    FRIEND = "friend"
    STRANGER = "stranger"
