"""Errors raised by the Dreadball domain."""

from __future__ import annotations


class InvalidPositionError(ValueError):
    """Raised when a roster position is not a positive integer."""

    def __init__(self, position: int) -> None:
        super().__init__(f"roster position must be higher than zero, got {position}")
        self.position = position


class AffinityCostNotSelectedError(RuntimeError):
    """Raised when an affinity cost is read before a level was chosen."""


class CatalogError(ValueError):
    """Raised when catalog data references entries that do not exist."""


def require(value, name: str):
    """Return ``value`` unchanged, or raise ``ValueError`` if it is ``None``."""

    if value is None:
        raise ValueError(f"{name} must not be None")
    return value


def require_all(values, name: str) -> list:
    """Validate an iterable and each of its members."""

    require(values, name)
    return [require(value, f"{name} entry") for value in values]
