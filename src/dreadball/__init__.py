"""Team-building model for the Dreadball tabletop game."""

__version__ = "0.3.0"
