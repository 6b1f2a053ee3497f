"""Encode bytes as emoji and decode them back with the base100 scheme."""

__version__ = "0.1.0"
__all__ = ["codec", "cli"]