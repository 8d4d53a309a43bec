"""Menu module initialization."""

from .item import MenuItem, build_lookup

__all__ = ["MenuItem", "build_lookup"]
