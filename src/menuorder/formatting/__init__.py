"""Formatting module initialization."""

from .display import MenuFormatter

__all__ = ["MenuFormatter"]
