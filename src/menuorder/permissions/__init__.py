"""Permissions module initialization."""

from .matrix import PermissionMatrix, PermissionUpdate, plan_toggle, toggle

__all__ = ["PermissionMatrix", "PermissionUpdate", "plan_toggle", "toggle"]
