"""Errors raised by the interface manager.

Both are programming/ordering defects (a template not registered during
startup, a foreign object handed to the registry) rather than runtime
conditions, so nothing in the package retries or recovers from them.
"""
from __future__ import annotations


class UIError(Exception):
    """Base class for interface manager errors."""


class InvalidComponentError(UIError, TypeError):
    """Raised when registering an object that is not a UIComponent."""

    def __init__(self, obj: object):
        super().__init__(f"UIManager.add_component() - invalid type of component: {type(obj).__name__}")
        self.obj = obj


class ComponentNotFoundError(UIError, LookupError):
    """Raised when looking up a name that has no registered component."""

    def __init__(self, name: str):
        super().__init__(f'UIManager.get_component() - component "{name}" not found')
        self.name = name


__all__ = ["UIError", "InvalidComponentError", "ComponentNotFoundError"]
