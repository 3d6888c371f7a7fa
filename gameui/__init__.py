"""gameui package public API.

Exports the interface manager the game client builds at startup.
"""
from __future__ import annotations

from .ui.ui_manager import UIManager
from .core.errors import ComponentNotFoundError, InvalidComponentError

__all__ = ["UIManager", "ComponentNotFoundError", "InvalidComponentError"]
