from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

class UIEventType(Enum):
    # Registry lifecycle
    COMPONENT_REGISTERED = auto()
    COMPONENT_APPENDED = auto()
    COMPONENT_REMOVED = auto()
    COMPONENTS_CLEARED = auto()
    # Viewport
    LAYOUT_CORRECTED = auto()
    # Modal dialogs
    DIALOG_OPENED = auto()
    DIALOG_CLOSED = auto()
    # Application
    RELOAD_REQUESTED = auto()

@dataclass(slots=True)
class UIEvent:
    type: UIEventType
    source: Any | None = None
    payload: Optional[dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default) if self.payload else default

    def __repr__(self) -> str:  # Helpful for debugging
        return f"UIEvent(type={self.type}, payload={self.payload})"
