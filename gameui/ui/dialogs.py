"""Modal dialogs cloned from the popup template.

A dialog is described by a ``DialogConfig`` record and driven by a small state
machine:

- OPEN: buttons and accept keys are live
- CLOSING: one dismissal path won; the dialog is being detached
- CLOSED: detached, every further click or key is ignored

Only an OPEN dialog can start closing, so a continuation runs at most once no
matter how many dismissal paths are wired. Removing the dialog by any other
route (teardown, reload) moves it straight to CLOSED without running one.
"""

from __future__ import annotations
import functools
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional

import pygame

from gameui.core.component import UIComponent
from gameui.core.ui_event import UIEvent, UIEventType
from gameui.ui.ui_objects import UIButton, VisualRoot
from gameui.ui.settings import (
    ACCEPT_KEYS, ERROR_BOX_NAME, MESSAGE_BOX_NAME, PROMPT_BOX_NAME,
    POPUP_WIDTH, POPUP_HEIGHT, POPUP_VERTICAL_RATIO, POPUP_PADDING,
    MODAL_Z_INDEX, OVERLAY_Z_INDEX, OVERLAY_COLOR,
    BUTTON_WIDTH, BUTTON_HEIGHT, BUTTON_SPACING,
)

logger = logging.getLogger(__name__)


class DialogKind(Enum):
    """Closed set of dialog variants; the value is the registry name."""
    ERROR = ERROR_BOX_NAME
    MESSAGE = MESSAGE_BOX_NAME
    PROMPT = PROMPT_BOX_NAME

    @property
    def window_name(self) -> str:
        return self.value


class DialogState(Enum):
    OPEN = auto()
    CLOSING = auto()
    CLOSED = auto()


@dataclass
class DialogButton:
    label: str
    callback: Optional[Callable[[], None]] = None


@dataclass
class DialogConfig:
    """Everything that distinguishes one dialog from another."""
    kind: DialogKind
    text: str
    buttons: List[DialogButton] = field(default_factory=list)
    accept_keys: bool = False  # ENTER/ESCAPE dismiss the dialog
    on_key_accept: Optional[Callable[[], None]] = None  # continuation for the key path
    overlay: bool = False  # block pointer input to everything beneath
    draggable: bool = True


def popup_position(viewport_width: int, viewport_height: int) -> tuple[int, int]:
    """(left, top) of a popup: centered horizontally, just above vertical center."""
    top = (viewport_height - POPUP_HEIGHT) / POPUP_VERTICAL_RATIO - POPUP_HEIGHT
    left = (viewport_width - POPUP_WIDTH) / 2.0
    return int(left), int(top)


class PopupOverlay(UIComponent):
    """Full-screen layer swallowing every click while a fatal dialog is up."""

    def __init__(self, name: str, width: int, height: int):
        super().__init__(name, VisualRoot(width, height))
        self.ui.z_index = OVERLAY_Z_INDEX

    def handle_click(self, pos) -> bool:  # type: ignore[override]
        return True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:  # type: ignore[override]
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        surface.blit(shade, (0, 0))


class ModalDialog(UIComponent):
    """A popup clone that holds keyboard priority while open."""

    def __init__(self, config: DialogConfig, ui: VisualRoot):
        super().__init__(config.kind.window_name, ui)
        self.config = config
        self.state = DialogState.OPEN
        self.overlay: Optional[PopupOverlay] = None
        # How the dialog ended: "button", "key" or "removed"
        self.closed_by: Optional[str] = None

    @classmethod
    def from_template(cls, template: UIComponent, config: DialogConfig) -> "ModalDialog":
        """Build a dialog sharing the template's frame. Registration is the caller's job."""
        ui = template.ui.copy() if template.ui is not None else VisualRoot(POPUP_WIDTH, POPUP_HEIGHT)
        return cls(config, ui)

    @property
    def kind(self) -> DialogKind:
        return self.config.kind

    def is_open(self) -> bool:
        return self.state == DialogState.OPEN

    # --- Hooks -------------------------------------------------------------

    def init(self) -> None:  # type: ignore[override]
        if self.config.draggable:
            self.draggable()
        self.ui.text = self.config.text
        viewport = self.manager.viewport if self.manager is not None else None
        if viewport is not None:
            self.move_to(*popup_position(viewport.width, viewport.height))
        self.ui.z_index = MODAL_Z_INDEX
        self._layout_buttons()

    def on_append(self) -> None:  # type: ignore[override]
        # Jump ahead of every window already listening for keys
        if self.manager is not None:
            self.manager.input_priority.register_top(self.handle_key_down)

    def on_key_down(self, event: pygame.event.Event) -> bool:  # type: ignore[override]
        if self.config.accept_keys and getattr(event, 'key', None) in ACCEPT_KEYS:
            self._close(self.config.on_key_accept, via="key")
        # Nothing behind an open modal sees the key
        return True

    def on_remove(self) -> None:  # type: ignore[override]
        if self.state == DialogState.OPEN:
            # Removed from outside (teardown, reload): no continuation
            self.state = DialogState.CLOSED
            self.closed_by = "removed"
            self._publish_closed()
        if self.overlay is not None:
            overlay, self.overlay = self.overlay, None
            # Teardown may already have detached it
            if overlay.attached:
                overlay.remove()

    # --- Buttons -----------------------------------------------------------

    def _layout_buttons(self) -> None:
        """Lay buttons out right-aligned along the bottom edge."""
        rect = self.ui.rect
        count = len(self.config.buttons)
        x = rect.right - POPUP_PADDING - count * BUTTON_WIDTH - (count - 1) * BUTTON_SPACING
        y = rect.bottom - POPUP_PADDING - BUTTON_HEIGHT
        self.ui.buttons = []
        for index, button in enumerate(self.config.buttons):
            self.ui.buttons.append(UIButton(
                label=button.label,
                rect=pygame.Rect(x, y, BUTTON_WIDTH, BUTTON_HEIGHT),
                on_click=functools.partial(self.press, index),
            ))
            x += BUTTON_WIDTH + BUTTON_SPACING

    def press(self, index: int) -> bool:
        """Activate button ``index``. Returns False if the dialog already closed."""
        button = self.config.buttons[index]
        return self._close(button.callback, via="button", label=button.label)

    def click(self, label: str) -> bool:
        """Activate the first button labelled ``label``."""
        for index, button in enumerate(self.config.buttons):
            if button.label == label:
                return self.press(index)
        raise ValueError(f"{self.name} has no button {label!r}")

    # --- Closing -----------------------------------------------------------

    def _close(self, continuation: Optional[Callable[[], None]], via: str, label: Optional[str] = None) -> bool:
        if self.state != DialogState.OPEN:
            return False
        self.state = DialogState.CLOSING
        self.closed_by = via
        self.remove()
        self.state = DialogState.CLOSED
        logger.info("%s closed via %s%s", self.name, via, f" ({label})" if label else "")
        self._publish_closed(label)
        if continuation is not None:
            continuation()
        return True

    def _publish_closed(self, label: Optional[str] = None) -> None:
        if self.manager is None:
            return
        self.manager.event_listener.publish(UIEvent(
            UIEventType.DIALOG_CLOSED,
            source=self,
            payload={
                "name": self.name,
                "kind": self.kind,
                "via": self.closed_by,
                "button": label,
            },
        ))


__all__ = [
    "DialogKind",
    "DialogState",
    "DialogButton",
    "DialogConfig",
    "ModalDialog",
    "PopupOverlay",
    "popup_position",
]
