from __future__ import annotations
import copy
import logging
from typing import TYPE_CHECKING, Optional
import pygame
from gameui.ui.ui_objects import VisualRoot
from gameui.ui.settings import (
    POPUP_BG, POPUP_BORDER, POPUP_TEXT, POPUP_PADDING,
    BUTTON_BG, BUTTON_BORDER, BUTTON_TEXT,
    BORDER_RADIUS_POPUP, BORDER_RADIUS_BUTTON, BORDER_WIDTH_POPUP, BORDER_WIDTH_BUTTON,
)

if TYPE_CHECKING:
    from gameui.ui.ui_manager import UIManager

logger = logging.getLogger(__name__)


class UIComponent:
    """A managed interface element (window, popup, HUD panel).

    ``ui`` is the visual root; components without one (pure logic panels) are
    skipped by layout, drawing and click routing. ``manager`` is set by the
    registry when the component is added.
    """

    def __init__(self, name: str, ui: Optional[VisualRoot] = None):
        self.name = name
        self.ui = ui
        self.manager: Optional[UIManager] = None
        self._attached = False
        self._initialized = False
        # Set by the manager on append; used to break z-index ties
        self.attach_order = 0

    # ---------------------------------------------------------------------
    # Hook slots. Subclasses override them, or callers assign replacements
    # on the instance before append():
    #   init()                -> first display only
    #   on_append()           -> after every attach
    #   on_key_down(event)    -> return True to consume the key
    #   on_remove()           -> after detach
    # ---------------------------------------------------------------------

    def init(self) -> None:  # default no-op
        pass

    def on_append(self) -> None:  # default no-op
        pass

    def on_key_down(self, event: pygame.event.Event) -> bool:  # default: let it through
        return False

    def on_remove(self) -> None:  # default no-op
        pass

    # --- Lifecycle ---------------------------------------------------------

    @property
    def attached(self) -> bool:
        return self._attached

    def append(self) -> None:
        """Attach to the display, running init() the first time."""
        self._attached = True
        if not self._initialized:
            self._initialized = True
            self.init()
        if self.manager is not None:
            self.manager._component_appended(self)
        self.on_append()

    def remove(self, destroy: bool = False) -> None:
        """Detach from the display. ``destroy`` also drops the registry entry."""
        was_attached = self._attached
        self._attached = False
        if self.manager is not None:
            self.manager._component_removed(self, was_attached, destroy)
        self.on_remove()

    def handle_key_down(self, event: pygame.event.Event) -> bool:
        """Priority stack entry point; detached components never consume keys."""
        if not self._attached:
            return False
        return bool(self.on_key_down(event))

    def clone(self, name: str) -> "UIComponent":
        """Return a detached copy registered under ``name`` in the same manager.

        Registering under a live name replaces that entry.
        """
        twin = copy.copy(self)
        twin.name = name
        twin.ui = self.ui.copy() if self.ui is not None else None
        twin.manager = None
        twin._attached = False
        twin._initialized = False
        twin.attach_order = 0
        if self.manager is not None:
            self.manager.add_component(twin)
        logger.debug("Cloned %s as %s", self.name, name)
        return twin

    # --- Geometry ----------------------------------------------------------

    def draggable(self) -> None:
        if self.ui is not None:
            self.ui.draggable = True

    def move_to(self, left: int, top: int) -> None:
        if self.ui is not None:
            self.ui.move_to(left, top)

    # Click handling (return True if consumed)
    def handle_click(self, pos) -> bool:
        if self.ui is None or not self._attached:
            return False
        btn = self.ui.button_at(pos)
        if btn is not None:
            btn.click()
            return True
        return self.ui.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Plain panel rendering: frame, text, buttons."""
        ui = self.ui
        if ui is None:
            return
        pygame.draw.rect(surface, POPUP_BG, ui.rect, border_radius=BORDER_RADIUS_POPUP)
        pygame.draw.rect(surface, POPUP_BORDER, ui.rect, width=BORDER_WIDTH_POPUP, border_radius=BORDER_RADIUS_POPUP)
        if ui.text:
            text_surf = font.render(ui.text, True, POPUP_TEXT)
            surface.blit(text_surf, (ui.rect.left + POPUP_PADDING, ui.rect.top + POPUP_PADDING))
        for btn in ui.buttons:
            pygame.draw.rect(surface, BUTTON_BG, btn.rect, border_radius=BORDER_RADIUS_BUTTON)
            pygame.draw.rect(surface, BUTTON_BORDER, btn.rect, width=BORDER_WIDTH_BUTTON, border_radius=BORDER_RADIUS_BUTTON)
            label_surf = font.render(btn.label, True, BUTTON_TEXT)
            surface.blit(label_surf, label_surf.get_rect(center=btn.rect.center))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, attached={self._attached})"


__all__ = ["UIComponent"]
