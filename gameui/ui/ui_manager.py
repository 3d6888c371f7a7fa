"""User interface manager.

Owns the component registry, the key-down priority stack and the dialog
factory for one running client. Created once at startup and handed to
whatever needs it; nothing here is a module-level singleton.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

import pygame

from gameui.core.component import UIComponent
from gameui.core.event_listener import EventListener
from gameui.core.ui_event import UIEvent, UIEventType
from gameui.ui.dialog_factory import DialogFactory
from gameui.ui.dialogs import ModalDialog
from gameui.ui.input_priority import InputPriorityStack
from gameui.ui.layout import fix_overflow
from gameui.ui.registry import ComponentRegistry
from gameui.ui.renderer import Viewport

logger = logging.getLogger(__name__)


class UIManager:
    def __init__(
        self,
        viewport: Optional[Viewport] = None,
        event_listener: Optional[EventListener] = None,
        reload_action: Optional[Callable[[], None]] = None,
    ):
        self.viewport = viewport or Viewport()
        self.event_listener = event_listener or EventListener()
        self.reload_action = reload_action
        self.components = ComponentRegistry(self)
        self.input_priority = InputPriorityStack()
        self.dialogs = DialogFactory(self)
        self._attach_seq = 0
        # (component, grab offset) while a draggable window follows the mouse
        self._drag: Optional[tuple[UIComponent, tuple[int, int]]] = None

    # --- Registry ------------------------------------------------------------

    def add_component(self, component: UIComponent) -> UIComponent:
        """Store a component in the manager (replaces any entry with the same name)."""
        self.components.add(component)
        self.event_listener.publish(UIEvent(
            UIEventType.COMPONENT_REGISTERED, source=component, payload={"name": component.name}
        ))
        return component

    def get_component(self, name: str) -> UIComponent:
        """Return the component stored under ``name``; ComponentNotFoundError otherwise."""
        return self.components.get(name)

    def remove_components(self) -> int:
        """Remove every component from the screen (logout, reload)."""
        count = self.components.remove_all()
        self._drag = None
        logger.info("Removed %d components", count)
        self.event_listener.publish(UIEvent(UIEventType.COMPONENTS_CLEARED, payload={"count": count}))
        return count

    # --- Lifecycle callbacks from UIComponent --------------------------------

    def _component_appended(self, component: UIComponent) -> None:
        self._attach_seq += 1
        component.attach_order = self._attach_seq
        self.input_priority.register(component.handle_key_down)
        self.event_listener.publish(UIEvent(
            UIEventType.COMPONENT_APPENDED, source=component, payload={"name": component.name}
        ))

    def _component_removed(self, component: UIComponent, was_attached: bool, destroy: bool) -> None:
        # Every removal path gives key priority back to whoever is next
        self.input_priority.unregister(component.handle_key_down)
        if self._drag is not None and self._drag[0] is component:
            self._drag = None
        if destroy:
            self.components.discard(component)
        if was_attached:
            self.event_listener.publish(UIEvent(
                UIEventType.COMPONENT_REMOVED,
                source=component,
                payload={"name": component.name, "destroyed": destroy},
            ))

    # --- Layout --------------------------------------------------------------

    def fix_resize_overflow(self, width: int, height: int) -> list[str]:
        """Pull windows left hanging outside a resized game screen back into view."""
        moved = fix_overflow(self.components, width, height)
        if moved:
            logger.debug("Resize %dx%d moved %s", width, height, moved)
            self.event_listener.publish(UIEvent(
                UIEventType.LAYOUT_CORRECTED,
                payload={"width": width, "height": height, "moved": moved},
            ))
        return moved

    def stacking_order(self) -> list[UIComponent]:
        """Attached visual components, bottom first."""
        shown = [c for c in self.components if c.attached and c.ui is not None]
        return sorted(shown, key=lambda c: (c.ui.z_index, c.attach_order))

    # --- Input ---------------------------------------------------------------

    def handle_key_down(self, event: pygame.event.Event) -> bool:
        return self.input_priority.dispatch(event)

    def handle_click(self, pos) -> bool:
        """Route a click to the topmost component under it."""
        for component in reversed(self.stacking_order()):
            if component.handle_click(pos):
                # A button may have closed the window; only grab what is still shown
                if component.attached and component.ui.draggable:
                    self._drag = (component, (pos[0] - component.ui.rect.left, pos[1] - component.ui.rect.top))
                return True
        return False

    def handle_mouse_motion(self, pos) -> bool:
        if self._drag is None:
            return False
        component, (ox, oy) = self._drag
        component.move_to(pos[0] - ox, pos[1] - oy)
        return True

    def handle_mouse_up(self) -> None:
        self._drag = None

    # --- Dialogs -------------------------------------------------------------

    def show_error_box(self, text: str) -> ModalDialog:
        return self.dialogs.show_error_box(text)

    def show_message_box(
        self,
        text: str,
        button_label: Optional[str] = None,
        on_dismiss: Optional[Callable[[], None]] = None,
        accept_keydown: bool = False,
    ) -> ModalDialog:
        return self.dialogs.show_message_box(text, button_label, on_dismiss, accept_keydown)

    def show_prompt_box(
        self,
        text: str,
        accept_label: str,
        cancel_label: str,
        on_accept: Optional[Callable[[], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
    ) -> ModalDialog:
        return self.dialogs.show_prompt_box(text, accept_label, cancel_label, on_accept, on_cancel)

    def request_reload(self) -> None:
        """Ask the application to reload after a fatal error."""
        logger.info("Application reload requested")
        self.event_listener.publish(UIEvent(UIEventType.RELOAD_REQUESTED))
        if self.reload_action is not None:
            self.reload_action()
        else:
            logger.warning("No reload action configured; staying on current screen")


__all__ = ["UIManager"]
