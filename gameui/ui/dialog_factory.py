"""Builds the error, message and prompt dialogs from the popup template."""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, Optional
from gameui.core.ui_event import UIEvent, UIEventType
from gameui.ui.dialogs import DialogButton, DialogConfig, DialogKind, ModalDialog, PopupOverlay
from gameui.ui.settings import POPUP_TEMPLATE_NAME, POPUP_OVERLAY_NAME

if TYPE_CHECKING:
    from gameui.ui.ui_manager import UIManager

logger = logging.getLogger(__name__)


class DialogFactory:
    """Turns a DialogConfig into a registered, appended ModalDialog.

    Each kind has a fixed registry name. Opening a second dialog of the same
    kind removes the first one (no continuation runs) before taking its entry.
    """

    def __init__(self, manager: "UIManager"):
        self.manager = manager

    def open(self, config: DialogConfig) -> ModalDialog:
        """Clone the popup template into a dialog for ``config`` and show it.

        Raises:
            ComponentNotFoundError: the popup template was never registered
        """
        template = self.manager.get_component(POPUP_TEMPLATE_NAME)
        self._retire(config.kind.window_name)
        dialog = ModalDialog.from_template(template, config)
        self.manager.add_component(dialog)

        if config.overlay:
            vp = self.manager.viewport
            overlay = PopupOverlay(POPUP_OVERLAY_NAME, vp.width, vp.height)
            self.manager.add_component(overlay)
            overlay.append()
            dialog.overlay = overlay

        dialog.append()
        logger.info("Opened %s: %r", dialog.name, config.text)
        self.manager.event_listener.publish(UIEvent(
            UIEventType.DIALOG_OPENED,
            source=dialog,
            payload={
                "name": dialog.name,
                "kind": config.kind,
                "buttons": [b.label for b in config.buttons],
                "accept_keys": config.accept_keys,
            },
        ))
        return dialog

    def _retire(self, name: str) -> None:
        """Close a still-open dialog about to lose its registry entry."""
        if name not in self.manager.components:
            return
        previous = self.manager.get_component(name)
        if isinstance(previous, ModalDialog) and previous.attached:
            logger.info("Replacing open %s", name)
            previous.remove()

    def show_error_box(self, text: str) -> ModalDialog:
        """Fatal dialog: ENTER/ESCAPE dismisses it and reloads the application."""
        return self.open(DialogConfig(
            kind=DialogKind.ERROR,
            text=text,
            accept_keys=True,
            on_key_accept=self.manager.request_reload,
            overlay=True,
            draggable=False,
        ))

    def show_message_box(
        self,
        text: str,
        button_label: Optional[str] = None,
        on_dismiss: Optional[Callable[[], None]] = None,
        accept_keydown: bool = False,
    ) -> ModalDialog:
        """Informational dialog.

        Args:
            text: Message to show
            button_label: Optional single button; without one ENTER/ESCAPE dismisses
            on_dismiss: Called at most once, whichever path dismisses the dialog
            accept_keydown: Also accept ENTER/ESCAPE when a button is present
        """
        buttons = [DialogButton(button_label, on_dismiss)] if button_label else []
        return self.open(DialogConfig(
            kind=DialogKind.MESSAGE,
            text=text,
            buttons=buttons,
            accept_keys=not button_label or accept_keydown,
            on_key_accept=on_dismiss,
        ))

    def show_prompt_box(
        self,
        text: str,
        accept_label: str,
        cancel_label: str,
        on_accept: Optional[Callable[[], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
    ) -> ModalDialog:
        """Two-button dialog; exactly one of the callbacks fires."""
        return self.open(DialogConfig(
            kind=DialogKind.PROMPT,
            text=text,
            buttons=[DialogButton(accept_label, on_accept), DialogButton(cancel_label, on_cancel)],
        ))


__all__ = ["DialogFactory"]
