"""Long-lived components registered once at startup."""
from __future__ import annotations
from gameui.core.component import UIComponent
from gameui.ui.ui_objects import VisualRoot
from gameui.ui.settings import POPUP_TEMPLATE_NAME, POPUP_WIDTH, POPUP_HEIGHT


def build_popup_template() -> UIComponent:
    return UIComponent(POPUP_TEMPLATE_NAME, VisualRoot(POPUP_WIDTH, POPUP_HEIGHT))


def register_default_components(manager) -> list[UIComponent]:
    """Register the templates dialogs are cloned from. Must run before any dialog opens."""
    return [manager.add_component(build_popup_template())]


__all__ = ["build_popup_template", "register_default_components"]
