"""Viewport overflow correction.

After a resize some windows may hang past the right or bottom edge. Each one
that would fit is pulled back inside; windows larger than the viewport are left
where they are.
"""
from __future__ import annotations
from typing import Iterable
import pygame
from gameui.core.component import UIComponent


def clamp_rect(rect: pygame.Rect, width: int, height: int) -> tuple[int, int]:
    """Return the corrected (left, top) for ``rect`` in a ``width`` x ``height`` viewport."""
    left, top = rect.left, rect.top
    if rect.top + rect.height > height and height > rect.height:
        top = height - rect.height
    if rect.left + rect.width > width and width > rect.width:
        left = width - rect.width
    return left, top


def fix_overflow(components: Iterable[UIComponent], width: int, height: int) -> list[str]:
    """Move every overflowing component back into view; returns the moved names."""
    moved: list[str] = []
    for component in components:
        ui = component.ui
        if ui is None:
            continue
        left, top = clamp_rect(ui.rect, width, height)
        if (left, top) != (ui.rect.left, ui.rect.top):
            component.move_to(left, top)
            moved.append(component.name)
    return moved


__all__ = ["clamp_rect", "fix_overflow"]
