from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Callable, Optional
from gameui.ui.settings import BUTTON_WIDTH, BUTTON_HEIGHT


@dataclass
class UIButton:
    """Clickable button living inside a component's visual root.

    Skin images follow the client's asset naming: ``btn_<label>.bmp`` with
    ``_a`` (hover) and ``_b`` (pressed) variants.
    """
    label: str
    rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT))
    on_click: Optional[Callable[[], None]] = None

    @property
    def background(self) -> str:
        return f"btn_{self.label}.bmp"

    @property
    def hover(self) -> str:
        return f"btn_{self.label}_a.bmp"

    @property
    def down(self) -> str:
        return f"btn_{self.label}_b.bmp"

    def collidepoint(self, pos) -> bool:
        return self.rect.collidepoint(pos)

    def click(self) -> None:
        if self.on_click:
            self.on_click()


class VisualRoot:
    """Resolved geometry and content of a component.

    Geometry is a plain ``pygame.Rect`` in pixels; layout code reads and writes it
    without caring how the frame ends up drawn.
    """

    def __init__(self, width: int, height: int, left: int = 0, top: int = 0):
        self.rect = pygame.Rect(left, top, width, height)
        self.z_index = 0
        self.text = ""
        self.buttons: list[UIButton] = []
        self.draggable = False

    @property
    def left(self) -> int:
        return self.rect.left

    @property
    def top(self) -> int:
        return self.rect.top

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    def move_to(self, left: int, top: int) -> None:
        """Move the frame, carrying its buttons along."""
        dx, dy = int(left) - self.rect.left, int(top) - self.rect.top
        if not dx and not dy:
            return
        self.rect.move_ip(dx, dy)
        for btn in self.buttons:
            btn.rect.move_ip(dx, dy)

    def button_at(self, pos) -> Optional[UIButton]:
        for btn in self.buttons:
            if btn.collidepoint(pos):
                return btn
        return None

    def copy(self) -> "VisualRoot":
        """Duplicate geometry, stacking and text. Buttons are not carried over
        since their handlers belong to the source component."""
        twin = VisualRoot(self.rect.width, self.rect.height, self.rect.left, self.rect.top)
        twin.z_index = self.z_index
        twin.text = self.text
        twin.draggable = self.draggable
        return twin

    def __repr__(self) -> str:
        return f"VisualRoot(rect={self.rect}, z_index={self.z_index})"


__all__ = ["UIButton", "VisualRoot"]
