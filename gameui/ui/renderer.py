import pygame
from dataclasses import dataclass
from gameui.ui.settings import WIDTH, HEIGHT, BG_COLOR


@dataclass
class Viewport:
    """Current drawable size of the game screen."""
    width: int = WIDTH
    height: int = HEIGHT

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> "Viewport":
        w, h = surface.get_size()
        return cls(w, h)

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = int(width), int(height)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, self.width, self.height)


class UIRenderer:
    """Draws every attached component bottom to top."""

    def __init__(self, manager, font: pygame.font.Font):
        self.manager = manager
        self.font = font

    def draw(self, surface: pygame.Surface, clear: bool = True) -> int:
        if clear:
            surface.fill(BG_COLOR)
        drawn = 0
        for component in self.manager.stacking_order():
            component.draw(surface, self.font)
            drawn += 1
        return drawn


__all__ = ["Viewport", "UIRenderer"]
