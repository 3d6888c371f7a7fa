import pygame
from gameui.ui.renderer import UIRenderer, Viewport
from gameui.ui.settings import BG_COLOR


def test_draw_renders_attached_dialogs_and_overlay(manager):
    pygame.init()
    font = pygame.font.Font(None, 18)
    surface = pygame.Surface((800, 600))
    renderer = UIRenderer(manager, font)
    # Template is registered but never attached
    assert renderer.draw(surface) == 0
    assert tuple(surface.get_at((5, 5)))[:3] == BG_COLOR
    manager.show_error_box("Fatal")
    assert renderer.draw(surface) == 2
    # Overlay darkens everything outside the dialog
    assert tuple(surface.get_at((5, 5)))[:3] != BG_COLOR


def test_viewport_from_surface():
    vp = Viewport.from_surface(pygame.Surface((320, 200)))
    assert (vp.width, vp.height) == (320, 200)
    vp.resize(640.0, 480.0)
    assert vp.rect == pygame.Rect(0, 0, 640, 480)
