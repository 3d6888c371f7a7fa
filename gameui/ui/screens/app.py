import logging
import pygame
from typing import Optional
from gameui.ui.renderer import UIRenderer, Viewport
from gameui.ui.settings import FPS
from gameui.ui.templates import register_default_components
from gameui.ui.ui_manager import UIManager

logger = logging.getLogger(__name__)


class App:
    """High-level application controller feeding pygame events to the UI manager.

    Routing:
      - KEYDOWN -> input priority stack (topmost modal first)
      - mouse buttons / motion -> click routing and window dragging
      - VIDEORESIZE -> viewport update + overflow correction
    """
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, clock: Optional[pygame.time.Clock] = None):
        self.screen = screen
        self.font = font
        self.clock = clock or pygame.time.Clock()
        self.viewport = Viewport.from_surface(screen)
        self.manager = UIManager(self.viewport, reload_action=self.reload)
        self.renderer = UIRenderer(self.manager, font)
        self.reload_count = 0
        self.running = False
        register_default_components(self.manager)

    def reload(self):
        """Tear the interface down and rebuild it from the startup templates."""
        self.reload_count += 1
        logger.info("Reloading interface (#%d)", self.reload_count)
        self.manager.remove_components()
        self.manager.components.clear()
        self.manager.input_priority.clear()
        register_default_components(self.manager)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one pygame event; returns True when the UI consumed it."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type == pygame.KEYDOWN:
            return self.manager.handle_key_down(event)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.manager.handle_click(event.pos)
        if event.type == pygame.MOUSEMOTION:
            return self.manager.handle_mouse_motion(event.pos)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.manager.handle_mouse_up()
            return False
        if event.type == pygame.VIDEORESIZE:
            self.viewport.resize(event.w, event.h)
            self.manager.fix_resize_overflow(self.viewport.width, self.viewport.height)
            return True
        return False

    def run(self):
        self.running = True
        while self.running:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)
                if not self.running:
                    break
            self.renderer.draw(self.screen)
            pygame.display.flip()
        pygame.quit()
