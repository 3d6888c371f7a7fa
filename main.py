"""Demo entry point for the interface runtime."""
import logging
import pygame
from gameui.ui.screens.app import App
from gameui.ui.settings import WIDTH, HEIGHT, FONT_SIZE_TEXT, LOG_FORMAT

def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("gameui")
    font = pygame.font.SysFont("Arial", FONT_SIZE_TEXT)
    app = App(screen, font)
    app.manager.show_prompt_box(
        "Connect to the map server?", "ok", "cancel",
        on_accept=lambda: app.manager.show_message_box("Connected.", "ok"),
        on_cancel=lambda: app.manager.show_error_box("Disconnected from server."),
    )
    app.run()

if __name__ == "__main__":
    main()
