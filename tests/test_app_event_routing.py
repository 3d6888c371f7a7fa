import unittest, pygame
from gameui.core.errors import ComponentNotFoundError
from gameui.ui.screens.app import App
from gameui.ui.settings import ERROR_BOX_NAME, POPUP_TEMPLATE_NAME
from tests.test_utils import KeyWindow


class AppEventRoutingTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()
        cls.screen = pygame.display.set_mode((800, 600))
        cls.font = pygame.font.Font(None, 18)

    def setUp(self):
        self.app = App(self.screen, self.font)
        self.manager = self.app.manager

    def test_template_registered_at_startup(self):
        self.assertIsNotNone(self.manager.get_component(POPUP_TEMPLATE_NAME))
        self.assertEqual((self.app.viewport.width, self.app.viewport.height), (800, 600))

    def test_keydown_goes_to_modal(self):
        box = self.manager.show_message_box("Hello")
        consumed = self.app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
        self.assertTrue(consumed)
        self.assertFalse(box.attached)

    def test_mouse_click_routes_to_button(self):
        done = []
        box = self.manager.show_message_box("Hello", "ok", lambda: done.append(True))
        pos = box.ui.buttons[0].rect.center
        self.app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))
        self.assertEqual(done, [True])

    def test_right_click_ignored(self):
        box = self.manager.show_message_box("Hello", "ok")
        pos = box.ui.buttons[0].rect.center
        self.assertFalse(self.app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=pos)))
        self.assertTrue(box.is_open())

    def test_resize_updates_viewport_and_layout(self):
        win = self.manager.add_component(KeyWindow("WinChat", rect=(600, 450, 200, 100)))
        self.app.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)))
        self.assertEqual((self.app.viewport.width, self.app.viewport.height), (640, 480))
        self.assertEqual(win.ui.rect.topleft, (440, 380))
        # New dialogs are centered in the resized viewport
        box = self.manager.show_message_box("Hi")
        self.assertEqual(box.ui.rect.left, (640 - 280) // 2)

    def test_error_box_reload_rebuilds_interface(self):
        chat = self.manager.add_component(KeyWindow("WinChat"))
        chat.append()
        self.manager.show_error_box("Connection lost")
        self.app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        self.assertEqual(self.app.reload_count, 1)
        self.assertFalse(chat.attached)
        self.assertEqual(chat.removed, 1)
        with self.assertRaises(ComponentNotFoundError):
            self.manager.get_component(ERROR_BOX_NAME)
        # Templates are back so dialogs keep working
        self.manager.show_message_box("Welcome back")
        self.assertEqual(len(self.manager.input_priority), 1)

    def test_quit_stops_loop(self):
        self.app.running = True
        self.app.handle_event(pygame.event.Event(pygame.QUIT))
        self.assertFalse(self.app.running)


if __name__ == '__main__':
    unittest.main()
