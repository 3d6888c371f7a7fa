import pygame
import pytest
from gameui.core.errors import ComponentNotFoundError
from gameui.ui.dialogs import DialogState
from gameui.ui.settings import PROMPT_BOX_NAME
from gameui.ui.ui_manager import UIManager
from tests.test_utils import CallCounter, KeyWindow, key_down


class PromptTrace:
    def __init__(self):
        self.calls = []
        self.box = None
    def accept(self):
        self.calls.append(("accept", self.box.attached))
    def cancel(self):
        self.calls.append(("cancel", self.box.attached))


def _open(manager, trace):
    trace.box = manager.show_prompt_box("Leave the party?", "yes", "no", trace.accept, trace.cancel)
    return trace.box


def test_accept_fires_only_accept(manager):
    trace = PromptTrace()
    box = _open(manager, trace)
    assert manager.get_component(PROMPT_BOX_NAME) is box
    box.click("yes")
    box.click("no")
    assert trace.calls == [("accept", False)]


def test_cancel_fires_only_cancel(manager):
    trace = PromptTrace()
    box = _open(manager, trace)
    box.click("no")
    box.click("yes")
    assert trace.calls == [("cancel", False)]


def test_buttons_laid_out_accept_then_cancel(manager):
    box = _open(manager, PromptTrace())
    accept, cancel = box.ui.buttons
    assert (accept.label, cancel.label) == ("yes", "no")
    assert accept.rect.right < cancel.rect.left
    manager.handle_click(cancel.rect.center)
    assert box.closed_by == "button"


def test_keys_do_not_answer_prompt(manager):
    below = manager.add_component(KeyWindow("WinChat"))
    below.append()
    trace = PromptTrace()
    box = _open(manager, trace)
    for key in (pygame.K_RETURN, pygame.K_ESCAPE):
        assert manager.handle_key_down(key_down(key)) is True
    assert box.is_open()
    assert trace.calls == []
    assert below.keys == []


def test_same_labels_still_distinct(manager):
    accept, cancel = CallCounter(), CallCounter()
    box = manager.show_prompt_box("?", "ok", "ok", accept, cancel)
    box.press(1)
    assert (accept.calls, cancel.calls) == (0, 1)


def test_unknown_label_raises(manager):
    box = _open(manager, PromptTrace())
    with pytest.raises(ValueError):
        box.click("maybe")
    assert box.state == DialogState.OPEN


def test_missing_template_raises():
    bare = UIManager()
    for opener in (
        lambda: bare.show_prompt_box("?", "yes", "no"),
        lambda: bare.show_message_box("?"),
        lambda: bare.show_error_box("?"),
    ):
        with pytest.raises(ComponentNotFoundError):
            opener()
    assert len(bare.components) == 0
    assert len(bare.input_priority) == 0
