import os

# Headless pygame for the whole suite
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gameui.ui.renderer import Viewport
from gameui.ui.templates import register_default_components
from gameui.ui.ui_manager import UIManager
from tests.test_utils import CallCounter


@pytest.fixture
def reloads():
    return CallCounter()


@pytest.fixture
def manager(reloads):
    m = UIManager(Viewport(800, 600), reload_action=reloads)
    register_default_components(m)
    return m
