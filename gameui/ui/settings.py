"""Central settings and UI constants for the interface runtime."""
import pygame

WIDTH, HEIGHT = 1024, 768
FPS = 30

# === COMPONENT NAMES ===

# Long-lived template every modal dialog is cloned from
POPUP_TEMPLATE_NAME = "WinPopup"
ERROR_BOX_NAME = "WinError"
MESSAGE_BOX_NAME = "WinMSG"
PROMPT_BOX_NAME = "WinPrompt"
# Full-screen click blocker shown behind the error box
POPUP_OVERLAY_NAME = "WinPopupOverlay"

# === POPUP GEOMETRY ===

POPUP_WIDTH = 280
POPUP_HEIGHT = 120
# Dialogs sit centered horizontally, a bit above the vertical center:
#   top = (H - POPUP_HEIGHT) / POPUP_VERTICAL_RATIO - POPUP_HEIGHT
POPUP_VERTICAL_RATIO = 1.5
POPUP_PADDING = 10

BUTTON_WIDTH = 64
BUTTON_HEIGHT = 20
BUTTON_SPACING = 6

# Stacking order
MODAL_Z_INDEX = 100
OVERLAY_Z_INDEX = 99

# === INPUT ===

# Keys that accept/dismiss a keyboard-enabled dialog
ACCEPT_KEYS = (pygame.K_RETURN, pygame.K_ESCAPE)

# === COLORS ===

POPUP_BG = (40, 55, 70)
POPUP_BORDER = (90, 140, 180)
POPUP_TEXT = (235, 235, 240)
OVERLAY_COLOR = (0, 0, 0, 96)
BUTTON_BG = (80, 120, 160)
BUTTON_BORDER = (200, 200, 200)
BUTTON_TEXT = (255, 255, 255)
BG_COLOR = (22, 38, 46)

# Font sizes
FONT_SIZE_TEXT = 18
FONT_SIZE_BUTTON = 16

# Border radius / widths
BORDER_RADIUS_POPUP = 6
BORDER_RADIUS_BUTTON = 4
BORDER_WIDTH_POPUP = 2
BORDER_WIDTH_BUTTON = 1

# === LOGGING ===

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
