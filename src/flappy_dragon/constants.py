"""
constants.py: Centralized configuration for the game world and the host window.
"""

# -------- Screen / Grid Config --------
SCREEN_WIDTH = 80               # Character columns
SCREEN_HEIGHT = 50              # Character rows
WINDOW_TITLE = "Flappy Dragon"
CELL_SIZE = 12                  # Pixels per character cell (host only)
RENDER_FPS = 60

# Time synchronization
FRAME_DURATION_MS = 75.0        # One physics step per quantum, leftovers discarded

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Physics Config (screen units / step) --------
GRAVITY_ACCEL = 0.2
TERMINAL_VELOCITY = 2.0
FLAP_IMPULSE = -2.0

# -------- Obstacle Config --------
GAP_CENTER_MIN = 10             # Inclusive
GAP_CENTER_MAX = 40             # Exclusive
BASE_GAP_SIZE = 20
MIN_GAP_SIZE = 2

# -------- Colours (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Glyphs --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"
