"""
constants.py: Centralized configuration for game, physics and rendering settings.
"""

# -------- Game World Config (cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
PLAYER_ABS_X = 20               # Fixed player screen column, the camera follows the player
PLAYER_START_X = 0
PLAYER_START_Y = 25

# Time synchronization
FRAME_DURATION = 75.0           # Fixed physics step (milliseconds)

# -------- Physics Config (cells / tick) --------
GRAVITY_ACCEL = 0.2             # Added to velocity each tick while below terminal velocity
TERMINAL_VELOCITY = 2.0         # Checked before adding gravity
FLY_VELOCITY = -2.0             # Instantaneous velocity after a fly impulse
PHYSICS_PRECISION = 4           # Decimal places kept after each step

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Inclusive
GAP_Y_MAX = 40                  # Exclusive
MAX_GAP_SIZE = 20               # Gap size at score 0
MIN_GAP_SIZE = 3

# -------- Render Config --------
WINDOW_TITLE = "~Flappy~"
RENDER_FPS = 60
CELL_SIZE = 10                  # Pixels per cell side

PLAYER_GLYPH = "@"
WALL_GLYPH = "|"

# RGB colours
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
BLUE = (0, 0, 255)
NAVY = (0, 0, 128)
DARK_GREEN = (0, 100, 0)
