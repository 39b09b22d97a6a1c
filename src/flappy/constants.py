"""
constants.py: Centralized configuration for the simulation and the pygame host.
"""

# -------- Screen Config --------
SCREEN_WIDTH = 500
SCREEN_HEIGHT = 500
WINDOW_TITLE = "Flappy Bird Clone 🐤"

# Time synchronization
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Wall-clock seconds per fixed tick
FIXED_STEP = 1.0                # dt handed to advance(); constants below are per tick
RENDER_FPS = 60

# -------- Flyer Config --------
BIRD_X = 200                    # Fixed flyer X position
BIRD_START_Y = 250.0
BIRD_SIZE = 20                  # Square bounding box
MAX_BIRD_Y = 480                # Lower bound; y above this ends the run

# -------- Gate Config --------
PIPE_WIDTH = 60
PIPE_GAP = 120
PIPE_SPEED = 3                  # Pixels per tick
PIPE_START_X = SCREEN_WIDTH
PIPE_SPAWN_INTERVAL = 2.0       # seconds between spawns
MIN_PIPE_GAP_Y = 100            # Inclusive
MAX_PIPE_GAP_Y = 350            # Exclusive

# -------- Physics Config (pixels / tick) --------
# Accumulation-based, so frame-rate dependent unless dt is fixed
GRAVITY = 0.5
JUMP_STRENGTH = -8.0

# -------- Render Config --------
COLOR_SKY = (135, 206, 235)
COLOR_BIRD = (255, 255, 0)
COLOR_PIPE = (0, 128, 0)
COLOR_TEXT = (0, 0, 0)
COLOR_GAME_OVER = (255, 0, 0)
SCORE_POS = (20, 20)
GAME_OVER_POS = (100, 250)
GAME_OVER_TEXT = "GAME OVER! Press ENTER to Restart"
FONT_SIZE = 24
