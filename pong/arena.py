"""Playfield dimensions and gameplay constants.

Distances are in pixels, speeds in pixels per second, angles in degrees.
Geometry code never reads WINDOW_WIDTH/WINDOW_HEIGHT directly: the current
screen size is passed in every frame, these only size the window at startup.
"""

# Window
WINDOW_WIDTH = 512
WINDOW_HEIGHT = 320
WINDOW_TITLE = "Pong"

# Puck
PUCK_RADIUS = 10.0
PUCK_SPEED = 200.0  # same magnitude on both axes
PUCK_START_ANGLE = 180.0  # serve towards the left paddle

# Paddles
PADDLE_WIDTH = 10.0
PADDLE_HEIGHT = 50.0
PADDLE_SPEED = 200.0
PADDLE_OFFSET = 10.0  # gap between paddle and its side wall

# Reflection
MIN_REFLECTION_ANGLE = 20.0
MAX_REFLECTION_ANGLE = 160.0

# Scoring: first side past MAX_SCORE // 2 wins (first to 3)
MAX_SCORE = 5

# Audio
HIT_SOUND_PATH = "forceField.ogg"
