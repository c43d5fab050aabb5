"""Window, timing, and color constants."""

# Timing
FPS = 60

# Window
WINDOW_W = 720
WINDOW_H = 720
CANVAS_FRACTION = 0.8
TITLE = "tilt-ball"

# Ball
BALL_RADIUS = 12.5

# Virtual device
TILT_STEP_DEG = 3.0
MAX_TILT_DEG = 60.0
GRAVITY = 9.81

# Colors
BG_COLOR = (0, 0, 0)
CANVAS_BORDER = (60, 60, 60)
BALL_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)
TEXT_DIM = (140, 140, 140)
WARN_COLOR = (255, 180, 0)

# Live sound controls
SENSITIVITY_STEP = 0.1
SENSITIVITY_RANGE = (0.1, 5.0)
BRIGHTNESS_STEP = 200.0
BRIGHTNESS_RANGE = (400.0, 8000.0)
