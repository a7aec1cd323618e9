"""Layout constants and color definitions."""

FPS = 60

# Stars
STAR_COUNT = 40
STAR_COLOR = (255, 255, 240)

# Colors
CLOUD_COLOR = (255, 255, 255)
PIPE_CAP_H = 20
PIPE_CAP_LIP = 4
GROUND_STRIPE = (0, 0, 0, 40)
EYE_WHITE = (255, 255, 255)
EYE_PUPIL = (20, 20, 20)
BEAK_COLOR = (230, 126, 34)

TEXT_COLOR = (255, 255, 255)
TEXT_SHADOW = (0, 0, 0)
OVERLAY_COLOR = (0, 0, 0, 120)
