# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
They cover rendering properties and default window sizes. Tunable physics
values (capacity, emission rate, masses) live in `config.json`.
"""
import math

# Visualization settings
# Window size used when `visualization.fullscreen` is false and the config
# does not provide one.
DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 800
UI_PANEL_WIDTH = 220
FPS = 60
# Cap on the per-frame step multiplier when physics is scaled by frame time.
MAX_TIME_SCALE = 3.0
BACKGROUND_COLOR = (0, 0, 0)
WINDOW_TITLE = "Particle Fields"

# --- Object Drawing ---
# Particles are drawn as filled squares of this side length (px).
PARTICLE_SIZE = 2
# Fields and emitters are drawn as filled circles of this radius (px).
OBJECT_SIZE = 4

PARTICLE_COLOR = (255, 0, 255)  # Magenta
EMITTER_COLOR = (153, 153, 153)  # Grey

# Field colours follow the sign of the field mass.
FIELD_COLOR_ATTRACTIVE = (0, 255, 0)  # Green
FIELD_COLOR_REPULSIVE = (255, 0, 0)   # Red
FIELD_COLOR_NEUTRAL = (255, 255, 255) # White

# --- Emitter Defaults ---
DEFAULT_EMITTER_SPREAD = math.pi / 32

# --- UI Panel ---
UI_BACKGROUND_COLOR = (30, 30, 30)
UI_BUTTON_COLOR = (80, 80, 80)
UI_BUTTON_HOVER_COLOR = (110, 110, 110)
UI_TEXT_COLOR = (255, 255, 255)
UI_TEXT_KEY_COLOR = (200, 200, 200)
