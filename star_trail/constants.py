"""Engine-wide constants for the Echo star trail background."""

import math

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Echo"

# --- Colors (RGB) ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
LIGHT_GREY = (180, 180, 190)
DIM_GREY = (110, 110, 125)

# HUD / hero accents
VIOLET = (139, 92, 246)
PANEL_BG = (10, 10, 16, 180)
PANEL_BORDER = (60, 60, 80)

# --- Background particles ---
BG_PARTICLE_DENSITY = 0.0003  # particles per square logical pixel
BG_VELOCITY_RANGE = 0.15  # full width of the symmetric velocity range
BG_SIZE_RANGE = (0.5, 1.5)
BG_ALPHA_RANGE = (0.1, 0.3)
TWINKLE_FREQUENCY = 0.002  # rad per ms

# --- Trail stars ---
TRAIL_SPAWN_RATE = 0.5
TRAIL_MOVE_THRESHOLD = 2.0  # logical px the pointer must travel per tick
TRAIL_SPREAD = 30
TRAIL_VELOCITY_RANGE = (-0.5, 0.5)
TRAIL_SIZE_RANGE = (3.0, 8.0)
TRAIL_ROTATION_SPEED_RANGE = (-0.05, 0.05)
TRAIL_DRIFT = 0.02  # subtracted from vy every tick
STAR_LIFE_DURATION = 100  # ticks
STAR_LIFE_JITTER = 20
TRAIL_COLOR = WHITE
TRAIL_GLOW_SCALE = 2.0
TRAIL_GLOW_OPACITY = 0.5

# --- Star polygon ---
STAR_SPIKES = 5
STAR_INNER_RATIO = 0.5
STAR_ANGLE_STEP = math.pi / STAR_SPIKES

# --- Ambient glow ---
GLOW_COLOR = VIOLET
GLOW_PULSE_FREQUENCY = 0.0008  # rad per ms
GLOW_PULSE_AMPLITUDE = 0.025
GLOW_PULSE_BASELINE = 0.065
GLOW_RADIUS_RATIO = 0.6
GRADIENT_STEP = 2  # device px between gradient rings

# --- Pointer ---
POINTER_OFFSCREEN = -1000.0

# --- Hero copy ---
HERO_BADGE = "BEYOND STEREO"
HERO_TITLE = "Echo"
HERO_TAGLINE = "The world's most advanced spatial audio engine for the web."
APP_VERSION = "0.1.0"
