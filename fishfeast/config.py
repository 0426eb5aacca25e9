"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

# ── Window & Arena ────────────────────────────────────────────────
PANEL_H         = 56
ARENA_W, ARENA_H = 960, 600
WIDTH, HEIGHT   = ARENA_W, ARENA_H + PANEL_H
OFFSET_X        = 0
OFFSET_Y        = PANEL_H
FPS             = 60
MAX_DT          = 0.033      # seconds; one step never simulates more

# ── Colors ────────────────────────────────────────────────────────
WATER_TOP   = (7,   49,  77)
WATER_DEEP  = (4,   25,  42)
CAUSTIC_COL = (155, 227, 255)
CURRENT_COL = (167, 243, 208)
EYE_WHITE   = (255, 255, 255)
EYE_PUPIL   = (11,  21,  32)
MOUTH_COL   = (6,   17,  26)
BUBBLE_COL  = (190, 235, 255)
UI_COL      = (150, 190, 215)
SCORE_COL   = (255, 214, 102)
LIVES_COL   = (255, 99,  120)
PLAYER_UI   = (94,  234, 180)
PANEL_BG    = (5,   20,  33)
BORDER_COL  = (20,  70,  100)

PLAYER_HSL  = (160, 80, 60)

# ── Gameplay ──────────────────────────────────────────────────────
START_LIVES        = 3
PLAYER_START_R     = 18
PLAYER_MIN_R       = 12
PLAYER_MAX_R       = 90          # growth cap from food
PLAYER_EAT_MAX_R   = 80          # growth cap from eating enemies
PLAYER_ACCEL       = 260         # units/s² per held direction
PLAYER_DRAG        = 0.9
BOUNCE_DAMP        = 0.7
KNOCKBACK_SPEED    = 200
BITE_DECAY         = 0.1

ENEMY_FLOOR        = 16
FOOD_FLOOR         = 20
INITIAL_ENEMIES    = 16
INITIAL_FOOD       = 22
ENEMY_SPAWN_MARGIN = 40
ENEMY_CULL_MARGIN  = 80
FOOD_SPAWN_MARGIN  = 30
ENEMY_RADIUS       = (10, 42)
ENEMY_WAVE_GROWTH  = 0.6         # radius bonus per wave, uncapped
FOOD_RADIUS        = (4, 10)

# Fraction of the ambient current applied as acceleration
CURRENT_PLAYER = 0.2
CURRENT_ENEMY  = 0.1
CURRENT_FOOD   = 0.05

# Collision thresholds scale the player's radius per interaction
ENEMY_HIT_SCALE  = 0.9
ENEMY_EAT_RATIO  = 0.9
FOOD_HIT_SCALE   = 0.8

WAVE_MS          = 8000
WAVE_BURST       = 3

DRAG_DEAD_ZONE   = 6             # px of pointer travel before it counts

BUBBLE_COUNT     = 20

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── Persistence & Logging ─────────────────────────────────────────
BEST_SCORE_KEY  = "fish-best"
BEST_SCORE_FILE = os.environ.get(
    "FISHFEAST_BEST_FILE",
    os.path.join(os.path.expanduser("~"), ".fishfeast.json"),
)
LOG_LEVEL = os.environ.get("FISHFEAST_LOG_LEVEL", "INFO")
