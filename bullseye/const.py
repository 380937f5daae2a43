# -----------------------------
# Gameplay constants
# -----------------------------

GAME_MS = 60_000                   # length of a full run

# Timed mode
TARGET_LIFETIME_MS = 3_000         # a timed target expires this long after it spawns
EXPIRED_LIMIT = 5                  # expirations that end a timed run
TIMED_SIZE_MIN = 58                # px, start diameter range
TIMED_SIZE_MAX = 84
TIMED_SIZE_FLOOR = 20              # px, diameter at the end of its lifetime

# Tracking mode
TRACKING_SIZE_MIN = 58
TRACKING_SIZE_MAX = 84
TRACKING_SPEED_MIN = 80            # px/sec
TRACKING_SPEED_MAX = 150
TRACKING_TARGET_HP = 4
TRACKING_SHIELD_HP = 2
TRACKING_OVERWHELM_LIMIT = 5       # more live targets than this ends a tracking run

# Bullseye math
CENTER_RADIUS_RATIO = 0.4
CENTER_POINTS = 2
OUTER_POINTS = 1
SHIELD_POINTS = 1

SPAWN_PADDING = 4                  # px kept between a fresh target and the arena edge

# Difficulty slider
DIFFICULTY_MIN = 1
DIFFICULTY_MAX = 10

# Spawn curves: (start delay ms, min delay ms, ramp ms per elapsed second)
TIMED_CURVE_EASY = (2000, 550, 3.0)
TIMED_CURVE_HARD = (1200, 350, 7.5)

# Tracking is intentionally slower than timed
TRACKING_CURVE_EASY = (2600, 900, 2.0)
TRACKING_CURVE_HARD = (2000, 650, 3.6)

# Best score keys (one per mode)
STORE_KEY_TIMED = "bullseye_high_timed"
STORE_KEY_TRACKING = "bullseye_high_tracking"
