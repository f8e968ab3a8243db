#!/usr/bin/env python3
"""
Shared constants for the three-body simulator.

World units are viewport pixels and seconds. G and EPSILON are tuned so the
central-mass preset (mass 10 with two light bodies at 100 px moving 5 px/s)
is an exact circular orbit: sqrt(G * 10 / 100) == 5.
"""

# Physics
G = 250.0  # px^3 mass^-1 s^-2, not the SI value
EPSILON = 5.0  # px; softening floor for pairwise distance
BODY_COUNT = 3

# Fixed-step integration
FIXED_SUBSTEP = 1 / 240.0  # seconds of simulation time per sub-step
MAX_SUBSTEPS = 240  # cap per step() call; backlog beyond it is dropped

# Time scale
DEFAULT_TIME_SCALE = 1.0
MIN_TIME_SCALE = 1 / 16.0
MAX_TIME_SCALE = 32.0
TIME_SCALE_STEP = 2.0

# Trails
MAX_TRAIL_LEN = 300

# Initial conditions
DEFAULT_SEED = 42
DEFAULT_PRESET = "random"
SPAWN_MARGIN = 100.0  # px kept clear of each viewport edge
MIN_RANDOM_MASS = 500.0
MAX_RANDOM_MASS = 1000.0
MAX_RANDOM_SPEED = 20.0  # px/s per axis

# Close approach reporting
COLLISION_DISTANCE = 10.0  # px

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
BACKGROUND_COLOR = (0, 0, 0)
HUD_COLOR = (200, 200, 200)
BODY_DRAW_RADIUS = 5

# Camera zoom bounds (screen pixels per world pixel)
DEFAULT_ZOOM = 1.0
MIN_ZOOM = 0.1
MAX_ZOOM = 10.0
PAN_SPEED_KEYS = 600  # screen pixels per second
ZOOM_STEP = 0.1

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
