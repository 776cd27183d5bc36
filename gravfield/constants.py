#!/usr/bin/env python3
"""
Shared constants for the gravity field simulator.

Field coordinates are screen pixels; one frame is one unit of time. Keeping
constants in one place helps ensure values are consistent across the engine,
the controller and the renderer.
"""

# Physical constants (field units)
GRAVITY = 6.67e-11  # pairwise force constant, F = G * m1 * m2 / d
MAX_MASS = 1e10  # upper bound for generated masses
POINTER_MASS = 1e5  # mass of the virtual attractor that follows the pointer

# Integration
DEFAULT_DT = 1.0  # frames per integration step; velocity accumulates acceleration * dt

# Population spawning
NUM_PARTICLES = 150
SPAWN_SPREAD = 355  # max pixel offset from the field centre on each axis
BASE_RADIUS = 5.0
RADIUS_SCALE = 10.0  # radius = BASE_RADIUS + mass / MAX_MASS * RADIUS_SCALE
MAX_COLOR = 0xFFFFFF

# Rendering (window)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
TARGET_FPS = 60
BACKGROUND_COLOR = (10, 12, 18)
HUD_COLOR = (200, 200, 200)
