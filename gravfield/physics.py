#!/usr/bin/env python3
"""
Force model for the gravity field simulator.

Responsibilities
- Compute the pairwise gravitational magnitude between two mass points.
- Compute the direction from one mass point toward another.
- Express the pull on a body as a polar acceleration Vector per unit of its mass.

Conventions
- A mass point is anything with .mass and .position: a Body or an Attractor.
- The force law is F = G * m1 * m2 / d (inverse distance, not inverse square).
- Coincident points have no defined force. gravitational_force raises
  DegenerateDistanceError; acceleration_on treats the pair as a zero contribution so
  nothing non-finite reaches the frame loop.
"""
import logging
import math

from .constants import GRAVITY
from .errors import DegenerateDistanceError
from .vector_utils import Vector, ZERO

logger = logging.getLogger("gravfield")


def distance(a, b) -> float:
    """Euclidean distance between two mass points."""
    return math.hypot(a.position[0] - b.position[0], a.position[1] - b.position[1])


def gravitational_force(a, b) -> float:
    """
    Magnitude of the gravitational pull between a and b.

    Args:
        a, b: Mass points exposing .mass and .position

    Returns:
        GRAVITY * a.mass * b.mass / distance(a, b)

    Raises:
        DegenerateDistanceError: if a and b occupy the same coordinate
    """
    d = distance(a, b)
    if d == 0:
        raise DegenerateDistanceError(f"coincident mass points at {a.position}")
    return GRAVITY * a.mass * b.mass / d


def direction(a, b) -> float:
    """Angle in radians from a toward b."""
    return math.atan2(b.position[1] - a.position[1], b.position[0] - a.position[0])


def acceleration_on(a, b) -> Vector:
    """
    Acceleration that b induces on a, oriented toward b.

    Returns the zero vector when a and b coincide.
    """
    if distance(a, b) == 0:
        logger.debug("Skipping degenerate pair at %s", a.position)
        return ZERO
    return Vector(gravitational_force(a, b) / a.mass, direction(a, b))
