#!/usr/bin/env python3
"""
Body factory: builds randomized particle populations.

Each factory owns its id counter and random source, so several independent
simulations can run side by side without id collisions. Pass a seeded
random.Random for reproducible populations.
"""
import itertools
import logging
import math
import random
from typing import List, Optional, Tuple

from .constants import BASE_RADIUS, MAX_COLOR, MAX_MASS, RADIUS_SCALE, SPAWN_SPREAD
from .data_models import Body
from .vector_utils import Vector

logger = logging.getLogger("gravfield")


def radius_for_mass(mass: float) -> float:
    return BASE_RADIUS + mass / MAX_MASS * RADIUS_SCALE


def color_from_int(value: int) -> Tuple[int, int, int]:
    """Split a 24-bit integer into an RGB tuple."""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


class BodyFactory:
    """
    Generates Bodies with randomized mass, position, velocity and color.

    Any attribute may be pinned through create_body keyword arguments; unpinned
    attributes are drawn from the factory's random source.
    """

    def __init__(self, rng: Optional[random.Random] = None, first_id: int = 0):
        self.rng = rng if rng is not None else random.Random()
        self._ids = itertools.count(first_id)

    def next_id(self) -> int:
        return next(self._ids)

    def generate_mass(self) -> float:
        # 1 - random() lies in (0, 1], so mass is never zero
        return (1.0 - self.rng.random()) * MAX_MASS

    def generate_position(self, max_extent: float) -> float:
        """Centre of the axis plus up to SPAWN_SPREAD pixels either way."""
        sign = 1 if self.rng.random() - 0.5 > 0 else -1
        return max_extent / 2 + self.rng.random() * SPAWN_SPREAD * sign

    def generate_velocity(self) -> Vector:
        return Vector(self.rng.random(), self.rng.random() * math.pi)

    def generate_color(self) -> Tuple[int, int, int]:
        return color_from_int(math.floor(self.rng.random() * MAX_COLOR))

    def create_body(self, field_width: float, field_height: float,
                    mass: Optional[float] = None,
                    position: Optional[Tuple[float, float]] = None,
                    velocity: Optional[Vector] = None,
                    radius: Optional[float] = None,
                    color: Optional[Tuple[int, int, int]] = None,
                    participates: bool = True) -> Body:
        """
        Create one body inside a field of the given size.

        Raises:
            InvalidMassError: if an explicit mass is not strictly positive
        """
        if mass is None:
            mass = self.generate_mass()
        if position is None:
            position = (self.generate_position(field_width), self.generate_position(field_height))
        return Body(
            id=self.next_id(),
            mass=float(mass),
            position=(float(position[0]), float(position[1])),
            radius=radius_for_mass(mass) if radius is None else float(radius),
            color=self.generate_color() if color is None else color,
            velocity=self.generate_velocity() if velocity is None else velocity,
            participates=participates,
        )

    def create_population(self, count: int, field_width: float, field_height: float) -> List[Body]:
        if count < 0:
            raise ValueError(f"population size must be >= 0, got {count}")
        if field_width <= 0 or field_height <= 0:
            raise ValueError(f"field must have a positive size, got {field_width}x{field_height}")
        bodies = [self.create_body(field_width, field_height) for _ in range(count)]
        logger.info("Created %d bodies in a %sx%s field", count, field_width, field_height)
        return bodies
