#!/usr/bin/env python3
"""
Polar 2D vector used for every velocity and acceleration in the simulator.

Vectors are stored as (magnitude, theta) and added by summing their Cartesian
components, then converting back to polar form. That composition is the only
addition rule the engine uses.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """
    Immutable 2D quantity in polar form.

    Fields:
    - magnitude: length of the vector (>= 0)
    - theta: direction in radians, measured from the +x axis
    """
    magnitude: float = 0.0
    theta: float = 0.0

    def magnitude_x(self) -> float:
        return self.magnitude * math.cos(self.theta)

    def magnitude_y(self) -> float:
        return self.magnitude * math.sin(self.theta)

    def compose(self, other: "Vector") -> "Vector":
        """
        Add two vectors component-wise and return the result in polar form.

        A zero-magnitude operand leaves the other one untouched, so composing
        with the zero vector returns the original exactly.
        """
        if other.magnitude == 0:
            return self
        if self.magnitude == 0:
            return other
        vx = self.magnitude_x() + other.magnitude_x()
        vy = self.magnitude_y() + other.magnitude_y()
        return Vector(math.hypot(vx, vy), math.atan2(vy, vx))

    def scaled(self, factor: float) -> "Vector":
        """Return the vector with its magnitude multiplied by factor."""
        return Vector(self.magnitude * factor, self.theta)


ZERO = Vector()
