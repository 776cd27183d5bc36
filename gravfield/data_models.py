#!/usr/bin/env python3
"""
Data models for the gravity field simulator.

This module defines the Body dataclass shared between the engine, the controller
and the renderer, plus the small value types the engine is configured with.

Units and usage
- position is in field pixels; velocity and acceleration are polar Vectors in pixels per frame.
- mass is dimensionless and strictly positive; radius and color are render attributes.
- Access to Body instances from the app is coordinated by SimulationController using a lock.
"""
import math
from dataclasses import dataclass, field
from typing import Tuple

from .constants import DEFAULT_DT
from .errors import InvalidConfigError, InvalidMassError
from .vector_utils import Vector


@dataclass
class Body:
    """
    A single simulated particle.

    Fields:
    - id: Identifier assigned by the owning BodyFactory; unique and stable
    - mass: Strictly positive mass
    - position: 2D position (x, y) in field pixels
    - radius: Visual radius, also widens the out-of-bounds extent
    - color: RGB tuple used for rendering
    - velocity: Current net motion per frame
    - acceleration: Pointer-attraction accumulator, written between frames only
    - alive: Read-only; False once the body has left the field. Only kill() changes it
    - participates: Whether the engine advances this body (False for anchors)
    """
    id: int
    mass: float
    position: Tuple[float, float]
    radius: float
    color: Tuple[int, int, int] = (200, 200, 255)
    velocity: Vector = field(default_factory=Vector)
    acceleration: Vector = field(default_factory=Vector)
    participates: bool = True
    _alive: bool = field(default=True, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.mass > 0:
            raise InvalidMassError(f"body {self.id}: mass must be > 0, got {self.mass!r}")

    @property
    def alive(self) -> bool:
        return self._alive

    def kill(self) -> None:
        """Mark the body dead. There is no way back."""
        self._alive = False


@dataclass(frozen=True)
class Attractor:
    """A mass point that is not a body, e.g. the virtual pointer."""
    mass: float
    position: Tuple[float, float]


@dataclass
class SimulationConfig:
    """
    Per-frame engine switches.

    wrap_out_of_bounds and kill_out_of_bounds are independent; every
    combination is valid. dt is the frame timestep and stays at 1.0 in the app.
    """
    wrap_out_of_bounds: bool = True
    kill_out_of_bounds: bool = False
    dt: float = DEFAULT_DT

    def __post_init__(self) -> None:
        if not math.isfinite(self.dt) or self.dt <= 0:
            raise InvalidConfigError(f"dt must be a finite number > 0, got {self.dt!r}")
