#!/usr/bin/env python3
"""
Frame engine for the gravity field simulator.

Responsibilities
- Advance a population by one frame: all-pairs gravity, velocity integration,
  position update and boundary handling.
- Apply pointer attraction to each body's acceleration accumulator.

Frame semantics
- A body is active unless kill-on-exit is on and the body is dead. Inactive bodies
  are frozen and pull on nobody.
- Every pull is computed from a snapshot taken before the pass; new states are
  committed only once all of them are known, so update order never matters.
- The timestep is config.dt (1 frame). Velocity accumulates the summed pull directly:
  v' = v + a * dt, then p' = p + v' * dt.
- Leaving the field always marks a body dead. The kill switch decides whether dead
  bodies are then excluded.

Acceleration channels
- advance_frame integrates its own per-frame gravity sum and discards it.
- apply_pointer_attraction composes into Body.acceleration, which advance_frame never
  reads. See DESIGN.md for why the channels stay separate.

Complexity
- Direct summation, O(N^2) per frame.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .boundary import apply_boundary
from .data_models import Attractor, Body, SimulationConfig
from .factory import BodyFactory
from .physics import acceleration_on
from .vector_utils import Vector, ZERO

logger = logging.getLogger("gravfield")


@dataclass(frozen=True)
class _Snapshot:
    """Pre-frame view of a body used as an attractor."""
    id: int
    mass: float
    position: Tuple[float, float]
    active: bool


class GravityEngine:
    """
    All-pairs gravity engine with a configurable boundary policy.

    The engine keeps no per-body state; everything lives on the Body objects.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config if config is not None else SimulationConfig()

    def set_config(self, config: SimulationConfig) -> None:
        self.config = config

    def is_active(self, body: Body) -> bool:
        """Whether body still takes part in the simulation."""
        return body.alive or not self.config.kill_out_of_bounds

    def gravity_on(self, body: Body, attractors: Sequence[_Snapshot]) -> Vector:
        """Sum of the pulls on body from every other active attractor."""
        total = ZERO
        for other in attractors:
            if other.id == body.id or not other.active:
                continue
            total = total.compose(acceleration_on(body, other))
        return total

    def advance_frame(self, bodies: List[Body], field_width: float, field_height: float) -> List[Body]:
        """
        Advance every active, participating body by one frame.

        Args:
            bodies: Population to update (modified in place)
            field_width, field_height: Current field size in pixels

        Returns:
            The same list, for chaining into the renderer.
        """
        dt = self.config.dt
        snapshot = [_Snapshot(b.id, b.mass, b.position, self.is_active(b)) for b in bodies]

        updates = []
        for body, before in zip(bodies, snapshot):
            if not before.active or not body.participates:
                continue
            v_gravity = self.gravity_on(body, snapshot)
            v_final = body.velocity.compose(v_gravity.scaled(dt))
            x = body.position[0] + v_final.magnitude_x() * dt
            y = body.position[1] + v_final.magnitude_y() * dt
            result = apply_boundary(x, y, field_width, field_height, body.radius,
                                    self.config.wrap_out_of_bounds)
            updates.append((body, v_final, result))

        for body, v_final, result in updates:
            if result.exited and body.alive:
                logger.debug("Body %d left the field at (%.1f, %.1f)", body.id, result.x, result.y)
                body.kill()
            body.velocity = v_final
            body.position = (result.x, result.y)
        return bodies

    def apply_pointer_attraction(self, bodies: List[Body], pointer_x: float, pointer_y: float,
                                 pointer_mass: float) -> None:
        """Compose the pointer's pull into the acceleration accumulator of each active body."""
        pointer = Attractor(mass=pointer_mass, position=(pointer_x, pointer_y))
        for body in bodies:
            if not self.is_active(body):
                continue
            body.acceleration = body.acceleration.compose(acceleration_on(body, pointer))


def create_population(count: int, field_width: float, field_height: float,
                      config: Optional[SimulationConfig] = None,
                      factory: Optional[BodyFactory] = None,
                      rng: Optional[random.Random] = None) -> List[Body]:
    """
    Build a fresh population for a field.

    config is accepted so callers can hand the same settings to every entry point;
    boundary switches do not influence spawning.
    """
    if factory is None:
        factory = BodyFactory(rng=rng)
    return factory.create_population(count, field_width, field_height)


def advance_frame(bodies: List[Body], field_width: float, field_height: float,
                  config: Optional[SimulationConfig] = None) -> List[Body]:
    return GravityEngine(config).advance_frame(bodies, field_width, field_height)


def apply_pointer_attraction(bodies: List[Body], pointer_x: float, pointer_y: float,
                             pointer_mass: float, config: Optional[SimulationConfig] = None) -> None:
    GravityEngine(config).apply_pointer_attraction(bodies, pointer_x, pointer_y, pointer_mass)
