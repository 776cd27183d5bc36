#!/usr/bin/env python3
"""
Simulation controller: shared state between the renderer thread and the UI.

The Pygame renderer ticks frames and forwards pointer motion; the Dear PyGui panel
flips switches and respawns the population. Every access goes through a
re-entrant lock, so a pointer event is applied to the whole population before the
next frame reads it.
"""
import dataclasses
import logging
import random
import threading
from typing import List, Optional

from .constants import NUM_PARTICLES, POINTER_MASS, VIEW_HEIGHT, VIEW_WIDTH
from .data_models import Body, SimulationConfig
from .engine import GravityEngine
from .factory import BodyFactory
from .settings_loader import Settings

logger = logging.getLogger("gravfield")


class SimulationController:
    """
    Shared simulation state guarded by a lock.
    """

    def __init__(self, width: int = VIEW_WIDTH, height: int = VIEW_HEIGHT,
                 config: Optional[SimulationConfig] = None,
                 rng: Optional[random.Random] = None):
        self.lock = threading.RLock()
        self.running = True  # app running
        self.playing = True  # simulation running
        self.width = width
        self.height = height
        self.particle_count = NUM_PARTICLES
        self.pointer_mass = POINTER_MASS
        self.frame = 0
        self.engine = GravityEngine(dataclasses.replace(config) if config is not None else SimulationConfig())
        self.factory = BodyFactory(rng=rng)
        self.bodies: List[Body] = []

    @property
    def config(self) -> SimulationConfig:
        return self.engine.config

    def respawn(self, count: Optional[int] = None) -> None:
        """Replace the population with a fresh one of count bodies."""
        with self.lock:
            if count is not None:
                self.particle_count = int(count)
            self.bodies = self.factory.create_population(self.particle_count, self.width, self.height)
            self.frame = 0

    def resize_field(self, width: int, height: int) -> None:
        with self.lock:
            if width <= 0 or height <= 0:
                return
            self.width = width
            self.height = height

    def set_wrap(self, enabled: bool) -> None:
        with self.lock:
            self.config.wrap_out_of_bounds = bool(enabled)

    def set_kill(self, enabled: bool) -> None:
        with self.lock:
            self.config.kill_out_of_bounds = bool(enabled)

    def set_pointer_mass(self, mass: float) -> None:
        with self.lock:
            self.pointer_mass = max(0.0, float(mass))

    def apply_settings(self, settings: Settings) -> None:
        """Adopt a preset and respawn with its population size."""
        with self.lock:
            self.engine.set_config(settings.to_config())
            self.pointer_mass = settings.pointer_mass
            logger.info("Applying settings %r", settings.name)
            self.respawn(settings.particle_count)

    def toggle_play(self) -> bool:
        with self.lock:
            self.playing = not self.playing
            logger.info("Simulation %s", "resumed" if self.playing else "paused")
            return self.playing

    def _advance(self) -> None:
        self.engine.advance_frame(self.bodies, self.width, self.height)
        self.frame += 1

    def tick(self) -> None:
        """Advance one frame if playing."""
        with self.lock:
            if self.playing:
                self._advance()

    def step_once(self) -> bool:
        """Advance exactly one frame while paused. Returns whether a frame was advanced."""
        with self.lock:
            if self.playing:
                return False
            self._advance()
            return True

    def pointer_moved(self, x: float, y: float) -> None:
        with self.lock:
            self.engine.apply_pointer_attraction(self.bodies, x, y, self.pointer_mass)

    def visible_bodies(self) -> List[Body]:
        """Snapshot of the bodies the renderer should draw."""
        with self.lock:
            return [b for b in self.bodies if self.engine.is_active(b)]

    def alive_count(self) -> int:
        with self.lock:
            return sum(1 for b in self.bodies if b.alive)
