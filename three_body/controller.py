#!/usr/bin/env python3
"""
Simulation controller: the sole owner of body state.

The render loop calls step(frame_dt) once per frame and then reads snapshot().
Input collaborators call the command methods (toggle_pause, reset,
set_time_scale, ...). Every public method takes a re-entrant lock so the
Dear PyGui thread and the pygame render thread can share one controller.
"""
import enum
import logging
import random
import threading
from collections import deque
from typing import List, Optional, Sequence

from .boundary import wrap
from .collisions import describe_close_pairs, find_close_pairs
from .constants import BODY_COUNT, MAX_TIME_SCALE, MIN_TIME_SCALE
from .data_models import Body, SimulationSnapshot
from .physics import NBodyPhysics
from .presets import build_preset, preset_names
from .settings import SimulationSettings
from .vector_utils import clamp

logger = logging.getLogger(__name__)


class SimState(enum.Enum):
    RUNNING = "Running"
    PAUSED = "Paused"


class SimulationController:
    """
    Fixed-timestep driver for three bodies.

    State machine: RUNNING <-> PAUSED via toggle_pause(); reset() always ends in
    RUNNING. Nothing inside step() changes the state.
    """

    def __init__(self, settings: Optional[SimulationSettings] = None, bodies: Optional[Sequence[Body]] = None):
        self.lock = threading.RLock()
        self.settings = settings or SimulationSettings()
        self.physics = NBodyPhysics(self.settings.g, self.settings.epsilon)

        self.state = SimState.RUNNING
        self.time_scale = 1.0
        self.accumulated_time = 0.0
        self.sim_time = 0.0
        self.step_count = 0
        self.substep_count = 0
        self.last_collision_msg: Optional[str] = None

        self.viewport_size = (self.settings.viewport_width, self.settings.viewport_height)
        self.trail_length = self.settings.trail_length
        self.preset = self.settings.preset
        self.seed = self.settings.seed
        self._rng = random.Random(self.seed)

        self.bodies: List[Body] = []
        self.set_time_scale(self.settings.time_scale)
        if bodies is not None:
            self.replace_bodies(bodies)
        else:
            self.reset()

    @property
    def paused(self) -> bool:
        return self.state is SimState.PAUSED

    # ------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------

    def step(self, frame_dt: float) -> int:
        """
        Advance the simulation by one rendered frame.

        Runs fixed-size sub-steps for the accumulated scaled time, wraps
        positions into the viewport and samples trails. Returns the number of
        sub-steps run (0 while paused).
        """
        with self.lock:
            if self.paused:
                return 0

            substep = self.settings.fixed_substep
            max_steps = self.settings.max_substeps
            self.accumulated_time += max(0.0, frame_dt) * self.time_scale

            steps = 0
            while self.accumulated_time >= substep:
                if steps >= max_steps:
                    # Slow frame: drop the backlog rather than spiral
                    logger.debug(
                        "Sub-step cap %d reached; dropping %.4fs of simulated time",
                        max_steps, self.accumulated_time,
                    )
                    self.accumulated_time = 0.0
                    break
                self.physics.integrate(self.bodies, substep)
                self.accumulated_time -= substep
                self.sim_time += substep
                steps += 1

            width, height = self.viewport_size
            for b in self.bodies:
                b.position = wrap(b.position, width, height)
                b.add_trail_point()

            # None once the bodies separate again
            self.last_collision_msg = describe_close_pairs(self.bodies, find_close_pairs(self.bodies))

            self.step_count += 1
            self.substep_count += steps
            return steps

    def snapshot(self) -> SimulationSnapshot:
        """Immutable copy of the state a renderer needs."""
        with self.lock:
            return SimulationSnapshot(
                bodies=tuple(b.snapshot() for b in self.bodies),
                paused=self.paused,
                time_scale=self.time_scale,
                sim_time=self.sim_time,
                step_count=self.step_count,
                last_collision_msg=self.last_collision_msg,
            )

    # ------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------

    def toggle_pause(self) -> SimState:
        with self.lock:
            self.state = SimState.RUNNING if self.paused else SimState.PAUSED
            logger.info("Simulation %s", self.state.value)
            return self.state

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Rebuild the current preset and resume running.

        Without a seed the next layout is drawn from the controller's generator,
        so successive resets differ but the whole sequence is reproducible. With a
        seed the generator is reseeded first.
        """
        with self.lock:
            if seed is not None:
                self.seed = seed
                self._rng = random.Random(seed)
            width, height = self.viewport_size
            bodies = build_preset(self.preset, self._rng, width, height, self.physics.g)
            self.replace_bodies(bodies)
            self.state = SimState.RUNNING
            logger.info("Reset to preset %r (seed %s)", self.preset, self.seed)

    def load_preset(self, name: str, seed: Optional[int] = None) -> None:
        with self.lock:
            if name not in preset_names():
                raise KeyError(f"Unknown preset {name!r}; expected one of {preset_names()}")
            self.preset = name
            self.reset(seed)

    def replace_bodies(self, new_bodies: Sequence[Body]) -> None:
        with self.lock:
            if len(new_bodies) != BODY_COUNT:
                raise ValueError(f"Simulation needs exactly {BODY_COUNT} bodies, got {len(new_bodies)}")
            self.bodies = list(new_bodies)
            for b in self.bodies:
                b.trail = deque(maxlen=self.trail_length)
            self.accumulated_time = 0.0
            self.sim_time = 0.0
            self.step_count = 0
            self.substep_count = 0
            self.last_collision_msg = None

    def set_time_scale(self, s: float) -> float:
        """Set the real-to-simulated time multiplier; returns the clamped value."""
        if not s > 0:
            raise ValueError(f"time scale must be positive, got {s!r}")
        with self.lock:
            self.time_scale = clamp(float(s), MIN_TIME_SCALE, MAX_TIME_SCALE)
            logger.info("Time scale %gx", self.time_scale)
            return self.time_scale

    def set_viewport_size(self, w: int, h: int) -> None:
        if w <= 0 or h <= 0:
            raise ValueError(f"viewport size must be positive, got {(w, h)!r}")
        with self.lock:
            self.viewport_size = (w, h)

    def set_trail_length(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"trail length must be at least 1, got {n!r}")
        with self.lock:
            self.trail_length = int(n)
            for b in self.bodies:
                b.trail = deque(b.trail, maxlen=self.trail_length)

    def clear_trails(self) -> None:
        with self.lock:
            for b in self.bodies:
                b.trail.clear()
