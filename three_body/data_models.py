#!/usr/bin/env python3
"""
Data models for the three-body simulator.

This module defines the Body dataclass owned by SimulationController and the
immutable snapshots handed to the renderer.

Units and usage
- position is in viewport pixels [px], velocity in pixels per second [px/s].
- mass is a positive simulation mass; it never changes during a run.
- trail stores past positions, oldest first, capped at MAX_TRAIL_LEN.
- Only the controller mutates a Body; renderers read BodySnapshot copies.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple

from .constants import MAX_TRAIL_LEN


@dataclass
class Body:
    """
    Represents a point mass in the simulation.

    Fields:
    - name: Identifier for the body
    - mass: Positive mass
    - radius: Visual radius in pixels
    - position: 2D position (x, y) in pixels
    - velocity: 2D velocity (vx, vy) in pixels/second
    - color: RGB tuple used for rendering
    - trail: Deque of past positions for drawing motion trails
    """
    name: str
    mass: float
    radius: float
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    color: Tuple[int, int, int] = (200, 200, 255)
    trail: Deque[Tuple[float, float]] = field(default_factory=lambda: deque(maxlen=MAX_TRAIL_LEN))

    def __post_init__(self) -> None:
        if not self.mass > 0:
            raise ValueError(f"Body {self.name!r} must have positive mass, got {self.mass!r}")

    def add_trail_point(self) -> None:
        """Append the current position to the trail."""
        self.trail.append(self.position)

    def snapshot(self) -> "BodySnapshot":
        return BodySnapshot(
            name=self.name,
            mass=self.mass,
            radius=self.radius,
            position=self.position,
            velocity=self.velocity,
            color=self.color,
            trail=tuple(self.trail),
        )


@dataclass(frozen=True)
class BodySnapshot:
    """Read-only copy of a Body taken between frames."""
    name: str
    mass: float
    radius: float
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    color: Tuple[int, int, int]
    trail: Tuple[Tuple[float, float], ...]


@dataclass(frozen=True)
class SimulationSnapshot:
    """Everything the renderer and status display need for one frame."""
    bodies: Tuple[BodySnapshot, ...]
    paused: bool
    time_scale: float
    sim_time: float
    step_count: int
    last_collision_msg: Optional[str] = None
