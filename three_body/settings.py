#!/usr/bin/env python3
"""
Runtime configuration for SimulationController.

Defaults come from constants.py; override individual fields to tune a run or
to shrink the problem in tests.
"""
from dataclasses import dataclass

from .constants import (
    DEFAULT_PRESET,
    DEFAULT_SEED,
    DEFAULT_TIME_SCALE,
    EPSILON,
    FIXED_SUBSTEP,
    G,
    MAX_SUBSTEPS,
    MAX_TRAIL_LEN,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)


@dataclass
class SimulationSettings:
    """Container for simulation tuning settings."""
    g: float = G
    epsilon: float = EPSILON
    fixed_substep: float = FIXED_SUBSTEP
    max_substeps: int = MAX_SUBSTEPS
    trail_length: int = MAX_TRAIL_LEN
    time_scale: float = DEFAULT_TIME_SCALE
    seed: int = DEFAULT_SEED
    preset: str = DEFAULT_PRESET
    viewport_width: int = VIEW_WIDTH
    viewport_height: int = VIEW_HEIGHT

    def __post_init__(self) -> None:
        if self.fixed_substep <= 0:
            raise ValueError(f"fixed_substep must be positive, got {self.fixed_substep!r}")
        if self.max_substeps < 1:
            raise ValueError(f"max_substeps must be at least 1, got {self.max_substeps!r}")
        if self.trail_length < 1:
            raise ValueError(f"trail_length must be at least 1, got {self.trail_length!r}")
