#!/usr/bin/env python3
"""
Initial-condition presets.

Every preset returns exactly three bodies. Randomized presets draw from the
`random.Random` instance they are given, so a seeded generator always yields
the same layout.
"""
import math
import random
from typing import Callable, Dict, List, Tuple

from .constants import (
    BODY_DRAW_RADIUS,
    G,
    MAX_RANDOM_MASS,
    MAX_RANDOM_SPEED,
    MIN_RANDOM_MASS,
    SPAWN_MARGIN,
)
from .data_models import Body
from .physics import circular_orbit_velocity

BODY_NAMES = ("A", "B", "C")


def _random_color(rng: random.Random) -> Tuple[int, int, int]:
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def _spawn_range(extent: float) -> Tuple[float, float]:
    # Small viewports fall back to the whole extent
    if extent <= 2 * SPAWN_MARGIN:
        return (0.0, float(extent))
    return (SPAWN_MARGIN, extent - SPAWN_MARGIN)


def random_bodies(rng: random.Random, width: float, height: float) -> List[Body]:
    """
    Three bodies with random colour, position, velocity and mass.

    Positions keep SPAWN_MARGIN clear of every edge; velocity components are
    uniform in [-MAX_RANDOM_SPEED, MAX_RANDOM_SPEED].
    """
    x_lo, x_hi = _spawn_range(width)
    y_lo, y_hi = _spawn_range(height)
    bodies = []
    for name in BODY_NAMES:
        color = _random_color(rng)
        position = (rng.uniform(x_lo, x_hi), rng.uniform(y_lo, y_hi))
        velocity = (rng.uniform(-MAX_RANDOM_SPEED, MAX_RANDOM_SPEED),
                    rng.uniform(-MAX_RANDOM_SPEED, MAX_RANDOM_SPEED))
        mass = rng.uniform(MIN_RANDOM_MASS, MAX_RANDOM_MASS)
        bodies.append(Body(name, mass, BODY_DRAW_RADIUS, position, velocity, color))
    return bodies


def central_mass_bodies(center: Tuple[float, float] = (0.0, 0.0), g: float = G) -> List[Body]:
    """
    One heavy body with two light bodies on opposite sides.

    The light bodies start on circular orbits about the heavy one for the given G;
    with the default G that is sqrt(G * 10 / 100) == 5.
    """
    cx, cy = center
    v = circular_orbit_velocity(10.0, 100.0, g)
    return [
        Body("A", 10.0, BODY_DRAW_RADIUS + 3, (cx, cy), (0.0, 0.0), (255, 204, 0)),
        Body("B", 1.0, BODY_DRAW_RADIUS, (cx + 100.0, cy), (0.0, v), (100, 149, 237)),
        Body("C", 1.0, BODY_DRAW_RADIUS, (cx - 100.0, cy), (0.0, -v), (188, 39, 50)),
    ]


def figure_eight_bodies(center: Tuple[float, float] = (0.0, 0.0), g: float = G) -> List[Body]:
    """Classic equal-mass figure-eight periodic solution (Chenciner-Montgomery).
    Dimensionless initial conditions (G=1, m=1):
    r1=(-0.97000436, 0.24308753), r2=(0.97000436,-0.24308753), r3=(0,0)
    v1=(0.4662036850, 0.4323657300), v2=(0.4662036850, 0.4323657300), v3=(-0.93240737,-0.86473146)
    Scaled by mass m and length L: velocity V = sqrt(G*m/L).
    """
    m = 500.0
    L = 200.0  # pixels
    V = math.sqrt(g * m / L)
    cx, cy = center

    r1 = (-0.97000436, 0.24308753)
    r2 = (0.97000436, -0.24308753)
    r3 = (0.0, 0.0)
    v1 = (0.4662036850, 0.4323657300)
    v2 = (0.4662036850, 0.4323657300)
    v3 = (-0.93240737, -0.86473146)

    bodies = []
    bodies.append(Body("A", m, BODY_DRAW_RADIUS, (cx + r1[0]*L, cy + r1[1]*L), (v1[0]*V, v1[1]*V), (255, 120, 120)))
    bodies.append(Body("B", m, BODY_DRAW_RADIUS, (cx + r2[0]*L, cy + r2[1]*L), (v2[0]*V, v2[1]*V), (120, 255, 120)))
    bodies.append(Body("C", m, BODY_DRAW_RADIUS, (cx + r3[0]*L, cy + r3[1]*L), (v3[0]*V, v3[1]*V), (120, 120, 255)))
    return bodies


PresetBuilder = Callable[[random.Random, float, float, float], List[Body]]

PRESETS: Dict[str, PresetBuilder] = {
    "random": lambda rng, w, h, g: random_bodies(rng, w, h),
    "central": lambda rng, w, h, g: central_mass_bodies((w / 2, h / 2), g),
    "figure_eight": lambda rng, w, h, g: figure_eight_bodies((w / 2, h / 2), g),
}


def preset_names() -> List[str]:
    return list(PRESETS)


def build_preset(name: str, rng: random.Random, width: float, height: float, g: float = G) -> List[Body]:
    """Build the named preset for a viewport of the given size and gravitational constant."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset {name!r}; expected one of {preset_names()}")
    return PRESETS[name](rng, width, height, g)
