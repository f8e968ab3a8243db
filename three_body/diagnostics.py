#!/usr/bin/env python3
"""
Conserved-quantity diagnostics.

Energy and momentum readouts for the status panel and for checking that the
integrator stays stable. Potential energy uses the same EPSILON floor as the
force model so the two stay consistent.
"""
import itertools
import math
from typing import Sequence, Tuple

from .constants import EPSILON, G
from .data_models import Body
from .vector_utils import vec_dot


def kinetic_energy(bodies: Sequence[Body]) -> float:
    s = 0.0
    for b in bodies:
        s += 0.5 * b.mass * vec_dot(b.velocity, b.velocity)
    return s


def potential_energy(bodies: Sequence[Body], g: float = G, epsilon: float = EPSILON) -> float:
    s = 0.0
    for a, b in itertools.combinations(bodies, 2):
        dx = b.position[0] - a.position[0]
        dy = b.position[1] - a.position[1]
        r = max(math.hypot(dx, dy), epsilon)
        s -= g * a.mass * b.mass / r
    return s


def total_energy(bodies: Sequence[Body], g: float = G, epsilon: float = EPSILON) -> float:
    return kinetic_energy(bodies) + potential_energy(bodies, g, epsilon)


def total_momentum(bodies: Sequence[Body]) -> Tuple[float, float]:
    px = sum(b.mass * b.velocity[0] for b in bodies)
    py = sum(b.mass * b.velocity[1] for b in bodies)
    return (px, py)


def center_of_mass(bodies: Sequence[Body]) -> Tuple[float, float]:
    """Mass-weighted mean position. Meaningless once positions have wrapped."""
    m_total = sum(b.mass for b in bodies)
    if m_total <= 0:
        return (0.0, 0.0)
    cx = sum(b.mass * b.position[0] for b in bodies) / m_total
    cy = sum(b.mass * b.position[1] for b in bodies) / m_total
    return (cx, cy)


def relative_energy_drift(e0: float, e1: float) -> float:
    """|e1 - e0| / |e0|, or the absolute change when e0 is zero."""
    if e0 == 0:
        return abs(e1 - e0)
    return abs(e1 - e0) / abs(e0)
