#!/usr/bin/env python3
"""
Core Physics Engine for the three-body simulator

Responsibilities
- Compute pairwise gravitational accelerations with a minimum-distance floor.
- Advance body states using semi-implicit (symplectic) Euler.
- Provide small helpers for common orbital computations (circular and escape velocity).

Units and conventions
- Positions are in viewport pixels [px].
- Velocities are in pixels per second [px/s].
- Time steps are in seconds [s].
- G is a tuned simulation constant, see constants.py.

Numerical notes
- Softening floor: the pair distance is clamped to at least EPSILON before the
  inverse-cube factor is applied. Coincident bodies get a bounded kick instead of
  an infinite one; this is not physically exact but common in N-body demos.
- Complexity: acceleration computation is O(N^2) per step (direct summation),
  trivial for three bodies.
- Energy: semi-implicit Euler is symplectic. Energy oscillates within a band of
  order dt instead of drifting, which is what keeps orbits from visibly decaying
  or exploding. Explicit Euler (position updated from the old velocity) does not
  have this property.
- Boundaries: distances are plain Euclidean on whatever positions are stored.
  Wrapped positions are not unwrapped here, so two bodies that look adjacent
  across a viewport edge do not attract each other strongly.
"""

import math
from typing import List, Sequence, Tuple

from .constants import EPSILON, G
from .data_models import Body
from .vector_utils import vec_add, vec_scale, vec_sub


class NBodyPhysics:
    """
    N-body gravitational physics engine with a distance floor.

    The acceleration on body i due to body j is:
    a_ij = G * m_j * d / max(|d|, eps)^3,  d = x_j - x_i
    """

    def __init__(self, g: float = G, epsilon: float = EPSILON):
        """
        Args:
            g: Gravitational constant in simulation units
            epsilon: Minimum pair distance in pixels (must be > 0)
        """
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon!r}")
        self.g = float(g)
        self.epsilon = float(epsilon)

    def acceleration_on(self, body: Body, others: Sequence[Body]) -> Tuple[float, float]:
        """
        Total gravitational acceleration on `body` from `others`.

        `body` itself is skipped if it appears in `others`, so the full body list
        can be passed directly.
        """
        ax_total, ay_total = 0.0, 0.0

        for other in others:
            if other is body:
                continue

            # Vector from body i to body j
            dx, dy = vec_sub(other.position, body.position)

            r = max(math.hypot(dx, dy), self.epsilon)
            acceleration_magnitude = self.g * other.mass / (r * r * r)

            ax_total += dx * acceleration_magnitude
            ay_total += dy * acceleration_magnitude

        return (ax_total, ay_total)

    def compute_accelerations(self, bodies: Sequence[Body]) -> List[Tuple[float, float]]:
        """Accelerations for every body, all taken from the current positions."""
        return [self.acceleration_on(body, bodies) for body in bodies]

    def integrate(self, bodies: Sequence[Body], dt: float) -> None:
        """
        Perform one semi-implicit Euler step in place.

        Workflow:
        1) accelerations for all bodies from pre-update positions
        2) v += a * dt
        3) x += v * dt, using the velocity from step 2
        """
        if dt <= 0:
            return

        accelerations = self.compute_accelerations(bodies)

        for body, acceleration in zip(bodies, accelerations):
            body.velocity = vec_add(body.velocity, vec_scale(acceleration, dt))
            body.position = vec_add(body.position, vec_scale(body.velocity, dt))


_default_physics = NBodyPhysics()


def acceleration_on(body: Body, others: Sequence[Body]) -> Tuple[float, float]:
    """Force model with the default G and EPSILON."""
    return _default_physics.acceleration_on(body, others)


def integrate(bodies: Sequence[Body], dt: float) -> None:
    """Semi-implicit Euler step with the default G and EPSILON."""
    _default_physics.integrate(bodies, dt)


def circular_orbit_velocity(central_mass: float, orbital_radius: float, g: float = G) -> float:
    """
    Calculate the velocity needed for a circular orbit.

    For a circular orbit, the gravitational force provides exactly the
    centripetal force needed: G * M / r = v^2 / r, so v = sqrt(G * M / r).

    Returns:
        Orbital speed in px/s, or 0.0 for a non-positive radius
    """
    if orbital_radius <= 0:
        return 0.0

    return math.sqrt(g * central_mass / orbital_radius)


def escape_velocity(total_mass: float, separation: float, g: float = G) -> float:
    """
    Calculate the escape velocity at a given separation.

    v_escape = sqrt(2 * G * M / r)
    """
    if separation <= 0 or total_mass <= 0:
        return 0.0

    return math.sqrt(2.0 * g * total_mass / separation)
