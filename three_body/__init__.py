"""
three_body - real-time gravitational simulation of three point masses.

Main entry points:
    - SimulationController: owns the bodies; step(frame_dt) once per frame.
    - ControlSurface: commands for input collaborators.
    - NBodyPhysics: force model and semi-implicit Euler integrator.
    - wrap: toroidal boundary policy.
"""
from .boundary import wrap
from .camera import Camera2D
from .controller import SimState, SimulationController
from .controls import ControlSurface
from .data_models import Body, BodySnapshot, SimulationSnapshot
from .physics import NBodyPhysics, acceleration_on, integrate
from .settings import SimulationSettings

__all__ = [
    "Body",
    "BodySnapshot",
    "Camera2D",
    "ControlSurface",
    "NBodyPhysics",
    "SimState",
    "SimulationController",
    "SimulationSettings",
    "SimulationSnapshot",
    "acceleration_on",
    "integrate",
    "wrap",
]
