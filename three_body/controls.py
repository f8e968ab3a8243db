#!/usr/bin/env python3
"""
Command surface for input collaborators.

Key handlers and UI widgets call these methods; none of them know about raw key
codes. Simulation commands go to the controller, camera commands go only to the
renderer's camera.
"""
from typing import Tuple

from .camera import Camera2D
from .constants import TIME_SCALE_STEP
from .controller import SimState, SimulationController
from .presets import preset_names


class ControlSurface:
    def __init__(self, sim: SimulationController, camera: Camera2D):
        self.sim = sim
        self.camera = camera

    def toggle_pause(self) -> SimState:
        return self.sim.toggle_pause()

    def reset(self) -> None:
        self.sim.reset()

    def set_time_scale(self, factor: float) -> float:
        return self.sim.set_time_scale(factor)

    def speed_up(self) -> float:
        with self.sim.lock:
            return self.sim.set_time_scale(self.sim.time_scale * TIME_SCALE_STEP)

    def slow_down(self) -> float:
        with self.sim.lock:
            return self.sim.set_time_scale(self.sim.time_scale / TIME_SCALE_STEP)

    def adjust_camera(self, pan_delta: Tuple[float, float], zoom_delta: float) -> None:
        self.camera.adjust(pan_delta, zoom_delta)

    def cycle_preset(self) -> str:
        """Switch to the next preset and reset; returns its name."""
        names = preset_names()
        with self.sim.lock:
            idx = names.index(self.sim.preset) if self.sim.preset in names else -1
            name = names[(idx + 1) % len(names)]
            self.sim.load_preset(name)
        self.camera.reset_view()
        return name
