#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.

World coordinates are viewport pixels, so at zoom 1 with the camera centred on
the viewport the transform is the identity. The camera is purely a rendering
concern; the simulation never sees it.
"""
from typing import Optional, Tuple

from .constants import DEFAULT_ZOOM, MAX_ZOOM, MIN_ZOOM, VIEW_HEIGHT, VIEW_WIDTH
from .vector_utils import clamp


class Camera2D:
    """
    Simple 2D camera that maps world coordinates to screen pixels.
    """

    def __init__(self, center=None, zoom=DEFAULT_ZOOM):
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)
        if center is None:
            center = (VIEW_WIDTH / 2, VIEW_HEIGHT / 2)
        self.center = [center[0], center[1]]
        self.zoom = zoom

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def reset_view(self) -> None:
        """Centre on the viewport at the default zoom."""
        self.center = [self.viewport_size[0] / 2, self.viewport_size[1] / 2]
        self.zoom = DEFAULT_ZOOM

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[int, int]:
        cx, cy = self.center
        px = (pos[0] - cx) * self.zoom + self.viewport_size[0] / 2
        py = (pos[1] - cy) * self.zoom + self.viewport_size[1] / 2
        return (int(px), int(py))

    def screen_to_world(self, screen: Tuple[int, int]) -> Tuple[float, float]:
        cx, cy = self.center
        wx = (screen[0] - self.viewport_size[0] / 2) / self.zoom + cx
        wy = (screen[1] - self.viewport_size[1] / 2) / self.zoom + cy
        return (wx, wy)

    def zoom_by(self, factor, pivot_screen: Optional[Tuple[int, int]] = None):
        """Multiply zoom by factor, keeping the world point under pivot_screen fixed."""
        factor = clamp(factor, 0.05, 20.0)
        before = None
        if pivot_screen is not None:
            before = self.screen_to_world(pivot_screen)
        self.zoom = clamp(self.zoom * factor, MIN_ZOOM, MAX_ZOOM)
        if pivot_screen is not None and before is not None:
            after = self.screen_to_world(pivot_screen)
            self.center[0] += (before[0] - after[0])
            self.center[1] += (before[1] - after[1])

    def pan_pixels(self, dx_pixels, dy_pixels):
        self.center[0] -= dx_pixels / self.zoom
        self.center[1] -= dy_pixels / self.zoom

    def adjust(self, pan_delta: Tuple[float, float], zoom_delta: float) -> None:
        """
        Pan by pan_delta screen pixels, then zoom by (1 + zoom_delta) about the
        viewport centre.
        """
        self.pan_pixels(pan_delta[0], pan_delta[1])
        if zoom_delta:
            self.zoom_by(1.0 + zoom_delta)
