#!/usr/bin/env python3
"""
Three Bodies application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui
  control panel (running on the main thread).
- Both share one SimulationController, which owns the bodies and guards every
  command and snapshot with a re-entrant lock.
- Maps raw keys and widgets onto the ControlSurface command set; the simulation
  package itself knows nothing about key codes.

Threading model
- PygameRenderer runs in a background thread and performs: input handling (for the
  viewport), sim.step(real_dt), and drawing from an immutable snapshot.
- The UI class runs in the main thread via Dear PyGui. It refreshes its readouts on a
  periodic frame callback and invokes ControlSurface commands.

Viewport keys
- Space: reset (new random layout)   P: pause/play   Tab: next preset
- +/-: speed up/slow down   Arrows: pan   Wheel: zoom   Home: reset view   C: clear trails

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python three_body_sim.py` (or `three-body-sim`)
"""

import logging
import math
import threading
import time

import pygame
import dearpygui.dearpygui as dpg

from three_body import diagnostics
from three_body.boundary import split_at_wraps
from three_body.camera import Camera2D
from three_body.constants import (
    BACKGROUND_COLOR,
    HUD_COLOR,
    MAX_TIME_SCALE,
    MIN_TIME_SCALE,
    PAN_SPEED_KEYS,
    SAFE_COORD_LIMIT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    ZOOM_STEP,
)
from three_body.controller import SimulationController
from three_body.controls import ControlSurface
from three_body.presets import preset_names

logger = logging.getLogger("three_body_sim")

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: steps the simulation, draws bodies, fading trails and the HUD.
    Handles keyboard commands, camera panning and zoom.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.camera = Camera2D()
        self.controls = ControlSurface(sim, self.camera)
        self.surface = None
        self.clock = None
        self.dragging_background = False
        self.drag_start_screen = (0, 0)
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Three Bodies")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.sim.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()
        logger.info("Viewport opened at %dx%d", VIEW_WIDTH, VIEW_HEIGHT)

        last_time = time.perf_counter()
        while self.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            self.handle_events(real_dt)
            self.sim.step(real_dt)
            self.draw()

            # Limit FPS
            self.clock.tick(60)

        pygame.quit()
        logger.info("Viewport closed")

    def handle_events(self, real_dt):
        keys = pygame.key.get_pressed()
        pan = PAN_SPEED_KEYS * real_dt
        if keys[pygame.K_LEFT]:
            self.controls.adjust_camera((pan, 0), 0.0)
        if keys[pygame.K_RIGHT]:
            self.controls.adjust_camera((-pan, 0), 0.0)
        if keys[pygame.K_UP]:
            self.controls.adjust_camera((0, pan), 0.0)
        if keys[pygame.K_DOWN]:
            self.controls.adjust_camera((0, -pan), 0.0)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)
                self.sim.set_viewport_size(event.w, event.h)

            elif event.type == pygame.KEYUP:
                self.handle_key(event.key)

            elif event.type == pygame.MOUSEWHEEL:
                factor = 1.0 + ZOOM_STEP if event.y > 0 else 1.0 / (1.0 + ZOOM_STEP)
                self.camera.zoom_by(factor, pygame.mouse.get_pos())

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in (1, 2, 3):
                    self.dragging_background = True
                    self.drag_start_screen = pygame.mouse.get_pos()

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in (1, 2, 3):
                    self.dragging_background = False

            elif event.type == pygame.MOUSEMOTION:
                if self.dragging_background:
                    mouse = pygame.mouse.get_pos()
                    dx = mouse[0] - self.drag_start_screen[0]
                    dy = mouse[1] - self.drag_start_screen[1]
                    self.controls.adjust_camera((dx, dy), 0.0)
                    self.drag_start_screen = mouse

    def handle_key(self, key):
        if key == pygame.K_SPACE:
            self.controls.reset()
        elif key == pygame.K_p:
            self.controls.toggle_pause()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.controls.speed_up()
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.controls.slow_down()
        elif key == pygame.K_TAB:
            self.controls.cycle_preset()
        elif key == pygame.K_HOME:
            self.camera.reset_view()
        elif key == pygame.K_c:
            self.sim.clear_trails()

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        snap = self.sim.snapshot()
        width, height = self.sim.viewport_size

        # Trails fade from background to body colour, oldest to newest
        for b in snap.bodies:
            n = len(b.trail)
            if n < 2:
                continue
            age = 0
            for run in split_at_wraps(b.trail, width, height):
                prev = None
                for p in run:
                    age += 1
                    sp = _safe_point(self.camera.world_to_screen(p))
                    if prev is not None and sp is not None:
                        color = _fade(b.color, age / n)
                        try:
                            pygame.draw.aaline(surf, color, prev, sp)
                        except Exception:
                            pass
                    prev = sp

        for b in snap.bodies:
            sp = _safe_point(self.camera.world_to_screen(b.position))
            if sp is None:
                continue
            vis_r = max(2, int(b.radius * self.camera.zoom))
            try:
                pygame.draw.circle(surf, b.color, sp, min(vis_r, 50))
            except Exception:
                pass

        draw_text(surf, "Space: reset | P: pause | Tab: preset | +/-: speed | Arrows/drag: pan | Wheel: zoom", 10, 10, HUD_COLOR)
        status = "Paused" if snap.paused else "Running"
        draw_text(surf, f"Speed: {snap.time_scale:g}x  [{status}]  t={snap.sim_time:.1f}s", 10, 30, HUD_COLOR)
        if snap.last_collision_msg:
            draw_text(surf, snap.last_collision_msg, 10, 50, (255, 180, 120))

        pygame.display.flip()

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        try:
            pygame.font.init()
        except Exception:
            pass
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("consolas", 16)
        except Exception:
            _cached_font = pygame.font.Font(None, 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def _fade(color, t):
    t = max(0.0, min(1.0, t))
    return tuple(int(bg + (c - bg) * t) for c, bg in zip(color, BACKGROUND_COLOR))

def _widget_stale(current, value, tol=1e-4):
    """True when a widget shows something other than value (floats compared loosely)."""
    if isinstance(current, (int, float)) and isinstance(value, (int, float)):
        return abs(current - value) > tol
    return current != value

def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except Exception:
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui control panel: pause/reset, presets, seed, speed, trails and readouts.
    """
    def __init__(self, sim: SimulationController, renderer: PygameRenderer):
        self.sim = sim
        self.renderer = renderer
        self.controls = renderer.controls

        self.status_msg_id = None
        self.readout_id = None
        self.seed_id = None
        self._last_collision_shown = None

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        try:
            current = dpg.get_frame_count()
        except Exception:
            current = 0
        dpg.set_frame_callback(current + 6, self._sync_ui_with_sim)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Three Bodies - Controls', width=440, height=420)

        with dpg.window(label="Controls", width=420, height=400, pos=(10, 10), tag="main_window"):
            with dpg.group(horizontal=True):
                dpg.add_text("Preset:")
                dpg.add_combo(preset_names(), default_value=self.sim.preset, width=160,
                              callback=lambda s, a, u: self._load_preset(a), tag="preset_combo")
                dpg.add_button(label="Reset view", callback=self.renderer.camera.reset_view)

            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=self._toggle_play)
                dpg.add_button(label="Reset", callback=self._reset)
                self.seed_id = dpg.add_input_int(label="Seed", default_value=self.sim.seed, width=100)
                dpg.add_button(label="Reseed", callback=self._reseed)

            with dpg.group(horizontal=True):
                dpg.add_text("Speed (x real-time):")
                dpg.add_slider_float(min_value=MIN_TIME_SCALE, max_value=MAX_TIME_SCALE,
                                     default_value=self.sim.time_scale, width=200,
                                     callback=lambda s, a, u: self._set_speed(a), tag="speed_slider")

            with dpg.group(horizontal=True):
                dpg.add_input_int(label="Trail length", default_value=self.sim.trail_length, min_value=1,
                                  max_value=5000, width=100, callback=self._on_trail_length,
                                  tag="trail_length_input")
                dpg.add_button(label="Clear trails", callback=self.sim.clear_trails)

            dpg.add_separator()
            self.readout_id = dpg.add_text("")
            dpg.add_separator()
            self.status_msg_id = dpg.add_text("Ready.", color=(180, 220, 180))

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _toggle_play(self):
        state = self.controls.toggle_pause()
        self._set_status(f"Simulation {state.value}.")

    def _reset(self):
        self.controls.reset()
        self._set_status("Reset.")

    def _reseed(self):
        seed = int(dpg.get_value(self.seed_id))
        self.sim.reset(seed)
        self._set_status(f"Reset with seed {seed}.")

    def _load_preset(self, name: str):
        self.sim.load_preset(name)
        self.renderer.camera.reset_view()
        self._set_status(f"Loaded preset: {name}")

    def _set_speed(self, value):
        try:
            applied = self.controls.set_time_scale(float(value))
        except (TypeError, ValueError):
            self._set_status("Speed must be positive.", color=(255, 120, 120))
            return
        self._set_status(f"Speed {applied:g}x")

    def _on_trail_length(self, sender, app_data, user_data=None):
        try:
            length = max(1, int(app_data))
        except (TypeError, ValueError):
            return
        self.sim.set_trail_length(length)
        self._set_status(f"Trail length set to {length}.")

    def _sync_ui_with_sim(self):
        """
        Periodic UI update: energy readout, body positions and close-approach messages.
        """
        with self.sim.lock:
            snap = self.sim.snapshot()
            energy = diagnostics.total_energy(self.sim.bodies, self.sim.physics.g, self.sim.physics.epsilon)
            preset = self.sim.preset
        lines = [f"t = {snap.sim_time:.2f}s   steps = {snap.step_count}   E = {energy:.4e}"]
        for b in snap.bodies:
            speed = math.hypot(b.velocity[0], b.velocity[1])
            lines.append(f"{b.name}: m={b.mass:.1f}  pos=({b.position[0]:.1f}, {b.position[1]:.1f})  |v|={speed:.2f}")
        dpg.set_value(self.readout_id, "\n".join(lines))
        try:
            # Only push values that changed elsewhere, so a drag in progress is not overridden
            if _widget_stale(dpg.get_value("speed_slider"), snap.time_scale):
                dpg.set_value("speed_slider", snap.time_scale)
            if _widget_stale(dpg.get_value("preset_combo"), preset):
                dpg.set_value("preset_combo", preset)
        except Exception:
            pass
        if snap.last_collision_msg and snap.last_collision_msg != self._last_collision_shown:
            self._set_status(snap.last_collision_msg, color=(255, 180, 120))
        self._last_collision_shown = snap.last_collision_msg
        if not self.renderer.is_alive():
            dpg.stop_dearpygui()
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sim = SimulationController()
    renderer = PygameRenderer(sim)

    # Start Pygame renderer thread
    renderer.start()

    ui = UI(sim, renderer)

    # Keyboard shortcut in UI window to toggle play/pause (P, as in the viewport)
    with dpg.handler_registry():
        def key_down(sender, app_data):
            if app_data == dpg.mvKey_P:
                ui._toggle_play()
        dpg.add_key_release_handler(callback=key_down)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()

if __name__ == "__main__":
    main()
