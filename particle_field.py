#!/usr/bin/env python3
"""
Gravity field simulator application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (the field) and the Dear PyGui
  control panel (running on the main thread).
- Shares a SimulationController that owns the population and engine settings; all
  access is guarded by a re-entrant lock for thread-safety.

Threading model
- PygameRenderer runs in a background thread and performs: input handling for the
  field window, one frame advance per display refresh, and drawing.
- The UI class runs in the main thread via Dear PyGui. It refreshes its status line on
  a periodic frame callback and invokes SimulationController methods as needed.

Controls (field window)
- Mouse motion: the pointer acts as a massive attractor.
- Esc: pause / resume. Space: advance one frame while paused.
- Resizing the window resizes the field.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python particle_field.py`
"""

import logging
import threading

import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from gravfield.constants import (
    BACKGROUND_COLOR,
    HUD_COLOR,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from gravfield.controller import SimulationController
from gravfield.settings_loader import list_settings, load_settings
from gravfield.utils import try_float, try_int

logger = logging.getLogger("gravfield")

# Avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: ticks the simulation, draws bodies and HUD, forwards input.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.surface = None
        self.clock = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Gravity Field - Viewport")
        self.surface = pygame.display.set_mode((self.sim.width, self.sim.height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        while self.running and self.sim.running:
            self.handle_events()
            self.draw()
            self.sim.tick()
            self.clock.tick(TARGET_FPS)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.sim.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.sim.resize_field(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.sim.toggle_play()
                elif event.key == pygame.K_SPACE:
                    self.sim.step_once()

            elif event.type == pygame.MOUSEMOTION:
                self.sim.pointer_moved(*event.pos)

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        bodies = self.sim.visible_bodies()
        for b in bodies:
            pt = _safe_point(b.position)
            if pt is None:
                continue
            try:
                gfxdraw.filled_circle(surf, pt[0], pt[1], max(1, int(b.radius)), b.color)
            except OverflowError:
                pass

        with self.sim.lock:
            playing = self.sim.playing
            frame = self.sim.frame
            total = len(self.sim.bodies)
        alive = self.sim.alive_count()
        draw_text(surf, "Move: attract | Esc: Pause/Play | Space: Step (paused)", 10, 10, HUD_COLOR)
        draw_text(surf, f"Frame {frame}  Alive {alive}/{total}  [{'Playing' if playing else 'Paused'}]",
                  10, 30, HUD_COLOR)

        pygame.display.flip()

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except (OverflowError, ValueError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui interface: settings presets, boundary switches, population controls.
    """
    def __init__(self, sim: SimulationController):
        self.sim = sim

        self.count_id = None
        self.pointer_mass_id = None
        self.wrap_id = None
        self.kill_id = None
        self.status_msg_id = None
        self.stats_id = None
        self._settings_map = {}

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (~10Hz)."""
        dpg.set_frame_callback(dpg.get_frame_count() + 6, self._sync_ui_with_sim)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Gravity Field - Controls', width=440, height=360)

        with dpg.window(label="Controls", width=420, height=340, pos=(10, 10), tag="main_window"):
            with dpg.group(horizontal=True):
                dpg.add_text("Preset:")
                for fn, display in list_settings():
                    self._settings_map[display] = fn
                preset_items = list(self._settings_map.keys())
                dpg.add_combo(preset_items,
                              default_value=preset_items[0] if preset_items else "",
                              width=200,
                              tag="preset_combo")
                dpg.add_button(label="Load", callback=lambda: self.load_preset(dpg.get_value("preset_combo")))

            dpg.add_separator()

            dpg.add_text("Population")
            with dpg.group(horizontal=True):
                self.count_id = dpg.add_input_text(label="Particles", default_value=str(self.sim.particle_count),
                                                   width=100)
                dpg.add_button(label="Respawn", callback=self._on_respawn_clicked)
            with dpg.group(horizontal=True):
                self.pointer_mass_id = dpg.add_input_text(label="Pointer mass",
                                                          default_value=f"{self.sim.pointer_mass:g}", width=100)
                dpg.add_button(label="Apply", callback=self._on_pointer_mass_applied)

            dpg.add_separator()

            dpg.add_text("Boundary")
            with dpg.group(horizontal=True):
                self.wrap_id = dpg.add_checkbox(label="Wrap out of bounds",
                                                default_value=self.sim.config.wrap_out_of_bounds,
                                                callback=lambda s, a, u: self._toggle_wrap(a))
                self.kill_id = dpg.add_checkbox(label="Kill out of bounds",
                                                default_value=self.sim.config.kill_out_of_bounds,
                                                callback=lambda s, a, u: self._toggle_kill(a))

            dpg.add_separator()

            dpg.add_text("Simulation Controls")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=self._toggle_play)
                dpg.add_button(label="Step", callback=self._step_once)
            self.stats_id = dpg.add_text("")
            self.status_msg_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        self._set_status(msg, color=(255, 120, 120))

    def _on_respawn_clicked(self):
        count = try_int(dpg.get_value(self.count_id))
        if count is None or count < 0:
            self._set_error("Particles must be a whole number >= 0.")
            return
        self.sim.respawn(count)
        self._set_status(f"Spawned {count} particles.")

    def _on_pointer_mass_applied(self):
        mass = try_float(dpg.get_value(self.pointer_mass_id))
        if mass is None or mass < 0:
            self._set_error("Pointer mass must be a number >= 0.")
            return
        self.sim.set_pointer_mass(mass)
        self._set_status(f"Pointer mass set to {mass:g}.")

    def _toggle_wrap(self, value):
        self.sim.set_wrap(value)
        self._set_status(f"Wrap {'ON' if value else 'OFF'}.")

    def _toggle_kill(self, value):
        self.sim.set_kill(value)
        self._set_status(f"Kill on exit {'ON' if value else 'OFF'}.")

    def _toggle_play(self):
        playing = self.sim.toggle_play()
        self._set_status(f"Simulation {'Playing' if playing else 'Paused'}.")

    def _step_once(self):
        if not self.sim.step_once():
            self._set_error("Pause the simulation to step.")
            return
        self._set_status("Stepped one frame.")

    def load_preset(self, name: str):
        fn = self._settings_map.get(name)
        if fn is None:
            self._set_error(f"Unknown preset: {name}")
            return
        settings = load_settings(fn)
        self.sim.apply_settings(settings)
        dpg.set_value(self.count_id, str(settings.particle_count))
        dpg.set_value(self.pointer_mass_id, f"{settings.pointer_mass:g}")
        dpg.set_value(self.wrap_id, settings.wrap_out_of_bounds)
        dpg.set_value(self.kill_id, settings.kill_out_of_bounds)
        self._set_status(f"Loaded preset: {settings.name}")

    def _sync_ui_with_sim(self):
        with self.sim.lock:
            frame = self.sim.frame
            total = len(self.sim.bodies)
            size = (self.sim.width, self.sim.height)
        alive = self.sim.alive_count()
        dpg.set_value(self.stats_id, f"Frame {frame} | Alive {alive}/{total} | Field {size[0]}x{size[1]}")
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    sim = SimulationController(VIEW_WIDTH, VIEW_HEIGHT)
    sim.respawn()

    renderer = PygameRenderer(sim)
    renderer.start()

    ui = UI(sim)

    try:
        dpg.start_dearpygui()
    finally:
        sim.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()

if __name__ == "__main__":
    main()
