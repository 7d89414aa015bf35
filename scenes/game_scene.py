"""scenes/game_scene.py — Playing one level.

The player moves one cell per key press; enemies move on the session's
fixed tick.  Reaching the goal unlocks the next level and saves the
user's progress.

A run started from level 1 is timed across every level that follows
with Enter; finishing the last level records the total as the user's
best time.  Starting from any other level plays untimed.

Controls:
  Arrows / WASD  move
  R              restart the level
  Enter          next level (after a win)
  F1             toggle the decision log + smart-enemy paths
  F2             pause / resume the decision log
  F3             log one enemy at a time (cycles, then back to all)
  F4             reload tuning
  F5             clear the decision log
  Escape         back to level select
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.constants import TILE_SIZE
from core import tuning
from core.level import load_level, level_path, LevelFormatError
from core.save import save_progress
from logic.pathfinding import search
from logic.tick import GameSession, RunClock, PLAYING, WON
from scenes.game_draw import (
    draw_grid, draw_player, draw_enemies, draw_path, draw_hud, draw_log,
)


_MOVE_KEYS: dict[int, tuple[int, int]] = {
    pygame.K_RIGHT: (1, 0),  pygame.K_d: (1, 0),
    pygame.K_LEFT:  (-1, 0), pygame.K_a: (-1, 0),
    pygame.K_UP:    (0, -1), pygame.K_w: (0, -1),
    pygame.K_DOWN:  (0, 1),  pygame.K_s: (0, 1),
}


class GameScene(Scene):
    def __init__(self, number: int, run: RunClock | None = None):
        self.number = number
        self.run = run or RunClock.starting_at(number)
        self.session: GameSession | None = None
        self.show_debug = False
        self._saved = False
        self._banked = False

    def on_enter(self, app: App):
        if self.session is None:
            self._start(app)

    def _start(self, app: App):
        self._bank()
        try:
            level = load_level(level_path(self.number))
        except LevelFormatError as ex:
            print(f"[GAME] Cannot start level {self.number}: {ex}")
            app.pop_scene()
            return
        self.session = GameSession(level)
        self._saved = False
        self._banked = False

    def _bank(self):
        """Add the current session's play time to the run, once."""
        if self.session is not None and not self._banked:
            self.run.add(self.session)
            self._banked = True

    # -- Input --

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type != pygame.KEYDOWN or self.session is None:
            return
        s = self.session

        if event.key == pygame.K_ESCAPE:
            self._bank()
            app.pop_scene()
        elif event.key == pygame.K_r:
            self._start(app)
        elif event.key == pygame.K_F1:
            self.show_debug = not self.show_debug
        elif event.key == pygame.K_F2:
            paused = s.log.toggle_pause()
            print(f"[GAME] Decision log {'paused' if paused else 'recording'}")
        elif event.key == pygame.K_F3:
            eid = s.cycle_log_focus()
            print(f"[GAME] Decision log: {'all enemies' if eid is None else f'enemy #{eid}'}")
        elif event.key == pygame.K_F4:
            tuning.reload()
        elif event.key == pygame.K_F5:
            s.log.clear()
        elif event.key == pygame.K_RETURN and s.status == WON:
            max_level = tuning.get("game", "max_level", 5)
            if self.number < max_level:
                app.replace_scene(GameScene(self.number + 1, run=self.run))
            else:
                app.pop_scene()
        elif event.key in _MOVE_KEYS and s.status == PLAYING:
            s.move_player(*_MOVE_KEYS[event.key])

    # -- Update --

    def update(self, dt: float, app: App):
        if self.session is None:
            return
        self.session.tick(dt)
        if self.session.status == WON and not self._saved:
            self._saved = True
            self._bank()
            if app.progress is not None:
                max_level = tuning.get("game", "max_level", 5)
                if self.run.complete(app.progress, self.number, max_level):
                    save_progress(app.progress)

    # -- Draw --

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((16, 20, 24))
        s = self.session
        if s is None:
            return
        tile = tuning.get("render", "tile_size", TILE_SIZE)
        sw, sh = surface.get_size()
        ox = max(8, (sw - s.grid.width * tile) // 2)
        oy = 64

        draw_grid(surface, s.grid, ox, oy, tile, show_lines=self.show_debug)
        if self.show_debug:
            for enemy in s.enemies:
                if enemy.kind == "smart":
                    result = search(s.grid, enemy.x, enemy.y, s.player.x, s.player.y)
                    draw_path(surface, result.path(), ox, oy, tile)
        draw_player(surface, s.player, ox, oy, tile)
        draw_enemies(surface, s.enemies, ox, oy, tile)

        title = f"Level {s.level.number}: {s.level.name}"
        run_time = None
        if self.run.timed:
            run_time = self.run.total + (0.0 if self._banked else s.elapsed)
        draw_hud(surface, app, title, s.status, s.moves, s.ticks, run_time)
        if self.show_debug:
            draw_log(surface, app, s.log, 8, oy + s.grid.height * tile + 8)
