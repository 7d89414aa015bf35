"""scenes/level_select.py — Level select menu.

Lists levels 1..max_level.  Levels above the user's progress are shown
greyed out and cannot be started.  Up/Down + Enter or the number keys
start a level; Escape quits.  Starting at level 1 begins a timed run;
the best finished run is shown next to the player name.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core import tuning
from core.save import available_levels, UserProgress
from scenes.game_scene import GameScene


class LevelSelectScene(Scene):
    def __init__(self):
        self.selected = 0

    def on_enter(self, app: App):
        # Highlight the configured start level, or the highest unlocked one
        # if that is lower.
        _, unlocked = self._levels(app)
        start = tuning.get("game", "start_level", 1)
        self.selected = max(1, min(start, unlocked[-1])) - 1

    def _levels(self, app: App) -> tuple[int, list[int]]:
        max_level = tuning.get("game", "max_level", 5)
        progress = app.progress or UserProgress(name="player")
        return max_level, available_levels(progress, max_level)

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type != pygame.KEYDOWN:
            return
        max_level, unlocked = self._levels(app)

        if event.key == pygame.K_ESCAPE:
            app.pop_scene()
        elif event.key in (pygame.K_UP, pygame.K_w):
            self.selected = (self.selected - 1) % max_level
        elif event.key in (pygame.K_DOWN, pygame.K_s):
            self.selected = (self.selected + 1) % max_level
        elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
            self._launch(app, self.selected + 1, unlocked)
        elif pygame.K_1 <= event.key <= pygame.K_9:
            self._launch(app, event.key - pygame.K_1 + 1, unlocked)

    def _launch(self, app: App, number: int, unlocked: list[int]):
        if number not in unlocked:
            return
        app.push_scene(GameScene(number))

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((16, 20, 24))
        sw, _ = surface.get_size()
        max_level, unlocked = self._levels(app)

        app.draw_text(surface, "SELECT LEVEL", sw // 2 - 80, 30, (0, 255, 200), app.font_lg)
        if app.progress is not None:
            app.draw_text(surface, f"player: {app.progress.name}", sw // 2 - 80, 60,
                          (140, 140, 140))
            best = app.progress.best_time
            if best is not None:
                app.draw_text(surface, f"best run: {best:.1f}s", sw // 2 + 80, 60,
                              (140, 140, 140))

        for i in range(max_level):
            number = i + 1
            locked = number not in unlocked
            color = (80, 80, 80) if locked else (220, 220, 220)
            if i == self.selected:
                pygame.draw.rect(surface, (36, 56, 44),
                                 pygame.Rect(sw // 2 - 100, 96 + i * 30, 200, 26))
            label = f"{number}. Level {number}" + ("  (locked)" if locked else "")
            app.draw_text(surface, label, sw // 2 - 90, 100 + i * 30, color)
