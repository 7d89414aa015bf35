"""scenes/game_draw.py — Rendering helpers for the game scene.

All pure-draw functions live here so that GameScene.draw() stays thin.
Every function receives the data it needs as parameters.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.constants import (
    Marker, TILE_COLORS, PLAYER_COLOR, ENEMY_COLORS, DIRECTIONS,
)
from core.grid import Grid
from components import Enemy, Player, DevLog


# ── Tiles ───────────────────────────────────────────────────────────

def draw_grid(surface: pygame.Surface, grid: Grid, ox: int, oy: int,
              tile: int, show_lines: bool = False):
    for y in range(grid.height):
        for x in range(grid.width):
            marker = grid.at(x, y)
            color = TILE_COLORS.get(marker, (255, 0, 255))
            rect = pygame.Rect(ox + x * tile, oy + y * tile, tile, tile)
            pygame.draw.rect(surface, color, rect)
            if marker is Marker.GOAL:
                pygame.draw.rect(surface, (200, 255, 200), rect.inflate(-tile // 2, -tile // 2), 2)
            elif marker in (Marker.CRATE, Marker.STEEL_CRATE):
                pygame.draw.line(surface, (0, 0, 0), rect.topleft, rect.bottomright, 2)
                pygame.draw.line(surface, (0, 0, 0), rect.topright, rect.bottomleft, 2)
            if show_lines:
                pygame.draw.rect(surface, (70, 70, 70), rect, 1)


# ── Actors ──────────────────────────────────────────────────────────

def draw_player(surface: pygame.Surface, player: Player, ox: int, oy: int, tile: int):
    cx = ox + player.x * tile + tile // 2
    cy = oy + player.y * tile + tile // 2
    pygame.draw.circle(surface, PLAYER_COLOR, (cx, cy), tile // 2 - 3)


def draw_enemies(surface: pygame.Surface, enemies: list[Enemy],
                 ox: int, oy: int, tile: int):
    """Enemies are triangles pointing along their last move direction."""
    half = tile // 2 - 3
    for enemy in enemies:
        cx = ox + enemy.x * tile + tile // 2
        cy = oy + enemy.y * tile + tile // 2
        dx, dy = DIRECTIONS.get(enemy.direction, (0, 1))
        # perpendicular for the base of the triangle
        px, py = -dy, dx
        points = [
            (cx + dx * half, cy + dy * half),
            (cx - dx * half + px * half, cy - dy * half + py * half),
            (cx - dx * half - px * half, cy - dy * half - py * half),
        ]
        pygame.draw.polygon(surface, ENEMY_COLORS.get(enemy.kind, (255, 0, 255)), points)


def draw_path(surface: pygame.Surface, path: list[tuple[int, int]],
              ox: int, oy: int, tile: int, color=(120, 200, 255)):
    if len(path) < 2:
        return
    pts = [(ox + x * tile + tile // 2, oy + y * tile + tile // 2) for x, y in path]
    pygame.draw.lines(surface, color, False, pts, 2)


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, title: str, status: str,
             moves: int, ticks: int, run_time: float | None = None):
    sw, sh = surface.get_size()
    app.draw_text(surface, title, 8, 6, (0, 255, 200), app.font_lg)
    stats = f"moves {moves}   ticks {ticks}"
    if run_time is not None:
        stats += f"   run {run_time:.1f}s"
    app.draw_text(surface, stats, 8, 34, (180, 180, 180))
    if status != "playing":
        msg = "CAUGHT!  [R] retry  [Esc] menu" if status == "caught" \
            else "LEVEL COMPLETE!  [Enter] next  [Esc] menu"
        app.draw_text(surface, msg, 8, sh - 28, (255, 220, 100), app.font_lg)
    else:
        app.draw_text(surface, "[arrows/WASD] move  [R] restart  [F1] debug  [Esc] menu",
                      8, sh - 20, (100, 100, 100), app.font_sm)


def draw_log(surface: pygame.Surface, app: App, log: DevLog, x: int, y: int, n: int = 12):
    if log.paused or log.eid_filter:
        state = "paused" if log.paused else f"enemy #{min(log.eid_filter)} only"
        app.draw_text(surface, f"[log {state}]", x, y, (220, 180, 80), app.font_sm)
        y += 13
    for i, e in enumerate(log.recent(n)):
        d = e["details"] or {}
        line = f"t{e['tick']:>4} #{e['eid']:>2} {e['kind']:<5} {e['msg']:<8}"
        if "from" in d:
            line += f" {d['from']}→{d['to']} exp={d['expanded']}"
        app.draw_text(surface, line, x, y + i * 13, (160, 200, 160), app.font_sm)
