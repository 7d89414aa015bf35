"""logic/enemies/dumb.py — Dumb enemy: axis-greedy move every tick.

Never searches, so it gets stuck behind walls that a smart enemy would
walk around.
"""

from __future__ import annotations

from components import Enemy
from core.grid import Grid
from logic.enemies.registry import Decision, register_enemy, FALLBACK, BLOCKED, IDLE
from logic.movement import greedy_step


def dumb_move(enemy: Enemy, grid: Grid, tx: int, ty: int) -> Decision:
    start = enemy.pos
    if start == (tx, ty):
        return Decision(IDLE, start, start)
    if greedy_step(grid, enemy, tx, ty) is None:
        return Decision(BLOCKED, start, start)
    return Decision(FALLBACK, start, enemy.pos)


register_enemy("dumb", dumb_move)
