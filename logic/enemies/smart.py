"""logic/enemies/smart.py — Smart enemy: chase along a searched path.

Runs ``logic.pathfinding.search`` from the enemy to the target and
takes the first step of the path it finds.  When the target cannot be
reached it moves exactly like a dumb enemy for that tick.
"""

from __future__ import annotations

from components import Enemy
from core.grid import Grid
from logic.enemies.registry import (
    Decision, register_enemy, PATH, FALLBACK, BLOCKED, IDLE,
)
from logic.movement import greedy_step, relocate
from logic.pathfinding import search, next_step


def smart_move(enemy: Enemy, grid: Grid, tx: int, ty: int) -> Decision:
    start = enemy.pos
    result = search(grid, enemy.x, enemy.y, tx, ty)

    if result.found:
        step = next_step(result)
        if step is None:
            return Decision(IDLE, start, start, result.expanded)
        relocate(grid, enemy, *step)
        return Decision(PATH, start, step, result.expanded)

    if greedy_step(grid, enemy, tx, ty) is None:
        return Decision(BLOCKED, start, start, result.expanded)
    return Decision(FALLBACK, start, enemy.pos, result.expanded)


register_enemy("smart", smart_move)
