"""logic/enemies — Enemy variants and the per-enemy decision entry point.

Public API
----------
``decide(enemy, grid, tx, ty)``       — move one enemy, return a ``Decision``
``decide_move(enemy, grid, tx, ty)``  — same, without the return value
``register_enemy(kind, fn)``          — add a variant to the registry
``registered_kinds()``                — names of all variants

Variant modules register themselves at import time via
``register_enemy``:

    smart   search for a path, fall back to the greedy move
    dumb    greedy move only

A decision runs to completion against the live grid and either moves
the enemy one cell (marker included) or leaves it exactly where it was.
"""

from __future__ import annotations

from components import Enemy
from core.grid import Grid
from logic.enemies.registry import (
    Decision, register_enemy, get_mover, registered_kinds,
    PATH, FALLBACK, BLOCKED, IDLE,
)


def decide(enemy: Enemy, grid: Grid, tx: int, ty: int) -> Decision:
    """Run *enemy*'s move function toward ``(tx, ty)``."""
    return get_mover(enemy.kind)(enemy, grid, tx, ty)


def decide_move(enemy: Enemy, grid: Grid, tx: int, ty: int) -> None:
    decide(enemy, grid, tx, ty)


# ── Side-effect imports: trigger register_enemy() calls ──────────────
from logic.enemies import smart as _smart                            # noqa: F401, E402
from logic.enemies import dumb as _dumb                              # noqa: F401, E402

__all__ = [
    "Decision", "decide", "decide_move", "register_enemy", "get_mover",
    "registered_kinds", "PATH", "FALLBACK", "BLOCKED", "IDLE",
]
