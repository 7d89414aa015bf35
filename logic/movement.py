"""logic/movement.py — One-cell moves on the live grid.

Everything that rewrites ENEMY / PLAYER markers on the live grid goes
through this module so the marker invariant (one marker per actor, at
the actor's recorded position) has a single owner.

Greedy axis move
----------------
Used by dumb enemies every tick and by smart enemies when the search
finds no path.  With ``diff_x = enemy.x - target_x`` and
``diff_y = enemy.y - target_y``:

* both zero        → stay
* ``diff_y == 0``  → step along x, no second try
* ``diff_x == 0``  → step along y, no second try
* ``diff_x <= diff_y`` → step along x, else along y; if that cell is
  blocked, try the other axis once

The ``diff_x <= diff_y`` test compares *signed* differences, so the
preferred axis depends on which side of the enemy the player stands,
not on which gap is shorter.  ``test_movement.py`` pins the cases.
"""

from __future__ import annotations

from components import Enemy, Player
from core.constants import Marker, direction_name
from core.grid import Grid
from logic.pathfinding import is_open


def relocate(grid: Grid, enemy: Enemy, x: int, y: int) -> None:
    """Move *enemy*'s marker from its current cell to ``(x, y)``.

    Updates ``enemy.direction`` when the move is a single orthogonal step.
    """
    name = direction_name(x - enemy.x, y - enemy.y)
    grid.put(enemy.x, enemy.y, Marker.EMPTY)
    enemy.x, enemy.y = x, y
    grid.put(x, y, Marker.ENEMY)
    if name is not None:
        enemy.direction = name


def _toward(diff: int) -> int:
    # diff = own - target; negative means the target is at a higher index
    return 1 if diff < 0 else -1


def greedy_step(grid: Grid, enemy: Enemy, tx: int, ty: int) -> tuple[int, int] | None:
    """Axis-greedy move toward ``(tx, ty)``; returns the new cell or ``None``.

    Works directly on the live grid.  When both tries are blocked the
    enemy and its marker stay where they were.
    """
    diff_x = enemy.x - tx
    diff_y = enemy.y - ty
    if diff_x == 0 and diff_y == 0:
        return None

    along_x = (enemy.x + _toward(diff_x), enemy.y)
    along_y = (enemy.x, enemy.y + _toward(diff_y))

    if diff_y == 0:
        tries = (along_x,)
    elif diff_x == 0:
        tries = (along_y,)
    elif diff_x <= diff_y:
        tries = (along_x, along_y)
    else:
        tries = (along_y, along_x)

    for x, y in tries:
        if is_open(grid, x, y):
            relocate(grid, enemy, x, y)
            return (x, y)
    return None


# ── Player ───────────────────────────────────────────────────────────

MOVED = "moved"
BLOCKED = "blocked"
WON = "won"
CAUGHT = "caught"


def step_player(grid: Grid, player: Player, dx: int, dy: int) -> str:
    """Move the player one cell by ``(dx, dy)``.

    Returns ``MOVED``, ``BLOCKED``, ``WON`` (stepped onto the goal) or
    ``CAUGHT`` (walked into an enemy; the player does not move).
    """
    x, y = player.x + dx, player.y + dy
    if not grid.in_bounds(x, y):
        return BLOCKED

    marker = grid.at(x, y)
    if marker is Marker.ENEMY:
        return CAUGHT
    if marker not in (Marker.EMPTY, Marker.GOAL):
        return BLOCKED

    grid.put(player.x, player.y, Marker.EMPTY)
    player.x, player.y = x, y
    grid.put(x, y, Marker.PLAYER)
    return WON if marker is Marker.GOAL else MOVED
