"""core/constants.py — Shared constants used across the codebase.

Centralises the cell-marker vocabulary so there's exactly one place to
change it.

Grid Coordinates
----------------
Levels are rectangular grids addressed as ``(x, y)``:

    x   column, grows to the right
    y   row,    grows downward

The marker matrix itself is stored row-major, so the cell at ``(x, y)``
lives at ``cells[y][x]``.  Only ``core.grid`` indexes the matrix
directly; everything else goes through ``Grid.at()`` / ``Grid.put()``.

Cell Markers
------------
Every cell holds exactly one ``Marker``.  The single-character values are
the ones used in ``data/levels/*.toml``:

    ' '  EMPTY         floor
    'V'  VISITED       search-only, never written to a live grid
    'E'  ENEMY         an adversary
    'C'  PLAYER        the player
    'W'  WALL
    'G'  GOAL          level exit
    'A'  CRATE
    'I'  STEEL_CRATE
    'D'  DOOR
    'T'  TOKEN_DOOR
    'P'  TRAP
    'H'  FIRE
"""

from __future__ import annotations
from enum import Enum


class Marker(str, Enum):
    EMPTY       = " "
    VISITED     = "V"
    ENEMY       = "E"
    PLAYER      = "C"
    WALL        = "W"
    GOAL        = "G"
    CRATE       = "A"
    STEEL_CRATE = "I"
    DOOR        = "D"
    TOKEN_DOOR  = "T"
    TRAP        = "P"
    FIRE        = "H"


# ── Passability ─────────────────────────────────────────────────────
# Enemies may only enter floor or the player's cell.  Adding a Marker
# without an entry here is caught by test_grid.py.

PASSABLE: dict[Marker, bool] = {
    Marker.EMPTY:       True,
    Marker.PLAYER:      True,
    Marker.VISITED:     False,
    Marker.ENEMY:       False,
    Marker.WALL:        False,
    Marker.GOAL:        False,
    Marker.CRATE:       False,
    Marker.STEEL_CRATE: False,
    Marker.DOOR:        False,
    Marker.TOKEN_DOOR:  False,
    Marker.TRAP:        False,
    Marker.FIRE:        False,
}


# ── Directions ──────────────────────────────────────────────────────
# Name → (dx, dy).  "up" is toward row 0.

DIRECTIONS: dict[str, tuple[int, int]] = {
    "right": ( 1,  0),
    "left":  (-1,  0),
    "up":    ( 0, -1),
    "down":  ( 0,  1),
}


def direction_name(dx: int, dy: int) -> str | None:
    """Return the direction name for a unit step, or ``None``."""
    for name, step in DIRECTIONS.items():
        if step == (dx, dy):
            return name
    return None


# Render (default; overridden by render.tile_size in tuning)
TILE_SIZE = 32

# Marker palette: marker → color
TILE_COLORS = {
    Marker.EMPTY:       (40, 40, 40),
    Marker.VISITED:     (255, 0, 255),     # should never be drawn
    Marker.ENEMY:       (40, 40, 40),      # floor under the sprite
    Marker.PLAYER:      (40, 40, 40),
    Marker.WALL:        (90, 90, 90),
    Marker.GOAL:        (40, 160, 60),
    Marker.CRATE:       (120, 85, 45),
    Marker.STEEL_CRATE: (110, 120, 135),
    Marker.DOOR:        (150, 110, 60),
    Marker.TOKEN_DOOR:  (200, 170, 40),
    Marker.TRAP:        (60, 30, 30),
    Marker.FIRE:        (220, 80, 20),
}

PLAYER_COLOR = (255, 255, 100)
ENEMY_COLORS = {
    "smart": (230, 60, 60),
    "dumb":  (230, 140, 60),
}
