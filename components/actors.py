"""components/actors.py — Player and enemy state."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Player:
    """Where the player stands.  The grid's PLAYER marker mirrors this."""
    x: int
    y: int


@dataclass
class Enemy:
    """State shared by every enemy variant.

    ``kind`` selects the move function from ``logic.enemies`` (``"smart"``
    or ``"dumb"``).  ``direction`` starts as the level file's hint and is
    updated to the direction of each step taken; renderers use it to
    orient the sprite.
    """
    x: int
    y: int
    kind: str = "smart"
    direction: str = "left"

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)
