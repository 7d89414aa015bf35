"""logic/enemies/registry.py — Enemy kind → move function mapping.

Keeps the registry as a separate module so variant modules can import
``register_enemy`` without pulling in the runner (avoids cycles).

A move function has the signature::

    fn(enemy: Enemy, grid: Grid, tx: int, ty: int) -> Decision
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable


# Decision outcomes
PATH = "path"            # followed the search path
FALLBACK = "fallback"    # axis-greedy move
BLOCKED = "blocked"      # wanted to move, nowhere to go
IDLE = "idle"            # already on the target


@dataclass
class Decision:
    """What one enemy did this tick."""
    outcome: str
    start: tuple[int, int]
    end: tuple[int, int]
    expanded: int = 0            # search expansions, 0 when no search ran

    @property
    def moved(self) -> bool:
        return self.start != self.end


_registry: dict[str, Callable] = {}


def register_enemy(kind: str, fn: Callable) -> None:
    """Register *fn* as the move function for enemies of *kind*."""
    _registry[kind] = fn


def get_mover(kind: str) -> Callable:
    """Return the move function for *kind*; ``KeyError`` if unknown."""
    try:
        return _registry[kind]
    except KeyError:
        raise KeyError(f"unknown enemy kind {kind!r}") from None


def registered_kinds() -> list[str]:
    """Return a sorted list of all registered enemy kinds."""
    return sorted(_registry.keys())
