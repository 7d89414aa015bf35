"""logic/pathfinding.py — Best-first search on the level grid.

How the search works
--------------------
The live grid is copied into a ``SnapshotGrid`` and the enemy's own
cell is marked visited.  Each iteration scores every frontier node as

    score = heuristic(node, target) + node.cost

and expands the first node with the lowest score.  Neighbours are
examined in the fixed order **right, left, up, down**; each open one is
marked visited *when it is discovered* and never looked at again.

Because a discovered cell is never reopened with a cheaper cost this is
a greedy best-first search, not textbook A*.  On grids with detours it
can return a path longer than the shortest one; the DETOUR case in
``test_pathfinding.py`` is one.

Node storage
------------
Nodes live in a list (the arena) in creation order.  ``SearchNode.parent``
is an index into that list; the root's parent is ``None``.

Public API
----------
``search(grid, sx, sy, tx, ty)``      → ``SearchResult``
``next_step(result)``                 → ``(x, y)`` or ``None``
``find_next_step(grid, sx, sy, tx, ty)`` → ``(x, y)`` or ``None``
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

from core.constants import Marker, PASSABLE
from core.grid import Grid


# ── Neighbour order: right, left, up (front), down (back) ────────────

NEIGHBOURS = (
    ( 1,  0),
    (-1,  0),
    ( 0, -1),
    ( 0,  1),
)


# ── Cell classification ──────────────────────────────────────────────

def is_passable(marker: Marker) -> bool:
    """True for floor and the player's cell; False for everything else."""
    return PASSABLE[marker]


def is_open(grid, x: int, y: int) -> bool:
    """Bounds-checked passability for a ``Grid`` or ``SnapshotGrid``.

    Cells outside the grid count as blocked, so neighbour probing never
    indexes past an edge.
    """
    return grid.in_bounds(x, y) and PASSABLE[grid.at(x, y)]


def heuristic(x: int, y: int, tx: int, ty: int) -> int:
    """Straight-line distance to the target, truncated to an int."""
    dx = x - tx
    dy = y - ty
    return int(math.sqrt(dx * dx + dy * dy))


# ── Search ───────────────────────────────────────────────────────────

@dataclass
class SearchNode:
    x: int
    y: int
    cost: int                     # steps from the start cell
    parent: int | None = None     # arena index, None for the root


@dataclass
class SearchResult:
    """Outcome of one ``search()``.

    ``goal`` is the arena index of the node standing on the target, or
    ``None`` when the frontier ran dry.  ``expanded`` counts nodes whose
    neighbours were examined.
    """
    nodes: list[SearchNode] = field(default_factory=list)
    goal: int | None = None
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.goal is not None

    def path(self) -> list[tuple[int, int]]:
        """Cells from start to target inclusive, or ``[]`` if not found."""
        if self.goal is None:
            return []
        out: list[tuple[int, int]] = []
        idx: int | None = self.goal
        while idx is not None:
            node = self.nodes[idx]
            out.append((node.x, node.y))
            idx = node.parent
        out.reverse()
        return out


def search(grid: Grid, sx: int, sy: int, tx: int, ty: int) -> SearchResult:
    """Search from ``(sx, sy)`` to ``(tx, ty)`` on a snapshot of *grid*.

    *grid* is never modified.  The start cell must lie inside the grid
    (``GridBoundsError`` otherwise).  Terminates after at most one
    expansion per grid cell.
    """
    snap = grid.snapshot()
    snap.mark_visited(sx, sy)

    result = SearchResult(nodes=[SearchNode(sx, sy, 0)])
    nodes = result.nodes
    frontier: list[int] = [0]

    while frontier:
        # First minimum wins ties (min() keeps the earliest).
        pick = min(
            range(len(frontier)),
            key=lambda i: heuristic(nodes[frontier[i]].x, nodes[frontier[i]].y,
                                    tx, ty) + nodes[frontier[i]].cost,
        )
        idx = frontier.pop(pick)
        node = nodes[idx]

        if node.x == tx and node.y == ty:
            result.goal = idx
            return result

        result.expanded += 1
        for dx, dy in NEIGHBOURS:
            nx, ny = node.x + dx, node.y + dy
            if not is_open(snap, nx, ny):
                continue
            snap.mark_visited(nx, ny)
            nodes.append(SearchNode(nx, ny, node.cost + 1, idx))
            frontier.append(len(nodes) - 1)

    return result


# ── Path reconstruction ──────────────────────────────────────────────

def next_step(result: SearchResult) -> tuple[int, int] | None:
    """The first cell after the start on the found path.

    ``None`` when nothing was found or the target is the start cell.
    """
    if result.goal is None:
        return None
    nodes = result.nodes
    node = nodes[result.goal]
    if node.parent is None:
        return None
    while nodes[node.parent].parent is not None:
        node = nodes[node.parent]
    return (node.x, node.y)


def find_next_step(grid: Grid, sx: int, sy: int,
                   tx: int, ty: int) -> tuple[int, int] | None:
    """``search()`` + ``next_step()`` in one call."""
    return next_step(search(grid, sx, sy, tx, ty))
