"""core/grid.py — Live level grid and the per-search snapshot.

Two distinct types share the same marker matrix layout:

``Grid``
    The live grid owned by the game session.  Renderer, player movement
    and enemy decisions all read and write it; it is the only place an
    enemy's marker is persisted.

``SnapshotGrid``
    A private copy made by the pathfinder for a single search.  It is
    the only grid that may hold ``Marker.VISITED`` and it is thrown away
    when the search returns.

Both index the matrix as ``cells[y][x]`` and raise ``GridBoundsError``
for any coordinate outside the grid.  Callers that test neighbours
must check ``in_bounds()`` first (see ``logic.pathfinding.is_open``).
"""

from __future__ import annotations
from typing import Iterable, Iterator

from core.constants import Marker


class GridBoundsError(IndexError):
    """A cell outside the grid was read or written."""


class _MarkerMatrix:
    """Shared storage and bounds handling for both grid types."""

    __slots__ = ("_cells", "height", "width")

    def __init__(self, cells: list[list[Marker]]):
        self._cells = cells
        self.height = len(cells)
        self.width = len(cells[0]) if cells else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Marker:
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                f"({x}, {y}) outside {self.width}x{self.height} grid")
        return self._cells[y][x]

    def to_rows(self) -> list[str]:
        """Render the matrix as one string per row (level-file format)."""
        return ["".join(m.value for m in row) for row in self._cells]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}x{self.height})"


class Grid(_MarkerMatrix):
    """Fixed-size live marker matrix.  Never resized after construction."""

    __slots__ = ()

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """Build a grid from marker-character strings.

        Raises ``ValueError`` for an unknown character or ragged rows.
        """
        cells = [[Marker(ch) for ch in row] for row in rows]
        if not cells or not cells[0]:
            raise ValueError("grid must have at least one cell")
        width = len(cells[0])
        for y, row in enumerate(cells):
            if len(row) != width:
                raise ValueError(
                    f"row {y} has {len(row)} cells, expected {width}")
        return cls(cells)

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        return cls([[Marker.EMPTY] * width for _ in range(height)])

    def put(self, x: int, y: int, marker: Marker) -> None:
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                f"({x}, {y}) outside {self.width}x{self.height} grid")
        self._cells[y][x] = marker

    def find(self, marker: Marker) -> Iterator[tuple[int, int]]:
        """Yield ``(x, y)`` of every cell holding *marker*, row by row."""
        for y, row in enumerate(self._cells):
            for x, m in enumerate(row):
                if m is marker:
                    yield x, y

    def count(self, marker: Marker) -> int:
        return sum(1 for _ in self.find(marker))

    def snapshot(self) -> "SnapshotGrid":
        """Deep-copy the markers into a fresh ``SnapshotGrid``."""
        return SnapshotGrid([list(row) for row in self._cells])


class SnapshotGrid(_MarkerMatrix):
    """Engine-local copy of a ``Grid``; only ever gains VISITED marks."""

    __slots__ = ()

    def mark_visited(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                f"({x}, {y}) outside {self.width}x{self.height} grid")
        self._cells[y][x] = Marker.VISITED
