"""test_grid.py — Marker table and live/snapshot grid behaviour.

Run:  python test_grid.py      (or: pytest test_grid.py)
"""
from __future__ import annotations
import sys, traceback

from core.constants import Marker, PASSABLE, DIRECTIONS, direction_name
from core.grid import Grid, SnapshotGrid, GridBoundsError


ROWS = [
    "WWWWW",
    "W C W",
    "W  EW",
    "WWWWW",
]


def test_every_marker_has_a_passability_entry():
    assert set(PASSABLE) == set(Marker)


def test_only_floor_and_player_are_passable():
    open_markers = {m for m, ok in PASSABLE.items() if ok}
    assert open_markers == {Marker.EMPTY, Marker.PLAYER}


def test_direction_names_round_trip():
    for name, (dx, dy) in DIRECTIONS.items():
        assert direction_name(dx, dy) == name
    assert direction_name(1, 1) is None
    assert direction_name(0, 0) is None


def test_from_rows_dimensions_and_lookup():
    g = Grid.from_rows(ROWS)
    assert (g.width, g.height) == (5, 4)
    assert g.at(2, 1) is Marker.PLAYER
    assert g.at(3, 2) is Marker.ENEMY
    assert g.at(0, 0) is Marker.WALL
    assert g.to_rows() == ROWS


def test_from_rows_rejects_ragged_and_unknown():
    for bad in (["WWW", "WW"], ["WXW"], []):
        try:
            Grid.from_rows(bad)
        except ValueError:
            continue
        raise AssertionError(f"{bad!r} should be rejected")


def test_out_of_bounds_access_raises():
    g = Grid.from_rows(ROWS)
    for x, y in ((-1, 0), (0, -1), (5, 0), (0, 4)):
        assert not g.in_bounds(x, y)
        try:
            g.at(x, y)
        except GridBoundsError:
            pass
        else:
            raise AssertionError(f"at({x}, {y}) should raise")
    try:
        g.put(9, 9, Marker.EMPTY)
    except GridBoundsError:
        pass
    else:
        raise AssertionError("put outside the grid should raise")


def test_snapshot_is_independent_of_live_grid():
    g = Grid.from_rows(ROWS)
    snap = g.snapshot()
    assert isinstance(snap, SnapshotGrid)
    snap.mark_visited(1, 1)
    assert snap.at(1, 1) is Marker.VISITED
    assert g.at(1, 1) is Marker.EMPTY
    # and the other way round
    g.put(1, 2, Marker.CRATE)
    assert snap.at(1, 2) is Marker.EMPTY
    assert g.count(Marker.VISITED) == 0


def test_snapshot_has_no_put():
    snap = Grid.from_rows(ROWS).snapshot()
    assert not hasattr(snap, "put")


def test_find_and_count():
    g = Grid.from_rows(ROWS)
    assert list(g.find(Marker.PLAYER)) == [(2, 1)]
    assert g.count(Marker.WALL) == 5 + 2 + 2 + 5
    e = Grid.empty(3, 2)
    assert e.count(Marker.EMPTY) == 6


# ── Script runner ────────────────────────────────────────────────────

if __name__ == "__main__":
    passed = failed = 0
    for name, fn in list(globals().items()):
        if not (name.startswith("test_") and callable(fn)):
            continue
        try:
            fn()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            for line in traceback.format_exc().strip().splitlines():
                print(f"         {line}")
    print(f"\n  Grid Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
