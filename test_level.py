"""test_level.py — Level files and level validation.

Run:  python test_level.py      (or: pytest test_level.py)
"""
from __future__ import annotations
import sys, traceback, tempfile
from pathlib import Path

from core import tuning
from core.constants import Marker
from core.level import (
    load_level, level_from_dict, level_path, LevelFormatError, LEVELS_DIR,
)
from logic.enemies import registered_kinds


def _raw(**over) -> dict:
    raw = {
        "number": 7,
        "name": "Test",
        "rows": ["WWWWW", "WC  W", "W  GW", "WWWWW"],
        "enemies": [{"kind": "smart", "x": 3, "y": 1, "direction": "left"}],
    }
    raw.update(over)
    return raw


def _rejects(raw: dict, fragment: str):
    try:
        level_from_dict(raw)
    except LevelFormatError as ex:
        assert fragment in str(ex), str(ex)
        return
    raise AssertionError(f"expected LevelFormatError containing {fragment!r}")


# ── Shipped levels ───────────────────────────────────────────────────

def test_shipped_levels_load():
    expected_enemies = {1: 2, 2: 2, 3: 3, 4: 3, 5: 4}
    for number, n_enemies in expected_enemies.items():
        level = load_level(level_path(number))
        assert level.number == number
        assert level.name
        assert len(level.enemies) == n_enemies
        assert level.grid.count(Marker.PLAYER) == 1
        assert level.grid.count(Marker.GOAL) == 1
        assert sorted(level.grid.find(Marker.ENEMY)) == \
               sorted(e.pos for e in level.enemies)
        assert all(e.kind in registered_kinds() for e in level.enemies)
        assert level.grid.at(level.player.x, level.player.y) is Marker.PLAYER


def test_every_configured_level_ships():
    tuning.clear()
    tuning.load()
    try:
        max_level = tuning.get("game", "max_level")
    finally:
        tuning.clear()
    assert max_level == 5
    for number in range(1, max_level + 1):
        assert level_path(number).exists(), number
    assert not level_path(max_level + 1).exists()


def test_level_path_uses_levels_dir():
    assert level_path(2) == LEVELS_DIR / "level2.toml"
    assert level_path(5, Path("elsewhere")) == Path("elsewhere") / "level5.toml"


# ── level_from_dict ──────────────────────────────────────────────────

def test_from_dict_builds_level():
    level = level_from_dict(_raw())
    assert (level.number, level.name) == (7, "Test")
    assert (level.width, level.height) == (5, 4)
    assert (level.player.x, level.player.y) == (1, 1)
    (e,) = level.enemies
    assert (e.x, e.y, e.kind, e.direction) == (3, 1, "smart", "left")
    assert level.grid.at(3, 1) is Marker.ENEMY


def test_enemy_defaults():
    level = level_from_dict(_raw(enemies=[{"x": 2, "y": 2}]))
    assert level.enemies[0].kind == "smart"
    assert level.enemies[0].direction == "left"


def test_no_enemies_is_fine():
    level = level_from_dict(_raw(enemies=[]))
    assert level.enemies == []
    assert level.grid.count(Marker.ENEMY) == 0


def test_rejects_bad_rows():
    _rejects(_raw(rows="WWW"), "rows")
    _rejects(_raw(rows=["WWW", "WC"]), "")
    _rejects(_raw(rows=["WCXW"]), "")


def test_rejects_reserved_markers_in_rows():
    _rejects(_raw(rows=["WWWWW", "WCV W", "WWWWW"], enemies=[]), "'V'")
    _rejects(_raw(rows=["WWWWW", "WCE W", "WWWWW"], enemies=[]), "[[enemies]]")


def test_rejects_player_count():
    _rejects(_raw(rows=["WWWWW", "W   W", "WWWWW"], enemies=[]), "found 0")
    _rejects(_raw(rows=["WWWWW", "WC CW", "WWWWW"], enemies=[]), "found 2")


def test_rejects_bad_enemies():
    _rejects(_raw(enemies=[{"kind": "ghost", "x": 2, "y": 2}]), "unknown kind")
    _rejects(_raw(enemies=[{"x": 2, "y": 2, "direction": "north"}]), "unknown direction")
    _rejects(_raw(enemies=[{"x": "2", "y": 2}]), "integers")
    _rejects(_raw(enemies=[{"x": 9, "y": 2}]), "outside")
    _rejects(_raw(enemies=[{"x": 0, "y": 0}]), "WALL")
    _rejects(_raw(enemies=[{"x": 1, "y": 1}]), "PLAYER")
    _rejects(_raw(enemies=[{"x": 2, "y": 2}, {"x": 2, "y": 2}]), "ENEMY")
    _rejects(_raw(enemies=["smart"]), "table")


def test_known_kinds_restricts_enemies():
    try:
        level_from_dict(_raw(), known_kinds=["dumb"])
    except LevelFormatError as ex:
        assert "smart" in str(ex)
    else:
        raise AssertionError("smart should be rejected when only dumb is known")


def test_rejects_non_integer_number():
    _rejects(_raw(number="seven"), "number")


# ── load_level ───────────────────────────────────────────────────────

def test_missing_and_malformed_files():
    with tempfile.TemporaryDirectory() as tmp:
        tmp = Path(tmp)
        try:
            load_level(tmp / "nope.toml")
        except LevelFormatError as ex:
            assert "no such level file" in str(ex)
        else:
            raise AssertionError("missing file should raise")

        bad = tmp / "bad.toml"
        bad.write_text("rows = [\n")
        try:
            load_level(bad)
        except LevelFormatError:
            pass
        else:
            raise AssertionError("malformed TOML should raise")


def test_load_from_temp_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "level9.toml"
        path.write_text(
            'number = 9\n'
            'name = "Tiny"\n'
            'rows = ["C  G"]\n'
            '\n'
            '[[enemies]]\n'
            'kind = "dumb"\n'
            'x = 2\n'
            'y = 0\n'
            'direction = "left"\n'
        )
        level = load_level(path)
        assert level.number == 9 and level.name == "Tiny"
        assert level.grid.to_rows() == ["C EG"]
        assert level.enemies[0].kind == "dumb"


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
    print(f"\n  Level Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
