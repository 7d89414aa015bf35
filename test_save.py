"""test_save.py — User progress save / load and level unlocking.

Run:  python test_save.py      (or: pytest test_save.py)
"""
from __future__ import annotations
import sys, traceback, tempfile, json
from pathlib import Path

from core.save import (
    UserProgress, get_save_file, save_progress, load_progress,
    complete_level, available_levels, record_run_time,
)


def test_round_trip():
    with tempfile.TemporaryDirectory() as tmp:
        path = save_progress(UserProgress("alice", current_level=3), tmp)
        assert path == Path(tmp) / "alice.json"
        assert json.loads(path.read_text()) == \
               {"name": "alice", "current_level": 3, "best_time": None}
        loaded = load_progress("alice", tmp)
        assert loaded == UserProgress("alice", current_level=3)


def test_best_time_round_trip():
    with tempfile.TemporaryDirectory() as tmp:
        save_progress(UserProgress("amy", current_level=5, best_time=84.25), tmp)
        assert load_progress("amy", tmp).best_time == 84.25


def test_bad_best_time_keeps_levels():
    with tempfile.TemporaryDirectory() as tmp:
        for raw in ('"fast"', "-3", "0", "[1]"):
            get_save_file("hal", tmp).write_text(
                '{"current_level": 4, "best_time": ' + raw + "}")
            p = load_progress("hal", tmp)
            assert (p.current_level, p.best_time) == (4, None), raw


def test_new_user_starts_at_level_one():
    with tempfile.TemporaryDirectory() as tmp:
        assert load_progress("bob", tmp) == UserProgress("bob", current_level=1)


def test_corrupt_save_starts_over():
    with tempfile.TemporaryDirectory() as tmp:
        get_save_file("carol", tmp).write_text("{not json")
        assert load_progress("carol", tmp).current_level == 1
        get_save_file("dave", tmp).write_text('{"current_level": "high"}')
        assert load_progress("dave", tmp).current_level == 1
        get_save_file("erin", tmp).write_text('{"current_level": -4}')
        assert load_progress("erin", tmp).current_level == 1


def test_save_file_name_is_sanitised():
    with tempfile.TemporaryDirectory() as tmp:
        assert get_save_file("../../etc/x", tmp).parent == Path(tmp)
        assert get_save_file("a b", tmp).name == "a_b.json"
        assert get_save_file("///", tmp).name == "player.json"


def test_complete_level_unlocks_next():
    p = UserProgress("frank")
    assert complete_level(p, 1, max_level=3) is True
    assert p.current_level == 2
    # replaying an earlier level changes nothing
    assert complete_level(p, 1, max_level=3) is False
    assert p.current_level == 2
    assert complete_level(p, 2, max_level=3) is True
    # finishing the last level cannot unlock past it
    assert complete_level(p, 3, max_level=3) is False
    assert p.current_level == 3


def test_available_levels():
    assert available_levels(UserProgress("g"), 3) == [1]
    assert available_levels(UserProgress("g", current_level=2), 3) == [1, 2]
    # a save from a build with more levels is clamped
    assert available_levels(UserProgress("g", current_level=9), 3) == [1, 2, 3]
    assert available_levels(UserProgress("g", current_level=0), 3) == [1]


def test_record_run_time_keeps_the_fastest():
    p = UserProgress("ivy")
    assert record_run_time(p, 90.0) is True
    assert p.best_time == 90.0
    assert record_run_time(p, 120.0) is False
    assert record_run_time(p, 90.0) is False
    assert record_run_time(p, 75.5) is True
    assert p.best_time == 75.5
    assert record_run_time(p, 0.0) is False
    assert p.best_time == 75.5


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
    print(f"\n  Save Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
