"""core/save.py — Per-user progress persistence.

Save files (JSON) store which levels a user has unlocked and their best
total time for a full run (level 1 through the last level)::

    {"name": "alice", "current_level": 3, "best_time": 84.2}

``best_time`` is ``null`` until a timed run has been finished.

``current_level`` is the highest level the user may play; every level
from 1 up to it is available in the level-select menu.  Level 1 is
always available, even for a brand-new user.

Level layouts are never saved; they are static templates in
``data/levels/``.
"""

from __future__ import annotations
import json
import re
from dataclasses import dataclass, asdict
from pathlib import Path


SAVES_DIR = Path("saves")

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_-]+")


@dataclass
class UserProgress:
    name: str
    current_level: int = 1
    best_time: float | None = None     # seconds


def get_save_file(name: str, saves_dir: Path | None = None) -> Path:
    """Path of *name*'s save file.  Unsafe characters become ``_``."""
    directory = Path(saves_dir or SAVES_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    safe = _SAFE_NAME.sub("_", name).strip("_") or "player"
    return directory / f"{safe}.json"


def save_progress(progress: UserProgress, saves_dir: Path | None = None) -> Path:
    path = get_save_file(progress.name, saves_dir)
    with open(path, "w") as f:
        json.dump(asdict(progress), f, indent=2)
    print(f"[SAVE] {progress.name}: level {progress.current_level} → {path}")
    return path


def load_progress(name: str, saves_dir: Path | None = None) -> UserProgress:
    """Load *name*'s progress, or a fresh one at level 1.

    A missing or unreadable save file is not an error: the user simply
    starts over.
    """
    path = get_save_file(name, saves_dir)
    if not path.exists():
        return UserProgress(name=name)

    try:
        with open(path, "r") as f:
            data = json.load(f)
        level = int(data.get("current_level", 1))
    except (OSError, ValueError, TypeError, AttributeError) as ex:
        print(f"[SAVE] Error loading save file {path}: {ex}")
        return UserProgress(name=name)

    return UserProgress(name=name, current_level=max(1, level),
                        best_time=_parse_time(data.get("best_time")))


def _parse_time(raw) -> float | None:
    # a bad best time is dropped; the unlocked levels are kept
    try:
        seconds = float(raw)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def complete_level(progress: UserProgress, number: int, max_level: int) -> bool:
    """Unlock the level after *number*.  Returns True if anything changed."""
    unlocked = min(number + 1, max_level)
    if unlocked <= progress.current_level:
        return False
    progress.current_level = unlocked
    return True


def available_levels(progress: UserProgress, max_level: int) -> list[int]:
    """Level numbers the user may start, lowest first."""
    top = max(1, min(progress.current_level, max_level))
    return list(range(1, top + 1))


def record_run_time(progress: UserProgress, seconds: float) -> bool:
    """Keep *seconds* as the best run time if it beats the stored one."""
    if seconds <= 0:
        return False
    if progress.best_time is not None and progress.best_time <= seconds:
        return False
    progress.best_time = seconds
    return True
