"""components.dev_log — Structured enemy decision log.

A ring-buffer that records one entry per enemy decision plus session
events (level start, caught, won).  Read by the game scene's debug
overlay (F1) and by the tests to check *why* an enemy moved.

Overlay keys (game scene): F2 pauses / resumes recording, F3 cycles
which enemy is recorded, F5 clears the buffer.

Usage:
    log = session.log
    log.record(eid, "decision", "path", tick=12,
               details={"from": (1, 1), "to": (2, 1), "expanded": 9})

Each entry is a dict:
    {"tick": int, "eid": int, "kind": str, "cat": str,
     "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring-buffer of enemy / session events for the debug overlay."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500
    _paused: bool = False

    # If non-empty, only entries whose ``eid`` is in the set are kept.
    # Session events use eid -1.
    eid_filter: set[int] = field(default_factory=set)

    def record(self, eid: int, cat: str, msg: str, *,
               kind: str = "", tick: int = 0,
               details: dict | None = None) -> None:
        if self._paused:
            return
        if self.eid_filter and eid not in self.eid_filter:
            return
        self.entries.append({
            "tick": tick,
            "eid": eid,
            "kind": kind,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    @property
    def paused(self) -> bool:
        return self._paused

    def clear(self):
        self.entries.clear()

    def pause(self):
        self._paused = True

    def resume(self):
        self._paused = False

    def toggle_pause(self) -> bool:
        """Flip recording on/off; returns the new paused state."""
        if self._paused:
            self.resume()
        else:
            self.pause()
        return self._paused

    def focus(self, eid: int | None) -> None:
        """Record only enemy *eid* from now on; ``None`` records everyone."""
        self.eid_filter = set() if eid is None else {eid}

    def recent(self, n: int = 50) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_enemy(self, eid: int, n: int = 30) -> list[dict]:
        """Return last *n* entries for one enemy."""
        return [e for e in self.entries if e["eid"] == eid][-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]
