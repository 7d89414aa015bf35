"""logic/tick.py — Game session state and the per-tick enemy pass.

A ``GameSession`` wraps one loaded ``Level``.  The scene feeds it player
input (``move_player``) and frame time (``tick``); every
``game.tick_interval`` seconds each enemy makes one decision.

Enemies are decided one at a time, in level-file order, against the
live grid.  Later enemies see the moves earlier ones made in the same
tick, so two enemies never end up on one cell.

A ``RunClock`` sums the sessions of one run (level 1 onward) into the
total completion time stored as the user's best.

Usage::

    session = GameSession(load_level(level_path(1)))
    session.move_player(1, 0)
    session.tick(dt)
    if session.status == CAUGHT: ...
"""

from __future__ import annotations
from dataclasses import dataclass

from components import DevLog
from core.level import Level
from core.save import UserProgress, complete_level, record_run_time
from core.tuning import get as _tun
from logic.enemies import decide
from logic.movement import step_player, BLOCKED, CAUGHT, WON


PLAYING = "playing"
# CAUGHT and WON are shared with logic.movement.step_player outcomes.

__all__ = ["GameSession", "RunClock", "PLAYING", "CAUGHT", "WON"]


class GameSession:
    def __init__(self, level: Level, log: DevLog | None = None):
        if level.player is None:
            raise ValueError(f"level {level.number} has no player")
        self.level = level
        self.grid = level.grid
        self.player = level.player
        self.enemies = level.enemies
        self.log = log or DevLog(max_entries=_tun("debug", "dev_log_size", 500))
        self.status = PLAYING
        self.ticks = 0
        self.moves = 0
        self.elapsed = 0.0           # seconds played while PLAYING
        self._accum = 0.0
        self._focus: int | None = None
        self.log.record(-1, "session", f"level {level.number} started",
                        details={"enemies": len(self.enemies)})

    # ── Player ───────────────────────────────────────────────────────

    def move_player(self, dx: int, dy: int) -> str:
        """Move the player one cell; returns the ``step_player`` outcome."""
        if self.status != PLAYING:
            return BLOCKED
        outcome = step_player(self.grid, self.player, dx, dy)
        if outcome == BLOCKED:
            return outcome
        self.moves += 1
        if outcome in (CAUGHT, WON):
            self._finish(outcome, "player")
        return outcome

    # ── Enemies ──────────────────────────────────────────────────────

    def tick(self, dt: float) -> int:
        """Advance the clock by *dt* seconds; returns enemy passes run."""
        if self.status != PLAYING:
            return 0
        self.elapsed += dt
        interval = _tun("game", "tick_interval", 0.5)
        if interval <= 0:
            # one pass per frame
            self.tick_enemies()
            return 1
        self._accum += dt
        passes = 0
        while self._accum >= interval and self.status == PLAYING:
            self._accum -= interval
            self.tick_enemies()
            passes += 1
        return passes

    def tick_enemies(self) -> None:
        """Let every enemy decide once, in order.  Stops if one catches."""
        if self.status != PLAYING:
            return
        self.ticks += 1
        verbose = _tun("debug", "print_decisions", False)
        tx, ty = self.player.x, self.player.y

        for eid, enemy in enumerate(self.enemies):
            d = decide(enemy, self.grid, tx, ty)
            self.log.record(eid, "decision", d.outcome, kind=enemy.kind,
                            tick=self.ticks,
                            details={"from": d.start, "to": d.end,
                                     "expanded": d.expanded})
            if verbose:
                print(f"[ENEMY] t={self.ticks} #{eid} {enemy.kind}: "
                      f"{d.outcome} {d.start} → {d.end}")
            if enemy.pos == (tx, ty):
                self._finish(CAUGHT, f"enemy {eid}")
                return

    # ── Debug log ────────────────────────────────────────────────────

    def cycle_log_focus(self) -> int | None:
        """Record only the next enemy in turn (all → 0 → 1 → … → all).

        Returns the enemy id now recorded, or ``None`` for everyone.
        """
        if self._focus is None:
            nxt = 0 if self.enemies else None
        elif self._focus + 1 < len(self.enemies):
            nxt = self._focus + 1
        else:
            nxt = None
        self._focus = nxt
        self.log.focus(nxt)
        return nxt

    def _finish(self, status: str, by: str) -> None:
        self.status = status
        self.log.record(-1, "session", f"{status} by {by}", tick=self.ticks)
        print(f"[GAME] Level {self.level.number}: {status} "
              f"after {self.moves} moves / {self.ticks} ticks")


# ── Run timing ───────────────────────────────────────────────────────

@dataclass
class RunClock:
    """Play time summed over the consecutive levels of one run.

    Only a run started at level 1 is ``timed``; finishing the last level
    on a timed run records the total as the user's best time if it is
    faster.  Retries count: every session's ``elapsed`` is added,
    whether it was won, lost or restarted.
    """
    timed: bool
    total: float = 0.0

    @classmethod
    def starting_at(cls, number: int) -> "RunClock":
        return cls(timed=number == 1)

    def add(self, session: GameSession) -> None:
        self.total += session.elapsed

    def complete(self, progress: UserProgress, number: int, max_level: int) -> bool:
        """Level *number* was won: unlock the next one, maybe record a time.

        Returns True if *progress* changed and should be saved.
        """
        changed = complete_level(progress, number, max_level)
        if self.timed and number >= max_level:
            print(f"[GAME] Run finished in {self.total:.1f}s")
            changed = record_run_time(progress, self.total) or changed
        return changed
