"""core/level.py — Level files and the Level container.

Level files live in ``data/levels/level<N>.toml``::

    number = 1
    name   = "First Steps"
    rows   = [
        "WWWWWWW",
        "WC    W",
        "W  W GW",
        "WWWWWWW",
    ]

    [[enemies]]
    kind      = "smart"      # see logic.enemies.registered_kinds()
    x         = 4
    y         = 1
    direction = "left"       # right | left | up | down

``rows`` use the marker characters from ``core.constants.Marker`` and
must contain exactly one player ``C``.  Enemies are *not* drawn in
``rows``; each ``[[enemies]]`` entry must sit on an empty cell and its
ENEMY marker is written onto the grid at load time.

Any problem with the file raises ``LevelFormatError``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

from components import Enemy, Player
from core.constants import Marker, DIRECTIONS
from core.grid import Grid


LEVELS_DIR = Path(__file__).resolve().parent.parent / "data" / "levels"


class LevelFormatError(ValueError):
    """A level file (or dict) does not describe a valid level."""


@dataclass
class Level:
    """One playable level.  ``grid`` is the live grid for the session."""
    grid: Grid
    number: int
    name: str = ""
    player: Player | None = None
    enemies: list[Enemy] = field(default_factory=list)

    # Height and width are fixed once the grid exists.
    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width


def level_path(number: int, levels_dir: Path | None = None) -> Path:
    return Path(levels_dir or LEVELS_DIR) / f"level{number}.toml"


def load_level(path: str | Path, known_kinds: list[str] | None = None) -> Level:
    """Read and validate a level file.

    *known_kinds* restricts the enemy ``kind`` values accepted; ``None``
    accepts every kind registered in ``logic.enemies``.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError:
        raise LevelFormatError(f"{path}: no such level file") from None
    except tomllib.TOMLDecodeError as ex:
        raise LevelFormatError(f"{path}: {ex}") from ex

    level = level_from_dict(raw, known_kinds=known_kinds, source=str(path))
    print(f"[LEVEL] Loaded level {level.number} '{level.name}' "
          f"({level.width}x{level.height}, {len(level.enemies)} enemies) from {path}")
    return level


def level_from_dict(raw: dict, known_kinds: list[str] | None = None,
                    source: str = "<level>") -> Level:
    """Build a ``Level`` from an already-parsed TOML table."""
    if known_kinds is None:
        from logic.enemies import registered_kinds
        known_kinds = registered_kinds()

    rows = raw.get("rows")
    if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        raise LevelFormatError(f"{source}: 'rows' must be a list of strings")
    try:
        grid = Grid.from_rows(rows)
    except ValueError as ex:
        raise LevelFormatError(f"{source}: {ex}") from ex

    if grid.count(Marker.VISITED):
        raise LevelFormatError(f"{source}: 'V' is reserved for the pathfinder")
    if grid.count(Marker.ENEMY):
        raise LevelFormatError(
            f"{source}: place enemies with [[enemies]], not 'E' in rows")

    players = list(grid.find(Marker.PLAYER))
    if len(players) != 1:
        raise LevelFormatError(
            f"{source}: expected exactly one player 'C', found {len(players)}")
    px, py = players[0]

    enemies = [_parse_enemy(i, e, grid, known_kinds, source)
               for i, e in enumerate(raw.get("enemies", []))]

    try:
        number = int(raw.get("number", 0))
    except (TypeError, ValueError):
        raise LevelFormatError(f"{source}: 'number' must be an integer") from None

    return Level(
        grid=grid,
        number=number,
        name=str(raw.get("name", "")),
        player=Player(px, py),
        enemies=enemies,
    )


def _parse_enemy(i: int, entry, grid: Grid, known_kinds: list[str],
                 source: str) -> Enemy:
    where = f"{source}: enemies[{i}]"
    if not isinstance(entry, dict):
        raise LevelFormatError(f"{where} must be a table")

    kind = entry.get("kind", "smart")
    if kind not in known_kinds:
        raise LevelFormatError(
            f"{where}: unknown kind {kind!r} (known: {', '.join(known_kinds)})")

    direction = entry.get("direction", "left")
    if direction not in DIRECTIONS:
        raise LevelFormatError(f"{where}: unknown direction {direction!r}")

    x, y = entry.get("x"), entry.get("y")
    if not isinstance(x, int) or not isinstance(y, int):
        raise LevelFormatError(f"{where}: 'x' and 'y' must be integers")
    if not grid.in_bounds(x, y):
        raise LevelFormatError(
            f"{where}: ({x}, {y}) outside {grid.width}x{grid.height} grid")
    if grid.at(x, y) is not Marker.EMPTY:
        raise LevelFormatError(
            f"{where}: ({x}, {y}) is {grid.at(x, y).name}, not EMPTY")

    grid.put(x, y, Marker.ENEMY)
    return Enemy(x=x, y=y, kind=kind, direction=direction)
