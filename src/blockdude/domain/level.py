from __future__ import annotations

import logging
from dataclasses import dataclass

from blockdude.domain.exceptions import InvalidLevel
from blockdude.domain.game_state import Actor, Board, Facing
from blockdude.domain.grid import Grid, Tile

logger = logging.getLogger(__name__)

_MIN_SIDE = 3


@dataclass(frozen=True)
class Level:
    """Immutable level template. Playing a level works on a copy of `tiles`."""
    tiles: tuple[tuple[Tile, ...], ...]
    start_row: int
    start_col: int
    start_facing: Facing
    start_carrying: bool = False
    name: str = ""

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0


def validate_level(level: Level) -> None:
    """
    Reject levels the move rules cannot run on: every scan (gravity, climb, drop)
    assumes the border is solid wall and the actor starts in open space.
    """
    label = level.name or "<unnamed>"
    tiles = level.tiles
    if not tiles or not tiles[0]:
        raise InvalidLevel(f"level {label}: grid is empty")

    width = len(tiles[0])
    for r, row in enumerate(tiles):
        if len(row) != width:
            raise InvalidLevel(f"level {label}: row {r} has {len(row)} cells, expected {width}")

    height = len(tiles)
    if height < _MIN_SIDE or width < _MIN_SIDE:
        raise InvalidLevel(f"level {label}: grid must be at least {_MIN_SIDE}x{_MIN_SIDE}")

    for r in range(height):
        for c in range(width):
            on_border = r in (0, height - 1) or c in (0, width - 1)
            if on_border and tiles[r][c] != Tile.WALL:
                raise InvalidLevel(f"level {label}: border cell ({r}, {c}) is not a wall")

    row, col = level.start_row, level.start_col
    if not (0 <= row < height and 0 <= col < width):
        raise InvalidLevel(f"level {label}: start ({row}, {col}) is outside the grid")
    if tiles[row][col] == Tile.GOAL:
        raise InvalidLevel(f"level {label}: start ({row}, {col}) is already on the goal")
    if tiles[row][col] != Tile.EMPTY:
        raise InvalidLevel(f"level {label}: start ({row}, {col}) is inside a {tiles[row][col].name.lower()}")
    if level.start_carrying and tiles[row - 1][col] not in (Tile.EMPTY, Tile.GOAL):
        raise InvalidLevel(f"level {label}: no room for the carried block above the start")

    if not any(Tile.GOAL in row for row in tiles):
        logger.warning("level %s has no goal tile", label)


def load_level(level: Level) -> Board:
    """Fresh board for a level. The template's tiles are copied, never shared."""
    validate_level(level)
    grid = Grid(level.tiles)
    actor = Actor(
        row=level.start_row,
        col=level.start_col,
        facing=level.start_facing,
        carrying=level.start_carrying,
    )
    logger.info("loaded level %s (%dx%d)", level.name or "<unnamed>", level.width, level.height)
    return Board(grid=grid, actor=actor)
