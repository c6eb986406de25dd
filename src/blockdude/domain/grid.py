from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from blockdude.domain.exceptions import CellOutOfBounds


class Tile(IntEnum):
    # Values double as the tile codes used in level files.
    EMPTY = 0
    WALL = 1
    BLOCK = 2
    GOAL = 3


class Grid:
    """
    Mutable tile grid, rows top-to-bottom and columns left-to-right.
    The shape never changes after construction; only cell values do.
    """

    def __init__(self, cells: Iterable[Iterable[int]]) -> None:
        self._cells: list[list[Tile]] = [[Tile(t) for t in row] for row in cells]

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < len(self._cells[row])

    def tile_at(self, row: int, col: int) -> Tile:
        # Explicit check: negative indices must not wrap around to the far edge.
        if not self.in_bounds(row, col):
            raise CellOutOfBounds(f"cell ({row}, {col}) is outside the {self.height}x{self.width} grid")
        return self._cells[row][col]

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        if not self.in_bounds(row, col):
            raise CellOutOfBounds(f"cell ({row}, {col}) is outside the {self.height}x{self.width} grid")
        self._cells[row][col] = tile

    def is_passable(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) in (Tile.EMPTY, Tile.GOAL)

    def is_empty(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) == Tile.EMPTY

    def rows(self) -> tuple[tuple[Tile, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def copy(self) -> Grid:
        return Grid(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        body = "/".join("".join(str(int(t)) for t in row) for row in self._cells)
        return f"Grid({body!r})"
