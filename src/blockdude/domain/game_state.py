from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

from blockdude.domain.grid import Grid


class Facing(IntEnum):
    LEFT = -1
    RIGHT = 1

    def flipped(self) -> Facing:
        return Facing(-self.value)


@dataclass(frozen=True)
class Actor:
    row: int
    col: int
    facing: Facing
    carrying: bool = False  # block held overhead at (row - 1, col)

    def turned(self) -> Actor:
        return replace(self, facing=self.facing.flipped())

    def shifted(self, *, d_row: int = 0, d_col: int = 0) -> Actor:
        return replace(self, row=self.row + d_row, col=self.col + d_col)

    def with_carrying(self, carrying: bool) -> Actor:
        return replace(self, carrying=carrying)


@dataclass
class Board:
    """The grid and actor pair that moves, undo and redo act on."""
    grid: Grid
    actor: Actor

    def copy(self) -> Board:
        return Board(grid=self.grid.copy(), actor=self.actor)
