from __future__ import annotations

import logging

from blockdude.domain.game_state import Board, Facing
from blockdude.domain.grid import Tile
from blockdude.domain.moves import Cell, Direction, MoveRecord

logger = logging.getLogger(__name__)


def drop_block(board: Board, row: int, col: int) -> Cell:
    """
    Release the carried block at (row, col) and let it fall through empty cells.
    Returns the cell it lands in.
    """
    grid = board.grid
    rest = row
    while grid.is_empty(rest + 1, col):
        rest += 1
    grid.set_tile(rest, col, Tile.BLOCK)
    board.actor = board.actor.with_carrying(False)
    return Cell(row=rest, col=col)


class MoveResolver:
    def __init__(self, *, auto_climb: bool = True) -> None:
        self.auto_climb = auto_climb

    def resolve(self, board: Board, direction: Direction) -> MoveRecord | None:
        """Apply one action to the board. Returns None when nothing moved."""
        if direction is Direction.LEFT:
            record = self._move_horizontal(board, Direction.LEFT, Facing.LEFT)
        elif direction is Direction.RIGHT:
            record = self._move_horizontal(board, Direction.RIGHT, Facing.RIGHT)
        elif direction is Direction.UP:
            record = self._climb(board)
        else:
            record = self._down(board)

        if record is None:
            logger.debug("%s rejected at (%d,%d)", direction.value, board.actor.row, board.actor.col)
        else:
            logger.debug("%s -> %s", direction.value, record)
        return record

    def _move_horizontal(self, board: Board, kind: Direction, facing: Facing) -> MoveRecord | None:
        grid = board.grid
        turned = False
        stepped = 0
        fell = 0
        dropped: Cell | None = None

        if board.actor.facing != facing:
            board.actor = board.actor.turned()
            turned = True

        a = board.actor
        if grid.is_passable(a.row, a.col + facing):
            board.actor = a = a.shifted(d_col=facing)
            stepped = int(facing)

            # Low ceiling: the held block stays behind on the old column.
            if a.carrying and not grid.is_passable(a.row - 1, a.col):
                dropped = drop_block(board, a.row - 1, a.col - facing)
                a = board.actor

            while grid.is_passable(a.row + fell + 1, a.col):
                fell += 1
            if fell:
                board.actor = a.shifted(d_row=fell)

        if turned or stepped:
            return MoveRecord(kind=kind, turned=turned, stepped=stepped, fell=fell, dropped=dropped)
        if self.auto_climb:
            return self._climb(board)
        return None

    def _climb(self, board: Board) -> MoveRecord | None:
        grid = board.grid
        a = board.actor
        ahead = a.col + a.facing
        if (
            # must climb onto something solid
            not grid.is_passable(a.row, ahead)
            and grid.is_passable(a.row - 1, a.col)
            and grid.is_passable(a.row - 1, ahead)
            # room for the held block
            and (not a.carrying or grid.is_passable(a.row - 2, ahead))
        ):
            board.actor = a.shifted(d_row=-1, d_col=a.facing)
            return MoveRecord(kind=Direction.UP, stepped=int(a.facing), fell=-1)
        return None

    def _down(self, board: Board) -> MoveRecord | None:
        grid = board.grid
        a = board.actor
        ahead = a.col + a.facing

        if a.carrying:
            # Exactly empty: a block may not be set down onto the goal.
            if grid.is_empty(a.row - 1, ahead):
                return MoveRecord(kind=Direction.DOWN, dropped=drop_block(board, a.row - 1, ahead))
            return None

        if (
            grid.tile_at(a.row, ahead) == Tile.BLOCK
            and grid.is_passable(a.row - 1, a.col)
            and grid.is_passable(a.row - 1, ahead)
        ):
            grid.set_tile(a.row, ahead, Tile.EMPTY)
            board.actor = a.with_carrying(True)
            return MoveRecord(kind=Direction.DOWN, picked_up=True)
        return None
