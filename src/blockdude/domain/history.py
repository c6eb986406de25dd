from __future__ import annotations

import logging

from blockdude.domain.game_state import Board
from blockdude.domain.grid import Tile
from blockdude.domain.moves import MoveRecord

logger = logging.getLogger(__name__)


def replay_move(board: Board, record: MoveRecord) -> None:
    """Re-apply a recorded move from its stored deltas, without re-checking legality."""
    a = board.actor
    if record.turned:
        a = a.turned()
    a = a.shifted(d_row=record.fell, d_col=record.stepped)

    if record.dropped is not None:
        board.grid.set_tile(record.dropped.row, record.dropped.col, Tile.BLOCK)
        a = a.with_carrying(False)
    elif record.picked_up:
        board.grid.set_tile(a.row, a.col + a.facing, Tile.EMPTY)
        a = a.with_carrying(True)
    board.actor = a


def revert_move(board: Board, record: MoveRecord) -> None:
    """Exact inverse of replay_move."""
    a = board.actor
    if record.turned:
        a = a.turned()
    a = a.shifted(d_row=-record.fell, d_col=-record.stepped)

    if record.dropped is not None:
        board.grid.set_tile(record.dropped.row, record.dropped.col, Tile.EMPTY)
        a = a.with_carrying(True)
    elif record.picked_up:
        board.grid.set_tile(a.row, a.col + a.facing, Tile.BLOCK)
        a = a.with_carrying(False)
    board.actor = a


class History:
    """Linear undo/redo over move records. Any new move discards the redo stack."""

    def __init__(self) -> None:
        self.undo_stack: list[MoveRecord] = []
        self.redo_stack: list[MoveRecord] = []

    def push(self, record: MoveRecord) -> None:
        self.undo_stack.append(record)
        self.redo_stack.clear()

    def undo(self, board: Board) -> MoveRecord | None:
        if not self.undo_stack:
            return None
        record = self.undo_stack.pop()
        self.redo_stack.append(record)
        revert_move(board, record)
        logger.debug("undo %s", record.kind.value)
        return record

    def redo(self, board: Board) -> MoveRecord | None:
        if not self.redo_stack:
            return None
        record = self.redo_stack.pop()
        self.undo_stack.append(record)
        replay_move(board, record)
        logger.debug("redo %s", record.kind.value)
        return record

    def rewind(self) -> None:
        # Newest first, so the oldest move ends up on top of the redo stack.
        while self.undo_stack:
            self.redo_stack.append(self.undo_stack.pop())

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    def move_codes(self) -> tuple[str, str]:
        """
        Move history as direction letters: (done moves oldest first,
        undone moves in the order redo would replay them).
        """
        done = "".join(r.kind.code for r in self.undo_stack)
        undone = "".join(r.kind.code for r in reversed(self.redo_stack))
        return done, undone
