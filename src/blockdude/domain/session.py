from __future__ import annotations

import logging

from blockdude.domain.game_state import Actor, Board
from blockdude.domain.grid import Grid, Tile
from blockdude.domain.history import History
from blockdude.domain.level import Level, load_level
from blockdude.domain.moves import Direction, MoveRecord
from blockdude.domain.resolver import MoveResolver

logger = logging.getLogger(__name__)


class GameSession:
    """
    One game in progress: the board, its move history and the current level.
    Independent sessions share nothing.
    """

    def __init__(self, level: Level | None = None, *, auto_climb: bool = True) -> None:
        self._resolver = MoveResolver(auto_climb=auto_climb)
        self.history = History()
        self._level: Level | None = None
        self._board: Board | None = None
        if level is not None:
            self.load_level(level)

    # ---------- Read accessors ----------

    @property
    def board(self) -> Board:
        if self._board is None:
            raise RuntimeError("no level loaded")
        return self._board

    @property
    def level(self) -> Level:
        if self._level is None:
            raise RuntimeError("no level loaded")
        return self._level

    @property
    def grid(self) -> Grid:
        return self.board.grid

    @property
    def actor(self) -> Actor:
        return self.board.actor

    @property
    def at_goal(self) -> bool:
        a = self.actor
        return self.grid.tile_at(a.row, a.col) == Tile.GOAL

    @property
    def auto_climb(self) -> bool:
        return self._resolver.auto_climb

    def set_auto_climb(self, enabled: bool) -> None:
        self._resolver.auto_climb = enabled

    # ---------- Moves ----------

    def attempt_move(self, direction: Direction) -> MoveRecord | None:
        record = self._resolver.resolve(self.board, direction)
        if record is None:
            return None
        if self.at_goal:
            # Reaching the goal ends the level; that move is not undoable.
            logger.info("goal reached on level %s", self.level.name or "<unnamed>")
            return record
        self.history.push(record)
        return record

    def undo(self) -> None:
        self.history.undo(self.board)

    def redo(self) -> None:
        self.history.redo(self.board)

    # ---------- Levels ----------

    def load_level(self, level: Level) -> None:
        board = load_level(level)
        self._level = level
        self._board = board
        self.history.clear()

    def restart(self) -> None:
        """Back to the start of the level, keeping every move on the redo stack."""
        self._board = load_level(self.level)
        self.history.rewind()
        logger.debug("restarted level %s", self.level.name or "<unnamed>")
