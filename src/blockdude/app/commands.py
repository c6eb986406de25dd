from __future__ import annotations

from enum import Enum

import logging

from blockdude.domain.moves import Direction
from blockdude.domain.session import GameSession

logger = logging.getLogger(__name__)


class Command(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    UNDO = "undo"
    REDO = "redo"
    RESTART = "restart"
    TOGGLE_AUTO_CLIMB = "toggle_auto_climb"

    @property
    def direction(self) -> Direction | None:
        return _MOVES.get(self)


_MOVES = {
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
}

# One-letter codes used by move strings: directions by initial, Z/Y/M as on the keyboard,
# A for auto-climb.
_CODES = {
    "L": Command.LEFT,
    "R": Command.RIGHT,
    "U": Command.UP,
    "D": Command.DOWN,
    "Z": Command.UNDO,
    "Y": Command.REDO,
    "M": Command.RESTART,
    "A": Command.TOGGLE_AUTO_CLIMB,
}


def parse_commands(text: str) -> list[Command]:
    """Parse a move string such as "RRULZD". Whitespace is ignored."""
    out: list[Command] = []
    for i, ch in enumerate(text):
        if ch.isspace():
            continue
        cmd = _CODES.get(ch.upper())
        if cmd is None:
            raise ValueError(f"unknown move code {ch!r} at position {i}")
        out.append(cmd)
    return out


def apply_command(session: GameSession, command: Command) -> bool:
    """
    Apply one command to a session. Returns True if the state changed; rejected
    moves and undo/redo on an empty stack return False. Goal handling is left
    to the caller.
    """
    direction = command.direction
    if direction is not None:
        return session.attempt_move(direction) is not None

    if command is Command.UNDO:
        if not session.history.undo_stack:
            return False
        session.undo()
    elif command is Command.REDO:
        if not session.history.redo_stack:
            return False
        session.redo()
    elif command is Command.RESTART:
        session.restart()
    elif command is Command.TOGGLE_AUTO_CLIMB:
        session.set_auto_climb(not session.auto_climb)
        logger.debug("auto-climb %s", "on" if session.auto_climb else "off")
    return True
