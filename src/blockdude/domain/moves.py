from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"

    @property
    def code(self) -> str:
        return self.value[0]

    @classmethod
    def from_code(cls, code: str) -> Direction:
        for d in cls:
            if d.code == code.upper():
                return d
        raise ValueError(f"unknown direction code: {code!r}")


@dataclass(frozen=True)
class Cell:
    row: int
    col: int


@dataclass(frozen=True)
class MoveRecord:
    """
    Delta of one successful move. Fields left at their defaults mean the
    sub-effect did not happen; undo and redo replay these deltas directly.
    """
    kind: Direction
    turned: bool = False
    stepped: int = 0          # signed column delta
    fell: int = 0             # rows fallen; -1 for a climb
    picked_up: bool = False
    dropped: Cell | None = None  # where a released block came to rest
