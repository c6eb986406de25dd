from __future__ import annotations

from blockdude.domain.game_state import Board, Facing
from blockdude.domain.grid import Tile

_GLYPHS = {
    Tile.EMPTY: ".",
    Tile.WALL: "#",
    Tile.BLOCK: "B",
    Tile.GOAL: "G",
}


def render_board(board: Board) -> str:
    rows = [[_GLYPHS[t] for t in row] for row in board.grid.rows()]
    a = board.actor
    rows[a.row][a.col] = ">" if a.facing == Facing.RIGHT else "<"
    if a.carrying:
        rows[a.row - 1][a.col] = "B"
    return "\n".join("".join(r) for r in rows)
