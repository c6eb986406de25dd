from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from blockdude.domain.game_state import Facing
from blockdude.domain.grid import Tile
from blockdude.domain.level import Level
from blockdude.domain.session import GameSession


def _level(
    rows: Sequence[str],
    row: int,
    col: int,
    facing: Facing = Facing.RIGHT,
    carrying: bool = False,
    name: str = "test",
) -> Level:
    tiles = tuple(tuple(Tile(int(ch)) for ch in r) for r in rows)
    return Level(
        tiles=tiles,
        start_row=row,
        start_col=col,
        start_facing=facing,
        start_carrying=carrying,
        name=name,
    )


@pytest.fixture()
def make_level() -> Callable[..., Level]:
    """Build a Level from digit-string rows ("1000001")."""
    return _level


@pytest.fixture()
def make_session() -> Callable[..., GameSession]:
    def _make(rows: Sequence[str], row: int, col: int, *, auto_climb: bool = False, **kw) -> GameSession:
        return GameSession(_level(rows, row, col, **kw), auto_climb=auto_climb)

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BLOCKDUDE_AUTO_CLIMB", "BLOCKDUDE_LEVELS_PATH", "BLOCKDUDE_START_LEVEL", "BLOCKDUDE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
