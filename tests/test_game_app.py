from __future__ import annotations

import json
from pathlib import Path

import pytest

from blockdude.app.commands import Command, parse_commands
from blockdude.app.config import GameConfig
from blockdude.app.game_app import GameApp
from blockdude.infra.level_codec import encode_level_pack
from blockdude.infra.level_files import load_bundled_levels


@pytest.fixture()
def app() -> GameApp:
    return GameApp(load_bundled_levels())


def _play(app: GameApp, moves: str) -> list[bool]:
    return [app.handle(c) for c in parse_commands(moves)]


def test_solving_a_level_advances(app: GameApp) -> None:
    assert _play(app, "RRRR") == [True, True, True, True]

    assert app.level_index == 1
    assert app.levels_beaten == 1
    assert app.session.level.name == "Step Up"
    assert app.session.history.undo_stack == []


def test_whole_pack_wraps_around(app: GameApp) -> None:
    _play(app, "RRRR")
    _play(app, "RRRRR")
    _play(app, "DRRRDRRR")

    assert app.levels_beaten == 3
    assert app.level_index == 0


def test_undo_redo_restart_commands(app: GameApp) -> None:
    assert app.handle(Command.UNDO) is False
    assert app.handle(Command.REDO) is False

    _play(app, "RR")
    assert app.handle(Command.UNDO) is True
    assert app.session.actor.col == 2

    assert app.handle(Command.RESTART) is True
    assert app.session.actor.col == 1
    assert app.session.history.move_codes() == ("", "RR")


def test_toggle_auto_climb(app: GameApp) -> None:
    app.select_level(1)
    _play(app, "RR")
    assert app.handle(Command.TOGGLE_AUTO_CLIMB) is True
    assert app.session.auto_climb is False

    assert app.handle(Command.RIGHT) is False
    assert app.handle(Command.UP) is True


def test_select_level_bounds(app: GameApp) -> None:
    with pytest.raises(IndexError):
        app.select_level(3)
    app.select_level(2)
    app.next_level()
    assert app.level_index == 0


def test_requires_levels() -> None:
    with pytest.raises(ValueError):
        GameApp([])


def test_from_config(tmp_path: Path, make_level) -> None:
    assert GameApp.from_config(GameConfig(start_level=2)).session.level.name == "Carry"

    level = make_level(["11111", "10031", "11111"], 1, 1, name="Tiny")
    pack = tmp_path / "pack.json"
    pack.write_text(json.dumps(encode_level_pack([level])), encoding="utf-8")

    app = GameApp.from_config(GameConfig(levels_path=pack, auto_climb=False))
    assert app.levels == (level,)
    assert app.session.auto_climb is False


def test_parse_commands() -> None:
    assert parse_commands("r u\tz") == [Command.RIGHT, Command.UP, Command.UNDO]
    assert parse_commands("YMA") == [Command.REDO, Command.RESTART, Command.TOGGLE_AUTO_CLIMB]
    with pytest.raises(ValueError):
        parse_commands("RX")
