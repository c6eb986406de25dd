from __future__ import annotations

import json
from pathlib import Path

import pytest

from blockdude.app.commands import parse_commands
from blockdude.app.replay import EXIT_ERROR, EXIT_SOLVED, EXIT_UNSOLVED, main, run
from blockdude.domain.game_state import Facing
from blockdude.domain.level import load_level
from blockdude.domain.session import GameSession
from blockdude.infra.level_codec import encode_level_pack
from blockdude.ui.text_view import render_board


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep any developer .env out of the replay's configuration.
    monkeypatch.chdir(tmp_path)


def test_solves_bundled_carry_level(capsys) -> None:
    assert main(["--level", "2", "DRRRDRRR"]) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert out.rstrip().endswith("solved")
    assert "not solved" not in out


def test_unsolved_prints_board_and_history(capsys) -> None:
    assert main(["--level", "0", "RRZ"]) == EXIT_UNSOLVED
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == [
        "#######",
        "#.....#",
        "#.>..G#",
        "#######",
    ]
    assert "moves: R  redo: R" in out
    assert out[-1] == "not solved"


def test_no_auto_climb_flag(capsys) -> None:
    assert main(["--level", "1", "--no-auto-climb", "RRRRR"]) == EXIT_UNSOLVED
    assert main(["--level", "1", "--no-auto-climb", "RRURR"]) == EXIT_SOLVED


def test_custom_pack(tmp_path: Path, make_level, capsys) -> None:
    pack = tmp_path / "pack.json"
    pack.write_text(json.dumps(encode_level_pack([make_level(["11111", "10031", "11111"], 1, 1)])), encoding="utf-8")

    assert main(["--levels", str(pack), "RR"]) == EXIT_SOLVED


@pytest.mark.parametrize(
    "argv",
    [
        ["--level", "9", "R"],
        ["--levels", "missing.json", "R"],
        ["R?"],
    ],
)
def test_errors(argv, capsys) -> None:
    assert main(argv) == EXIT_ERROR
    assert "error:" in capsys.readouterr().err


def test_run_stops_at_goal(make_level) -> None:
    session = GameSession(make_level(["11111", "10031", "11111"], 1, 1))
    assert run(session, parse_commands("RRL")) is True
    assert session.actor.col == 3


def test_render_board(make_level) -> None:
    board = load_level(make_level(["1111111", "1000031", "1111111"], 1, 2, facing=Facing.LEFT))
    assert render_board(board) == "#######\n#.<..G#\n#######"

    carrying = load_level(make_level(["11111", "10001", "10031", "11111"], 2, 1, carrying=True))
    assert render_board(carrying) == "#####\n#B..#\n#>.G#\n#####"


def test_auto_climb_toggled_mid_replay(capsys) -> None:
    assert main(["--level", "1", "--no-auto-climb", "RRARRR"]) == EXIT_SOLVED


def test_run_toggles_auto_climb(make_level) -> None:
    session = GameSession(make_level(["11111", "10001", "10011", "11111"], 2, 2), auto_climb=False)
    assert run(session, parse_commands("RAR")) is False
    assert session.auto_climb is True
    assert (session.actor.row, session.actor.col) == (1, 3)
