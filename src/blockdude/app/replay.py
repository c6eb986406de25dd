"""
Replay a move string against a level and report whether it solves it.

    blockdude-replay --level 0 RRULDR
    blockdude-replay --levels my_pack.json --level 2 --no-auto-climb "LLU D"
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from blockdude.app.commands import Command, apply_command, parse_commands
from blockdude.app.config import configure_logging, load_config
from blockdude.domain.session import GameSession
from blockdude.infra.exceptions import LevelDecodeError
from blockdude.infra.level_files import load_bundled_levels, load_level_pack_from_path
from blockdude.ui.text_view import render_board

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="blockdude-replay", description=__doc__.strip().splitlines()[0])
    p.add_argument("moves", help="move codes: L R U D, Z=undo, Y=redo, M=restart, A=toggle auto-climb")
    p.add_argument("--levels", type=Path, default=None, help="level pack JSON (default: bundled pack)")
    p.add_argument("--level", type=int, default=None, help="level index in the pack")
    climb = p.add_mutually_exclusive_group()
    climb.add_argument("--auto-climb", dest="auto_climb", action="store_true", default=None)
    climb.add_argument("--no-auto-climb", dest="auto_climb", action="store_false")
    return p


def run(session: GameSession, commands: Sequence[Command]) -> bool:
    """Apply commands in order; stops at the first move that reaches the goal."""
    for cmd in commands:
        if apply_command(session, cmd) and cmd.direction is not None and session.at_goal:
            return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR
    if args.levels is not None:
        config = replace(config, levels_path=args.levels)
    if args.level is not None:
        config = replace(config, start_level=args.level)
    if args.auto_climb is not None:
        config = replace(config, auto_climb=args.auto_climb)
    configure_logging(config)

    try:
        commands = parse_commands(args.moves)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        if config.levels_path is None:
            levels = load_bundled_levels()
        else:
            levels = load_level_pack_from_path(config.levels_path)
    except LevelDecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not 0 <= config.start_level < len(levels):
        print(f"error: level {config.start_level} out of range (pack has {len(levels)})", file=sys.stderr)
        return EXIT_ERROR

    session = GameSession(levels[config.start_level], auto_climb=config.auto_climb)
    solved = run(session, commands)

    print(render_board(session.board))
    done, undone = session.history.move_codes()
    print(f"moves: {done or '-'}  redo: {undone or '-'}")
    print("solved" if solved else "not solved")
    return EXIT_SOLVED if solved else EXIT_UNSOLVED


if __name__ == "__main__":
    sys.exit(main())
