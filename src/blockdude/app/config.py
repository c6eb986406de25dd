"""
Game configuration, read from environment variables (and a `.env` file when present).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GameConfig:
    auto_climb: bool = True
    levels_path: Path | None = None  # None = bundled level pack
    start_level: int = 0
    log_level: str = "INFO"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def _environment(dotenv: bool) -> dict[str, str]:
    # Real environment variables win over a .env file in the working directory.
    values: dict[str, str] = {}
    if dotenv:
        path = find_dotenv(usecwd=True)
        if path:
            values.update({k: v for k, v in dotenv_values(path).items() if v is not None})
    values.update(os.environ)
    return values


def load_config(*, dotenv: bool = True) -> GameConfig:
    env = _environment(dotenv)

    auto_climb = _parse_bool("BLOCKDUDE_AUTO_CLIMB", env.get("BLOCKDUDE_AUTO_CLIMB", "true"))

    levels_raw = env.get("BLOCKDUDE_LEVELS_PATH")
    levels_path = Path(levels_raw) if levels_raw else None

    start_raw = env.get("BLOCKDUDE_START_LEVEL", "0")
    try:
        start_level = int(start_raw)
    except ValueError:
        raise ValueError(f"BLOCKDUDE_START_LEVEL must be an integer (got {start_raw!r})") from None
    if start_level < 0:
        raise ValueError("BLOCKDUDE_START_LEVEL must be >= 0")

    log_level = env.get("BLOCKDUDE_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"BLOCKDUDE_LOG_LEVEL is not a logging level: {log_level!r}")

    return GameConfig(
        auto_climb=auto_climb,
        levels_path=levels_path,
        start_level=start_level,
        log_level=log_level,
    )


def configure_logging(config: GameConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
