from __future__ import annotations

from typing import Any

from blockdude.domain.exceptions import InvalidLevel
from blockdude.domain.game_state import Facing
from blockdude.domain.grid import Tile
from blockdude.domain.level import Level, validate_level
from blockdude.infra.exceptions import LevelDecodeError, LevelEncodeError


_FORMAT = "blockdude.level"
_PACK_FORMAT = "blockdude.levels"
_VERSION_LATEST = 1

_FACING_NAMES = {"left": Facing.LEFT, "right": Facing.RIGHT}


def encode_level(level: Level) -> dict:
    try:
        return {
            "format": _FORMAT,
            "version": _VERSION_LATEST,
            **_level_body(level),
        }
    except Exception as e:
        raise LevelEncodeError(f"Failed to encode level: {e}") from e


def encode_level_pack(levels: list[Level]) -> dict:
    try:
        return {
            "format": _PACK_FORMAT,
            "version": _VERSION_LATEST,
            "levels": [_level_body(lv) for lv in levels],
        }
    except Exception as e:
        raise LevelEncodeError(f"Failed to encode level pack: {e}") from e


def _level_body(level: Level) -> dict:
    return {
        "name": level.name,
        "map": ["".join(str(int(t)) for t in row) for row in level.tiles],
        "row": int(level.start_row),
        "col": int(level.start_col),
        "facing": level.start_facing.name.lower(),
        "carrying": bool(level.start_carrying),
    }


def decode_level(obj: dict) -> Level:
    try:
        if obj.get("format") != _FORMAT:
            raise LevelDecodeError("Invalid level format marker.")
        if obj.get("version") != _VERSION_LATEST:
            raise LevelDecodeError("Unsupported level version.")
        return _decode_body(obj, where="level")
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to decode level: {e}") from e


def decode_level_pack(obj: dict) -> list[Level]:
    try:
        if obj.get("format") != _PACK_FORMAT:
            raise LevelDecodeError("Invalid level pack format marker.")
        if obj.get("version") != _VERSION_LATEST:
            raise LevelDecodeError("Unsupported level pack version.")

        raw_levels = obj.get("levels")
        if not isinstance(raw_levels, list) or not raw_levels:
            raise LevelDecodeError("levels must be a non-empty list.")

        parsed: list[Level] = []
        for i, rl in enumerate(raw_levels):
            if not isinstance(rl, dict):
                raise LevelDecodeError(f"levels[{i}] must be an object.")
            # Entries may carry their own marker; when present it must match.
            if "format" in rl and rl["format"] != _FORMAT:
                raise LevelDecodeError(f"levels[{i}] has an invalid format marker.")
            parsed.append(_decode_body(rl, where=f"levels[{i}]"))
        return parsed
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to decode level pack: {e}") from e


def _decode_body(obj: dict, *, where: str) -> Level:
    name = obj.get("name", "")
    if not isinstance(name, str):
        raise LevelDecodeError(f"{where}.name must be a string.")

    tiles = _decode_map(obj.get("map"), where=where)

    row = obj.get("row")
    col = obj.get("col")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)):
        raise LevelDecodeError(f"{where} row/col must be integers.")

    facing = _decode_facing(obj.get("facing"), where=where)

    carrying = obj.get("carrying", False)
    if not isinstance(carrying, bool):
        raise LevelDecodeError(f"{where}.carrying must be a boolean.")

    level = Level(
        tiles=tiles,
        start_row=row,
        start_col=col,
        start_facing=facing,
        start_carrying=carrying,
        name=name,
    )
    try:
        validate_level(level)
    except InvalidLevel as e:
        raise LevelDecodeError(f"{where} is not playable: {e}") from e
    return level


def _decode_map(raw: Any, *, where: str) -> tuple[tuple[Tile, ...], ...]:
    if not isinstance(raw, list) or not raw:
        raise LevelDecodeError(f"{where}.map must be a non-empty list of rows.")

    rows: list[tuple[Tile, ...]] = []
    for r, raw_row in enumerate(raw):
        # Rows are either digit strings ("1000001") or lists of ints.
        if isinstance(raw_row, str):
            if not raw_row.isdigit():
                raise LevelDecodeError(f"{where}.map[{r}] must contain only tile digits.")
            codes = [int(ch) for ch in raw_row]
        elif isinstance(raw_row, list) and all(isinstance(v, int) and not isinstance(v, bool) for v in raw_row):
            codes = raw_row
        else:
            raise LevelDecodeError(f"{where}.map[{r}] must be a digit string or a list of ints.")

        try:
            rows.append(tuple(Tile(c) for c in codes))
        except ValueError as e:
            raise LevelDecodeError(f"{where}.map[{r}] has an unknown tile code: {e}") from e
    return tuple(rows)


def _decode_facing(raw: Any, *, where: str) -> Facing:
    if isinstance(raw, str) and raw.lower() in _FACING_NAMES:
        return _FACING_NAMES[raw.lower()]
    if raw in (-1, 1) and not isinstance(raw, bool):
        return Facing(raw)
    raise LevelDecodeError(f"{where}.facing must be 'left', 'right', -1 or 1.")
