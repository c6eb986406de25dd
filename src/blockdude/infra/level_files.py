from __future__ import annotations

import json
from pathlib import Path

from blockdude.domain.level import Level
from blockdude.infra.exceptions import LevelDecodeError
from blockdude.infra.level_codec import decode_level_pack

BUNDLED_LEVELS_PATH = Path(__file__).resolve().parent.parent / "data" / "levels.json"


def load_level_pack_from_path(path: Path) -> list[Level]:
    try:
        obj = json.loads(path.read_text(encoding="utf-8"))
        return decode_level_pack(obj)
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to load level pack from {path}: {e}") from e


def load_bundled_levels() -> list[Level]:
    return load_level_pack_from_path(BUNDLED_LEVELS_PATH)
