from __future__ import annotations

import logging
from collections.abc import Sequence

from blockdude.app.commands import Command, apply_command
from blockdude.app.config import GameConfig
from blockdude.domain.level import Level
from blockdude.domain.session import GameSession
from blockdude.infra.level_files import load_bundled_levels, load_level_pack_from_path

logger = logging.getLogger(__name__)


class GameApp:
    """
    Plays an ordered list of levels. Input and rendering layers call `handle`
    and read `session` for the board to draw.
    """

    def __init__(self, levels: Sequence[Level], *, auto_climb: bool = True, start_level: int = 0) -> None:
        if not levels:
            raise ValueError("at least one level is required")
        self._levels = tuple(levels)
        self.levels_beaten = 0
        self._level_index = 0
        self.session = GameSession(auto_climb=auto_climb)
        self.select_level(start_level)

    @classmethod
    def from_config(cls, config: GameConfig) -> GameApp:
        if config.levels_path is None:
            levels = load_bundled_levels()
        else:
            levels = load_level_pack_from_path(config.levels_path)
        return cls(levels, auto_climb=config.auto_climb, start_level=config.start_level)

    @property
    def levels(self) -> tuple[Level, ...]:
        return self._levels

    @property
    def level_index(self) -> int:
        return self._level_index

    # ---------- Level switching ----------

    def select_level(self, index: int) -> None:
        if not 0 <= index < len(self._levels):
            raise IndexError(f"level index {index} out of range (0..{len(self._levels) - 1})")
        self._level_index = index
        self.session.load_level(self._levels[index])

    def next_level(self) -> None:
        self.select_level((self._level_index + 1) % len(self._levels))

    # ---------- Commands ----------

    def handle(self, command: Command) -> bool:
        """
        Apply one command. Returns True if the state changed; undo/redo on an
        empty stack and rejected moves return False.
        """
        if not apply_command(self.session, command):
            return False
        if command.direction is not None and self.session.at_goal:
            self.levels_beaten += 1
            logger.info("level %d complete (%d beaten)", self._level_index, self.levels_beaten)
            self.next_level()
        return True
