class LevelDecodeError(Exception):
    """Raised when a level file or payload cannot be turned into a Level."""


class LevelEncodeError(Exception):
    """Raised when a Level cannot be serialized."""
