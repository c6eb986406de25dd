class InvalidLevel(ValueError):
    """Raised when a level definition cannot be played safely (bad shape, open border, bad start)."""


class CellOutOfBounds(IndexError):
    """Raised on a grid query outside the level. Only a malformed level can trigger it."""
