"""Common type aliases and enumerations."""

from enum import StrEnum, auto


class CellState(StrEnum):
    """Tri-state view of a plane entry.

    ``UNTOUCHED`` means the coordinate has no entry, ``ALIVE`` and ``DEAD``
    mirror a stored ``True`` / ``False``.
    """

    UNTOUCHED = auto()
    ALIVE = auto()
    DEAD = auto()
