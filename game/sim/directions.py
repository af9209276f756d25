"""
Level entry/exit directions.

The integer values are mixed into level seeds, so never renumber them.
"""

from __future__ import annotations

from enum import IntEnum


class EnterDirection(IntEnum):
    """Edge of the level the player came in through."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    NONE = 4  # root level / not entered through an edge


class ExitDirection(IntEnum):
    """Edge of the level the player leaves through."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    def to_enter_direction(self) -> EnterDirection:
        # Leaving through the north edge means arriving at the south edge of the next level.
        return _OPPOSITE[self]


_OPPOSITE = {
    ExitDirection.NORTH: EnterDirection.SOUTH,
    ExitDirection.SOUTH: EnterDirection.NORTH,
    ExitDirection.EAST: EnterDirection.WEST,
    ExitDirection.WEST: EnterDirection.EAST,
}
