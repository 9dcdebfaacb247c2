"""
Terrain Types Module
====================

Cell roles and the elevation symbol alphabet.
"""

import string
from enum import IntEnum
from typing import Dict

MIN_ELEVATION = 0
MAX_ELEVATION = 25

START_SYMBOL = 'S'
END_SYMBOL = 'E'


class CellRole(IntEnum):
    """
    Role of a grid cell.

    Values are integers for efficient numpy array storage.
    """
    NORMAL = 0
    START = 1
    END = 2

    @classmethod
    def from_symbol(cls, symbol: str) -> 'CellRole':
        """Get role from a heightmap symbol"""
        if symbol == START_SYMBOL:
            return cls.START
        if symbol == END_SYMBOL:
            return cls.END
        return cls.NORMAL

    @property
    def is_marker(self) -> bool:
        """Start and End are markers, everything else is plain terrain"""
        return self != CellRole.NORMAL


# a..z -> 0..25; S sits at the bottom, E at the top
SYMBOL_ELEVATION: Dict[str, int] = {
    letter: i for i, letter in enumerate(string.ascii_lowercase)
}
SYMBOL_ELEVATION[START_SYMBOL] = MIN_ELEVATION
SYMBOL_ELEVATION[END_SYMBOL] = MAX_ELEVATION


def elevation_symbol(elevation: int, role: CellRole = CellRole.NORMAL) -> str:
    """Inverse of SYMBOL_ELEVATION, used when writing heightmaps back out"""
    if role == CellRole.START:
        return START_SYMBOL
    if role == CellRole.END:
        return END_SYMBOL
    if not MIN_ELEVATION <= elevation <= MAX_ELEVATION:
        raise ValueError(f"Elevation {elevation} outside {MIN_ELEVATION}..{MAX_ELEVATION}")
    return string.ascii_lowercase[elevation]
