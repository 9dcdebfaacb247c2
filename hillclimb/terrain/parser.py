"""
Heightmap Parser Module
=======================

Turns the textual heightmap (one character per cell) into elevation
and role data.

    Sabqponm
    abcryxxl
    accszExk

Lowercase letters are elevations 0-25, ``S`` marks the start (elevation 0)
and ``E`` the end (elevation 25).
"""

import numpy as np
from pathlib import Path
from typing import Iterable, List, Tuple, Union
from dataclasses import dataclass

from .types import CellRole, SYMBOL_ELEVATION, START_SYMBOL, END_SYMBOL, elevation_symbol

Coord = Tuple[int, int]


class MalformedInputError(ValueError):
    """Heightmap text that cannot be turned into a grid"""


@dataclass
class HeightMap:
    """Container for parsed or generated heightmap data"""
    elevation: np.ndarray  # (rows, cols) int
    start: Coord
    end: Coord

    @property
    def shape(self) -> Tuple[int, int]:
        return self.elevation.shape

    def to_grid(self, max_climb: int = 1):
        """Build a search grid from this heightmap"""
        from ..environment import Grid
        return Grid(self.elevation, self.start, self.end, max_climb=max_climb)

    def to_text(self) -> str:
        """Write the heightmap back out in letter form"""
        lines = []
        for r, row in enumerate(self.elevation):
            chars = []
            for c, level in enumerate(row):
                role = CellRole.NORMAL
                if (r, c) == self.start:
                    role = CellRole.START
                elif (r, c) == self.end:
                    role = CellRole.END
                chars.append(elevation_symbol(int(level), role))
            lines.append(''.join(chars))
        return '\n'.join(lines) + '\n'


def _split_lines(source: Union[str, Iterable[str]]) -> List[str]:
    if isinstance(source, str):
        raw = source.splitlines()
    else:
        raw = [line.rstrip('\r\n') for line in source]

    lines = [line.strip() for line in raw]
    # Trailing blank lines come from files ending in newlines
    while lines and not lines[-1]:
        lines.pop()
    while lines and not lines[0]:
        lines.pop(0)
    return lines


def parse_heightmap(source: Union[str, Iterable[str]]) -> HeightMap:
    """
    Parse a textual heightmap.

    Args:
        source: Whole text, or an iterable of lines (e.g. an open file)

    Returns:
        HeightMap with elevation array and start/end coordinates

    Raises:
        MalformedInputError: empty or ragged input, unknown symbols,
            missing or repeated start/end markers
    """
    lines = _split_lines(source)
    if not lines:
        raise MalformedInputError("Heightmap is empty")

    width = len(lines[0])
    elevation = np.zeros((len(lines), width), dtype=np.int16)
    starts: List[Coord] = []
    ends: List[Coord] = []

    for r, line in enumerate(lines):
        if len(line) != width:
            raise MalformedInputError(
                f"Row {r} has {len(line)} cells, expected {width}"
            )
        for c, symbol in enumerate(line):
            level = SYMBOL_ELEVATION.get(symbol)
            if level is None:
                raise MalformedInputError(
                    f"Invalid elevation {symbol!r} at row {r}, column {c}"
                )
            elevation[r, c] = level
            role = CellRole.from_symbol(symbol)
            if role == CellRole.START:
                starts.append((r, c))
            elif role == CellRole.END:
                ends.append((r, c))

    for symbol, found in ((START_SYMBOL, starts), (END_SYMBOL, ends)):
        if not found:
            raise MalformedInputError(f"No {symbol!r} marker in heightmap")
        if len(found) > 1:
            raise MalformedInputError(
                f"Expected one {symbol!r} marker, found {len(found)} at {found}"
            )

    return HeightMap(elevation=elevation, start=starts[0], end=ends[0])


def load_heightmap(path: Union[str, Path]) -> HeightMap:
    """Read and parse a heightmap file"""
    with open(path, 'r') as f:
        return parse_heightmap(f)
