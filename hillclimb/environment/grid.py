"""
Elevation Grid Module
=====================

Grid representing the elevation field and the per-cell search costs.
"""

import numpy as np
from typing import Tuple, List, Optional

from ..terrain import CellRole, MIN_ELEVATION, MAX_ELEVATION

Coord = Tuple[int, int]

# Cost value for cells not reached yet
UNKNOWN_COST = -1

# Up, left, down, right
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


class BoundsError(IndexError):
    """Coordinate outside the grid"""


class Grid:
    """
    Rectangular elevation field with a mutable cost layer.

    Contains:
    - Elevation map (read-only once constructed)
    - Cost map (best-known step count per cell)
    - Start and end positions

    Provides:
    - Bounds-checked elevation and cost access
    - Neighbor queries filtered by the climb rule
    """

    def __init__(self, elevation: np.ndarray, start: Coord, end: Coord,
                 max_climb: int = 1):
        """
        Initialize grid.

        Args:
            elevation: (rows, cols) integer elevations
            start: Start cell (row, col)
            end: End cell (row, col)
            max_climb: Largest ascent allowed in one move
        """
        elevation = np.array(elevation, dtype=np.int16, copy=True)
        if elevation.ndim != 2 or elevation.size == 0:
            raise ValueError(f"Elevation must be a non-empty 2-D array, got shape {elevation.shape}")
        if elevation.min() < MIN_ELEVATION or elevation.max() > MAX_ELEVATION:
            raise ValueError(
                f"Elevations must be in {MIN_ELEVATION}..{MAX_ELEVATION}, "
                f"got {int(elevation.min())}..{int(elevation.max())}"
            )
        if max_climb < 0:
            raise ValueError(f"max_climb must be non-negative, got {max_climb}")

        elevation.setflags(write=False)
        self._elevation = elevation
        self._cost = np.full(elevation.shape, UNKNOWN_COST, dtype=np.int64)
        self.max_climb = max_climb

        self.start = self._check(tuple(start))
        self.end = self._check(tuple(end))

    # ==================== Property Access ====================

    @property
    def elevation(self) -> np.ndarray:
        """Elevation map (read-only view)"""
        return self._elevation

    @property
    def shape(self) -> Tuple[int, int]:
        return self._elevation.shape

    @property
    def rows(self) -> int:
        return self._elevation.shape[0]

    @property
    def cols(self) -> int:
        return self._elevation.shape[1]

    # ==================== Cell Queries ====================

    def in_bounds(self, coord: Coord) -> bool:
        """Check if cell is within grid bounds"""
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check(self, coord: Coord) -> Coord:
        if not self.in_bounds(coord):
            raise BoundsError(f"{coord} outside {self.rows}x{self.cols} grid")
        return coord

    def elevation_at(self, coord: Coord) -> int:
        """Get elevation at cell"""
        r, c = self._check(coord)
        return int(self._elevation[r, c])

    def role_at(self, coord: Coord) -> CellRole:
        """Get start/end/normal role of cell"""
        self._check(coord)
        if coord == self.start:
            return CellRole.START
        if coord == self.end:
            return CellRole.END
        return CellRole.NORMAL

    def neighbors(self, coord: Coord) -> List[Coord]:
        """
        Orthogonal neighbors reachable in one move.

        A move may descend any amount but climb at most ``max_climb``.
        """
        r, c = coord
        ceiling = self.elevation_at(coord) + self.max_climb
        result = []
        for dr, dc in _STEPS:
            rr, cc = r + dr, c + dc
            if 0 <= rr < self.rows and 0 <= cc < self.cols \
                    and self._elevation[rr, cc] <= ceiling:
                result.append((rr, cc))
        return result

    def cells_at_elevation(self, level: int) -> List[Coord]:
        """All cells with the given elevation, row-major"""
        return [(int(r), int(c)) for r, c in np.argwhere(self._elevation == level)]

    def lowest_cells(self, level: int = MIN_ELEVATION) -> List[Coord]:
        """Cells at the minimum elevation (start included)"""
        return self.cells_at_elevation(level)

    def distance_to_end(self, coord: Coord) -> int:
        """Manhattan distance to the end cell; lower bound on any path"""
        r, c = self._check(coord)
        return abs(self.end[0] - r) + abs(self.end[1] - c)

    # ==================== Cost Layer ====================

    def reset_costs(self):
        """Mark every cell as not reached"""
        self._cost.fill(UNKNOWN_COST)

    def cost_at(self, coord: Coord) -> Optional[int]:
        """Best-known cost at cell, or None if not reached"""
        r, c = self._check(coord)
        value = self._cost[r, c]
        return None if value == UNKNOWN_COST else int(value)

    def set_cost(self, coord: Coord, value: int):
        """Record best-known cost at cell"""
        if value < 0:
            raise ValueError(f"Cost must be non-negative, got {value}")
        r, c = self._check(coord)
        self._cost[r, c] = value

    def cost_field(self) -> np.ndarray:
        """Copy of the cost map, unknown cells as -1"""
        return self._cost.copy()

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, start={self.start}, end={self.end})"
