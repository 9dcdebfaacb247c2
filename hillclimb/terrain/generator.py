"""
Heightmap Generator Module
==========================

Procedural generation of synthetic heightmaps for benchmarks and tests.
Only generates elevation data and marker positions.
"""

import numpy as np
from scipy.ndimage import gaussian_filter
from typing import List, Optional

from .types import MIN_ELEVATION, MAX_ELEVATION
from .parser import HeightMap, Coord
from ..config import GeneratorConfig

# One cell per level from the valley floor up to the end marker
RAMP_LENGTH = MAX_ELEVATION - MIN_ELEVATION + 1


def snake_order(rows: int, cols: int) -> List[Coord]:
    """Boustrophedon walk over the grid; consecutive cells are adjacent"""
    order = []
    for r in range(rows):
        cols_in_row = range(cols) if r % 2 == 0 else range(cols - 1, -1, -1)
        order.extend((r, c) for c in cols_in_row)
    return order


class HeightmapGenerator:
    """
    Procedural heightmap generator.

    Creates rolling terrain with:
    - Smoothed random noise (gaussian filter) up to ``max_elevation``
    - A flat valley floor at elevation 0
    - A ramp climbing one level per cell from the floor to the end marker
    - Start on a random valley cell, end on a background summit cell

    The ramp keeps the end reachable from the lowest cells whatever
    ``max_elevation`` is.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None, seed: Optional[int] = None):
        self.config = config or GeneratorConfig()
        self.config.validate()
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def generate(self) -> HeightMap:
        """Generate elevation field and place start/end markers"""
        elevation = self._generate_elevation()
        end = self._pick_summit(elevation)
        end = self._carve_ramp(elevation, end)
        start = self._pick_start(elevation)
        return HeightMap(elevation=elevation, start=start, end=end)

    def _generate_elevation(self) -> np.ndarray:
        """Smoothed noise quantised to 0..max_elevation"""
        shape = (self.config.rows, self.config.cols)
        noise = self.rng.random(shape)
        smooth = gaussian_filter(noise, sigma=self.config.smoothing_sigma, mode='reflect')

        lo, hi = smooth.min(), smooth.max()
        if hi - lo < 1e-12:
            return np.zeros(shape, dtype=np.int16)
        normalized = (smooth - lo) / (hi - lo)

        # Flatten the bottom of the range into a valley floor
        valley = self.config.valley_fraction
        if valley > 0:
            normalized = np.clip((normalized - valley) / (1.0 - valley), 0.0, 1.0)

        return np.rint(normalized * self.config.max_elevation).astype(np.int16)

    def _pick_summit(self, elevation: np.ndarray) -> Coord:
        highest = np.argwhere(elevation == elevation.max())
        return tuple(int(v) for v in highest[self.rng.integers(len(highest))])

    def _carve_ramp(self, elevation: np.ndarray, end: Coord) -> Coord:
        """
        Overwrite RAMP_LENGTH consecutive snake cells with 0, 1, ..., 25,
        ending on ``end``. Moves the end when no such run fits around it.

        Returns:
            End coordinate actually used
        """
        order = snake_order(*elevation.shape)
        k = order.index(end)

        if k >= RAMP_LENGTH - 1:
            ramp = order[k - RAMP_LENGTH + 1:k + 1]
        elif k + RAMP_LENGTH <= len(order):
            ramp = order[k:k + RAMP_LENGTH][::-1]
        else:
            ramp = order[:RAMP_LENGTH]

        for level, cell in enumerate(ramp, start=MIN_ELEVATION):
            elevation[cell] = level
        return ramp[-1]

    def _pick_start(self, elevation: np.ndarray) -> Coord:
        lowest = np.argwhere(elevation == MIN_ELEVATION)
        return tuple(int(v) for v in lowest[self.rng.integers(len(lowest))])


def uniform_heightmap(rows: int, cols: int, level: int = 0,
                      start: Coord = (0, 0),
                      end: Optional[Coord] = None) -> HeightMap:
    """
    Flat heightmap with arbitrary start/end placement.

    Marker cells keep ``level`` instead of the usual 0/25 so the whole
    field is uniform.
    """
    if end is None:
        end = (rows - 1, cols - 1)
    elevation = np.full((rows, cols), level, dtype=np.int16)
    return HeightMap(elevation=elevation, start=start, end=end)
