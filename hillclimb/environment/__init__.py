"""
Environment Module
==================

Grid representation of the elevation field and search costs.
"""

from .grid import Grid, BoundsError, Coord, UNKNOWN_COST

__all__ = [
    'Grid',
    'BoundsError',
    'Coord',
    'UNKNOWN_COST',
]
