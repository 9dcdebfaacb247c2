"""
Terrain Module
==============

Cell roles, heightmap parsing, and procedural heightmap generation.
"""

from .types import (
    CellRole,
    MIN_ELEVATION,
    MAX_ELEVATION,
    SYMBOL_ELEVATION,
    elevation_symbol,
)
from .parser import HeightMap, MalformedInputError, parse_heightmap, load_heightmap
from .generator import HeightmapGenerator, uniform_heightmap

__all__ = [
    'CellRole',
    'MIN_ELEVATION',
    'MAX_ELEVATION',
    'SYMBOL_ELEVATION',
    'elevation_symbol',
    'HeightMap',
    'MalformedInputError',
    'parse_heightmap',
    'load_heightmap',
    'HeightmapGenerator',
    'uniform_heightmap',
]
