"""
Hill Climb Search
=================

Fewest-step search across elevation grids where a move may climb at
most one level but descend any amount.

Key Features:
- Text heightmap parsing (``a``-``z``, ``S`` start, ``E`` end)
- Dijkstra search from the start or from every lowest cell at once
- Synthetic heightmap generation
- Terminal rendering and matplotlib plots of elevation and costs

Version: 1.0.0
"""

__version__ = "1.0.0"

from .config import Config, SearchConfig, GeneratorConfig, VisualizationConfig
from .terrain import (
    CellRole,
    HeightMap,
    MalformedInputError,
    parse_heightmap,
    load_heightmap,
    HeightmapGenerator,
    uniform_heightmap,
)
from .environment import Grid, BoundsError
from .planning import (
    Frontier,
    FrontierEntry,
    ElevationSearch,
    SearchResult,
    SearchStats,
    SearchOutcome,
    SourcePolicy,
    fewest_steps,
    fewest_steps_from_start,
    fewest_steps_from_lowest,
)
from .visualization import render_elevation, render_costs, render_heightmap, GridVisualizer
from .pipeline import PuzzleRunner, RunReport, SuiteSummary, save_report

__all__ = [
    'Config', 'SearchConfig', 'GeneratorConfig', 'VisualizationConfig',
    'CellRole', 'HeightMap', 'MalformedInputError',
    'parse_heightmap', 'load_heightmap',
    'HeightmapGenerator', 'uniform_heightmap',
    'Grid', 'BoundsError',
    'Frontier', 'FrontierEntry',
    'ElevationSearch', 'SearchResult', 'SearchStats', 'SearchOutcome', 'SourcePolicy',
    'fewest_steps', 'fewest_steps_from_start', 'fewest_steps_from_lowest',
    'render_elevation', 'render_costs', 'render_heightmap', 'GridVisualizer',
    'PuzzleRunner', 'RunReport', 'SuiteSummary', 'save_report',
]
