"""
Planning Module
===============

Search frontier and the elevation-constrained shortest-path search.
"""

from .frontier import Frontier, FrontierEntry
from .search import (
    ElevationSearch,
    SearchResult,
    SearchStats,
    SearchOutcome,
    SourcePolicy,
    fewest_steps,
    fewest_steps_from_start,
    fewest_steps_from_lowest,
)

__all__ = [
    'Frontier',
    'FrontierEntry',
    'ElevationSearch',
    'SearchResult',
    'SearchStats',
    'SearchOutcome',
    'SourcePolicy',
    'fewest_steps',
    'fewest_steps_from_start',
    'fewest_steps_from_lowest',
]
