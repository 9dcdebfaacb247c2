"""
Visualization Module
====================

Terminal rendering and matplotlib plots of grids and cost fields.
"""

from .render import render_elevation, render_costs, render_heightmap
from .plot import GridVisualizer

__all__ = [
    'render_elevation',
    'render_costs',
    'render_heightmap',
    'GridVisualizer',
]
