"""
Grid Plotting Module
====================

Matplotlib figures of the elevation field and the cost field left by
the last search.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional

from ..config import VisualizationConfig
from ..environment import Grid


class GridVisualizer:
    """
    Static grid visualization.

    Rows run top to bottom, matching the text heightmap.
    """

    def __init__(self, grid: Grid, config: Optional[VisualizationConfig] = None):
        """
        Initialize visualizer.

        Args:
            grid: Grid to draw
            config: Visualization configuration
        """
        self.grid = grid
        self.config = config or VisualizationConfig()

    def plot_elevation(self, ax=None, show_lowest: bool = False) -> plt.Axes:
        """
        Plot elevation field.

        Args:
            ax: Matplotlib axes (creates new if None)
            show_lowest: Mark every cell at elevation 0

        Returns:
            Matplotlib axes
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=self.config.figure_size)

        im = ax.imshow(self.grid.elevation, cmap=self.config.elevation_cmap,
                       origin='upper', interpolation='nearest')
        plt.colorbar(im, ax=ax, label='Elevation')

        if show_lowest:
            lowest = np.array(self.grid.lowest_cells())
            if len(lowest):
                ax.scatter(lowest[:, 1], lowest[:, 0], s=6,
                           c=self.config.marker_colors['lowest'],
                           alpha=0.6, label='Lowest')

        self._plot_markers(ax)
        ax.set_title('Elevation')
        return ax

    def plot_costs(self, ax=None) -> plt.Axes:
        """Plot cost field; unreached cells are left blank"""
        if ax is None:
            fig, ax = plt.subplots(figsize=self.config.figure_size)

        field = self.grid.cost_field()
        masked = np.ma.masked_less(field, 0)
        im = ax.imshow(masked, cmap=self.config.cost_cmap,
                       origin='upper', interpolation='nearest')
        plt.colorbar(im, ax=ax, label='Steps')

        self._plot_markers(ax)
        ax.set_title('Steps from source')
        return ax

    def _plot_markers(self, ax):
        colors = self.config.marker_colors
        sr, sc = self.grid.start
        er, ec = self.grid.end
        ax.plot(sc, sr, 'o', color=colors['start'], markersize=10,
                markeredgecolor='black', label='Start')
        ax.plot(ec, er, '*', color=colors['end'], markersize=14,
                markeredgecolor='black', label='End')
        ax.set_xlabel('Column')
        ax.set_ylabel('Row')
        ax.legend(loc='upper right')

    def create_figure(self, title: str = 'Hill climb') -> plt.Figure:
        """Elevation and cost side by side"""
        fig, (ax_elev, ax_cost) = plt.subplots(1, 2, figsize=self.config.figure_size)
        self.plot_elevation(ax_elev, show_lowest=True)
        self.plot_costs(ax_cost)
        fig.suptitle(title, fontsize=14, fontweight='bold')
        return fig

    def save_figure(self, fig: plt.Figure, filename: str, dpi: int = None):
        """Save figure to file"""
        fig.savefig(filename, dpi=dpi or self.config.dpi,
                    bbox_inches='tight', facecolor='white')
