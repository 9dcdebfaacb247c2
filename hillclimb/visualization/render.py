"""
Text rendering of grids for terminal output.
"""

from ..environment import Grid
from ..terrain import elevation_symbol


def render_elevation(grid: Grid) -> str:
    """
    Elevation table, two digits per cell, start/end bracketed.

        [ 0]  0   1  16  15  14  13  12
    """
    lines = []
    for r in range(grid.rows):
        cells = []
        for c in range(grid.cols):
            level = grid.elevation_at((r, c))
            if grid.role_at((r, c)).is_marker:
                cells.append(f"[{level:2}]")
            else:
                cells.append(f" {level:2} ")
        lines.append(''.join(cells))
    return '\n'.join(lines)


def render_costs(grid: Grid, unknown: str = '.') -> str:
    """Cost field from the last search; unreached cells shown as ``unknown``"""
    field = grid.cost_field()
    width = max(len(str(max(int(field.max()), 0))), len(unknown))
    lines = []
    for row in field:
        lines.append(' '.join(
            (unknown if value < 0 else str(int(value))).rjust(width) for value in row
        ))
    return '\n'.join(lines)


def render_heightmap(grid: Grid) -> str:
    """Letter form of the grid, as accepted by the parser"""
    lines = []
    for r in range(grid.rows):
        lines.append(''.join(
            elevation_symbol(grid.elevation_at((r, c)), grid.role_at((r, c)))
            for c in range(grid.cols)
        ))
    return '\n'.join(lines)
