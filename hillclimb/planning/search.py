"""
Elevation Search Module
=======================

Uniform-cost (Dijkstra) search for the fewest moves to the end cell,
where a move may climb at most one elevation unit.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

from .frontier import Frontier
from ..config import Config
from ..environment import Grid, Coord


class SourcePolicy(Enum):
    """Where a search is seeded from"""
    START = 'start'    # the start marker only
    LOWEST = 'lowest'  # every cell at the lowest elevation, start included


class SearchOutcome(Enum):
    FOUND = 'found'
    NOT_FOUND = 'not_found'


@dataclass
class SearchStats:
    """Statistics from a search run"""
    pops: int = 0
    stale_pops: int = 0
    pushes: int = 0
    finalized: int = 0
    expansion_order: List[Tuple[Coord, int]] = field(default_factory=list)


@dataclass
class SearchResult:
    """
    Outcome of a search.

    ``cost`` is the step count when the end was reached and None otherwise,
    so an unreachable end never looks like a zero-length path.
    """
    outcome: SearchOutcome
    cost: Optional[int] = None
    policy: Optional[SourcePolicy] = None
    num_sources: int = 0
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.outcome == SearchOutcome.FOUND


class ElevationSearch:
    """
    Dijkstra search over the implicit 4-connected grid graph.

    Every move costs 1, so a breadth-first sweep would give the same
    answers; the priority queue keeps a single code path for one or many
    sources and a reproducible (cost, row, col) expansion order.
    """

    def __init__(self, grid: Grid, config: Optional[Config] = None):
        """
        Initialize search.

        Args:
            grid: Grid to search; its cost layer is overwritten by each run
            config: Configuration object (uses default if None)
        """
        self.grid = grid
        self.config = config or Config()

        # Last search stats
        self.last_stats: Optional[SearchStats] = None

    def sources(self, policy: SourcePolicy) -> List[Coord]:
        """Source cells for a policy"""
        if policy == SourcePolicy.START:
            return [self.grid.start]
        if policy == SourcePolicy.LOWEST:
            cells = self.grid.lowest_cells(self.config.search.lowest_elevation)
            if self.grid.start not in cells:
                cells.append(self.grid.start)
            return cells
        raise ValueError(f"Unknown source policy: {policy}")

    def search(self, policy: SourcePolicy = SourcePolicy.START) -> SearchResult:
        """Fewest moves to the end cell from the policy's sources"""
        result = self.search_from(self.sources(policy))
        result.policy = policy
        return result

    def search_from(self, sources: Iterable[Coord]) -> SearchResult:
        """
        Fewest moves to the end cell from the nearest of ``sources``.

        Args:
            sources: Cells seeded at cost 0 (duplicates ignored)

        Returns:
            SearchResult with FOUND and the cost, or NOT_FOUND
        """
        grid = self.grid
        record = self.config.search.record_expansion_order
        stats = SearchStats()
        self.last_stats = stats

        grid.reset_costs()
        frontier = Frontier()

        seeds = list(dict.fromkeys(tuple(s) for s in sources))
        for coord in seeds:
            grid.set_cost(coord, 0)
            frontier.push(0, coord)
            stats.pushes += 1

        while True:
            entry = frontier.pop_min()
            if entry is None:
                return SearchResult(SearchOutcome.NOT_FOUND, num_sources=len(seeds), stats=stats)
            stats.pops += 1

            cost, coord = entry
            if cost > grid.cost_at(coord):
                stats.stale_pops += 1
                continue

            stats.finalized += 1
            if record:
                stats.expansion_order.append((coord, cost))

            if coord == grid.end:
                return SearchResult(SearchOutcome.FOUND, cost=cost,
                                    num_sources=len(seeds), stats=stats)

            step = cost + 1
            for neighbor in grid.neighbors(coord):
                known = grid.cost_at(neighbor)
                if known is None or step < known:
                    grid.set_cost(neighbor, step)
                    frontier.push(step, neighbor)
                    stats.pushes += 1


def fewest_steps(grid: Grid,
                 policy: SourcePolicy = SourcePolicy.START,
                 config: Optional[Config] = None) -> Optional[int]:
    """Step count to the end cell, or None if it cannot be reached"""
    return ElevationSearch(grid, config).search(policy).cost


def fewest_steps_from_start(grid: Grid) -> Optional[int]:
    return fewest_steps(grid, SourcePolicy.START)


def fewest_steps_from_lowest(grid: Grid) -> Optional[int]:
    return fewest_steps(grid, SourcePolicy.LOWEST)
