"""
Pipeline Runner Module
======================

Runs both source policies on a grid and collects the results, either
for a single heightmap or for a suite of generated ones.
"""

import json
import time
import numpy as np
from pathlib import Path
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field, asdict

from ..config import Config
from ..environment import Grid
from ..terrain import HeightMap, HeightmapGenerator
from ..planning import ElevationSearch, SearchResult, SourcePolicy


@dataclass
class RunReport:
    """Results of all policies on one grid"""
    name: str
    shape: List[int]
    start: List[int]
    end: List[int]
    policies: Dict[str, Dict] = field(default_factory=dict)
    runtimes: Dict[str, float] = field(default_factory=dict)

    def cost(self, policy: SourcePolicy) -> Optional[int]:
        """Step count for a policy, None when the end was unreachable"""
        return self.policies[policy.value]['cost']

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class SuiteSummary:
    """Aggregated results over generated heightmaps"""
    num_maps: int = 0
    seeds: List[int] = field(default_factory=list)
    summary: Dict[str, Dict] = field(default_factory=dict)
    reports: List[RunReport] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


def _result_entry(result: SearchResult) -> Dict[str, Any]:
    stats = result.stats
    return {
        'status': result.outcome.value,
        'cost': result.cost,
        'num_sources': result.num_sources,
        'pops': stats.pops,
        'stale_pops': stats.stale_pops,
        'pushes': stats.pushes,
        'finalized': stats.finalized,
    }


class PuzzleRunner:
    """
    Runs the start-only and lowest-cells searches on grids.

    Features:
    - Per-policy timing and search statistics
    - Progress output when verbose
    - JSON export
    """

    POLICIES = [SourcePolicy.START, SourcePolicy.LOWEST]

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize runner.

        Args:
            config: Configuration object (uses default if None)
        """
        self.config = config or Config()

    def build_grid(self, heightmap: HeightMap) -> Grid:
        return heightmap.to_grid(max_climb=self.config.search.max_climb)

    def run(self, grid: Grid, name: str = 'grid',
            verbose: Optional[bool] = None) -> RunReport:
        """
        Run every policy on one grid.

        Args:
            grid: Grid to search (its cost layer is left from the last policy)
            name: Label used in output and reports
            verbose: Print progress (defaults to config.verbose)

        Returns:
            RunReport with per-policy results
        """
        if verbose is None:
            verbose = self.config.verbose

        report = RunReport(
            name=name,
            shape=list(grid.shape),
            start=list(grid.start),
            end=list(grid.end),
        )
        search = ElevationSearch(grid, self.config)

        for policy in self.POLICIES:
            t0 = time.perf_counter()
            result = search.search(policy)
            elapsed = time.perf_counter() - t0

            report.policies[policy.value] = _result_entry(result)
            report.runtimes[policy.value] = elapsed

            if verbose:
                cost = result.cost if result.found else 'unreachable'
                print(f"[{name}] {policy.value}: {result.outcome.value} cost={cost} "
                      f"sources={result.num_sources} pops={result.stats.pops} ({elapsed:.4f}s)")

        return report

    def run_heightmap(self, heightmap: HeightMap, name: str = 'grid',
                      verbose: Optional[bool] = None) -> RunReport:
        return self.run(self.build_grid(heightmap), name=name, verbose=verbose)

    def run_suite(self, num_maps: int = 10, seed_base: int = 42,
                  verbose: Optional[bool] = None) -> SuiteSummary:
        """
        Run every policy on generated heightmaps.

        Args:
            num_maps: Number of heightmaps to generate
            seed_base: Seed of the first map; later maps use seed_base + i
            verbose: Print progress (defaults to config.verbose)

        Returns:
            SuiteSummary with per-policy aggregates and every report
        """
        if verbose is None:
            verbose = self.config.verbose

        suite = SuiteSummary(num_maps=num_maps)
        for i in range(num_maps):
            seed = seed_base + i
            heightmap = HeightmapGenerator(self.config.generator, seed=seed).generate()
            report = self.run_heightmap(heightmap, name=f"seed {seed}", verbose=verbose)
            suite.seeds.append(seed)
            suite.reports.append(report)

        for policy in self.POLICIES:
            key = policy.value
            costs = [r.policies[key]['cost'] for r in suite.reports
                     if r.policies[key]['cost'] is not None]
            runtimes = [r.runtimes[key] for r in suite.reports]
            suite.summary[key] = {
                'found_rate': len(costs) / num_maps if num_maps > 0 else 0,
                'n_found': len(costs),
                'cost_mean': float(np.mean(costs)) if costs else None,
                'cost_min': int(np.min(costs)) if costs else None,
                'cost_max': int(np.max(costs)) if costs else None,
                'runtime_mean_s': float(np.mean(runtimes)) if runtimes else None,
            }

        if verbose:
            self._print_summary(suite)

        return suite

    def _print_summary(self, suite: SuiteSummary):
        """Print summary table"""
        print("\n" + "=" * 60)
        print("SUITE SUMMARY")
        print("=" * 60)
        print(f"Total maps: {suite.num_maps}")
        print(f"{'Policy':<12} {'Found':>8} {'Mean cost':>12} {'Runtime(ms)':>14}")
        print("-" * 60)

        for policy in self.POLICIES:
            s = suite.summary.get(policy.value, {})
            rate = s.get('found_rate', 0) * 100
            cost = s.get('cost_mean')
            runtime = s.get('runtime_mean_s')

            cost_str = f"{cost:.1f}" if cost is not None else "N/A"
            runtime_str = f"{runtime * 1000:.2f}" if runtime is not None else "N/A"

            print(f"{policy.value:<12} {rate:>7.1f}% {cost_str:>12} {runtime_str:>14}")

        print("=" * 60)


def save_report(report: Union[RunReport, SuiteSummary], path: Union[str, Path]) -> Path:
    """Write a report to JSON"""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(report.to_dict(), f, indent=2)
    return output_path
