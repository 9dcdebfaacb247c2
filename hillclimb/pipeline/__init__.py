"""
Pipeline Module
===============

Runs the searches over single grids and generated suites.
"""

from .runner import PuzzleRunner, RunReport, SuiteSummary, save_report

__all__ = ['PuzzleRunner', 'RunReport', 'SuiteSummary', 'save_report']
