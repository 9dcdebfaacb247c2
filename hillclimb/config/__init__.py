"""
Configuration Module
====================

Centralized configuration management for the hill-climb search.
"""

from .settings import (
    Config,
    SearchConfig,
    GeneratorConfig,
    VisualizationConfig,
)

__all__ = [
    'Config',
    'SearchConfig',
    'GeneratorConfig',
    'VisualizationConfig',
]
