"""
Configuration Settings Module
==============================

Dataclass-based configuration with validation and defaults.
Only handles configuration; no search logic lives here.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any, Tuple


@dataclass
class SearchConfig:
    """Search engine parameters"""
    max_climb: int = 1  # elevation units a single move may ascend
    lowest_elevation: int = 0  # source level for the multi-source policy

    # Keep (coord, cost) of every finalised cell in SearchStats
    record_expansion_order: bool = False

    def __post_init__(self):
        if self.max_climb < 0:
            raise ValueError(f"max_climb must be non-negative, got {self.max_climb}")


@dataclass
class GeneratorConfig:
    """Synthetic heightmap generation parameters"""
    rows: int = 41
    cols: int = 80

    # Top of the background terrain; the end ramp always climbs to 25
    max_elevation: int = 25

    # Gaussian smoothing of the raw noise (cells)
    smoothing_sigma: float = 4.0

    # Fraction of the range kept as flat valley floor at elevation 0
    valley_fraction: float = 0.15

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Check ranges; also called by the generator for configs edited in place"""
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"rows and cols must be positive, got {self.rows}x{self.cols}")
        # Room for one ramp cell per level a..z
        if self.rows * self.cols < 26:
            raise ValueError(f"Heightmap needs at least 26 cells, got {self.rows * self.cols}")
        if not 0 <= self.max_elevation <= 25:
            raise ValueError(f"max_elevation must be in 0..25, got {self.max_elevation}")
        if self.smoothing_sigma < 0:
            raise ValueError(f"smoothing_sigma must be non-negative, got {self.smoothing_sigma}")
        if not 0 <= self.valley_fraction < 1:
            raise ValueError(f"valley_fraction must be in [0, 1), got {self.valley_fraction}")


@dataclass
class VisualizationConfig:
    """Plotting configuration"""
    elevation_cmap: str = 'terrain'
    cost_cmap: str = 'viridis'
    figure_size: Tuple[int, int] = (12, 5)
    dpi: int = 100

    marker_colors: Dict[str, str] = field(default_factory=lambda: {
        'start': 'lime',
        'end': 'red',
        'lowest': 'white',
    })


@dataclass
class Config:
    """
    Master configuration class combining all sub-configurations.

    Usage:
        config = Config()
        config = Config(search=SearchConfig(record_expansion_order=True))
    """
    search: SearchConfig = field(default_factory=SearchConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    # Global settings
    random_seed: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary"""
        config = cls()
        sections = {
            'search': SearchConfig,
            'generator': GeneratorConfig,
            'visualization': VisualizationConfig,
        }
        for key, value in d.items():
            if key in sections and isinstance(value, dict):
                setattr(config, key, sections[key](**value))
            elif hasattr(config, key):
                setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Export config to dictionary"""
        from dataclasses import asdict
        return asdict(self)
