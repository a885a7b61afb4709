"""
Configuration classes and defaults for the flocking simulation.
"""

from dataclasses import dataclass, field, asdict, fields
from typing import Dict, List, Optional, Tuple, Literal


@dataclass
class FlockParameters:
    """Tunable flocking parameters, read by the simulator every tick."""

    # Speed limits
    min_speed: float = 20.0
    max_speed: float = 80.0

    # Neighbor ranges
    protected_range: float = 10.0
    visible_range: float = 20.0

    # Rule gains
    avoid_factor: float = 2.0
    matching_factor: float = 0.05
    centering_factor: float = 0.0005

    # Edge steering
    turn_factor: float = 2.0
    margin: float = 50.0

    def to_dict(self) -> dict:
        """Convert parameters to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "FlockParameters":
        """Create parameters from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


# Slider bounds used by the tuning panel, in display order
PARAMETER_RANGES: Dict[str, Tuple[float, float]] = {
    "min_speed": (0.01, 200.0),
    "max_speed": (0.01, 200.0),
    "protected_range": (1.0, 100.0),
    "visible_range": (0.01, 100.0),
    "avoid_factor": (0.01, 20.0),
    "matching_factor": (0.01, 0.1),
    "centering_factor": (0.00001, 0.0001),
    "margin": (10.0, 50.0),
    "turn_factor": (0.2, 10.0),
}

PARAMETER_LABELS: Dict[str, str] = {
    "min_speed": "min speed",
    "max_speed": "max speed",
    "protected_range": "protected range",
    "visible_range": "visible range",
    "avoid_factor": "avoid factor",
    "matching_factor": "matching factor",
    "centering_factor": "centering factor",
    "margin": "margin",
    "turn_factor": "turn factor",
}


@dataclass
class SimulationConfig:
    """Configuration for the window, population and output files."""

    # Screen settings
    screenWidth: int = 800
    screenHeight: int = 600

    # Population
    boidCount: int = 600
    spawnMargin: float = 10.0
    seed: Optional[int] = None

    # Neighbor exclusion: "position" (exact position match) or "identity"
    neighborExclusion: Literal["position", "identity"] = "position"

    # Visualization
    fpsTarget: int = 60
    debugMode: bool = False
    boidRadius: int = 6
    headingLength: int = 15
    backgroundColor: List[int] = field(default_factory=lambda: [0, 0, 0])
    boidColor: List[int] = field(default_factory=lambda: [0, 228, 48])
    headingColor: List[int] = field(default_factory=lambda: [253, 249, 0])
    protectedColor: List[int] = field(default_factory=lambda: [0, 228, 48])
    visibleColor: List[int] = field(default_factory=lambda: [253, 249, 0])
    separationColor: List[int] = field(default_factory=lambda: [230, 41, 55])
    panelColor: List[int] = field(default_factory=lambda: [200, 200, 200])
    panelHighlightColor: List[int] = field(default_factory=lambda: [255, 255, 255])

    # Statistics sampling (ticks)
    statsInterval: int = 10

    # Output
    resultsCsvFile: str = "flock_trials.csv"
    timeseriesCsvFile: str = "flock_timeseries.csv"
    reportFile: str = "flock_report.json"
    plotFile: str = "flock_exclusion_comparison.png"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()

DEFAULT_PARAMETERS = FlockParameters()

NEIGHBOR_EXCLUSION_MODES = ("position", "identity")
