"""
Core module containing configuration, the boid/flock data model and the
flocking update.
"""

from .config import (
    FlockParameters, SimulationConfig, DEFAULT_CONFIG, DEFAULT_PARAMETERS,
    PARAMETER_RANGES, PARAMETER_LABELS,
)
from .boid import Boid, FlockState
from .simulator import FlockSimulator

__all__ = [
    'FlockParameters', 'SimulationConfig', 'DEFAULT_CONFIG', 'DEFAULT_PARAMETERS',
    'PARAMETER_RANGES', 'PARAMETER_LABELS', 'Boid', 'FlockState', 'FlockSimulator',
]
