"""
Simulation module containing the interactive and headless simulation classes.
"""

from .interactive import Simulation
from .headless import HeadlessSimulation
from .panel import TuningPanel

__all__ = ['Simulation', 'HeadlessSimulation', 'TuningPanel']
