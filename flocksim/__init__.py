"""
Boids flocking simulation: separation, alignment and cohesion from local rules.
"""

__version__ = "0.1.0"
