"""
Boid entity and the flock state container.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

import pygame

from .config import FlockParameters


@dataclass
class Boid:
    """A single flock member with a position and a velocity (units per second)."""

    position: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(0, 0))
    velocity: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(0, 0))

    @property
    def heading(self) -> float:
        """Heading in degrees, 0 for a stationary boid."""
        if self.velocity.length() == 0:
            return 0.0
        return self.velocity.as_polar()[1]

    @property
    def direction(self) -> pygame.Vector2:
        """Unit velocity, or a zero vector for a stationary boid."""
        if self.velocity.length() == 0:
            return pygame.Vector2(0, 0)
        return self.velocity.normalize()

    def copy(self) -> "Boid":
        return Boid(self.position.copy(), self.velocity.copy())

    def __repr__(self) -> str:
        return (f"Boid(position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"velocity=({self.velocity.x:.2f}, {self.velocity.y:.2f}))")


@dataclass
class FlockState:
    """
    The ordered boid population plus the parameters and bounds it lives in.

    Owned by the frame loop; the simulator mutates it in place once per tick.
    """

    boids: List[Boid] = field(default_factory=list)
    params: FlockParameters = field(default_factory=FlockParameters)
    width: float = 800.0
    height: float = 600.0

    @classmethod
    def populate(cls, count: int, width: float, height: float,
                 params: Optional[FlockParameters] = None,
                 rng: Optional[random.Random] = None,
                 inset: float = 10.0) -> "FlockState":
        """
        Build a randomized starting flock.

        Args:
            count: Number of boids
            width: Width of the simulation area
            height: Height of the simulation area
            params: Flock parameters (defaults if None)
            rng: Random source (module-level random if None)
            inset: Distance from each edge kept free of boids

        Returns:
            New flock state
        """
        if count < 0:
            raise ValueError(f"boid count must be non-negative, got {count}")

        params = params if params is not None else FlockParameters()
        rng = rng if rng is not None else random

        boids = []
        for _ in range(count):
            position = pygame.Vector2(
                rng.uniform(inset, width - inset),
                rng.uniform(inset, height - inset),
            )
            velocity = pygame.Vector2(
                rng.uniform(-params.min_speed, params.max_speed),
                rng.uniform(-params.min_speed, params.max_speed),
            )
            boids.append(Boid(position, velocity))

        return cls(boids=boids, params=params, width=width, height=height)

    def snapshot(self) -> List[Boid]:
        """Independent copy of every boid, for read-only consumers."""
        return [boid.copy() for boid in self.boids]

    def __len__(self) -> int:
        return len(self.boids)
