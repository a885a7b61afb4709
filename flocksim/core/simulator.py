"""
Flocking update: separation, alignment, cohesion, edge steering, speed
clamping and integration.
"""

import random
from typing import List, Optional, Tuple

import pygame

from .boid import Boid, FlockState
from .config import FlockParameters, NEIGHBOR_EXCLUSION_MODES


class FlockSimulator:
    """
    Advances a FlockState by one tick.

    The three steering rules run as three sequential passes over the boid
    list. Each pass reads a copy of the list as left by the previous pass,
    so separation output feeds alignment and alignment output feeds
    cohesion. Neighbor search is a direct pairwise scan, O(n^2) per pass.

    Neighbor exclusion:
    - "position": skip any boid whose position is exactly equal to the
      evaluated boid's position. Two distinct boids stacked on the same
      point ignore each other.
    - "identity": skip only the evaluated boid itself.
    """

    def __init__(self, exclusion: str = "position"):
        if exclusion not in NEIGHBOR_EXCLUSION_MODES:
            raise ValueError(
                f"unknown neighbor exclusion {exclusion!r}, "
                f"expected one of {NEIGHBOR_EXCLUSION_MODES}"
            )
        self.exclusion = exclusion

    def step(self, state: FlockState, elapsed_seconds: float) -> None:
        """
        Advance the flock by one tick in place.

        Args:
            state: Flock to update
            elapsed_seconds: Time since the previous tick
        """
        if elapsed_seconds < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed_seconds}")

        params = state.params
        self.apply_separation(state.boids, params)
        self.apply_alignment(state.boids, params)
        self.apply_cohesion(state.boids, params)
        self.apply_boundary_steering(state)
        for boid in state.boids:
            self.clamp_speed(boid, params)
        self.integrate(state.boids, elapsed_seconds)

    def _is_excluded(self, index: int, boid: Boid, other_index: int, other: Boid) -> bool:
        if self.exclusion == "identity":
            return index == other_index
        # Exact float comparison; pygame's Vector2 equality uses an epsilon
        return (boid.position.x, boid.position.y) == (other.position.x, other.position.y)

    def _neighbors(self, index: int, boid: Boid, snapshot: List[Boid],
                   radius: float) -> List[Boid]:
        """Boids of the snapshot strictly within radius of boid."""
        neighbors = []
        for other_index, other in enumerate(snapshot):
            if self._is_excluded(index, boid, other_index, other):
                continue
            if other.position.distance_to(boid.position) < radius:
                neighbors.append(other)
        return neighbors

    def separation_vector(self, index: int, boid: Boid, snapshot: List[Boid],
                          params: FlockParameters) -> pygame.Vector2:
        """Sum of offsets from every boid inside the protected range."""
        close = pygame.Vector2(0, 0)
        for other in self._neighbors(index, boid, snapshot, params.protected_range):
            close += boid.position - other.position
        return close

    def apply_separation(self, boids: List[Boid], params: FlockParameters) -> None:
        """Steer each boid away from boids inside its protected range."""
        snapshot = [b.copy() for b in boids]
        for index, boid in enumerate(boids):
            close = self.separation_vector(index, snapshot[index], snapshot, params)
            boid.velocity += close * params.avoid_factor

    def apply_alignment(self, boids: List[Boid], params: FlockParameters) -> None:
        """
        Close a fraction of the gap between each boid's velocity and the mean
        velocity of its visible neighbors. Without neighbors the mean is zero.
        """
        snapshot = [b.copy() for b in boids]
        for index, boid in enumerate(boids):
            neighbors = self._neighbors(index, snapshot[index], snapshot, params.visible_range)
            avg_velocity = pygame.Vector2(0, 0)
            for other in neighbors:
                avg_velocity += other.velocity
            if neighbors:
                avg_velocity /= len(neighbors)
            boid.velocity += (avg_velocity - boid.velocity) * params.matching_factor

    def apply_cohesion(self, boids: List[Boid], params: FlockParameters) -> None:
        """
        Close a fraction of the gap between each boid's position and the mean
        position of its visible neighbors. Without neighbors the mean is the
        origin.
        """
        snapshot = [b.copy() for b in boids]
        for index, boid in enumerate(boids):
            neighbors = self._neighbors(index, snapshot[index], snapshot, params.visible_range)
            avg_position = pygame.Vector2(0, 0)
            for other in neighbors:
                avg_position += other.position
            if neighbors:
                avg_position /= len(neighbors)
            boid.velocity += (avg_position - boid.position) * params.centering_factor

    def apply_boundary_steering(self, state: FlockState) -> None:
        """Nudge boids within margin of an edge back toward the interior."""
        margin = state.params.margin
        turn = state.params.turn_factor

        for boid in state.boids:
            if boid.position.x < margin:
                boid.velocity.x += turn
            if boid.position.x > state.width - margin:
                boid.velocity.x -= turn
            if boid.position.y < margin:
                boid.velocity.y += turn
            if boid.position.y > state.height - margin:
                boid.velocity.y -= turn

    @staticmethod
    def clamp_speed(boid: Boid, params: FlockParameters) -> None:
        """
        Rescale a boid whose speed is outside [min_speed, max_speed].

        Known quirk, kept on purpose: the x component is scaled to max_speed
        and the y component to min_speed, in both the over-speed and
        under-speed branches. Both branches test the speed
        measured before any rescaling. A stationary boid is left alone.
        """
        speed = boid.velocity.length()
        if speed == 0:
            return

        if speed > params.max_speed:
            boid.velocity = pygame.Vector2(
                (boid.velocity.x / speed) * params.max_speed,
                (boid.velocity.y / speed) * params.min_speed,
            )
        if speed < params.min_speed:
            boid.velocity = pygame.Vector2(
                (boid.velocity.x / speed) * params.max_speed,
                (boid.velocity.y / speed) * params.min_speed,
            )

    @staticmethod
    def integrate(boids: List[Boid], elapsed_seconds: float) -> None:
        """First-order position update."""
        for boid in boids:
            boid.position += boid.velocity * elapsed_seconds

    @staticmethod
    def spawn(state: FlockState, bounds: Optional[Tuple[float, float]] = None,
              max_speed: Optional[float] = None,
              rng: Optional[random.Random] = None) -> Boid:
        """
        Append one randomized boid to the flock.

        Spawned boids use the whole area (no inset) and a wide non-negative
        velocity range of [0, max_speed * 20) per axis, unlike the initial
        population.

        Args:
            state: Flock to append to
            bounds: (width, height), the state's bounds if None
            max_speed: Speed scale, the state's max_speed if None
            rng: Random source (module-level random if None)

        Returns:
            The new boid
        """
        width, height = bounds if bounds is not None else (state.width, state.height)
        max_speed = max_speed if max_speed is not None else state.params.max_speed
        rng = rng if rng is not None else random

        boid = Boid(
            pygame.Vector2(rng.random() * width, rng.random() * height),
            pygame.Vector2(rng.random() * max_speed * 20, rng.random() * max_speed * 20),
        )
        state.boids.append(boid)
        return boid
