"""Tests for the boid entity and the initial flock population."""

import random

import pygame
import pytest

from flocksim.core.boid import Boid, FlockState
from flocksim.core.config import FlockParameters


class TestBoid:
    """Derived rendering values."""

    def test_heading_in_degrees(self):
        boid = Boid(pygame.Vector2(0, 0), pygame.Vector2(0, 10))
        assert boid.heading == pytest.approx(90.0)

    def test_direction_is_unit_velocity(self):
        boid = Boid(pygame.Vector2(0, 0), pygame.Vector2(3, 4))
        assert (boid.direction.x, boid.direction.y) == pytest.approx((0.6, 0.8))

    def test_stationary_boid_has_no_direction(self):
        boid = Boid(pygame.Vector2(5, 5), pygame.Vector2(0, 0))
        assert boid.heading == 0.0
        assert (boid.direction.x, boid.direction.y) == (0.0, 0.0)

    def test_copy_is_independent(self):
        boid = Boid(pygame.Vector2(1, 2), pygame.Vector2(3, 4))
        clone = boid.copy()
        clone.velocity.x = 99
        clone.position += pygame.Vector2(1, 1)
        assert boid.velocity.x == 3
        assert (boid.position.x, boid.position.y) == (1, 2)

    def test_repr_shows_position_and_velocity(self):
        boid = Boid(pygame.Vector2(1.5, 2), pygame.Vector2(3, 4.25))
        assert repr(boid) == "Boid(position=(1.50, 2.00), velocity=(3.00, 4.25))"


class TestPopulate:
    """Initial randomized flock."""

    def test_positions_are_inset(self):
        state = FlockState.populate(200, 800, 600, rng=random.Random(0))
        assert len(state) == 200
        for boid in state.boids:
            assert 10 <= boid.position.x <= 790
            assert 10 <= boid.position.y <= 590

    def test_velocities_use_initial_range(self):
        params = FlockParameters(min_speed=20.0, max_speed=80.0)
        state = FlockState.populate(200, 800, 600, params, rng=random.Random(0))
        for boid in state.boids:
            assert -20 <= boid.velocity.x <= 80
            assert -20 <= boid.velocity.y <= 80

    def test_keeps_bounds_and_parameters(self):
        params = FlockParameters(margin=25.0)
        state = FlockState.populate(3, 320, 240, params, rng=random.Random(1))
        assert state.params is params
        assert (state.width, state.height) == (320, 240)

    def test_same_seed_same_flock(self):
        a = FlockState.populate(10, 800, 600, rng=random.Random(4))
        b = FlockState.populate(10, 800, 600, rng=random.Random(4))
        assert [tuple(x.position) for x in a.boids] == [tuple(x.position) for x in b.boids]

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            FlockState.populate(-1, 800, 600)

    def test_snapshot_is_detached(self):
        state = FlockState.populate(2, 800, 600, rng=random.Random(2))
        snapshot = state.snapshot()
        snapshot[0].position.x = -1000
        assert state.boids[0].position.x != -1000
