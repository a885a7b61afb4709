"""Pytest configuration - headless pygame/matplotlib and shared fixtures."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import matplotlib

matplotlib.use("Agg")

import pygame
import pytest

from flocksim.core.boid import Boid, FlockState
from flocksim.core.config import FlockParameters


@pytest.fixture
def params():
    """Default flock parameters."""
    return FlockParameters()


@pytest.fixture
def make_state(params):
    """Build an 800x600 flock from (position, velocity) pairs."""

    def _make(*pairs, width=800, height=600, parameters=None):
        boids = [Boid(pygame.Vector2(p), pygame.Vector2(v)) for p, v in pairs]
        return FlockState(boids=boids, params=parameters or params,
                          width=width, height=height)

    return _make
