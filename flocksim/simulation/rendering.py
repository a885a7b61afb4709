"""
Drawing helpers shared by the interactive window and video capture.
"""

import pygame

from ..core.boid import Boid, FlockState
from ..core.config import SimulationConfig
from ..core.simulator import FlockSimulator


def draw_boid(surface, boid: Boid, config: SimulationConfig) -> None:
    """
    Draw a boid as a filled circle with a heading line.

    Args:
        surface: Pygame surface to draw on
        boid: Boid to draw
        config: Colors and sizes
    """
    center = (int(boid.position.x), int(boid.position.y))
    pygame.draw.circle(surface, config.boidColor, center, config.boidRadius)

    direction = boid.direction
    if direction.length() > 0:
        end_pos = boid.position + direction * config.headingLength
        pygame.draw.line(surface, config.headingColor, boid.position, end_pos, 3)


def separation_label(close: pygame.Vector2) -> str:
    """Debug text for a separation vector."""
    return f"close: ({close.x:.1f}, {close.y:.1f})"


def draw_debug_overlay(surface, state: FlockState, simulator: FlockSimulator,
                       config: SimulationConfig, font=None) -> None:
    """
    Draw each boid's protected and visible ranges and its separation vector.

    Args:
        surface: Pygame surface to draw on
        state: Flock to visualize
        simulator: Simulator whose neighbor exclusion is used
        config: Colors
        font: Pygame font for the separation label, no label if None
    """
    params = state.params
    boids = state.boids

    for index, boid in enumerate(boids):
        center = (int(boid.position.x), int(boid.position.y))
        pygame.draw.circle(surface, config.protectedColor, center,
                           max(1, int(params.protected_range)), 2)
        pygame.draw.circle(surface, config.visibleColor, center,
                           max(1, int(params.visible_range)), 2)

        close = simulator.separation_vector(index, boid, boids, params)
        if close.length() > 0:
            pygame.draw.line(surface, config.separationColor,
                             boid.position, boid.position + close, 4)

        if font is not None:
            label = font.render(separation_label(close), True, config.panelColor)
            surface.blit(label, (int(boid.position.x), int(boid.position.y) - 20))


def draw_flock(surface, state: FlockState, config: SimulationConfig,
               simulator: FlockSimulator = None, debug: bool = False,
               font=None) -> None:
    """Clear the surface and draw every boid."""
    surface.fill(config.backgroundColor)

    if debug and simulator is not None:
        draw_debug_overlay(surface, state, simulator, config, font)

    for boid in state.boids:
        draw_boid(surface, boid, config)
