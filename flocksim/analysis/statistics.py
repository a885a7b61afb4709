"""
Flock-level statistics shared by the interactive and headless simulations.
"""

from typing import Dict, List

import pygame

from ..core.boid import Boid


def flock_statistics(boids: List[Boid]) -> Dict[str, float]:
    """
    Summarize the current flock.

    Args:
        boids: Boids to summarize

    Returns:
        Dictionary with avg_speed, cohesion (mean distance to the centroid)
        and boid_count. All zero for an empty flock.
    """
    if not boids:
        return {"avg_speed": 0.0, "cohesion": 0.0, "boid_count": 0}

    total_speed = sum(b.velocity.length() for b in boids)

    centroid = pygame.Vector2(0, 0)
    for b in boids:
        centroid += b.position
    centroid /= len(boids)

    total_dist = sum(b.position.distance_to(centroid) for b in boids)

    return {
        "avg_speed": total_speed / len(boids),
        "cohesion": total_dist / len(boids),
        "boid_count": len(boids),
    }
