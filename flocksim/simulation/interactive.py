"""
Interactive simulation with pygame GUI.
"""

import random
from typing import Optional

import pygame

from ..core.boid import FlockState
from ..core.config import SimulationConfig, FlockParameters, DEFAULT_CONFIG, PARAMETER_LABELS
from ..core.simulator import FlockSimulator
from ..analysis.statistics import flock_statistics
from .panel import TuningPanel
from .rendering import draw_flock


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.

    Parameters are edited live through the tuning panel; the simulator
    reads them on the next tick.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 params: Optional[FlockParameters] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            params: Flock parameters (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        if self.config.statsInterval <= 0:
            raise ValueError(f"statsInterval must be positive, got {self.config.statsInterval}")
        params = params if params else FlockParameters()

        width = self.config.screenWidth
        height = self.config.screenHeight

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Boids")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 20)

        self.rng = random.Random(self.config.seed)
        self.simulator = FlockSimulator(self.config.neighborExclusion)
        self.state = FlockState.populate(
            self.config.boidCount, width, height, params,
            rng=self.rng, inset=self.config.spawnMargin,
        )
        self.panel = TuningPanel(self.state.params)

        self.debug_mode = self.config.debugMode
        self.frame_count = 0
        self.running = True
        self.stats = flock_statistics(self.state.boids)

    def update(self, elapsed_seconds: float) -> None:
        """Advance the flock by one tick."""
        self.simulator.step(self.state, elapsed_seconds)
        self.frame_count += 1
        if self.frame_count % self.config.statsInterval == 0:
            self.stats = flock_statistics(self.state.boids)

    def spawn(self) -> None:
        """Add one randomized boid and report it."""
        boid = self.simulator.spawn(self.state, rng=self.rng)
        print(f"Spawned {boid}")

    def draw(self) -> None:
        """Render the current frame."""
        draw_flock(self.screen, self.state, self.config, self.simulator,
                   self.debug_mode, self.font)
        self._draw_panel()
        pygame.display.flip()

    def _draw_panel(self) -> None:
        """Draw the tuning panel and statistics overlay."""
        mouse_x, mouse_y = pygame.mouse.get_pos()
        header = [
            f"FPS: {int(self.clock.get_fps())}",
            "Tweak Boids (UP/DOWN select, LEFT/RIGHT adjust)",
        ]
        footer = [
            f"Debug: {'ON' if self.debug_mode else 'OFF'}",
            f"Boids: {len(self.state.boids)}",
            f"Avg Speed: {self.stats['avg_speed']:.2f}",
            f"Cohesion: {self.stats['cohesion']:.1f}",
            f"mouse: ({mouse_x}, {mouse_y})",
        ]
        self.panel.draw(self.screen, self.font, header, footer,
                        self.config.panelColor, self.config.panelHighlightColor)

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key, event.mod)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.spawn()

            elapsed_seconds = self.clock.tick(self.config.fpsTarget) / 1000.0
            self.update(elapsed_seconds)
            self.draw()

        pygame.quit()

    def _handle_keydown(self, key: int, mod: int = 0) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_d:
            self.debug_mode = not self.debug_mode
            print(f"Debug mode: {'ON' if self.debug_mode else 'OFF'}")
        elif key == pygame.K_s:
            self.spawn()
        elif key == pygame.K_UP:
            self.panel.select_previous()
        elif key == pygame.K_DOWN:
            self.panel.select_next()
        elif key in (pygame.K_LEFT, pygame.K_RIGHT):
            direction = 1 if key == pygame.K_RIGHT else -1
            value = self.panel.adjust(direction, fine=bool(mod & pygame.KMOD_SHIFT))
            name = self.panel.selected_name
            print(f"{PARAMETER_LABELS.get(name, name)}: {value:.5g}")
