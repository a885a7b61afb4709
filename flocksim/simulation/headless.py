"""
Headless simulation for fixed-timestep runs and data collection.
"""

import random
import time
from typing import Dict, Optional, Any

import numpy as np
import pygame

try:
    import cv2
    VIDEO_SUPPORT = True
except ImportError:
    VIDEO_SUPPORT = False

from ..core.boid import FlockState
from ..core.config import SimulationConfig, FlockParameters, DEFAULT_CONFIG
from ..core.simulator import FlockSimulator
from ..analysis.statistics import flock_statistics
from .rendering import draw_flock


PROGRESS_INTERVAL = 1000


class HeadlessSimulation:
    """
    Runs the flock without a window using the fixed timestep 1 / fpsTarget.

    Samples flock statistics every statsInterval ticks. Can optionally
    render to an offscreen surface and record the run to a video file.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 params: Optional[FlockParameters] = None,
                 seed: Optional[int] = None, exclusion: Optional[str] = None,
                 enable_video: bool = False, video_filename: Optional[str] = None,
                 video_fps: int = 30):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            params: Flock parameters (uses defaults if None)
            seed: Seed for the initial population (config.seed if None)
            exclusion: Neighbor exclusion mode (config.neighborExclusion if None)
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
        """
        self.config = config if config else DEFAULT_CONFIG
        if self.config.boidCount <= 0:
            raise ValueError(f"boidCount must be positive, got {self.config.boidCount}")
        if self.config.statsInterval <= 0:
            raise ValueError(f"statsInterval must be positive, got {self.config.statsInterval}")

        params = params if params else FlockParameters()
        self.seed = seed if seed is not None else self.config.seed
        self.exclusion = exclusion if exclusion else self.config.neighborExclusion
        self.timestep = 1.0 / self.config.fpsTarget

        width = self.config.screenWidth
        height = self.config.screenHeight

        self.rng = random.Random(self.seed)
        self.simulator = FlockSimulator(self.exclusion)
        self.state = FlockState.populate(
            self.config.boidCount, width, height, params,
            rng=self.rng, inset=self.config.spawnMargin,
        )

        # Video recording
        self.enable_video = enable_video and VIDEO_SUPPORT
        self.video_writer = None
        self.video_filename = video_filename
        self.frame_skip = max(1, self.config.fpsTarget // video_fps)
        self.surface = None

        if self.enable_video and self.video_filename:
            self.surface = pygame.Surface((width, height))
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(
                self.video_filename, fourcc, video_fps, (width, height)
            )
            print(f"  Recording video to: {self.video_filename}")

        self.tick_count = 0
        self.start_time = time.time()

        self.stats = {
            "speed_sum": 0.0,
            "cohesion_sum": 0.0,
            "samples": 0,
            "stats_over_time": [],
        }
        self._sample()

    def update(self) -> None:
        """Advance one tick and sample statistics when due."""
        self.simulator.step(self.state, self.timestep)
        self.tick_count += 1

        if self.tick_count % self.config.statsInterval == 0:
            self._sample()

    def _sample(self) -> None:
        current = flock_statistics(self.state.boids)
        self.stats["speed_sum"] += current["avg_speed"]
        self.stats["cohesion_sum"] += current["cohesion"]
        self.stats["samples"] += 1
        self.stats["stats_over_time"].append({"tick": self.tick_count, **current})

    def run(self, ticks: int) -> Dict[str, Any]:
        """
        Run for the given number of ticks.

        Args:
            ticks: Number of ticks to simulate

        Returns:
            Results dictionary with summary statistics and the time series
        """
        print(f"Running {ticks} ticks ({self.exclusion} exclusion, seed={self.seed})...")

        while self.tick_count < ticks:
            self.update()

            if self.video_writer and self.tick_count % self.frame_skip == 0:
                self._capture_frame()

            if self.tick_count % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - self.start_time
                progress = (self.tick_count / ticks) * 100
                print(f"  Progress: {progress:.1f}% ({self.tick_count}/{ticks} ticks, "
                      f"{elapsed:.1f}s elapsed)")

        if self.video_writer:
            self.video_writer.release()
            print("  Video saved successfully!")

        return self.get_results()

    def _capture_frame(self) -> None:
        """Render offscreen and append the frame to the video."""
        draw_flock(self.surface, self.state, self.config)
        frame = pygame.surfarray.array3d(self.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing summary statistics and the sampled time series
        """
        final = flock_statistics(self.state.boids)
        samples = max(1, self.stats["samples"])

        return {
            "exclusion": self.exclusion,
            "seed": self.seed,
            "ticks": self.tick_count,
            "timestep": self.timestep,
            "elapsed_time_seconds": time.time() - self.start_time,
            "final_boid_count": final["boid_count"],
            "final_avg_speed": final["avg_speed"],
            "final_cohesion": final["cohesion"],
            "avg_speed": self.stats["speed_sum"] / samples,
            "avg_cohesion": self.stats["cohesion_sum"] / samples,
            "stats_over_time": self.stats["stats_over_time"],
        }
