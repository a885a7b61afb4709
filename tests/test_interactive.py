"""Tests for the interactive window, keyboard handling and rendering (dummy SDL driver)."""

import numpy as np
import pygame
import pytest

from flocksim.core.config import SimulationConfig, FlockParameters
from flocksim.core.simulator import FlockSimulator
from flocksim.simulation.interactive import Simulation
from flocksim.simulation.rendering import (
    draw_flock,
    draw_debug_overlay,
    separation_label,
)


@pytest.fixture
def sim():
    config = SimulationConfig(boidCount=8, screenWidth=200, screenHeight=150,
                              debugMode=True, seed=1)
    simulation = Simulation(config, FlockParameters())
    yield simulation
    pygame.quit()


@pytest.fixture
def surface():
    pygame.init()
    yield pygame.Surface((200, 150))
    pygame.quit()


class TestSimulationSetup:
    """Window creation and the first ticks."""

    def test_populates_configured_count(self, sim):
        assert len(sim.state.boids) == 8
        assert sim.debug_mode is True
        assert sim.running is True
        assert sim.stats["boid_count"] == 8

    def test_update_advances_frame(self, sim):
        sim.update(1 / 60)
        sim.update(1 / 60)
        assert sim.frame_count == 2
        assert len(sim.state.boids) == 8

    def test_draw_with_debug_view(self, sim):
        sim.update(1 / 60)
        sim.draw()
        assert sim.screen.get_size() == (200, 150)

    def test_rejects_zero_stats_interval(self):
        config = SimulationConfig(boidCount=4, screenWidth=200, screenHeight=150,
                                  statsInterval=0)
        try:
            with pytest.raises(ValueError):
                Simulation(config)
        finally:
            pygame.quit()


class TestKeyboard:
    """Key presses routed through _handle_keydown."""

    def test_s_spawns_boid(self, sim, capsys):
        sim._handle_keydown(pygame.K_s)
        assert len(sim.state.boids) == 9
        out = capsys.readouterr().out
        assert out.startswith("Spawned Boid(position=(")

    def test_d_toggles_debug(self, sim, capsys):
        sim._handle_keydown(pygame.K_d)
        assert sim.debug_mode is False
        assert "Debug mode: OFF" in capsys.readouterr().out

        sim._handle_keydown(pygame.K_d)
        assert sim.debug_mode is True
        assert "Debug mode: ON" in capsys.readouterr().out

    def test_right_raises_selected_parameter(self, sim, capsys):
        assert sim.panel.selected_name == "min_speed"
        sim._handle_keydown(pygame.K_RIGHT)
        assert sim.state.params.min_speed == pytest.approx(20 + 1.9999)
        assert capsys.readouterr().out.startswith("min speed:")

    def test_shift_uses_fine_step(self, sim):
        sim._handle_keydown(pygame.K_LEFT, pygame.KMOD_LSHIFT)
        assert sim.state.params.min_speed == pytest.approx(20 - 0.19999)

    def test_down_then_right_edits_next_parameter(self, sim):
        sim._handle_keydown(pygame.K_DOWN)
        sim._handle_keydown(pygame.K_RIGHT)
        assert sim.state.params.min_speed == 20
        assert sim.state.params.max_speed == pytest.approx(80 + 1.9999)

    def test_escape_stops_loop(self, sim):
        sim._handle_keydown(pygame.K_ESCAPE)
        assert sim.running is False

    def test_edits_reach_simulator(self, sim):
        sim._handle_keydown(pygame.K_RIGHT)
        assert sim.panel.params is sim.state.params


class TestMainLoop:
    """One pass of run() driven by posted events."""

    def test_click_spawns_then_quit(self, sim, capsys):
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 50)))
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        sim.run()

        assert sim.running is False
        assert len(sim.state.boids) == 9
        assert sim.frame_count == 1
        assert "Spawned Boid(" in capsys.readouterr().out


class TestRendering:
    """Drawing onto an offscreen surface."""

    def test_draw_flock_paints_boid(self, surface, make_state):
        config = SimulationConfig()
        state = make_state(((100, 75), (10, 0)), width=200, height=150)

        draw_flock(surface, state, config)

        assert tuple(surface.get_at((100, 80)))[:3] == tuple(config.boidColor)
        assert tuple(surface.get_at((5, 5)))[:3] == tuple(config.backgroundColor)

    def test_debug_overlay_draws_separation_vector(self, surface, make_state):
        config = SimulationConfig()
        state = make_state(((100, 75), (0, 0)), ((105, 75), (0, 0)), width=200, height=150)
        surface.fill(config.backgroundColor)

        draw_debug_overlay(surface, state, FlockSimulator(), config)

        assert tuple(surface.get_at((98, 75)))[:3] == tuple(config.separationColor)

    def test_debug_overlay_labels_with_font(self, surface, make_state):
        config = SimulationConfig()
        state = make_state(((100, 75), (0, 0)), ((105, 75), (0, 0)), width=200, height=150)
        simulator = FlockSimulator()

        surface.fill(config.backgroundColor)
        draw_debug_overlay(surface, state, simulator, config)
        without_label = pygame.surfarray.array3d(surface)

        surface.fill(config.backgroundColor)
        draw_debug_overlay(surface, state, simulator, config, pygame.font.Font(None, 20))
        with_label = pygame.surfarray.array3d(surface)

        # Labels sit 20 pixels above each boid
        assert (with_label[100:140, 55:65] != without_label[100:140, 55:65]).any()

    def test_debug_view_only_with_simulator(self, surface, make_state):
        config = SimulationConfig()
        state = make_state(((100, 75), (0, 0)), ((105, 75), (0, 0)), width=200, height=150)

        draw_flock(surface, state, config, debug=True)
        plain = pygame.surfarray.array3d(surface)
        draw_flock(surface, state, config, FlockSimulator(), debug=True)
        debug = pygame.surfarray.array3d(surface)

        assert not np.array_equal(plain, debug)


class TestSeparationLabel:
    """Text shown next to each boid in the debug view."""

    def test_format(self):
        assert separation_label(pygame.Vector2(-5, 0)) == "close: (-5.0, 0.0)"

    def test_rounds_to_one_decimal(self):
        assert separation_label(pygame.Vector2(1.26, -0.04)) == "close: (1.3, -0.0)"
