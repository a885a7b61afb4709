"""Tests for flock parameters and simulation configuration."""

from flocksim.core.config import (
    FlockParameters,
    SimulationConfig,
    PARAMETER_RANGES,
    PARAMETER_LABELS,
    DEFAULT_CONFIG,
)


class TestFlockParameters:
    """Defaults and dict conversion."""

    def test_default_tuning_values(self):
        p = FlockParameters()
        assert p.min_speed == 20.0
        assert p.max_speed == 80.0
        assert p.protected_range == 10.0
        assert p.visible_range == 20.0
        assert p.avoid_factor == 2.0
        assert p.matching_factor == 0.05
        assert p.centering_factor == 0.0005
        assert p.turn_factor == 2.0
        assert p.margin == 50.0

    def test_from_dict_ignores_unknown_keys(self):
        p = FlockParameters.from_dict({"max_speed": 120.0, "gravity": 9.8})
        assert p.max_speed == 120.0
        assert p.min_speed == 20.0

    def test_dict_round_trip(self):
        p = FlockParameters(visible_range=5.0, protected_range=30.0)
        assert FlockParameters.from_dict(p.to_dict()) == p

    def test_fields_are_independently_settable(self):
        p = FlockParameters()
        p.visible_range = 1.0
        assert p.protected_range == 10.0


class TestParameterRanges:
    """Slider bounds for the tuning panel."""

    def test_every_parameter_has_a_range_and_label(self):
        names = set(FlockParameters().to_dict())
        assert set(PARAMETER_RANGES) == names
        assert set(PARAMETER_LABELS) == names

    def test_ranges_are_ordered(self):
        for low, high in PARAMETER_RANGES.values():
            assert low < high


class TestSimulationConfig:
    """Presentation configuration."""

    def test_default_bounds(self):
        assert DEFAULT_CONFIG.screenWidth == 800
        assert DEFAULT_CONFIG.screenHeight == 600
        assert DEFAULT_CONFIG.neighborExclusion == "position"

    def test_from_dict_keeps_list_fields(self):
        config = SimulationConfig.from_dict({"boidCount": 12, "boidColor": [1, 2, 3], "bogus": 1})
        assert config.boidCount == 12
        assert config.boidColor == [1, 2, 3]

    def test_dict_round_trip(self):
        config = SimulationConfig(boidCount=42, seed=7)
        assert SimulationConfig.from_dict(config.to_dict()) == config
