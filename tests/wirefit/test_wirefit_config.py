"""Tests for wirefit/config.py: WireFitConfig and ExperimentConfig validation."""

import pytest

from wirefit import ExperimentConfig, WireFitConfig


def make_config(**kwargs):
    args = dict(
        state_dimensions=1, action_dimensions=2, number_of_wires=4,
        min_action=[0, -1], max_action=[1, 1],
    )
    args.update(kwargs)
    return WireFitConfig(**args)


class TestWireFitConfig:

    def test_defaults(self):
        config = make_config()
        assert config.base_of_dimensions == 2
        assert config.learning_rate == 0.95
        assert config.devaluation_factor == 0.4
        assert config.control_points_gd_error_target == 0.001
        assert config.control_points_gd_learning_rate == 0.1
        assert config.control_points_gd_max_iterations == 10000

    def test_bounds_converted_to_float(self):
        config = make_config()
        assert config.min_action == [0.0, -1.0]
        assert all(isinstance(a, float) for a in config.max_action)

    def test_output_size(self):
        assert make_config().output_size == 4 * 3

    @pytest.mark.parametrize("kwargs, match", [
        ({"state_dimensions": 0}, "state_dimensions"),
        ({"action_dimensions": 0}, "action_dimensions"),
        ({"number_of_wires": 0}, "number_of_wires"),
        ({"min_action": [0.0]}, "min_action"),
        ({"max_action": [1.0, 1.0, 1.0]}, "max_action"),
        ({"min_action": [2.0, -1.0]}, r"min_action\[0\]"),
        ({"base_of_dimensions": 0}, "base_of_dimensions"),
        ({"learning_rate": 0.0}, "learning_rate"),
        ({"learning_rate": 1.5}, "learning_rate"),
        ({"devaluation_factor": -0.1}, "devaluation_factor"),
        ({"devaluation_factor": 1.1}, "devaluation_factor"),
        ({"control_points_gd_error_target": -1.0}, "control_points_gd_error_target"),
        ({"control_points_gd_learning_rate": 0.0}, "control_points_gd_learning_rate"),
        ({"control_points_gd_max_iterations": 0}, "control_points_gd_max_iterations"),
        ({"seed": -1}, "seed"),
    ])
    def test_invalid_values_raise(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            make_config(**kwargs)

    def test_boundary_values_allowed(self):
        config = make_config(learning_rate=1.0, devaluation_factor=0.0)
        assert config.learning_rate == 1.0


class TestExperimentConfig:

    def test_defaults_valid(self):
        config = ExperimentConfig()
        assert config.episodes > 0
        assert config.exploration > 0

    @pytest.mark.parametrize("kwargs, match", [
        ({"episodes": 0}, "episodes"),
        ({"steps_per_episode": 0}, "steps_per_episode"),
        ({"exploration": 0.0}, "exploration"),
        ({"exploration_decay": 0.0}, "exploration_decay"),
        ({"min_exploration": 0.0}, "min_exploration"),
        ({"eval_every": 0}, "eval_every"),
        ({"hidden_layers": -1}, "hidden_layers"),
        ({"neurons_per_layer": 0}, "neurons_per_layer"),
    ])
    def test_invalid_values_raise(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            ExperimentConfig(**kwargs)
