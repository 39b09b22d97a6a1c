"""SimulationConfig defaults and validation."""

import dataclasses

import pytest

from flappy.config import ConfigError, ScoringPolicy, SimulationConfig


def test_defaults_match_classic_game():
    cfg = SimulationConfig()
    assert (cfg.screen_width, cfg.screen_height) == (500, 500)
    assert (cfg.flyer_x, cfg.flyer_start_y, cfg.flyer_size) == (200, 250.0, 20)
    assert (cfg.gravity, cfg.flap_impulse) == (0.5, -8.0)
    assert (cfg.gate_width, cfg.gap_height, cfg.gate_speed) == (60, 120, 3)
    assert (cfg.gap_y_min, cfg.gap_y_max) == (100, 350)
    assert cfg.spawn_x == 500
    assert cfg.spawn_interval == 2.0
    assert cfg.max_flyer_y == 480
    assert cfg.scoring_policy is ScoringPolicy.EXACT


def test_default_spacing_is_a_multiple_of_gate_speed():
    cfg = SimulationConfig()
    assert (cfg.spawn_x - cfg.flyer_x) % cfg.gate_speed == 0


@pytest.mark.parametrize("lo, hi", [(350, 100), (200, 200)])
def test_empty_gap_range_rejected(lo, hi):
    with pytest.raises(ConfigError, match="gap range"):
        SimulationConfig(gap_y_min=lo, gap_y_max=hi)


def test_negative_spawn_interval_rejected():
    with pytest.raises(ConfigError, match="spawn_interval"):
        SimulationConfig(spawn_interval=-1.0)


def test_zero_spawn_interval_allowed():
    assert SimulationConfig(spawn_interval=0.0).spawn_interval == 0.0


@pytest.mark.parametrize("field", [
    "screen_width", "screen_height", "flyer_size", "gate_width", "gap_height", "gate_speed",
])
def test_non_positive_dimensions_rejected(field):
    with pytest.raises(ConfigError, match=field):
        SimulationConfig(**{field: 0})


def test_gap_taller_than_screen_rejected():
    with pytest.raises(ConfigError):
        SimulationConfig(gap_height=600)


def test_unknown_scoring_policy_rejected():
    with pytest.raises(ConfigError):
        SimulationConfig(scoring_policy="exact")


def test_replace_revalidates():
    cfg = SimulationConfig()
    with pytest.raises(ConfigError):
        dataclasses.replace(cfg, gap_y_min=400)


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize("lo, hi", [(100.5, 350), (100, 350.0)])
def test_fractional_gap_bounds_rejected(lo, hi):
    with pytest.raises(ConfigError, match="integers"):
        SimulationConfig(gap_y_min=lo, gap_y_max=hi)


def test_negative_gap_min_rejected():
    with pytest.raises(ConfigError, match="above the screen"):
        SimulationConfig(gap_y_min=-10, gap_y_max=200)


def test_gap_range_running_off_screen_rejected():
    with pytest.raises(ConfigError, match="off screen"):
        SimulationConfig(gap_y_min=400, gap_y_max=450)


def test_gap_range_touching_screen_bottom_allowed():
    # highest draw is 380; 380 + 120 == 500 still fits a 500px screen
    assert SimulationConfig(gap_y_min=300, gap_y_max=381).gap_y_max == 381


@pytest.mark.parametrize("start_y", [-1.0, 481.0])
def test_start_outside_bounds_rejected(start_y):
    with pytest.raises(ConfigError, match="flyer_start_y"):
        SimulationConfig(flyer_start_y=start_y)


def test_non_positive_floor_rejected():
    with pytest.raises(ConfigError, match="max_flyer_y"):
        SimulationConfig(max_flyer_y=0)
