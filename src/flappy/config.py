"""
config.py: Validated simulation configuration built from the constants.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_X, BIRD_START_Y, BIRD_SIZE, MAX_BIRD_Y,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_START_X, PIPE_SPAWN_INTERVAL,
    MIN_PIPE_GAP_Y, MAX_PIPE_GAP_Y, GRAVITY, JUMP_STRENGTH
)


class ConfigError(ValueError):
    """Raised when a SimulationConfig cannot produce a playable world."""


class ScoringPolicy(Enum):
    """How a gate's leading edge is matched against the flyer's x."""
    EXACT = "exact"         # x lands exactly on the flyer; needs integer-aligned constants
    CROSSING = "crossing"   # x moved from >= flyer x to < flyer x this tick


@dataclass(frozen=True)
class SimulationConfig:
    """All tunables of one simulation. Defaults reproduce the classic game."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT

    flyer_x: float = BIRD_X
    flyer_start_y: float = BIRD_START_Y
    flyer_size: float = BIRD_SIZE
    max_flyer_y: float = MAX_BIRD_Y

    gravity: float = GRAVITY
    flap_impulse: float = JUMP_STRENGTH

    gate_width: float = PIPE_WIDTH
    gap_height: float = PIPE_GAP
    gate_speed: float = PIPE_SPEED
    spawn_x: float = PIPE_START_X
    spawn_interval: float = PIPE_SPAWN_INTERVAL
    gap_y_min: int = MIN_PIPE_GAP_Y
    gap_y_max: int = MAX_PIPE_GAP_Y

    scoring_policy: ScoringPolicy = ScoringPolicy.EXACT

    def __post_init__(self):
        for name in ("screen_width", "screen_height", "flyer_size",
                     "gate_width", "gap_height", "gate_speed", "max_flyer_y"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

        if self.gap_height > self.screen_height:
            raise ConfigError(
                f"gap_height {self.gap_height} does not fit in screen height {self.screen_height}")
        if not 0 <= self.flyer_start_y <= self.max_flyer_y:
            raise ConfigError(
                f"flyer_start_y {self.flyer_start_y} outside [0, max_flyer_y={self.max_flyer_y}]")

        # randrange needs whole-number bounds
        if not (isinstance(self.gap_y_min, int) and isinstance(self.gap_y_max, int)):
            raise ConfigError(
                f"gap range bounds must be integers, got {self.gap_y_min!r}, {self.gap_y_max!r}")
        if self.gap_y_min >= self.gap_y_max:
            raise ConfigError(
                f"gap range is empty: min {self.gap_y_min} >= max {self.gap_y_max}")
        if self.gap_y_min < 0:
            raise ConfigError(f"gap range starts above the screen: min {self.gap_y_min}")
        if self.gap_y_max - 1 + self.gap_height > self.screen_height:
            raise ConfigError(
                f"gap range runs off screen: {self.gap_y_max - 1} + gap {self.gap_height} "
                f"> screen height {self.screen_height}")

        if self.spawn_interval < 0:
            raise ConfigError(f"spawn_interval must be >= 0, got {self.spawn_interval}")
        if not isinstance(self.scoring_policy, ScoringPolicy):
            raise ConfigError(f"unknown scoring policy: {self.scoring_policy!r}")
