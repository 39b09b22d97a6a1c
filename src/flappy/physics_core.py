"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable, Tuple

from .config import SimulationConfig, ScoringPolicy
from .data_models import Gate


class PhysicsCore:
    """
    Stateless physics shared by the engine and its tests.
    All rates are per tick; dt is a tick multiplier (1.0 for fixed-step play).
    """

    def __init__(self, config: SimulationConfig):
        self.config = config

    def integrate(self, y: float, velocity: float, dt: float = 1.0) -> Tuple[float, float]:
        """
        Semi-implicit Euler: velocity first, then position with the new velocity.
        Not an exact solution of the motion, it accumulates per tick.
        """
        velocity += self.config.gravity * dt
        y += velocity * dt
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a flap. Overwrites, never adds."""
        return self.config.flap_impulse

    def out_of_bounds(self, y: float) -> bool:
        return y > self.config.max_flyer_y or y < 0

    def overlaps(self, gate: Gate) -> bool:
        """Horizontal span of the gate covers part of the flyer."""
        cfg = self.config
        return gate.x < cfg.flyer_x + cfg.flyer_size and gate.right_edge(cfg.gate_width) > cfg.flyer_x

    def hits_gate(self, y: float, gate: Gate) -> bool:
        if not self.overlaps(gate):
            return False
        cfg = self.config
        return y < gate.gap_y or y + cfg.flyer_size > gate.gap_y + cfg.gap_height

    def check_collision(self, y: float, gates: Iterable[Gate]) -> bool:
        return any(self.hits_gate(y, gate) for gate in gates)

    def passes(self, previous_x: float, new_x: float) -> bool:
        """True on the tick a gate's leading edge reaches the flyer."""
        flyer_x = self.config.flyer_x
        if self.config.scoring_policy is ScoringPolicy.CROSSING:
            return previous_x >= flyer_x > new_x
        # Only fires when spawn_x - flyer_x is a multiple of gate_speed * dt
        return new_x == flyer_x
