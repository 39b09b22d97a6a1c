"""
physics_engine.py: The authoritative simulation. Owns the state, the RNG and the spawn clock.
"""

import random
from typing import Optional

from loguru import logger

from .config import SimulationConfig
from .data_models import GamePhase, Gate, SimulationState
from .physics_core import PhysicsCore


class SimulationEngine:
    """
    Single-threaded, host-driven engine.

    The host calls advance() once per tick and reads `state` to render.
    flap() and reset() must be called from the same thread as advance().
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.config = config or SimulationConfig()
        self.core = PhysicsCore(self.config)
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = SimulationState.initial(self.config)
        self.last_spawn: Optional[float] = None
        self.tick_count = 0
        self.reset()

    def spawn_gate(self) -> Gate:
        """Adds a gate at the right edge with a gap drawn from [gap_y_min, gap_y_max)."""
        gap_y = self.rng.randrange(self.config.gap_y_min, self.config.gap_y_max)
        gate = Gate(x=float(self.config.spawn_x), gap_y=float(gap_y))
        self.state.gates.append(gate)
        logger.debug(f"Gate spawned at x={gate.x} gap_y={gate.gap_y}")
        return gate

    def reset(self):
        """Back to construction defaults, from either phase, with one fresh gate."""
        self.state = SimulationState.initial(self.config)
        self.last_spawn = None
        self.tick_count = 0
        self.spawn_gate()
        logger.info("Simulation reset")

    def flap(self) -> bool:
        if self.state.is_over:
            return False
        self.state.flyer.velocity = self.core.flap()
        return True

    def _game_over(self, reason: str):
        self.state.phase = GamePhase.OVER
        logger.info(f"Game over ({reason}) after {self.tick_count} ticks, score {self.state.score}")

    def advance(self, dt: float = 1.0, now: float = 0.0) -> GamePhase:
        """
        One simulation step. `dt` is in ticks, `now` is a monotonic timestamp
        in seconds used only for spawn timing. No-op once the game is over.
        """
        state = self.state
        if state.is_over:
            return state.phase

        self.tick_count += 1
        flyer = state.flyer
        cfg = self.config

        # 1. Gravity and movement
        flyer.y, flyer.velocity = self.core.integrate(flyer.y, flyer.velocity, dt)

        # 2. Floor / ceiling ends the step immediately
        if self.core.out_of_bounds(flyer.y):
            self._game_over("out of bounds")
            return state.phase

        # 3-4. Move gates and score the ones reaching the flyer
        delta_x = cfg.gate_speed * dt
        for gate in state.gates:
            previous_x = gate.x
            gate.x -= delta_x
            if not gate.scored and self.core.passes(previous_x, gate.x):
                gate.scored = True
                state.score += 1
                logger.debug(f"Score {state.score}")

        # 5. Gate collision
        if self.core.check_collision(flyer.y, state.gates):
            self._game_over("hit gate")

        # 6. Retire gates that left the screen
        remaining = [g for g in state.gates if g.x >= -cfg.gate_width]
        if len(remaining) != len(state.gates):
            logger.debug(f"Retired {len(state.gates) - len(remaining)} gate(s)")
            state.gates[:] = remaining

        # 7. Spawn on interval; the first tick after reset anchors the clock
        if self.last_spawn is None:
            self.last_spawn = now
        elif now - self.last_spawn > cfg.spawn_interval:
            self.spawn_gate()
            self.last_spawn = now

        return state.phase
