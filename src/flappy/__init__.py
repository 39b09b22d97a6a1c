"""
flappy: a Flappy Bird style simulation core with a pygame host.
"""

from .config import ConfigError, ScoringPolicy, SimulationConfig
from .data_models import Flyer, GamePhase, Gate, SimulationState
from .physics_core import PhysicsCore
from .physics_engine import SimulationEngine

__all__ = [
    "ConfigError", "ScoringPolicy", "SimulationConfig",
    "Flyer", "GamePhase", "Gate", "SimulationState",
    "PhysicsCore", "SimulationEngine",
]
