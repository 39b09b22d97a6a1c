"""
data_models.py: Data structures for the simulation state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import SimulationConfig

Rect = Tuple[float, float, float, float]  # (x, y, w, h)


class GamePhase(Enum):
    PLAYING = "playing"
    OVER = "over"


@dataclass
class Flyer:
    """The player-controlled entity. Only y and velocity ever change."""
    x: float
    y: float
    size: float
    velocity: float = 0.0


@dataclass
class Gate:
    """A top/bottom wall pair with a gap starting at gap_y."""
    x: float
    gap_y: float
    scored: bool = False

    def right_edge(self, width: float) -> float:
        return self.x + width

    def top_wall(self, width: float) -> Rect:
        return (self.x, 0.0, width, self.gap_y)

    def bottom_wall(self, width: float, gap_height: float, screen_height: float) -> Rect:
        top = self.gap_y + gap_height
        return (self.x, top, width, screen_height - top)


@dataclass
class SimulationState:
    """Everything a renderer needs for one frame. Owned by SimulationEngine."""
    flyer: Flyer
    gates: List[Gate] = field(default_factory=list)
    score: int = 0
    phase: GamePhase = GamePhase.PLAYING

    @classmethod
    def initial(cls, config: SimulationConfig) -> "SimulationState":
        flyer = Flyer(x=config.flyer_x, y=config.flyer_start_y, size=config.flyer_size)
        return cls(flyer=flyer)

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.OVER

    def to_client_state(self):
        """Plain snapshot for renderers, logs and comparisons."""
        return {
            "y": round(self.flyer.y, 2),
            "v": round(self.flyer.velocity, 2),
            "gates": [
                {"x": round(g.x, 2), "gap_y": g.gap_y, "scored": g.scored}
                for g in self.gates
            ],
            "score": self.score,
            "phase": self.phase.value,
        }
