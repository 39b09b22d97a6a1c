"""Data model helpers: wall rectangles, initial state and snapshots."""

from flappy.config import SimulationConfig
from flappy.data_models import GamePhase, Gate, SimulationState


def test_gate_walls_frame_the_gap():
    gate = Gate(x=300.0, gap_y=150.0)
    assert gate.top_wall(60) == (300.0, 0.0, 60, 150.0)
    assert gate.bottom_wall(60, 120, 500) == (300.0, 270.0, 60, 230.0)
    assert gate.right_edge(60) == 360.0


def test_initial_state_from_config():
    state = SimulationState.initial(SimulationConfig(flyer_start_y=100.0, flyer_x=50))
    assert (state.flyer.x, state.flyer.y, state.flyer.velocity) == (50, 100.0, 0.0)
    assert state.gates == []
    assert state.score == 0
    assert state.phase is GamePhase.PLAYING
    assert state.is_over is False


def test_initial_states_do_not_share_gate_lists():
    cfg = SimulationConfig()
    a, b = SimulationState.initial(cfg), SimulationState.initial(cfg)
    a.gates.append(Gate(x=1.0, gap_y=2.0))
    assert b.gates == []


def test_client_state_snapshot():
    state = SimulationState.initial(SimulationConfig())
    state.flyer.velocity = 1.23456
    state.gates.append(Gate(x=497.0, gap_y=180.0))
    state.score = 3
    state.phase = GamePhase.OVER

    assert state.is_over
    assert state.to_client_state() == {
        "y": 250.0,
        "v": 1.23,
        "gates": [{"x": 497.0, "gap_y": 180.0, "scored": False}],
        "score": 3,
        "phase": "over",
    }
