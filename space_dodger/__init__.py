from space_dodger.config import DEFAULT_CONFIG, GameConfig
from space_dodger.engine import Obstacle, SessionState, SimulationEngine, Vector2, advance
from space_dodger.input_state import Direction, InputSnapshot, InputState

__all__ = [
    "DEFAULT_CONFIG",
    "Direction",
    "GameConfig",
    "InputSnapshot",
    "InputState",
    "Obstacle",
    "SessionState",
    "SimulationEngine",
    "Vector2",
    "advance",
]
