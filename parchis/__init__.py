from .board import Board
from .config import config
from .dice import RandomDice, ScriptedDice
from .exceptions import PegStateError
from .peg import Peg
from .player import Player
from .session import GameSession
from .strategy import FirstPegStrategy, RandomStrategy
from .turn import TurnEngine
from .types import Color, EventKind, PegState, TurnEvent, TurnPhase, TurnRecord

__all__ = [
    "Color",
    "config",
    "EventKind",
    "PegState",
    "TurnEvent",
    "TurnPhase",
    "TurnRecord",
    "Board",
    "Peg",
    "Player",
    "PegStateError",
    "RandomDice",
    "ScriptedDice",
    "FirstPegStrategy",
    "RandomStrategy",
    "TurnEngine",
    "GameSession",
]
