from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from loguru import logger

from .board import Board
from .dice import DiceSource, RandomDice
from .player import Player
from .strategy import FirstPegStrategy, Strategy
from .turn import TurnEngine
from .types import TurnRecord


@dataclass(slots=True)
class GameSession:
    """One game: a board, a turn engine and the current-seat cursor."""

    dice: DiceSource = field(default_factory=RandomDice)
    default_strategy: Strategy = field(default_factory=FirstPegStrategy)
    strategies: Dict[int, Strategy] = field(default_factory=dict)
    board: Board = field(init=False)
    engine: TurnEngine = field(init=False, repr=False)
    current_player: Player = field(default_factory=lambda: Player(0), init=False)
    history: List[TurnRecord] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.board = Board()
        self.engine = TurnEngine(
            board=self.board,
            dice=self.dice,
            default_strategy=self.default_strategy,
            strategies=self.strategies,
        )

    @classmethod
    def seeded(cls, seed: int | None, **kwargs) -> "GameSession":
        return cls(dice=RandomDice.seeded(seed), **kwargs)

    @staticmethod
    def players() -> List[Player]:
        return Player.all()

    def next_turn(self) -> TurnRecord:
        """Play the current player's whole turn, then pass to the next seat."""
        record = self.engine.perform_turn(self.current_player)
        self.history.append(record)
        self.current_player = self.current_player.next()
        return record

    def winner(self) -> Optional[Player]:
        for player in self.players():
            if self.board.has_finished(player):
                return player
        return None

    @property
    def is_over(self) -> bool:
        return self.winner() is not None

    def run(
        self,
        max_turns: int,
        advance: Optional[Callable[[], None]] = None,
        on_turn: Optional[Callable[[TurnRecord], None]] = None,
    ) -> Optional[Player]:
        """Play turns until someone finishes or ``max_turns`` have been played.

        ``advance`` is called before every turn and is where a front end waits
        for its "next turn" signal. ``on_turn`` receives each finished turn.
        """
        for _ in range(max_turns):
            if self.is_over:
                break
            if advance is not None:
                advance()
            record = self.next_turn()
            if on_turn is not None:
                on_turn(record)
        winner = self.winner()
        if winner is not None:
            logger.info(f"WINNER: {winner.name} after {len(self.history)} turns")
        return winner
