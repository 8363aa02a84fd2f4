from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from loguru import logger

from .board import Board
from .config import config
from .dice import DiceSource, RandomDice
from .exceptions import PegStateError
from .player import Player
from .strategy import FirstPegStrategy, Strategy
from .types import EventKind, TurnEvent, TurnPhase, TurnRecord


@dataclass(slots=True)
class TurnEngine:
    """Per-turn state machine.

    ROLL -> (MANDATORY_INSERT | MANDATORY_MOVE_INSERTED | FREE_MOVE | NO_ACTION)
    -> ROLL again on a six, TURN_END otherwise. ``step`` runs one transition;
    ``perform_turn`` runs a whole turn including bonus rolls.
    """

    board: Board
    dice: DiceSource = field(default_factory=RandomDice)
    default_strategy: Strategy = field(default_factory=FirstPegStrategy)
    strategies: Dict[int, Strategy] = field(default_factory=dict)

    # Per-turn state
    player: Optional[Player] = field(default=None, init=False)
    phase: TurnPhase = field(default=TurnPhase.TURN_END, init=False)
    roll: int = field(default=0, init=False)
    inserted: Optional[int] = field(default=None, init=False)
    record: Optional[TurnRecord] = field(default=None, init=False, repr=False)

    # --- Dice ---
    def roll_dice(self) -> int:
        value = int(self.dice())
        if not config.DICE_MIN <= value <= config.DICE_MAX:
            raise ValueError(f"Die source returned {value}")
        return value

    def strategy_for(self, player: Player) -> Strategy:
        return self.strategies.get(player.seat, self.default_strategy)

    # --- State machine ---
    def begin(self, player: Player) -> None:
        logger.info(f"TURN: {player.name}")
        self.player = player
        self.phase = TurnPhase.ROLL
        self.roll = 0
        self.inserted = None
        self.record = TurnRecord(seat=player.seat)

    @property
    def finished(self) -> bool:
        return self.phase is TurnPhase.TURN_END

    def step(self) -> TurnPhase:
        if self.player is None or self.finished:
            raise RuntimeError("No turn in progress; call begin() first")

        if self.phase is TurnPhase.ROLL:
            self.roll = self.roll_dice()
            logger.info(f"ROLL: {self.player.name} rolls {self.roll}")
            self.record.rolls.append(self.roll)
            self._emit([TurnEvent(EventKind.ROLL, self.player.seat, roll=self.roll)])
            self.phase = self._decide()
        else:
            self._act()
            self.phase = (
                TurnPhase.ROLL if self.roll == config.BONUS_ROLL else TurnPhase.TURN_END
            )
        logger.debug(f"{self.player.name} -> {self.phase.value}")
        return self.phase

    def perform_turn(self, player: Player) -> TurnRecord:
        self.begin(player)
        while not self.finished:
            self.step()
        return self.record

    # --- Decision and actions ---
    def _decide(self) -> TurnPhase:
        reserve, on_track, _ = self.board.partition(self.player)
        if self.roll == config.BONUS_ROLL and reserve:
            return TurnPhase.MANDATORY_INSERT
        if self.inserted is not None:
            return TurnPhase.MANDATORY_MOVE_INSERTED
        if on_track:
            return TurnPhase.FREE_MOVE
        return TurnPhase.NO_ACTION

    def _act(self) -> None:
        player = self.player
        if self.phase is TurnPhase.MANDATORY_INSERT:
            reserve, _, _ = self.board.partition(player)
            peg_index = reserve[0]
            self._emit(self.board.insert(player, peg_index))
            self.inserted = peg_index
        elif self.phase is TurnPhase.MANDATORY_MOVE_INSERTED:
            # A peg that enters must advance on the same turn
            peg_index = self.inserted
            self.inserted = None
            self._emit(self.board.move_peg(player, peg_index, self.roll))
        elif self.phase is TurnPhase.FREE_MOVE:
            _, on_track, _ = self.board.partition(player)
            peg_index = self.strategy_for(player).select_peg(
                player, tuple(on_track), self.roll
            )
            if peg_index not in on_track:
                raise PegStateError(
                    f"strategy picked {player.name} peg {peg_index}, "
                    f"movable pegs are {on_track}",
                    seat=player.seat,
                    peg=peg_index,
                )
            self._emit(self.board.move_peg(player, peg_index, self.roll))
        elif self.phase is TurnPhase.NO_ACTION:
            logger.info(f"NO MOVE: {player.name} cannot use {self.roll}")
            self._emit([TurnEvent(EventKind.NO_MOVE, player.seat, roll=self.roll)])
        else:
            raise RuntimeError(f"Unexpected phase {self.phase}")

    def _emit(self, events: list[TurnEvent]) -> None:
        self.record.events.extend(events)
