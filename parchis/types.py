from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional


class Color(IntEnum):
    BLUE = 0
    YELLOW = 1
    GREEN = 2
    RED = 3


class PegState(Enum):
    RESERVE = "reserve"
    ON_TRACK = "on_track"
    HOME = "home"


class EventKind(Enum):
    ROLL = "roll"
    INSERT = "insert"
    MOVE = "move"
    MOVE_HOME = "move_home"
    CAPTURE = "capture"
    NO_MOVE = "no_move"


class TurnPhase(Enum):
    ROLL = "roll"
    MANDATORY_INSERT = "mandatory_insert"
    MANDATORY_MOVE_INSERTED = "mandatory_move_inserted"
    FREE_MOVE = "free_move"
    NO_ACTION = "no_action"
    TURN_END = "turn_end"


@dataclass(slots=True, frozen=True)
class TurnEvent:
    kind: EventKind
    seat: int
    peg: Optional[int] = None
    roll: Optional[int] = None
    steps: Optional[int] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None
    victim_seat: Optional[int] = None
    victim_peg: Optional[int] = None


@dataclass(slots=True)
class TurnRecord:
    seat: int
    rolls: List[int] = field(default_factory=list)
    events: List[TurnEvent] = field(default_factory=list)

    def of_kind(self, kind: EventKind) -> List[TurnEvent]:
        return [ev for ev in self.events if ev.kind is kind]

    @property
    def captures(self) -> List[TurnEvent]:
        return self.of_kind(EventKind.CAPTURE)
