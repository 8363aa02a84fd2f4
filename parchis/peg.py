from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import config
from .types import PegState


@dataclass(slots=True, frozen=True)
class Peg:
    """Immutable peg value. Holds state only.

    ``position`` is a track cell (0..TRACK_LENGTH-1) while on the track, a
    lane slot (0..PEGS_PER_PLAYER-1) while home, and None in the reserve.
    The Board swaps values in its peg matrix; nothing mutates a Peg.
    """

    state: PegState = PegState.RESERVE
    position: Optional[int] = None

    @classmethod
    def reserve(cls) -> "Peg":
        return cls(PegState.RESERVE, None)

    @classmethod
    def on_track(cls, position: int) -> "Peg":
        if not 0 <= position < config.TRACK_LENGTH:
            raise ValueError(f"Track position {position} out of range")
        return cls(PegState.ON_TRACK, position)

    @classmethod
    def in_lane(cls, slot: int) -> "Peg":
        if not 0 <= slot < config.PEGS_PER_PLAYER:
            raise ValueError(f"Lane slot {slot} out of range")
        return cls(PegState.HOME, slot)

    @property
    def is_reserve(self) -> bool:
        return self.state is PegState.RESERVE

    @property
    def is_on_track(self) -> bool:
        return self.state is PegState.ON_TRACK

    @property
    def is_home(self) -> bool:
        return self.state is PegState.HOME

    @property
    def symbol(self) -> str:
        """Single-letter summary used by ``Board.stats``."""
        if self.is_on_track:
            return "I"
        if self.is_home:
            return "H"
        return "O"

    def __str__(self) -> str:
        if self.is_reserve:
            return "Peg(reserve)"
        return f"Peg({self.state.value} at {self.position})"
