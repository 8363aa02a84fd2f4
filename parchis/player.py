from __future__ import annotations

from dataclasses import dataclass

from .config import config


@dataclass(slots=True, frozen=True)
class Player:
    """Seat identity. Everything else about a player is derived from it."""

    seat: int

    def __post_init__(self) -> None:
        if not 0 <= int(self.seat) < config.PLAYER_COUNT:
            raise ValueError(f"Seat {self.seat} out of range")
        object.__setattr__(self, "seat", int(self.seat))

    @classmethod
    def all(cls) -> list["Player"]:
        return [cls(i) for i in range(config.PLAYER_COUNT)]

    @property
    def name(self) -> str:
        return config.PLAYER_NAMES[self.seat]

    @property
    def marker(self) -> int:
        # 0 marks an empty track cell
        return self.seat + 1

    @property
    def start_position(self) -> int:
        return self.seat * config.SIDE_SIZE

    @property
    def home_entry(self) -> int:
        """Last track cell of this player's lap."""
        return (self.start_position + config.TRACK_LENGTH - 1) % config.TRACK_LENGTH

    def next(self) -> "Player":
        return Player((self.seat + 1) % config.PLAYER_COUNT)

    @classmethod
    def from_marker(cls, marker: int) -> "Player":
        return cls(marker - 1)

    def __str__(self) -> str:
        return self.name
