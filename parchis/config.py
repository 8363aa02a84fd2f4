import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Rules (fixed, never read from the environment) ---
    TRACK_LENGTH: int = 40
    PLAYER_COUNT: int = 4
    PEGS_PER_PLAYER: int = 4

    DICE_MIN: int = 1
    DICE_MAX: int = 6
    BONUS_ROLL: int = 6  # inserts a reserve peg and grants another roll

    PLAYER_NAMES: list[str] = field(
        default_factory=lambda: ["Blue", "Yellow", "Green", "Red"]
    )

    # Derived (populated in __post_init__ due to slots)
    SIDE_SIZE: int = 0
    HOME_THRESHOLD: int = 0

    def __post_init__(self):
        if self.TRACK_LENGTH % self.PLAYER_COUNT:
            raise ValueError("TRACK_LENGTH must be divisible by PLAYER_COUNT")
        if len(self.PLAYER_NAMES) != self.PLAYER_COUNT:
            raise ValueError("PLAYER_NAMES must name every seat")
        # Per-player span of the track; also the gap between start cells
        self.SIDE_SIZE = self.TRACK_LENGTH // self.PLAYER_COUNT
        # A move whose lap progress exceeds this turns into the home lane
        self.HOME_THRESHOLD = self.TRACK_LENGTH - self.SIDE_SIZE


@dataclass(slots=True)
class RunConfig:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SEED: int | None = int(os.getenv("SEED")) if os.getenv("SEED") else None
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 1000))
    STRATEGY: str = os.getenv("STRATEGY", "first")


config = Config()
run_config = RunConfig()
