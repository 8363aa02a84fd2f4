from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Protocol

from .config import config


class DiceSource(Protocol):
    def __call__(self) -> int:
        ...


def _checked_faces(values: Iterable[int]) -> List[int]:
    faces = [int(v) for v in values]
    for v in faces:
        if not config.DICE_MIN <= v <= config.DICE_MAX:
            raise ValueError(f"Invalid die face {v}")
    return faces


@dataclass(slots=True)
class RandomDice:
    """Fair six-sided die backed by a seedable ``random.Random``."""

    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def seeded(cls, seed: int | None) -> "RandomDice":
        return cls(rng=random.Random(seed))

    def __call__(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)


@dataclass(slots=True)
class ScriptedDice:
    """Replays a fixed sequence of faces; used for replays and tests."""

    values: List[int]
    _index: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.values = _checked_faces(self.values)

    @property
    def remaining(self) -> int:
        return len(self.values) - self._index

    def __call__(self) -> int:
        if self._index >= len(self.values):
            raise RuntimeError("Scripted dice sequence exhausted")
        value = self.values[self._index]
        self._index += 1
        return value
