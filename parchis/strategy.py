from __future__ import annotations

import random
from dataclasses import dataclass, field, fields
from typing import Dict, Protocol, Sequence, Type

from .player import Player


class Strategy(Protocol):
    name: str

    def select_peg(self, player: Player, candidates: Sequence[int], roll: int) -> int:
        ...


@dataclass(slots=True)
class FirstPegStrategy:
    """Always advances the lowest-index movable peg."""

    name: str = field(default="first", init=False)

    def select_peg(self, player: Player, candidates: Sequence[int], roll: int) -> int:
        return min(candidates)


@dataclass(slots=True)
class RandomStrategy:
    rng_seed: int | None = None
    name: str = field(default="random", init=False)
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.rng_seed)

    def select_peg(self, player: Player, candidates: Sequence[int], roll: int) -> int:
        return self._rng.choice(list(candidates))


STRATEGY_REGISTRY: Dict[str, Type] = {
    "first": FirstPegStrategy,
    "random": RandomStrategy,
}


def create(strategy_name: str, seed: int | None = None, **kwargs) -> Strategy:
    """Build a registered strategy; ``seed`` reaches strategies that draw randomly."""
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise KeyError(f"Unknown strategy '{strategy_name}'.")
    if seed is not None and any(f.name == "rng_seed" for f in fields(cls)):
        kwargs.setdefault("rng_seed", seed)
    return cls(**kwargs)


def available() -> Dict[str, Type]:
    return dict(STRATEGY_REGISTRY)
