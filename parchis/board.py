from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np
from loguru import logger

from .config import config
from .exceptions import PegStateError
from .peg import Peg
from .player import Player
from .types import EventKind, TurnEvent


@dataclass(slots=True, eq=False)
class Board:
    """Owns the shared track, the home lanes and the peg matrix.

    The Board is the only mutator of its arrays. Everything outside reads
    through the iterator/accessor methods and changes state through
    ``insert`` and ``move_peg``.
    """

    _cells: np.ndarray = field(init=False, repr=False)
    _home: np.ndarray = field(init=False, repr=False)
    _pegs: List[List[Peg]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._cells = np.zeros(config.TRACK_LENGTH, dtype=np.int8)
        self._home = np.zeros(
            (config.PLAYER_COUNT, config.PEGS_PER_PLAYER), dtype=np.bool_
        )
        self._pegs = [
            [Peg.reserve() for _ in range(config.PEGS_PER_PLAYER)]
            for _ in range(config.PLAYER_COUNT)
        ]

    # --- Read-only inspection ---
    def cells(self) -> Iterator[int]:
        return (int(v) for v in self._cells)

    def home_cells(self, player: Player) -> Iterator[bool]:
        return (bool(v) for v in self._home[player.seat])

    def player_pegs(self, player: Player) -> Iterator[Peg]:
        return iter(tuple(self._pegs[player.seat]))

    def peg(self, player: Player, peg_index: int) -> Peg:
        self._check_peg_index(peg_index)
        return self._pegs[player.seat][peg_index]

    def cell(self, pos: int) -> int:
        return int(self._cells[pos % config.TRACK_LENGTH])

    def occupant(self, pos: int) -> Optional[Player]:
        marker = self.cell(pos)
        return Player.from_marker(marker) if marker else None

    def partition(self, player: Player) -> Tuple[List[int], List[int], List[int]]:
        """Peg indices of ``player`` split into (reserve, on_track, home)."""
        reserve: List[int] = []
        on_track: List[int] = []
        home: List[int] = []
        for i, pg in enumerate(self._pegs[player.seat]):
            if pg.is_reserve:
                reserve.append(i)
            elif pg.is_on_track:
                on_track.append(i)
            else:
                home.append(i)
        return reserve, on_track, home

    def has_finished(self, player: Player) -> bool:
        return all(pg.is_home for pg in self._pegs[player.seat])

    def stats(self) -> str:
        lines = []
        for player in Player.all():
            symbols = "".join(pg.symbol for pg in self._pegs[player.seat])
            lines.append(f"{player.name} {symbols}")
        return "\n".join(lines) + "\n"

    def snapshot(self) -> dict:
        return {
            "cells": self._cells.tolist(),
            "home": self._home.tolist(),
            "pegs": [
                [
                    {"state": pg.state.value, "position": pg.position}
                    for pg in pegs
                ]
                for pegs in self._pegs
            ],
        }

    # --- Mutations ---
    def insert(self, player: Player, peg_index: int) -> List[TurnEvent]:
        """Insert a reserve peg on the player's start cell."""
        self._check_peg_index(peg_index)
        if not self._pegs[player.seat][peg_index].is_reserve:
            raise PegStateError(
                f"cannot insert {player.name} peg {peg_index}: not in reserve",
                seat=player.seat,
                peg=peg_index,
            )
        logger.info(f"INSERT: {player.name}")
        start = player.start_position
        events = [
            TurnEvent(EventKind.INSERT, player.seat, peg=peg_index, to_pos=start)
        ]
        events.extend(self.place_peg(start, player, peg_index))
        return events

    def move_peg(self, player: Player, peg_index: int, steps: int) -> List[TurnEvent]:
        """Move an on-track peg forward, turning into the home lane on overrun."""
        self._check_peg_index(peg_index)
        current = self._pegs[player.seat][peg_index]
        if not current.is_on_track:
            raise PegStateError(
                "cannot move peg that is not on the board",
                seat=player.seat,
                peg=peg_index,
            )
        if not config.DICE_MIN <= steps <= config.DICE_MAX:
            raise ValueError(f"Cannot move {steps} places")

        pos = current.position
        dest = (pos + steps) % config.TRACK_LENGTH
        pos_in_round = (
            config.TRACK_LENGTH + dest - player.home_entry
        ) % config.TRACK_LENGTH

        if pos_in_round > config.HOME_THRESHOLD:
            logger.info(f"MOVE HOME: {player.name} peg {peg_index}, {steps} places")
            self._cells[pos] = 0
            slot = self._free_lane_slot(player)
            self._home[player.seat][slot] = True
            self._pegs[player.seat][peg_index] = Peg.in_lane(slot)
            return [
                TurnEvent(
                    EventKind.MOVE_HOME,
                    player.seat,
                    peg=peg_index,
                    steps=steps,
                    from_pos=pos,
                    to_pos=slot,
                )
            ]

        logger.info(f"MOVE: {player.name} peg {peg_index}, {steps} places")
        self._cells[pos] = 0
        events = [
            TurnEvent(
                EventKind.MOVE,
                player.seat,
                peg=peg_index,
                steps=steps,
                from_pos=pos,
                to_pos=dest,
            )
        ]
        events.extend(self.place_peg(dest, player, peg_index))
        return events

    def place_peg(self, pos: int, player: Player, peg_index: int) -> List[TurnEvent]:
        """Put a peg on ``pos``, sending home whatever occupies it."""
        events: List[TurnEvent] = []
        current = int(self._cells[pos])
        if current != 0:
            victim = Player.from_marker(current)
            logger.info(f"THROW OUT: {victim.name}")
            victim_pegs = self._pegs[victim.seat]
            for i, pg in enumerate(victim_pegs):
                if pg.is_on_track and pg.position == pos:
                    victim_pegs[i] = Peg.reserve()
                    events.append(
                        TurnEvent(
                            EventKind.CAPTURE,
                            player.seat,
                            peg=peg_index,
                            to_pos=pos,
                            victim_seat=victim.seat,
                            victim_peg=i,
                        )
                    )
        self._cells[pos] = player.marker
        self._pegs[player.seat][peg_index] = Peg.on_track(pos)
        return events

    # --- Helpers ---
    def _free_lane_slot(self, player: Player) -> int:
        free = np.flatnonzero(~self._home[player.seat])
        if free.size == 0:
            # one slot per peg, so a peg still on the track always finds one
            raise PegStateError(
                f"{player.name} home lane is full", seat=player.seat
            )
        return int(free[0])

    @staticmethod
    def _check_peg_index(peg_index: int) -> None:
        if not 0 <= peg_index < config.PEGS_PER_PLAYER:
            raise IndexError(f"Peg index {peg_index} out of range")
