"""Consistency checks between the track, the home lanes and the peg matrix."""

from collections import Counter

from .board import Board
from .player import Player


def assert_single_occupancy(board: Board, where: str = "") -> None:
    """
    Check that no two pegs, of any player, sit on the same track cell.

    Args:
        board: The Board to check.
        where: Optional description of where the check is performed.

    Raises:
        AssertionError: If a track position is held by more than one peg.
    """
    counts = Counter(
        pg.position
        for player in Player.all()
        for pg in board.player_pegs(player)
        if pg.is_on_track
    )
    crowded = {pos: n for pos, n in counts.items() if n > 1}
    if crowded:
        raise AssertionError(f"[DOUBLE OCCUPANCY] {crowded} at {where}")


def assert_cells_match_pegs(board: Board, where: str = "") -> None:
    """
    Check that every marked cell has its owner's peg on it and vice versa.

    Raises:
        AssertionError: If the track array and the peg matrix disagree.
    """
    expected = [0] * len(list(board.cells()))
    for player in Player.all():
        for pg in board.player_pegs(player):
            if pg.is_on_track:
                expected[pg.position] = player.marker
    actual = list(board.cells())
    if actual != expected:
        raise AssertionError(
            f"[TRACK DESYNC] at {where}\nCells   ={actual}\nExpected={expected}"
        )


def assert_lane_matches_pegs(board: Board, where: str = "") -> None:
    """
    Check that occupied lane slots are exactly those held by home pegs.

    Raises:
        AssertionError: If a lane slot and the peg matrix disagree.
    """
    for player in Player.all():
        slots = {pg.position for pg in board.player_pegs(player) if pg.is_home}
        occupied = {i for i, used in enumerate(board.home_cells(player)) if used}
        if slots != occupied:
            raise AssertionError(
                f"[LANE DESYNC] {player.name} at {where}\n"
                f"Pegs={sorted(slots)}, Lane={sorted(occupied)}"
            )


def assert_board_invariant(board: Board, where: str = "") -> None:
    """Run every board check."""
    assert_single_occupancy(board, where)
    assert_cells_match_pegs(board, where)
    assert_lane_matches_pegs(board, where)
