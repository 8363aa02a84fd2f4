"""Errors raised by the board and turn engine."""


class PegStateError(RuntimeError):
    """A peg was asked to do something its current state forbids.

    Raised for internal contract violations such as moving a peg that is not
    on the track. The turn engine never triggers it through ``next_turn``.
    """

    def __init__(self, message: str, seat: int | None = None, peg: int | None = None):
        super().__init__(message)
        self.seat = seat
        self.peg = peg
