"""Exceptions raised by collection operators."""


class FixpointNotReached(RuntimeError):
    """Raised when iterate() runs out of rounds before its input stops changing."""

    def __init__(self, rounds, last):
        super().__init__(f"no fixed point reached after {rounds} rounds")
        self.rounds = rounds
        self.last = last
