"""The game's linear congruential random number generator."""

from __future__ import annotations


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class Rng:
    """Deterministic generator with 32-bit signed state, as the game has always used."""

    def __init__(self, seed: int) -> None:
        self.seed = _to_int32(seed)

    def next(self) -> int:
        """Advance the state and return a value in 0..65535."""
        self.seed = _to_int32(self.seed * 11109 + 13849)
        return (self.seed >> 16) & 0xFFFF

    def rnd(self, limit: int) -> int:
        """Return a value in 0..abs(limit)-1, or 0 when limit is 0."""
        if limit == 0:
            return 0
        return self.next() % abs(limit)

    def roll(self, number: int, sides: int) -> int:
        """Roll `number` dice with `sides` faces each and total them."""
        return sum(self.rnd(sides) + 1 for _ in range(max(number, 0)))