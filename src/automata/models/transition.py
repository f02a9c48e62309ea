"""
Transition Models

A transition is an ordered (before, after) pair of state identifiers.
Registries key everything by the packed 64-bit form of that pair.
"""

from dataclasses import dataclass

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_LOW_MASK = 0xFFFFFFFF


def pack_transition(low: int, high: int) -> int:
    """
    Pack two int32 state identifiers into one 64-bit key

    `low` lands in bits 0-31, `high` in bits 32-63. The packing is
    order-sensitive: pack_transition(a, b) != pack_transition(b, a) for a != b.

    Args:
        low: State the transition starts from
        high: State the transition ends in

    Returns:
        Unsigned 64-bit integer key

    Raises:
        TypeError: If either identifier is not an integer
        ValueError: If either identifier does not fit in int32
    """
    for value in (low, high):
        if not isinstance(value, int):
            raise TypeError(f"State identifier must be an int, not {type(value).__name__}")
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"State identifier {value} is outside int32 range")
    return (int(low) & _LOW_MASK) | ((int(high) & _LOW_MASK) << 32)


@dataclass(frozen=True)
class TransitionKey:
    """Hashable (before, after) pair"""
    before: int
    after: int

    @property
    def packed(self) -> int:
        return pack_transition(self.before, self.after)

    def __int__(self) -> int:
        return self.packed

    def __repr__(self):
        return f"TransitionKey({self.before} → {self.after})"
