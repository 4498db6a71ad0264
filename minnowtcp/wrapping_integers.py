"""32-bit sequence numbers that wrap around, relative to a zero point."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_WRAP_SIZE = 1 << 32


@dataclass(frozen=True, eq=False)
class Wrap32:
    """A 32-bit unsigned value that wraps to zero after 2**32 - 1."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return zero_point + (n & _MASK32)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self.raw_value - zero_point.raw_value) & _MASK32
        result = (checkpoint & ~_MASK32 & _MASK64) | offset
        if result < checkpoint and checkpoint - result > _WRAP_SIZE // 2:
            result = (result + _WRAP_SIZE) & _MASK64
        if result > checkpoint and result - checkpoint > _WRAP_SIZE // 2 and result >= _WRAP_SIZE:
            result -= _WRAP_SIZE
        return result

    def __add__(self, n: int) -> Wrap32:
        return Wrap32((self.raw_value + n) & _MASK32)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self.raw_value == other.raw_value

    def __hash__(self) -> int:
        return hash(self.raw_value)