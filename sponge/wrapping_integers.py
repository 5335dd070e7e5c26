"""32-bit wrapping sequence numbers and conversion to 64-bit absolute indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_MASK32 = 0xFFFFFFFF
_ROUND = 1 << 32
_UINT64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer expressed relative to an initial sequence number."""

    raw_value: int

    mask: ClassVar[int] = _MASK32

    def __post_init__(self) -> None:
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(f"raw value {self.raw_value} does not fit in 32 bits")

    def __add__(self, other: object) -> WrappingInt32:
        """The point `other` steps past this one."""
        if isinstance(other, WrappingInt32) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) & _MASK32)

    def __sub__(self, other: object) -> int | WrappingInt32:
        """Signed 32-bit offset from another point, or the point `other` steps before this one."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _ROUND if diff >= 1 << 31 else diff
        if isinstance(other, int):
            return WrappingInt32((self.raw_value - other) & _MASK32)
        return NotImplemented

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Convert an absolute 64-bit sequence number into a wrapping 32-bit one."""
    return WrappingInt32((n + isn.raw_value) & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and is closest to `checkpoint`."""
    if not 0 <= checkpoint <= _UINT64_MAX:
        raise ValueError(f"checkpoint {checkpoint} does not fit in 64 bits")

    offset = (n.raw_value - isn.raw_value) & _MASK32
    candidate = checkpoint - (checkpoint & _MASK32) + offset

    if candidate >= checkpoint:
        if candidate >= _ROUND and candidate - checkpoint > checkpoint + _ROUND - candidate:
            return candidate - _ROUND
        return candidate
    if _UINT64_MAX - candidate >= _ROUND and candidate + _ROUND - checkpoint < checkpoint - candidate:
        return candidate + _ROUND
    return candidate