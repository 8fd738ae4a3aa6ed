"""Sets of accessibility states, stored as a 64-bit mask."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from functools import reduce

from atspikit.state import State

__all__ = ["StateSetDecodeError", "StateSet"]

_ALL_BITS = reduce(lambda acc, state: acc | state.bit(), State, 0)
_LENGTH = struct.Struct("<I")
_WORDS = struct.Struct("<II")


class StateSetDecodeError(ValueError):
    """Raised when bytes cannot be decoded into a StateSet."""


def _bits_of(value: object) -> int:
    """Bits of a State, a StateSet or an iterable of States."""
    if isinstance(value, State):
        return value.bit()
    if isinstance(value, StateSet):
        return value._bits
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return reduce(lambda acc, item: acc | _bits_of(item), value, 0)
    raise TypeError(f"expected a State, StateSet or iterable of States, not {type(value).__name__}")


class StateSet:
    """The set of states an accessible object holds."""

    __slots__ = ("_bits",)

    def __init__(self, *args: State | StateSet | Iterable[State]) -> None:
        self._bits = reduce(lambda acc, arg: acc | _bits_of(arg), args, 0)

    @classmethod
    def from_bits(cls, bits: int) -> StateSet:
        """Build a set from a bit pattern; raise ValueError on undefined bits."""
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(f"bits must be an int, not {type(bits).__name__}")
        if bits < 0 or bits & ~_ALL_BITS:
            raise ValueError(f"bit pattern {bits:#x} encodes an undefined state")
        result = cls()
        result._bits = bits
        return result

    @classmethod
    def empty(cls) -> StateSet:
        """An empty set."""
        return cls()

    def bits(self) -> int:
        """The set as a 64-bit integer."""
        return self._bits

    def contains(self, other: State | StateSet | Iterable[State]) -> bool:
        """Whether every state in ``other`` is in this set."""
        wanted = _bits_of(other)
        return self._bits & wanted == wanted

    def __contains__(self, other: object) -> bool:
        return self.contains(other)  # type: ignore[arg-type]

    def insert(self, other: State | StateSet | Iterable[State]) -> None:
        """Add the given states."""
        self._bits |= _bits_of(other)

    def remove(self, other: State | StateSet | Iterable[State]) -> None:
        """Remove the given states if present."""
        self._bits &= ~_bits_of(other)

    def toggle(self, other: State | StateSet | Iterable[State]) -> None:
        """Flip the given states."""
        self._bits ^= _bits_of(other)

    def intersects(self, other: State | StateSet | Iterable[State]) -> bool:
        """Whether at least one state is shared with ``other``."""
        return bool(self._bits & _bits_of(other))

    def is_empty(self) -> bool:
        """Whether no state is set."""
        return self._bits == 0

    def __iter__(self) -> Iterator[State]:
        return (state for state in State if self._bits & state.bit())

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def _combine(self, other: object, op) -> StateSet:
        result = StateSet()
        result._bits = op(self._bits, _bits_of(other))
        return result

    def __or__(self, other: object) -> StateSet:
        if not isinstance(other, (State, StateSet)):
            return NotImplemented
        return self._combine(other, int.__or__)

    __ror__ = __or__

    def __and__(self, other: object) -> StateSet:
        if not isinstance(other, (State, StateSet)):
            return NotImplemented
        return self._combine(other, int.__and__)

    __rand__ = __and__

    def __xor__(self, other: object) -> StateSet:
        if not isinstance(other, (State, StateSet)):
            return NotImplemented
        return self._combine(other, int.__xor__)

    __rxor__ = __xor__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StateSet):
            return self._bits == other._bits
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        names = ", ".join(f"State.{state.name}" for state in self)
        return f"StateSet({names})"

    def encode(self) -> bytes:
        """Encode as a little-endian array of two unsigned 32-bit words."""
        low = self._bits & 0xFFFFFFFF
        high = self._bits >> 32
        return _LENGTH.pack(_WORDS.size) + _WORDS.pack(low, high)

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> StateSet:
        """Decode the wire form made by ``encode``."""
        raw = bytes(data)
        if len(raw) < _LENGTH.size:
            raise StateSetDecodeError("missing array length")
        (length,) = _LENGTH.unpack_from(raw)
        body = raw[_LENGTH.size:]
        if length % 4:
            raise StateSetDecodeError(f"array length {length} is not a multiple of 4")
        if len(body) != length:
            raise StateSetDecodeError(
                f"array length {length} does not match {len(body)} bytes of data"
            )
        if length != _WORDS.size:
            raise StateSetDecodeError(
                f"invalid length {length // 4}, expected array of size 2"
            )
        low, high = _WORDS.unpack(body)
        try:
            return cls.from_bits(low | (high << 32))
        except ValueError as exc:
            raise StateSetDecodeError("invalid state") from exc