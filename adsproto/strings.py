"""Fixed-length byte and wide string types as used by PLCs."""

from __future__ import annotations

import struct
from typing import Iterable


def _debug_repr(text: str) -> str:
    escapes = {"\t": "\\t", "\r": "\\r", "\n": "\\n", "\\": "\\\\", '"': '\\"', "\0": "\\0"}
    parts = []
    for ch in text:
        if ch in escapes:
            parts.append(escapes[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            parts.append(f"\\u{{{ord(ch):x}}}")
    return '"' + "".join(parts) + '"'


class AdsString:
    """A fixed-length byte string (STRING(n)); stored with one extra null byte."""

    def __init__(self, capacity: int, value: bytes | str = b"") -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        if len(raw) > capacity:
            raise ValueError(f"string longer than {capacity} bytes")
        self.capacity = capacity
        self._buf = bytearray(capacity)
        self._buf[: len(raw)] = raw

    @classmethod
    def from_buffer(cls, capacity: int, data: bytes) -> AdsString:
        """Create from a full buffer of `capacity` bytes, optionally plus terminator."""
        data = bytes(data)
        if len(data) not in (capacity, capacity + 1):
            raise ValueError(f"buffer must hold {capacity} or {capacity + 1} bytes")
        string = cls(capacity)
        string._buf[:] = data[:capacity]
        return string

    def __len__(self) -> int:
        pos = self._buf.find(0)
        return self.capacity if pos < 0 else pos

    def as_bytes(self) -> bytes:
        """Return the bytes up to the first null byte."""
        return bytes(self._buf[: len(self)])

    def backing_array(self) -> bytearray:
        """Return the full, mutable array of bytes."""
        return self._buf

    def to_bytes(self) -> bytes:
        """Return the wire representation including the terminating null byte."""
        return bytes(self._buf) + b"\0"

    def to_str(self) -> str:
        """Decode the string as UTF-8."""
        return self.as_bytes().decode("utf-8")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AdsString):
            return self.as_bytes() == other.as_bytes()
        if isinstance(other, (bytes, bytearray)):
            return self.as_bytes() == bytes(other)
        if isinstance(other, str):
            return self.as_bytes() == other.encode("utf-8")
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return _debug_repr(self.as_bytes().decode("utf-8", errors="replace"))


def _units_of(text: str) -> list[int]:
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    return list(struct.unpack(f"<{len(encoded) // 2}H", encoded))


def _pack_units(units: Iterable[int]) -> bytes:
    units = list(units)
    return struct.pack(f"<{len(units)}H", *units)


class WString:
    """A fixed-length UTF-16 string (WSTRING(n)); stored with one extra null unit."""

    def __init__(self, capacity: int, value: str | Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        units = _units_of(value) if isinstance(value, str) else list(value)
        if len(units) > capacity:
            raise ValueError(f"string longer than {capacity} code units")
        if not all(isinstance(u, int) and 0 <= u <= 0xFFFF for u in units):
            raise ValueError("code units must be 16-bit integers")
        self.capacity = capacity
        self._units = units + [0] * (capacity - len(units))

    @classmethod
    def from_buffer(cls, capacity: int, data: bytes) -> WString:
        """Create from little-endian bytes of `capacity` units, optionally plus terminator."""
        data = bytes(data)
        if len(data) not in (2 * capacity, 2 * (capacity + 1)):
            raise ValueError(
                f"buffer must hold {2 * capacity} or {2 * (capacity + 1)} bytes"
            )
        units = struct.unpack(f"<{capacity}H", data[: 2 * capacity])
        return cls(capacity, units)

    def __len__(self) -> int:
        try:
            return self._units.index(0)
        except ValueError:
            return self.capacity

    def as_units(self) -> list[int]:
        """Return the code units up to the first null."""
        return self._units[: len(self)]

    def backing_array(self) -> list[int]:
        """Return the full, mutable list of code units."""
        return self._units

    def to_bytes(self) -> bytes:
        """Return the little-endian wire representation including the terminator."""
        return _pack_units(self._units) + b"\0\0"

    def to_str(self) -> str:
        """Decode the string as UTF-16; unpaired surrogates raise UnicodeDecodeError."""
        return _pack_units(self.as_units()).decode("utf-16-le")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WString):
            return self.as_units() == other.as_units()
        if isinstance(other, str):
            return self.as_units() == _units_of(other)
        if isinstance(other, (list, tuple)):
            return self.as_units() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return _debug_repr(_pack_units(self.as_units()).decode("utf-16-le", errors="replace"))