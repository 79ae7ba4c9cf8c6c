"""ADS notifications: attributes for requesting them and parsing of messages."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator

from .errors import IoError

# Size of the AMS/TCP header plus the AMS header preceding the ADS data.
_ADS_HEADER_SIZE = 38
_CONTEXT = "parsing notification"

Handle = int


class TransmissionMode(enum.IntEnum):
    """When notifications should be generated."""

    NO_TRANS = 0
    SERVER_CYCLE = 3
    SERVER_ON_CHANGE = 4


@dataclass
class Attributes:
    """Attributes for creating a notification."""

    length: int
    trans_mode: TransmissionMode
    max_delay: timedelta
    cycle_time: timedelta


@dataclass(frozen=True)
class Sample:
    """A single data sample of a notification message.

    The timestamp counts 100 ns intervals since 1601-01-01.
    """

    handle: Handle
    timestamp: int
    data: bytes


def _eof() -> IoError:
    return IoError(_CONTEXT, EOFError("unexpected end of notification data"))


class _Reader:
    """Sequential little-endian reader over a byte string."""

    def __init__(self, data: bytes, pos: int) -> None:
        self._data = data
        self._pos = pos

    def _unpack(self, fmt: str) -> int:
        try:
            (value,) = struct.unpack_from(fmt, self._data, self._pos)
        except struct.error:
            raise _eof() from None
        self._pos += struct.calcsize(fmt)
        return value

    def u32(self) -> int:
        return self._unpack("<I")

    def u64(self) -> int:
        return self._unpack("<Q")

    def take(self, length: int) -> bytes:
        if self.remaining < length:
            raise _eof()
        chunk = self._data[self._pos : self._pos + length]
        self._pos += length
        return chunk

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos


class Notification:
    """A notification message from the ADS server."""

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) < _ADS_HEADER_SIZE + 8:
            raise _eof()
        reader = _Reader(data, _ADS_HEADER_SIZE + 4)
        nstamps = reader.u32()
        samples: list[Sample] = []
        for _ in range(nstamps):
            timestamp = reader.u64()
            nsamples = reader.u32()
            for _ in range(nsamples):
                handle = reader.u32()
                length = reader.u32()
                samples.append(Sample(handle, timestamp, reader.take(length)))
        if reader.remaining:
            raise _eof()
        self.data = data
        self.nstamps = nstamps
        self._samples = tuple(samples)

    def samples(self) -> Iterator[Sample]:
        """Return an iterator over all data samples in this notification."""
        return iter(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return self.samples()

    def __repr__(self) -> str:
        lines = ["Notification ["]
        lines.extend(f"    {sample!r}" for sample in self._samples)
        lines.append("]")
        return "\n".join(lines)