"""AMS NetIDs and AMS addresses."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import BinaryIO, Iterable

AmsPort = int

_NETID_LEN = 6


def _parse_u8(part: str) -> int:
    digits = part[1:] if part.startswith("+") else part
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(part)
    value = int(digits)
    if value > 0xFF:
        raise ValueError(part)
    return value


@dataclass(frozen=True, order=True)
class AmsNetId:
    """An AMS NetID: six bytes, usually written like ``1.2.3.4.5.6``."""

    octets: tuple[int, ...] = (0, 0, 0, 0, 0, 0)

    def __post_init__(self) -> None:
        octets = tuple(self.octets)
        if len(octets) != _NETID_LEN or not all(
            isinstance(b, int) and 0 <= b <= 0xFF for b in octets
        ):
            raise ValueError("a NetID consists of six bytes")
        object.__setattr__(self, "octets", octets)

    @staticmethod
    def local() -> AmsNetId:
        """Return the local NetID ``127.0.0.1.1.1``."""
        return AmsNetId((127, 0, 0, 1, 1, 1))

    @staticmethod
    def from_slice(data: Iterable[int]) -> AmsNetId:
        """Create a NetID from exactly six bytes."""
        data = tuple(data)
        if len(data) != _NETID_LEN:
            raise ValueError("a NetID needs exactly six bytes")
        return AmsNetId(data)

    @staticmethod
    def from_ip(ip: str | ipaddress.IPv4Address, e: int, f: int) -> AmsNetId:
        """Create a NetID from an IPv4 address and two more octets."""
        packed = ipaddress.IPv4Address(ip).packed
        return AmsNetId((*packed, e, f))

    @staticmethod
    def parse(text: str) -> AmsNetId:
        """Parse ``a.b.c.d.e.f``; missing trailing bytes default to 1."""
        parts = text.split(".")
        if len(parts) > _NETID_LEN:
            raise ValueError("invalid NetID string")
        try:
            values = [_parse_u8(part) for part in parts]
        except ValueError:
            raise ValueError("invalid NetID string") from None
        values.extend([1] * (_NETID_LEN - len(values)))
        return AmsNetId(tuple(values))

    def is_zero(self) -> bool:
        """Return whether all bytes are zero."""
        return not any(self.octets)

    def __str__(self) -> str:
        return ".".join(str(b) for b in self.octets)

    def __bytes__(self) -> bytes:
        return bytes(self.octets)


@dataclass(frozen=True, order=True)
class AmsAddr:
    """An AMS NetID together with an AMS port."""

    netid: AmsNetId = AmsNetId()
    port: AmsPort = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError("invalid port number")

    @staticmethod
    def parse(text: str) -> AmsAddr:
        """Parse an address written as ``netid:port``."""
        parts = text.split(":")
        if len(parts) != 2:
            raise ValueError("invalid AMS addr string")
        netid_text, port_text = parts
        netid = AmsNetId.parse(netid_text)
        digits = port_text[1:] if port_text.startswith("+") else port_text
        if not digits or not (digits.isascii() and digits.isdigit()) or int(digits) > 0xFFFF:
            raise ValueError("invalid port number")
        return AmsAddr(netid, int(digits))

    def write_to(self, stream: BinaryIO) -> None:
        """Write the address in wire format (six bytes, then port LE)."""
        stream.write(bytes(self.netid) + self.port.to_bytes(2, "little"))

    @staticmethod
    def read_from(stream: BinaryIO) -> AmsAddr:
        """Read an address in wire format from a stream."""
        data = stream.read(_NETID_LEN + 2)
        if len(data) < _NETID_LEN + 2:
            raise EOFError("unexpected end of data while reading AMS address")
        return AmsAddr(
            AmsNetId(tuple(data[:_NETID_LEN])),
            int.from_bytes(data[_NETID_LEN:], "little"),
        )

    def __str__(self) -> str:
        return f"{self.netid}:{self.port}"