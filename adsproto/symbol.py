"""Symbol handles, symbol lookups and decoding of the PLC symbol and type tables."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from . import index
from .errors import Error, IoError, ReplyError

_TYPE_CTX = "decoding type info"
_SYMBOL_CTX = "decoding symbol info"
_NO_OFFSET = 0xFFFF_FFFF


class _Device(Protocol):
    """What this module needs from a connected ADS device."""

    def read(self, index_group: int, index_offset: int, length: int) -> bytes: ...

    def write(self, index_group: int, index_offset: int, data: bytes) -> None: ...

    def write_read(
        self, index_group: int, index_offset: int, data: bytes, length: int
    ) -> bytes: ...


def _exact(data: bytes, length: int) -> bytes:
    """Check that a reply holds exactly the requested number of bytes."""
    data = bytes(data)
    if len(data) < length:
        raise ReplyError("reading data", "got less data than expected", len(data))
    if len(data) > length:
        raise ReplyError("reading data", "got more data than expected", len(data))
    return data


class Handle:
    """A handle to a variable in the ADS device, released by `close`."""

    def __init__(self, device: _Device, symbol: str) -> None:
        self._device = device
        self._released = True
        reply = device.write_read(
            index.GET_SYMHANDLE_BYNAME, 0, symbol.encode("utf-8"), 4
        )
        self._handle = int.from_bytes(_exact(reply, 4), "little")
        self._released = False

    def _check_open(self) -> None:
        if self._released:
            raise ValueError("symbol handle has been released")

    def raw(self) -> int:
        """Return the raw handle number."""
        return self._handle

    def read(self, length: int) -> bytes:
        """Read exactly `length` bytes from the variable."""
        self._check_open()
        reply = self._device.read(index.RW_SYMVAL_BYHANDLE, self._handle, length)
        return _exact(reply, length)

    def write(self, data: bytes) -> None:
        """Write raw data to the variable."""
        self._check_open()
        self._device.write(index.RW_SYMVAL_BYHANDLE, self._handle, bytes(data))

    def read_value(self, fmt: str) -> Any:
        """Read a value described by a `struct` format string.

        A format with a single item returns that item, others return a tuple.
        """
        values = struct.unpack(fmt, self.read(struct.calcsize(fmt)))
        return values[0] if len(values) == 1 else values

    def write_value(self, fmt: str, value: Any) -> None:
        """Write a value (or a tuple of values) packed with a `struct` format."""
        packed = struct.pack(fmt, *value) if isinstance(value, tuple) else struct.pack(fmt, value)
        self.write(packed)

    def close(self) -> None:
        """Release the handle; errors from the device are ignored."""
        if self._released:
            return
        self._released = True
        try:
            self._device.write(
                index.RELEASE_SYMHANDLE, 0, self._handle.to_bytes(4, "little")
            )
        except Error:
            pass

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass


def get_size(device: _Device, symbol: str) -> int:
    """Return the size of a symbol in bytes."""
    reply = _exact(
        device.write_read(index.GET_SYMINFO_BYNAME, 0, symbol.encode("utf-8"), 12), 12
    )
    return int.from_bytes(reply[8:12], "little")


def get_location(device: _Device, symbol: str) -> tuple[int, int]:
    """Return the (index group, index offset) of a symbol."""
    reply = _exact(
        device.write_read(index.GET_SYMINFO_BYNAME, 0, symbol.encode("utf-8"), 12), 12
    )
    group, offset = struct.unpack_from("<II", reply, 0)
    return group, offset


@dataclass
class Symbol:
    """A symbol in the PLC memory."""

    name: str
    ix_group: int
    ix_offset: int
    typ: str
    size: int
    base_type: int
    flags: int


@dataclass
class Field:
    """A field of a structure type; `offset` is None if placed elsewhere in memory."""

    name: str
    typ: str
    offset: Optional[int]
    size: int
    array: list[tuple[int, int]]
    base_type: int
    flags: int


@dataclass
class Type:
    """A type of the PLC's type inventory."""

    name: str
    size: int
    array: list[tuple[int, int]]
    base_type: int
    flags: int
    fields: list[Field] = field(default_factory=list)


TypeMap = dict[str, Type]


class _Reader:
    """Sequential little-endian reader reporting truncation as `IoError`."""

    def __init__(self, data: bytes, context: str) -> None:
        self._data = data
        self._pos = 0
        self._context = context

    def _eof(self) -> IoError:
        return IoError(self._context, EOFError("unexpected end of data"))

    def unpack(self, fmt: str) -> tuple[Any, ...]:
        size = struct.calcsize(fmt)
        if self.remaining < size:
            raise self._eof()
        values = struct.unpack_from(fmt, self._data, self._pos)
        self._pos += size
        return values

    def u32(self) -> int:
        return self.unpack("<I")[0]

    def take(self, length: int) -> bytes:
        if length < 0 or self.remaining < length:
            raise self._eof()
        chunk = self._data[self._pos : self._pos + length]
        self._pos += length
        return chunk

    def text(self, length: int) -> str:
        """Read a null-terminated string of `length` bytes plus terminator."""
        return self.take(length + 1)[:length].decode("utf-8", errors="replace")

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos


def _entries(data: bytes, context: str):
    """Yield the bodies of size-prefixed entries."""
    reader = _Reader(data, context)
    while reader.remaining:
        entry_size = reader.u32()
        yield reader.take(entry_size - 4)


def _decode_type(data: bytes, parent: Optional[Type]) -> Optional[Type]:
    reader = _Reader(data, _TYPE_CTX)
    version = reader.u32()
    if version != 1:
        raise ReplyError(_TYPE_CTX, "unknown type info version", version)
    (
        _subitem_index,
        _plc_interface_id,
        _reserved,
        size,
        offset,
        base_type,
        flags,
        len_name,
        len_type,
        len_comment,
        array_dim,
        sub_items,
    ) = reader.unpack("<HHIIIIIHHHHH")
    name = reader.text(len_name)
    typ = reader.text(len_type)
    reader.take(len_comment + 1)

    array = []
    for _ in range(array_dim):
        lower, total = reader.unpack("<ii")
        array.append((lower, lower + total - 1))

    if parent is not None:
        if sub_items != 0:
            raise ReplyError(_TYPE_CTX, "unexpected sub-items in field", sub_items)
        parent.fields.append(
            Field(
                name=name,
                typ=typ,
                offset=None if offset == _NO_OFFSET else offset,
                size=size,
                array=array,
                base_type=base_type,
                flags=flags,
            )
        )
        return None

    if offset != 0:
        raise ReplyError(_TYPE_CTX, "unexpected offset of type", offset)
    typeinfo = Type(name=name, size=size, array=array, base_type=base_type, flags=flags)
    for _ in range(sub_items):
        sub_size = reader.u32()
        _decode_type(reader.take(sub_size - 4), typeinfo)
    # Trailing variable-length data (GUID, copy mask, methods, attributes...) is skipped.
    return typeinfo


def decode_symbol_info(symbol_data: bytes, type_data: bytes) -> tuple[list[Symbol], TypeMap]:
    """Decode data of the SYM_UPLOAD and SYM_DT_UPLOAD queries.

    Returns a list of symbols and a map of type names to types.
    """
    type_map: TypeMap = {}
    for body in _entries(bytes(type_data), _TYPE_CTX):
        typ = _decode_type(body, None)
        assert typ is not None
        type_map[typ.name] = typ

    symbols = []
    for body in _entries(bytes(symbol_data), _SYMBOL_CTX):
        reader = _Reader(body, _SYMBOL_CTX)
        (
            ix_group,
            ix_offset,
            size,
            base_type,
            flags,
            _legacy_array_dim,
            len_name,
            len_type,
            _len_comment,
        ) = reader.unpack("<IIIIHHHHH")
        name = reader.text(len_name)
        typ = reader.text(len_type)
        # Comment, GUID, attributes and extended flags follow and are skipped.
        symbols.append(
            Symbol(
                name=name,
                ix_group=ix_group,
                ix_offset=ix_offset,
                typ=typ,
                size=size,
                base_type=base_type,
                flags=flags,
            )
        )
    return symbols, type_map


def get_symbol_info(device: _Device) -> tuple[list[Symbol], TypeMap]:
    """Query and decode symbol and type information from the PLC."""
    info = _exact(device.read(index.SYM_UPLOAD_INFO2, 0, 64), 64)
    symbol_len = int.from_bytes(info[4:8], "little")
    types_len = int.from_bytes(info[12:16], "little")
    type_data = _exact(device.read(index.SYM_DT_UPLOAD, 0, types_len), types_len)
    symbol_data = _exact(device.read(index.SYM_UPLOAD, 0, symbol_len), symbol_len)
    return decode_symbol_info(symbol_data, type_data)