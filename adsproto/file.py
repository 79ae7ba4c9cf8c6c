"""File access on the PLC over ADS."""

from __future__ import annotations

import errno
from typing import Protocol, Union

from . import index
from .errors import AdsError, Error, IoError, ReplyError

READ = 1 << 0
"""File read mode."""
WRITE = 1 << 1
"""File write mode."""
APPEND = 1 << 2
"""File append mode."""
PLUS = 1 << 3
BINARY = 1 << 4
"""Binary file mode."""
TEXT = 1 << 5
"""Text file mode."""
ENSURE_DIR = 1 << 6
ENABLE_DIR = 1 << 7
OVERWRITE = 1 << 8
OVERWRITE_RENAME = 1 << 9

DIRECTORY = 0x10
"""File attribute bit for directories."""

_NOT_PERMITTED = 0x704
_NOT_FOUND = 0x70C
_BROWSE_SIZE = 324
_CHUNK = 8192

PathLike = Union[bytes, str]


class _Device(Protocol):
    """What this module needs from a connected ADS device."""

    def write_read(
        self, index_group: int, index_offset: int, data: bytes, length: int
    ) -> bytes: ...


def _encode(name: PathLike) -> bytes:
    return name.encode("utf-8") if isinstance(name, str) else bytes(name)


def _exact(data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) < length:
        raise ReplyError("reading data", "got less data than expected", len(data))
    if len(data) > length:
        raise ReplyError("reading data", "got more data than expected", len(data))
    return data


def _to_os_error(err: Error) -> OSError:
    """Map an ADS error to an OSError, keeping the meaning where possible."""
    if isinstance(err, IoError) and isinstance(err.error, OSError):
        return err.error
    if isinstance(err, AdsError) and err.code == _NOT_PERMITTED:
        return OSError(errno.EINVAL, str(err))
    if isinstance(err, AdsError) and err.code == _NOT_FOUND:
        return FileNotFoundError(errno.ENOENT, str(err))
    return OSError(str(err))


class File:
    """A file opened within the PLC; closed by `close` or on leaving a `with` block."""

    def __init__(self, device: _Device, handle: int) -> None:
        self._device = device
        self._handle = handle
        self._closed = False

    @staticmethod
    def open(device: _Device, filename: PathLike, flags: int) -> File:
        """Open a file; `flags` is combined from the mode constants of this module."""
        reply = device.write_read(index.FILE_OPEN, flags, _encode(filename), 4)
        return File(device, int.from_bytes(_exact(reply, 4), "little"))

    @staticmethod
    def delete(device: _Device, filename: PathLike, flags: int) -> None:
        """Delete a file; `flags` is combined from the mode constants of this module."""
        device.write_read(index.FILE_DELETE, flags, _encode(filename), 0)

    @property
    def closed(self) -> bool:
        """Whether the file has been closed."""
        return self._closed

    @property
    def handle(self) -> int:
        """The raw file handle."""
        return self._handle

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed file")

    def _read_chunk(self, size: int) -> bytes:
        try:
            return bytes(self._device.write_read(index.FILE_READ, self._handle, b"", size))
        except Error as err:
            raise _to_os_error(err) from err

    def read(self, size: int = -1) -> bytes:
        """Read up to `size` bytes, or everything up to the end if `size` is negative."""
        self._check_open()
        if size >= 0:
            return self._read_chunk(size)
        parts = []
        while chunk := self._read_chunk(_CHUNK):
            parts.append(chunk)
        return b"".join(parts)

    def write(self, data: bytes) -> int:
        """Write data to the file and return the number of bytes written."""
        self._check_open()
        data = bytes(data)
        try:
            self._device.write_read(index.FILE_WRITE, self._handle, data, 0)
        except Error as err:
            raise _to_os_error(err) from err
        return len(data)

    def flush(self) -> None:
        """Do nothing; writes are not buffered."""

    def close(self) -> None:
        """Close the file; errors from the device are ignored."""
        if self._closed:
            return
        self._closed = True
        try:
            self._device.write_read(index.FILE_CLOSE, self._handle, b"", 0)
        except Error:
            pass

    def __enter__(self) -> File:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass


def listdir(device: _Device, dirname: PathLike) -> list[tuple[bytes, int, int]]:
    """Return (name, attributes, size) of every entry of a directory.

    Names are bytes since they are likely encoded in Windows-1252.
    """
    files = []
    # Offset 4 would start at the TwinCAT boot directory instead.
    offset = 1
    argument = _encode(dirname) + b"\\*.*"
    while True:
        try:
            buf = _exact(
                device.write_read(index.FILE_BROWSE, offset, argument, _BROWSE_SIZE),
                _BROWSE_SIZE,
            )
        except AdsError as err:
            if err.code == _NOT_FOUND:
                return files
            raise
        attrs = int.from_bytes(buf[4:8], "little")
        size = int.from_bytes(buf[32:36], "little") << 32 | int.from_bytes(buf[36:40], "little")
        name = buf[48:].split(b"\0", 1)[0]
        files.append((name, attrs, size))
        offset = int.from_bytes(buf[:4], "little")
        argument = b""