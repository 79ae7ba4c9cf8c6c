import errno
import struct

import pytest

from adsproto import index
from adsproto.errors import AdsError, IoError, ads_error
from adsproto.file import (
    APPEND,
    DIRECTORY,
    READ,
    WRITE,
    File,
    listdir,
)

ENTRIES = [
    (b"a.txt", 0x20, 5),
    (b"sub", DIRECTORY, 0),
    (b"big.bin", 0x20, (1 << 32) + 7),
]


class FakeDevice:
    """Simulates the file service of a PLC."""

    def __init__(self):
        self.file_ptr = None
        self.browse_args = []

    def write_read(self, group, offset, data, length):
        if group == index.FILE_OPEN:
            if data != b"/etc/passwd":
                raise ads_error("opening file", 0x70C)
            if self.file_ptr is not None:
                raise ads_error("opening file", 0x708)
            self.file_ptr = [bool(offset & (WRITE | APPEND)), 0]
            return (42).to_bytes(4, "little")
        if group == index.FILE_CLOSE:
            if data:
                raise ads_error("closing file", 0x70B)
            if offset != 42:
                raise ads_error("closing file", 0x70C)
            self.file_ptr = None
            return b""
        if group == index.FILE_WRITE:
            if self.file_ptr is not None and self.file_ptr[0]:
                self.file_ptr[1] += len(data)
                return b""
            raise ads_error("writing file", 0x704)
        if group == index.FILE_READ:
            if offset != 42:
                raise ads_error("reading file", 0x70C)
            if self.file_ptr is not None and not self.file_ptr[0]:
                cur = self.file_ptr[1]
                self.file_ptr[1] = min(cur + length, 888)
                return bytes(self.file_ptr[1] - cur)
            raise ads_error("reading file", 0x704)
        if group == index.FILE_DELETE:
            if data != b"/etc/passwd":
                raise ads_error("deleting file", 0x70C)
            if self.file_ptr is not None:
                raise ads_error("deleting file", 0xFFFF)
            return b""
        if group == index.FILE_BROWSE:
            self.browse_args.append((offset, bytes(data)))
            if offset == 1:
                if data != b"C:\\data\\*.*":
                    raise ads_error("browsing", 0x702)
                i = 0
            else:
                if data:
                    raise ads_error("browsing", 0x706)
                i = offset - 100
            if i >= len(ENTRIES):
                raise ads_error("browsing", 0x70C)
            name, attrs, size = ENTRIES[i]
            buf = bytearray(324)
            struct.pack_into("<II", buf, 0, 100 + i + 1, attrs)
            struct.pack_into("<II", buf, 32, size >> 32, size & 0xFFFFFFFF)
            buf[48 : 48 + len(name)] = name
            return bytes(buf)
        raise ads_error("write_read", 0x702)


class BrokenDevice:
    def write_read(self, group, offset, data, length):
        raise IoError("reading file", ConnectionResetError("connection reset"))


def test_file_access():
    device = FakeDevice()
    with pytest.raises(AdsError) as info:
        File.open(device, "blub", 0)
    assert info.value.code == 0x70C

    file = File.open(device, "/etc/passwd", WRITE)
    with pytest.raises(AdsError) as info:
        File.open(device, "/etc/passwd", 0)
    assert info.value.code == 0x708
    with pytest.raises(OSError) as os_info:
        file.read(4)
    assert os_info.value.errno == errno.EINVAL
    assert file.write(b"asdf") == 4
    file.flush()
    file.close()
    assert file.closed

    file = File.open(device, "/etc/passwd", READ)
    with pytest.raises(OSError):
        file.write(bytes(4))
    data = file.read()
    assert len(data) == 888
    with pytest.raises(AdsError) as info:
        File.delete(device, "/etc/passwd", 0)
    assert info.value.message == "Unknown error code"
    file.close()

    File.delete(device, "/etc/passwd", 0)
    assert device.file_ptr is None


def test_partial_reads():
    device = FakeDevice()
    with File.open(device, b"/etc/passwd", READ) as file:
        assert file.handle == 42
        assert len(file.read(100)) == 100
        assert len(file.read()) == 788
        assert file.read(10) == b""
    assert device.file_ptr is None


def test_read_not_found_maps_to_file_not_found():
    file = File(FakeDevice(), 99)
    with pytest.raises(FileNotFoundError):
        file.read(4)
    file.close()
    assert file.closed


def test_io_error_is_unwrapped():
    file = File(BrokenDevice(), 42)
    with pytest.raises(ConnectionResetError):
        file.read(4)


def test_use_after_close():
    device = FakeDevice()
    file = File.open(device, "/etc/passwd", WRITE)
    file.close()
    with pytest.raises(ValueError):
        file.write(b"x")


def test_listdir():
    device = FakeDevice()
    assert listdir(device, "C:\\data") == ENTRIES
    assert device.browse_args == [
        (1, b"C:\\data\\*.*"),
        (101, b""),
        (102, b""),
        (103, b""),
    ]


def test_listdir_other_error():
    with pytest.raises(AdsError) as info:
        listdir(FakeDevice(), b"D:\\other")
    assert info.value.code == 0x702