import struct
from datetime import timedelta

import pytest

from adsproto.errors import IoError
from adsproto.notif import (
    Attributes,
    Notification,
    Sample,
    TransmissionMode,
)

HEADER = bytes(38)
STAMP = 0x9988776655443322


def build(stamps, declared_stamps=None):
    body = b""
    for timestamp, samples in stamps:
        body += struct.pack("<QI", timestamp, len(samples))
        for handle, data in samples:
            body += struct.pack("<II", handle, len(data)) + data
    count = len(stamps) if declared_stamps is None else declared_stamps
    payload = struct.pack("<I", count) + body
    return HEADER + struct.pack("<I", len(payload)) + payload


def test_single_sample():
    notif = Notification(build([(STAMP, [(132, bytes([4, 4, 1, 1]))])]))
    samples = notif.samples()
    assert next(samples) == Sample(132, STAMP, bytes([4, 4, 1, 1]))
    assert next(samples, None) is None


def test_multiple_stamps_in_order():
    notif = Notification(
        build([(1, [(10, b"a"), (11, b"bc")]), (2, [(12, b"")])])
    )
    assert list(notif) == [
        Sample(10, 1, b"a"),
        Sample(11, 1, b"bc"),
        Sample(12, 2, b""),
    ]
    assert notif.nstamps == 2


def test_bad_stamp_count_rejected():
    with pytest.raises(IoError) as info:
        Notification(build([(STAMP, [(132, b"\x08\x08\x01\x01")])], declared_stamps=0xFFFFFFFF))
    assert info.value.context == "parsing notification"


def test_too_short():
    with pytest.raises(IoError):
        Notification(bytes(45))


def test_trailing_garbage_rejected():
    with pytest.raises(IoError):
        Notification(build([(STAMP, [(1, b"xy")])]) + b"\x00")


def test_sample_length_exceeds_data():
    data = HEADER + struct.pack("<II", 0, 1) + struct.pack("<QI", 5, 1) + struct.pack("<II", 1, 10) + b"abc"
    with pytest.raises(IoError):
        Notification(data)


def test_empty_notification():
    notif = Notification(build([]))
    assert list(notif.samples()) == []


def test_repr():
    notif = Notification(build([(7, [(3, b"z")])]))
    text = repr(notif)
    assert text.startswith("Notification [\n    ")
    assert text.endswith("\n]")
    assert repr(Sample(3, 7, b"z")) in text


def test_attributes_and_modes():
    attrib = Attributes(4, TransmissionMode.SERVER_ON_CHANGE, timedelta(seconds=1), timedelta(seconds=1))
    assert attrib.length == 4
    assert int(attrib.trans_mode) == 4
    assert TransmissionMode(3) is TransmissionMode.SERVER_CYCLE
    assert TransmissionMode.NO_TRANS == 0