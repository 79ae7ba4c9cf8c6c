# adsproto

Building blocks for talking to Beckhoff PLCs and TwinCAT systems over the
Automation Device Specification (ADS) protocol. The package has no
dependencies outside the standard library.

## Modules

- `adsproto.netid` has `AmsNetId` and `AmsAddr`, which parse, format, compare
  and serialize AMS NetIDs and addresses.
- `adsproto.errors` has the exception hierarchy. The base class is `Error`,
  with the subclasses `IoError`, `AdsError`, `ReplyError`,
  `LengthOverflowError` and `IoSyncError`. The module also holds the table of
  known ADS result codes (`ADS_ERRORS`), `error_message(code)` and
  `ads_error(action, code)`. `ads_error` builds an `AdsError` that is ready to
  be raised.
- `adsproto.notif` parses notification messages. `Notification(data)` checks
  a raw message and yields `Sample`s, each with a `handle`, a `timestamp` and
  `data`. The module also has `Attributes` and `TransmissionMode`, which
  describe a notification to be set up.
- `adsproto.strings` has the fixed-length PLC string types. `AdsString` is a
  `STRING(n)` and `WString` is a `WSTRING(n)`.
- `adsproto.symbol` has `Handle`, for access to a variable by symbol handle,
  and the lookups `get_size` and `get_location`. It also decodes the symbol and
  type tables with `get_symbol_info` and `decode_symbol_info`, which return
  `Symbol`, `Type` and `Field` records.
- `adsproto.file` gives access to files inside the PLC through `File` and
  `listdir`. It also has the mode flags `READ`, `WRITE`, `APPEND`, `BINARY`,
  `TEXT` and others, and the `DIRECTORY` attribute bit.
- `adsproto.index` and `adsproto.ports` hold well-known index groups and AMS
  ports as constants.

## Installation

```
pip install adsproto
```

## Examples

AMS addresses:

```python
from io import BytesIO
from adsproto.netid import AmsNetId, AmsAddr

netid = AmsNetId.parse("5.123.8.9")      # missing bytes become 1
print(netid)                             # 5.123.8.9.1.1
addr = AmsAddr.parse("5.123.8.9.1.1:851")
print(addr.port)                         # 851

buf = BytesIO()
addr.write_to(buf)                       # six NetID bytes, then the port little-endian
buf.seek(0)
assert AmsAddr.read_from(buf) == addr
```

Invalid strings raise `ValueError`.

Fixed-length strings:

```python
from adsproto.strings import AdsString, WString

name = AdsString(5, "abc")
name.to_bytes()   # b"abc\x00\x00\x00" (5 bytes plus the terminating null)
name.to_str()     # "abc"
name == "abc"     # True

wide = WString(5, "abc")
wide.as_units()   # [97, 98, 99]
WString.from_buffer(5, wide.to_bytes()) == wide   # True
```

A value that is longer than the capacity raises `ValueError`.

Error codes:

```python
from adsproto.errors import AdsError, ads_error, error_message

error_message(0x710)          # "Symbol not found"
err = ads_error("reading", 0x710)
str(err)                      # "reading: Symbol not found (0x710)"
```

Notifications:

```python
from adsproto.notif import Notification

for sample in Notification(raw_message):
    print(sample.handle, sample.timestamp, sample.data)
```

A truncated or inconsistent message raises `IoError`.

## Devices

`Handle`, `File`, `listdir`, `get_size`, `get_location` and
`get_symbol_info` work on a *device* object that carries ADS requests to a
PLC. You supply this object. It must offer these methods:

- `read(index_group, index_offset, length) -> bytes`
- `write(index_group, index_offset, data) -> None`
- `write_read(index_group, index_offset, data, length) -> bytes`

A failed request must raise a subclass of `adsproto.errors.Error`. An error
returned by the server must be an `AdsError` with its `code`. A reply that is
shorter or longer than expected raises `ReplyError`.

```python
from adsproto.symbol import Handle
from adsproto import file

with Handle(device, "MAIN.counter") as handle:
    value = handle.read_value("<I")
    handle.write_value("<I", value + 1)

with file.File.open(device, "/boot/log.txt", file.READ) as f:
    data = f.read()                    # reads to the end

for name, attrs, size in file.listdir(device, b"C:\\TwinCAT"):
    print(name, bool(attrs & file.DIRECTORY), size)
```

Errors during file reads and writes are raised as `OSError`. Server code
0x70C becomes `FileNotFoundError`.

## What the package does not do

The package opens no network connections. It has no TCP or UDP client, no
AMS framing, no request/response matching and no route management. The
device object described above has to come from elsewhere. There is no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```