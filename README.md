# trilogy-wire

Low-level pieces for writing packets of the MySQL client/server wire protocol.

- `trilogy_wire.buffer.Buffer` is a byte buffer that tracks its capacity. When more room
  is needed, the capacity doubles until the data fits.
- `trilogy_wire.builder.PacketBuilder` writes protocol packets into a `Buffer`. Each
  packet has a 4-byte header, made of a 3-byte length and a 1-byte sequence id. The
  builder writes:
  - little-endian integers,
  - floats and doubles,
  - length-encoded integers and strings,
  - NUL-terminated strings.

  A payload that reaches the maximum fragment size (`trilogy_wire.builder.MAX_PACKET_LEN`,
  `0xFFFFFF`) is split across continuation packets automatically.
- `trilogy_wire.charset.Charset` lists the server's collation ids.
- `trilogy_wire.encoding.Encoding` lists the character encodings that collations belong to.
- `trilogy_wire.encoding_map.encoding_from_charset` maps a collation to its encoding. The
  full table is available as the read-only mapping `trilogy_wire.encoding_map.CHARSET_ENCODINGS`.

The package has no dependencies outside the standard library.

## Installation

```
pip install trilogy-wire
```

## Buffers

```python
from trilogy_wire.buffer import Buffer

buffer = Buffer(1)
buffer.putc(ord("a"))   # len 1, capacity 1
buffer.putc(ord("b"))   # len 2, capacity 2
assert bytes(buffer) == b"ab"
assert buffer.capacity == 2
```

`Buffer.expand(needed)` makes room for `needed` more bytes without writing anything.
`Buffer.clear()` drops the content and keeps the capacity.

If growing the capacity would go beyond the largest 64-bit size,
`trilogy_wire.buffer.TypeOverflowError` is raised. This error is a subclass of
`OverflowError`. A negative capacity, a negative `needed`, or a byte value outside
0..255 raises `ValueError`.

## Building a packet

```python
from trilogy_wire.buffer import Buffer
from trilogy_wire.builder import PacketBuilder

buffer = Buffer(32)
builder = PacketBuilder(buffer, 0)   # sequence id 0; the buffer is cleared first
builder.write_uint8(0x03)
builder.write_buffer(b"SELECT 1")
builder.finalize()                   # fill in the length of the last fragment

assert bytes(buffer) == b"\x09\x00\x00\x00\x03SELECT 1"
```

The writers available on `PacketBuilder` are:

- `write_uint8`
- `write_uint16`
- `write_uint24`
- `write_uint32`
- `write_uint64`
- `write_float`
- `write_double`
- `write_lenenc`
- `write_buffer`
- `write_lenenc_buffer`
- `write_string`

`write_lenenc` chooses its form from the size of the value:

- values below 251 take one byte,
- values up to `0xFFFF` are written as `0xFC` followed by 2 bytes,
- values up to `0xFFFFFF` are written as `0xFD` followed by 3 bytes,
- anything larger is written as `0xFE` followed by 8 bytes.

`write_string` accepts `str` or `bytes`. A `str` is encoded as UTF-8. The value is cut at
the first NUL byte, and a terminating NUL is then written.

### Maximum packet length

A builder can enforce a maximum packet length. A write that would bring the packet
length to the maximum raises `trilogy_wire.builder.MaxPacketExceededError`:

```python
from trilogy_wire.buffer import Buffer
from trilogy_wire.builder import MaxPacketExceededError, PacketBuilder

builder = PacketBuilder(Buffer(16), 0)
builder.set_max_packet_length(3)
builder.write_uint8(1)
builder.write_uint8(2)
try:
    builder.write_uint8(3)
except MaxPacketExceededError:
    ...
```

`set_max_packet_length` raises the same error if the packet is already longer than the
new maximum.

## Charsets and encodings

```python
from trilogy_wire.charset import Charset
from trilogy_wire.encoding import Encoding
from trilogy_wire.encoding_map import encoding_from_charset

assert encoding_from_charset(Charset.UTF8MB4_0900_AI_CI) is Encoding.UTF8MB4
assert encoding_from_charset(Charset.BINARY) is Encoding.BINARY
assert encoding_from_charset(17) is Encoding.NONE   # in range, but no collation has this code
```

`encoding_from_charset` accepts a `Charset` or a plain integer. It raises `ValueError`
for codes outside 0..255.

## What this package does not do

- It only builds outgoing packets and looks up charset tables.
- It does not open connections or do any socket I/O.
- It does not read or parse packets from a server.
- It does not perform authentication, run queries or prepare statements.

## Running the tests

```
pip install -e ".[test]"
pytest
```