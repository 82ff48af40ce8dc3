"""Construction of length-prefixed, sequence-numbered wire packets."""

from __future__ import annotations

import struct

from .buffer import SIZE_MAX, Buffer

MAX_PACKET_LEN = 0xFFFFFF


class MaxPacketExceededError(Exception):
    """Raised when a packet would reach its configured maximum length."""


def _cstring(data: str | bytes) -> bytes:
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return raw.split(b"\0", 1)[0]


class PacketBuilder:
    """Writes packet payloads into a buffer, splitting them into fragments."""

    def __init__(self, buffer: Buffer, seq: int) -> None:
        self.buffer = buffer
        self.buffer.clear()
        self.seq = seq & 0xFF
        self.packet_length = 0
        self.packet_max_length = SIZE_MAX
        self.header_offset = 0
        self.fragment_length = 0
        self._write_header()

    def _write_header(self) -> None:
        self.buffer.expand(4)
        self.header_offset = len(self.buffer)
        self.fragment_length = 0
        self.buffer._append((0, 0, 0, self.seq))
        self.seq = (self.seq + 1) & 0xFF

    def _write_continuation_header(self) -> None:
        self.buffer._patch(self.header_offset, b"\xff\xff\xff")
        self._write_header()

    def finalize(self) -> None:
        """Write the length of the current fragment into its header."""
        self.buffer._patch(self.header_offset, (self.fragment_length & 0xFFFFFF).to_bytes(3, "little"))

    def write_uint8(self, val: int) -> None:
        if self.packet_length + 1 >= self.packet_max_length:
            raise MaxPacketExceededError("maximum packet length exceeded")
        self.buffer._append((val & 0xFF,))
        self.fragment_length += 1
        self.packet_length += 1
        if self.fragment_length == MAX_PACKET_LEN:
            self._write_continuation_header()

    def _write_bytes_each(self, data: bytes) -> None:
        for byte in data:
            self.write_uint8(byte)

    def write_uint16(self, val: int) -> None:
        self._write_bytes_each((val & 0xFFFF).to_bytes(2, "little"))

    def write_uint24(self, val: int) -> None:
        self._write_bytes_each((val & 0xFFFFFF).to_bytes(3, "little"))

    def write_uint32(self, val: int) -> None:
        self._write_bytes_each((val & 0xFFFFFFFF).to_bytes(4, "little"))

    def write_uint64(self, val: int) -> None:
        self._write_bytes_each((val & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little"))

    def write_float(self, val: float) -> None:
        self._write_bytes_each(struct.pack("<f", val))

    def write_double(self, val: float) -> None:
        self._write_bytes_each(struct.pack("<d", val))

    def write_lenenc(self, val: int) -> None:
        """Write an integer in the length-encoded form."""
        if val < 251:
            self.write_uint8(val)
        elif val <= 0xFFFF:
            self.write_uint8(0xFC)
            self.write_uint16(val)
        elif val <= 0xFFFFFF:
            self.write_uint8(0xFD)
            self.write_uint24(val)
        else:
            self.write_uint8(0xFE)
            self.write_uint64(val)

    def write_buffer(self, data: bytes | bytearray | memoryview) -> None:
        """Write raw bytes, starting new fragments at each boundary."""
        view = memoryview(bytes(data))
        remaining = len(view)

        if self.packet_length + remaining >= self.packet_max_length:
            raise MaxPacketExceededError("maximum packet length exceeded")

        fragment_remaining = MAX_PACKET_LEN - self.fragment_length

        while remaining >= fragment_remaining:
            self._append_chunk(view[:fragment_remaining])
            view = view[fragment_remaining:]
            remaining -= fragment_remaining
            self._write_continuation_header()
            fragment_remaining = MAX_PACKET_LEN

        if remaining:
            self._append_chunk(view)

    def _append_chunk(self, chunk: memoryview) -> None:
        self.buffer._append(chunk)
        self.fragment_length += len(chunk)
        self.packet_length += len(chunk)

    def write_lenenc_buffer(self, data: bytes | bytearray | memoryview) -> None:
        raw = bytes(data)
        self.write_lenenc(len(raw))
        self.write_buffer(raw)

    def write_string(self, data: str | bytes) -> None:
        """Write a NUL-terminated string, stopping at any embedded NUL."""
        self.write_buffer(_cstring(data))
        self.write_uint8(0)

    def set_max_packet_length(self, max_length: int) -> None:
        if self.packet_length > max_length:
            raise MaxPacketExceededError("packet already longer than the new maximum")
        self.packet_max_length = max_length