import pytest

from trilogy_wire.buffer import Buffer
from trilogy_wire.builder import MAX_PACKET_LEN, MaxPacketExceededError, PacketBuilder


def make_builder(seq=0):
    return PacketBuilder(Buffer(1), seq)


def test_write_uint8():
    builder = make_builder()
    builder.write_uint8(0x61)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x01, 0x00, 0x00, 0x00, 0x61])


def test_write_uint8_split_packet():
    builder = make_builder()
    builder.write_buffer(bytes(MAX_PACKET_LEN - 1))
    builder.write_uint8(0x00)
    builder.write_uint8(0x00)
    builder.finalize()

    data = bytes(builder.buffer)
    assert data[:4] == bytes([0xFF, 0xFF, 0xFF, 0x00])
    offset = MAX_PACKET_LEN + 4
    assert data[offset : offset + 4] == bytes([0x01, 0x00, 0x00, 0x01])


def test_write_uint8_exceeds_small_max():
    builder = make_builder()
    builder.set_max_packet_length(3)
    builder.write_uint8(0x01)
    builder.write_uint8(0x02)
    with pytest.raises(MaxPacketExceededError):
        builder.write_uint8(0x03)


def test_write_uint8_exceeds_large_max():
    builder = make_builder()
    max_len = MAX_PACKET_LEN * 2
    builder.set_max_packet_length(max_len)
    builder.write_buffer(bytes(max_len - 3))
    builder.write_uint8(0x01)
    builder.write_uint8(0x02)
    with pytest.raises(MaxPacketExceededError):
        builder.write_uint8(0x03)


def test_write_uint16():
    builder = make_builder()
    builder.write_uint16(0x61)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x02, 0x00, 0x00, 0x00, 0x61, 0x00])


def test_write_uint24():
    builder = make_builder()
    builder.write_uint24(0x030201)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x03, 0x00, 0x00, 0x00, 0x01, 0x02, 0x03])


def test_write_uint32():
    builder = make_builder()
    builder.write_uint32(0x61)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x04, 0x00, 0x00, 0x00, 0x61, 0x00, 0x00, 0x00])


def test_write_uint64():
    builder = make_builder()
    builder.write_uint64(0x61)
    builder.finalize()
    expected = bytes([0x08, 0x00, 0x00, 0x00, 0x61, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00])
    assert bytes(builder.buffer) == expected


def test_write_float():
    builder = make_builder()
    builder.write_float(1.0)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x04, 0x00, 0x00, 0x00, 0x00, 0x00, 0x80, 0x3F])


def test_write_double():
    builder = make_builder()
    builder.write_double(1.0)
    builder.finalize()
    expected = bytes([0x08, 0x00, 0x00, 0x00, 0, 0, 0, 0, 0, 0, 0xF0, 0x3F])
    assert bytes(builder.buffer) == expected


def test_write_lenenc8():
    builder = make_builder()
    builder.write_lenenc(0x01)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x01, 0x00, 0x00, 0x00, 0x01])


def test_write_lenenc16():
    builder = make_builder()
    builder.write_lenenc(0xFF1)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x03, 0x00, 0x00, 0x00, 0xFC, 0xF1, 0x0F])


def test_write_lenenc24():
    builder = make_builder()
    builder.write_lenenc(0xFFFF1)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x04, 0x00, 0x00, 0x00, 0xFD, 0xF1, 0xFF, 0x0F])


def test_write_lenenc64():
    builder = make_builder()
    builder.write_lenenc(0xFFFFFF1)
    builder.finalize()
    expected = bytes([0x09, 0x00, 0x00, 0x00, 0xFE, 0xF1, 0xFF, 0xFF, 0x0F, 0x00, 0x00, 0x00, 0x00])
    assert bytes(builder.buffer) == expected


def test_write_buffer():
    builder = make_builder()
    builder.write_buffer(bytes([0x68, 0x65, 0x6C, 0x6C, 0x6F]))
    builder.finalize()
    expected = bytes([0x05, 0x00, 0x00, 0x00, 0x68, 0x65, 0x6C, 0x6C, 0x6F])
    assert bytes(builder.buffer) == expected


def test_write_large_buffer():
    builder = make_builder()
    builder.write_buffer(bytes(MAX_PACKET_LEN + 10))
    builder.finalize()

    data = bytes(builder.buffer)
    assert data[:4] == bytes([0xFF, 0xFF, 0xFF, 0x00])
    offset = MAX_PACKET_LEN + 4
    assert data[offset : offset + 4] == bytes([0x0A, 0x00, 0x00, 0x01])
    assert len(data) == MAX_PACKET_LEN + 10 + 8


def test_write_lenenc_buffer():
    builder = make_builder()
    builder.write_lenenc_buffer(bytes([0x68, 0x65, 0x6C, 0x6C, 0x6F]))
    builder.finalize()
    expected = bytes([0x06, 0x00, 0x00, 0x00, 0x05, 0x68, 0x65, 0x6C, 0x6C, 0x6F])
    assert bytes(builder.buffer) == expected


def test_write_string():
    builder = make_builder()
    builder.write_string(bytes([0x68, 0x65, 0x6C, 0x6C, 0x6F, 0x00]))
    builder.finalize()
    expected = bytes([0x06, 0x00, 0x00, 0x00, 0x68, 0x65, 0x6C, 0x6C, 0x6F, 0x00])
    assert bytes(builder.buffer) == expected


def test_write_string_from_str_stops_at_nul():
    builder = make_builder()
    builder.write_string("ab\0cd")
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x03, 0x00, 0x00, 0x00, 0x61, 0x62, 0x00])


def test_set_insufficient_max():
    builder = make_builder()
    builder.write_uint8(0x01)
    builder.write_uint8(0x02)
    builder.write_uint8(0x03)
    with pytest.raises(MaxPacketExceededError):
        builder.set_max_packet_length(2)


def test_write_buffer_exceeding_max_raises():
    builder = make_builder()
    builder.set_max_packet_length(5)
    with pytest.raises(MaxPacketExceededError):
        builder.write_buffer(b"hello")


def test_sequence_number_in_header():
    builder = make_builder(seq=7)
    builder.write_uint8(0x01)
    builder.finalize()
    assert bytes(builder.buffer) == bytes([0x01, 0x00, 0x00, 0x07, 0x01])
    assert builder.seq == 8


def test_init_clears_existing_buffer():
    buff = Buffer(4)
    buff.putc(0x42)
    builder = PacketBuilder(buff, 0)
    builder.finalize()
    assert bytes(buff) == bytes([0x00, 0x00, 0x00, 0x00])