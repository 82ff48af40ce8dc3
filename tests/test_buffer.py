import pytest

from trilogy_wire.buffer import Buffer, TypeOverflowError


def test_buffer_expand():
    buff = Buffer(1)
    assert len(buff) == 0
    assert buff.capacity == 1

    buff.expand(1)
    assert len(buff) == 0
    assert buff.capacity == 1

    buff.expand(2)
    assert len(buff) == 0
    assert buff.capacity == 2


def test_buffer_putc():
    buff = Buffer(1)
    assert len(buff) == 0
    assert buff.capacity == 1

    buff.putc(ord("a"))
    assert len(buff) == 1
    assert buff.capacity == 1

    buff.putc(ord("b"))
    assert len(buff) == 2
    assert buff.capacity == 2
    assert bytes(buff) == b"ab"


def test_expand_doubles_until_large_enough():
    buff = Buffer(3)
    buff.expand(20)
    assert buff.capacity == 24


def test_expand_overflow_raises():
    buff = Buffer(2**63 + 1)
    with pytest.raises(TypeOverflowError):
        buff.expand(2**63 + 2)


def test_putc_rejects_out_of_range():
    buff = Buffer(1)
    with pytest.raises(ValueError):
        buff.putc(256)


def test_clear_keeps_capacity():
    buff = Buffer(1)
    for c in b"abcde":
        buff.putc(c)
    cap = buff.capacity
    buff.clear()
    assert len(buff) == 0
    assert bytes(buff) == b""
    assert buff.capacity == cap


def test_negative_initial_capacity_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)