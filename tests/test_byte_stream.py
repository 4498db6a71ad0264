import pytest

from minnowtcp.byte_stream import ByteStream, read


def test_push_limited_by_capacity():
    stream = ByteStream(3)
    stream.push(b"hello")
    assert stream.bytes_pushed() == 3
    assert stream.bytes_buffered() == 3
    assert stream.available_capacity() == 0
    assert stream.peek() == b"hello"[:3]


def test_capacity_invariant_holds_across_operations():
    stream = ByteStream(10)
    for chunk in (b"abcd", b"efgh", b"ijkl"):
        stream.push(chunk)
        assert stream.available_capacity() + stream.bytes_buffered() == 10
        stream.pop(2)
        assert stream.bytes_pushed() - stream.bytes_popped() == stream.bytes_buffered()


def test_pop_more_than_buffered_pops_everything():
    stream = ByteStream(8)
    stream.push(b"abc")
    stream.pop(100)
    assert stream.bytes_popped() == len(b"abc")
    assert stream.bytes_buffered() == 0
    assert stream.peek() == b""


def test_close_and_finish():
    stream = ByteStream(8)
    stream.push(b"xy")
    stream.close()
    assert stream.is_closed()
    assert not stream.is_finished()
    stream.pop(len(b"xy"))
    assert stream.is_finished()


def test_push_after_close_is_ignored():
    stream = ByteStream(8)
    stream.close()
    stream.push(b"data")
    assert stream.bytes_pushed() == 0
    assert stream.peek() == b""


def test_empty_push_changes_nothing():
    stream = ByteStream(4)
    stream.push(b"")
    assert stream.bytes_pushed() == 0
    assert stream.available_capacity() == 4


def test_error_flag():
    stream = ByteStream(4)
    assert stream.has_error() is False
    stream.set_error()
    assert stream.has_error() is True


def test_read_round_trip():
    stream = ByteStream(64)
    payload = b"Here's a null byte:\x00and it's gone."
    stream.push(payload)
    assert read(stream, stream.bytes_buffered()) == payload
    assert stream.bytes_popped() == len(payload)


def test_read_respects_max_len():
    stream = ByteStream(16)
    stream.push(b"abcdef")
    first = read(stream, 2)
    rest = read(stream, 100)
    assert first == b"abcdef"[:2]
    assert first + rest == b"abcdef"


def test_read_empty_stream():
    stream = ByteStream(4)
    assert read(stream, 10) == b""


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ByteStream(-1)


def test_negative_pop_rejected():
    stream = ByteStream(4)
    with pytest.raises(ValueError):
        stream.pop(-1)