"""A bounded, in-order byte stream with a writing end and a reading end."""

from __future__ import annotations


class ByteStream:
    """A flow-controlled byte pipe of fixed capacity.

    The writer pushes bytes up to the free capacity and eventually closes the
    stream; the reader peeks at and pops buffered bytes.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    # Writing side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the free capacity allows."""
        if self._closed or not data:
            return
        accepted = bytes(data[: self.available_capacity()])
        self._buffer.extend(accepted)
        self._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self.capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes ever accepted by ``push``."""
        return self._pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        removed = min(length, len(self._buffer))
        del self._buffer[:removed]
        self._popped += removed

    def is_finished(self) -> bool:
        """True once the stream is closed and fully drained."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        """Bytes pushed but not yet popped."""
        return len(self._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes ever removed by ``pop``."""
        return self._popped

    # Error state

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error


def read(stream: ByteStream, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``stream`` and return them."""
    out = bytearray()
    while stream.bytes_buffered() and len(out) < max_len:
        view = stream.peek()
        if not view:
            raise RuntimeError("ByteStream.peek() returned no bytes while bytes are buffered")
        part = view[: max_len - len(out)]
        out.extend(part)
        stream.pop(len(part))
    return bytes(out)