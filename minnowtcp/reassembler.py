"""Reassembly of indexed, possibly overlapping substrings into a ByteStream."""

from __future__ import annotations

from bisect import bisect_left, insort

from minnowtcp.byte_stream import ByteStream


class Reassembler:
    """Writes substrings into a ByteStream in order, buffering early arrivals."""

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._starts: list[int] = []
        self._segments: dict[int, bytes] = {}
        self._next_index = 0
        self._eof_index = 0
        self._is_last = False

    @property
    def output(self) -> ByteStream:
        """The stream that reassembled bytes are written to."""
        return self._output

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` starting at stream index ``first_index``."""
        data = bytes(data)
        if is_last_substring:
            self._is_last = True
            self._eof_index = first_index + len(data)

        stream = self._output
        first_unacceptable = (
            stream.bytes_popped() + stream.available_capacity() + stream.bytes_buffered()
        )

        if first_index >= first_unacceptable or first_index + len(data) <= self._next_index:
            self._close_if_done()
            return

        if first_index + len(data) > first_unacceptable:
            data = data[: first_unacceptable - first_index]

        if first_index < self._next_index:
            data = data[self._next_index - first_index :]
            first_index = self._next_index

        pos = bisect_left(self._starts, first_index)
        if pos > 0:
            prev_start = self._starts[pos - 1]
            prev = self._segments[prev_start]
            prev_end = prev_start + len(prev)
            if prev_end >= first_index:
                if prev_end >= first_index + len(data):
                    data = b""
                else:
                    data = prev[: first_index - prev_start] + data
                    first_index = prev_start
                    del self._starts[pos - 1]
                    del self._segments[prev_start]

        pos = bisect_left(self._starts, first_index)
        while pos < len(self._starts) and first_index + len(data) >= self._starts[pos]:
            start = self._starts.pop(pos)
            segment = self._segments.pop(start)
            end = first_index + len(data)
            if end < start + len(segment):
                data += segment[end - start :]

        if data:
            insort(self._starts, first_index)
            self._segments[first_index] = data

        while self._starts and self._starts[0] == self._next_index:
            segment = self._segments.pop(self._starts.pop(0))
            stream.push(segment)
            self._next_index += len(segment)

        self._close_if_done()

    def count_bytes_pending(self) -> int:
        """Number of bytes held here, waiting for earlier gaps to fill."""
        return sum(len(segment) for segment in self._segments.values())

    def _close_if_done(self) -> None:
        if self._is_last and self._next_index == self._eof_index:
            self._output.close()