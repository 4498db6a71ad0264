"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from typing import Optional

from minnowtcp.byte_stream import ByteStream
from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

_MASK64 = (1 << 64) - 1
_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Feeds incoming segments into a Reassembler and reports ackno and window."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._isn: Optional[Wrap32] = None

    @property
    def reassembler(self) -> Reassembler:
        return self._reassembler

    @property
    def stream(self) -> ByteStream:
        """The reassembled inbound byte stream."""
        return self._reassembler.output

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the segment's payload at its stream index."""
        if message.rst:
            self.stream.set_error()
            return
        if message.syn:
            self._isn = message.seqno
        if self._isn is None:
            return
        checkpoint = self.stream.bytes_pushed()
        abs_seqno = message.seqno.unwrap(self._isn, checkpoint)
        stream_index = (abs_seqno + int(message.syn) - 1) & _MASK64
        self._reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the acknowledgment message for the peer's sender."""
        stream = self.stream
        window = min(stream.available_capacity(), _MAX_WINDOW)
        ackno = None
        if self._isn is not None:
            abs_ackno = stream.bytes_pushed() + 1 + int(stream.is_closed())
            ackno = Wrap32.wrap(abs_ackno, self._isn)
        return TCPReceiverMessage(ackno=ackno, window_size=window, rst=stream.has_error())