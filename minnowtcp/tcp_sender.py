"""The sending half of a TCP endpoint."""

from __future__ import annotations

from collections import deque
from typing import Callable

from minnowtcp.byte_stream import ByteStream
from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.wrapping_integers import Wrap32

TransmitFunction = Callable[[TCPSenderMessage], None]

MAX_PAYLOAD_SIZE = 1000


class TCPSender:
    """Segments an outbound stream, honours the peer's window and retransmits on timeout."""

    def __init__(
        self,
        stream: ByteStream,
        isn: Wrap32,
        initial_rto_ms: int,
        max_payload_size: int = MAX_PAYLOAD_SIZE,
    ) -> None:
        self._stream = stream
        self._isn = isn
        self._initial_rto_ms = initial_rto_ms
        self._max_payload_size = max_payload_size
        self._syn_sent = False
        self._fin_sent = False
        self._next_seqno = 0
        self._ack_seqno = 0
        self._window_size = 1
        self._consecutive_retransmissions = 0
        self._current_rto_ms = 0
        self._timer_ms = 0
        self._timer_running = False
        self._outstanding: deque[TCPSenderMessage] = deque()

    @property
    def stream(self) -> ByteStream:
        """The outbound byte stream."""
        return self._stream

    def sequence_numbers_in_flight(self) -> int:
        return self._next_seqno - self._ack_seqno

    def consecutive_retransmissions(self) -> int:
        return self._consecutive_retransmissions

    def make_empty_message(self) -> TCPSenderMessage:
        return TCPSenderMessage(
            seqno=Wrap32.wrap(self._next_seqno, self._isn), rst=self._stream.has_error()
        )

    def push(self, transmit: TransmitFunction) -> None:
        """Send as many segments as the window allows."""
        window = self._window_size or 1
        while window > self.sequence_numbers_in_flight() and not self._fin_sent:
            syn = False
            if not self._syn_sent:
                self._current_rto_ms = self._initial_rto_ms
                syn = self._syn_sent = True
            rst = self._stream.has_error()
            room = window - self.sequence_numbers_in_flight() - int(syn)
            room = min(self._max_payload_size, room)
            payload = self._stream.peek()[:room]
            self._stream.pop(len(payload))

            fin = False
            if self._stream.is_finished():
                used = self.sequence_numbers_in_flight() + int(syn) + len(payload)
                if window > used:
                    fin = self._fin_sent = True

            msg = TCPSenderMessage(
                seqno=Wrap32.wrap(self._next_seqno, self._isn),
                syn=syn,
                payload=payload,
                fin=fin,
                rst=rst,
            )
            if msg.sequence_length() == 0 and not rst:
                break
            if not self._timer_running:
                self._timer_running = True
                self._timer_ms = 0
            transmit(msg)
            self._outstanding.append(msg)
            self._next_seqno += msg.sequence_length()
            if fin or rst:
                break

    def receive(self, msg: TCPReceiverMessage) -> None:
        """Process an acknowledgment and window update from the peer."""
        if msg.rst:
            self._stream.set_error()
            return
        self._window_size = msg.window_size
        if msg.ackno is None:
            return
        ack = msg.ackno.unwrap(self._isn, self._next_seqno)
        if ack > self._next_seqno:
            return
        if ack > self._ack_seqno:
            self._ack_seqno = ack
            while self._outstanding:
                seg = self._outstanding[0]
                end = seg.seqno.unwrap(self._isn, self._next_seqno) + seg.sequence_length()
                if end > ack:
                    break
                self._outstanding.popleft()
            self._current_rto_ms = self._initial_rto_ms
            self._timer_ms = 0
            self._consecutive_retransmissions = 0
        if not self._outstanding:
            self._timer_running = False

    def tick(self, ms_since_last_tick: int, transmit: TransmitFunction) -> None:
        """Advance the retransmission timer, resending the oldest segment on expiry."""
        if not self._timer_running:
            return
        self._timer_ms += ms_since_last_tick
        if self._timer_ms >= self._current_rto_ms:
            transmit(self._outstanding[0])
            if self._window_size > 0:
                self._consecutive_retransmissions += 1
                self._current_rto_ms *= 2
            self._timer_ms = 0