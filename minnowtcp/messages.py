"""Messages exchanged between a TCP sender and a TCP receiver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from minnowtcp.wrapping_integers import Wrap32


@dataclass(frozen=True)
class TCPSenderMessage:
    """A segment from a sender: sequence number, flags and payload."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """Number of sequence numbers this segment occupies (SYN and FIN count one each)."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass(frozen=True)
class TCPReceiverMessage:
    """Acknowledgment and flow-control window sent back by a receiver."""

    ackno: Optional[Wrap32] = None
    window_size: int = 0
    rst: bool = False