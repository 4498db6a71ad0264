"""TCP endpoint core: byte streams, reassembly, wrapping sequence numbers, sender and receiver."""

__version__ = "0.1.0"

__all__ = ["byte_stream", "wrapping_integers", "reassembler", "messages", "tcp_receiver", "tcp_sender"]