# minnowtcp

This package holds the core of a TCP endpoint, written in pure Python. It has
no third-party dependencies. Each piece is a plain object: you feed it data and
messages, then read back the state it reports.

## Components

### `minnowtcp.byte_stream`

`ByteStream(capacity)` is a bounded, in-order byte pipe. A negative capacity
raises `ValueError`.

- **Writing:** `push(data)` accepts as much of `data` as the free capacity allows. Once the stream is closed, `push` is ignored.
- **Closing and write state:** `close()`, `is_closed()`, `available_capacity()` and `bytes_pushed()`.
- **Peeking:** `peek()` returns every buffered byte without removing any.
- **Popping:** `pop(length)` removes up to `length` bytes. A negative length raises `ValueError`.
- **Read state:** `is_finished()` is true once the stream is closed and empty. `bytes_buffered()` and `bytes_popped()` count bytes.
- **Errors:** `set_error()` and `has_error()`.

The module-level `read(stream, max_len)` pops up to `max_len` bytes and returns them.

### `minnowtcp.wrapping_integers`

`Wrap32(raw_value)` is a 32-bit sequence number. Values are reduced modulo 2**32.

- `Wrap32.wrap(n, zero_point)` turns an absolute sequence number into a wrapped one.
- `unwrap(zero_point, checkpoint)` returns the absolute sequence number closest to `checkpoint` that wraps to this value.
- `+ n` adds with wrap-around.
- Two `Wrap32` values are equal when their raw values are equal.

### `minnowtcp.reassembler`

`Reassembler(output)` takes substrings through `insert(first_index, data, is_last_substring)`. The substrings may arrive out of order and may overlap.

- Each byte is written to the `output` stream as soon as every byte before it is known.
- Bytes that arrive early are held back until the gap before them is filled.
- Bytes beyond the stream's capacity are discarded.
- The stream is closed after its last byte has been written.

`count_bytes_pending()` reports how many bytes are being held back.

### `minnowtcp.messages`

- `TCPSenderMessage` is a frozen dataclass with the fields `seqno`, `syn`, `payload`, `fin` and `rst`. Its `sequence_length()` counts SYN and FIN as one each, plus the payload length.
- `TCPReceiverMessage` is a frozen dataclass with the fields `ackno` (a `Wrap32` or `None`), `window_size` and `rst`.

### `minnowtcp.tcp_receiver`

`TCPReceiver(reassembler)` handles incoming segments.

- `receive(message)` takes a `TCPSenderMessage`.
  - A segment with `rst` set marks the stream as errored.
  - A segment with `syn` set sets the initial sequence number.
  - Segments that arrive before a SYN are ignored.
  - Otherwise the payload goes into the reassembler at the matching stream index.
- `send()` returns a `TCPReceiverMessage`.
  - The window size is the stream's free capacity, capped at 65535.
  - `ackno` is present once the SYN has been seen, and it counts FIN once the stream is closed.
  - `rst` reflects the stream's error state.
- The properties `reassembler` and `stream` give access to the receiver's parts.

### `minnowtcp.tcp_sender`

`TCPSender(stream, isn, initial_rto_ms, max_payload_size=1000)` sends an outbound stream to its peer.

- `push(transmit)` fills the peer's window with segments and passes each one to `transmit`.
  - The first segment carries SYN.
  - No segment carries more than `max_payload_size` payload bytes.
  - FIN is added once the stream is finished and the window has room for it.
  - A zero window is treated as a window of one, so a probe byte is still sent.
- `receive(msg)` handles a `TCPReceiverMessage`.
  - It updates the window.
  - It drops the segments that `ackno` fully acknowledges.
  - Acknowledgements beyond what has been sent are ignored.
  - A message with `rst` set marks the stream as errored.
- `tick(ms, transmit)` advances the retransmission timer.
  - On expiry it resends the oldest unacknowledged segment.
  - If the window is nonzero, it also doubles the timeout and counts a consecutive retransmission.
- `make_empty_message()` returns a message with no flags and no payload. It carries the next sequence number, plus RST if the stream has errored.
- `sequence_numbers_in_flight()` and `consecutive_retransmissions()` report the sender's state.
- The `stream` property returns the outbound stream.

The module also defines `MAX_PAYLOAD_SIZE` (1000) and the `TransmitFunction` type alias.

## Examples

Reassembling out-of-order data:

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.reassembler import Reassembler

r = Reassembler(ByteStream(8))
r.insert(3, b"def", False)
r.insert(0, b"abc", False)
assert read(r.output, 100) == b"abcdef"
```

Sending with retransmission:

```python
from minnowtcp.byte_stream import ByteStream
from minnowtcp.tcp_sender import TCPSender
from minnowtcp.wrapping_integers import Wrap32

sent = []
sender = TCPSender(ByteStream(4000), Wrap32(0), 1000)
sender.push(sent.append)          # sends the SYN
sender.stream.push(b"hello")
sender.tick(1000, sent.append)    # timeout: the SYN is sent again
assert sent[0] == sent[1] and sent[0].syn
```

Receiving:

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.messages import TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver
from minnowtcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(4000)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(100), syn=True, payload=b"hi", fin=True))
assert receiver.send().ackno == Wrap32(104)
assert read(receiver.stream, 10) == b"hi"
```

## What this package does not do

The package opens no sockets and does no I/O of any kind.

It has none of the following:

- a network interface or ARP layer,
- a router,
- IP or TCP header encoding,
- a combined TCP connection object,
- a command-line tool.

Moving messages between a sender and a receiver, and calling `tick` as time passes, is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```