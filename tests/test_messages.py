from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.wrapping_integers import Wrap32


def test_empty_message_occupies_nothing():
    msg = TCPSenderMessage()
    assert msg.sequence_length() == 0
    assert msg.seqno == Wrap32(0)


def test_flags_and_payload_count():
    msg = TCPSenderMessage(seqno=Wrap32(7), syn=True, payload=b"hello", fin=True)
    assert msg.sequence_length() == len(b"hello") + 2


def test_rst_occupies_no_sequence_number():
    assert TCPSenderMessage(rst=True).sequence_length() == 0


def test_syn_alone():
    assert TCPSenderMessage(syn=True).sequence_length() == 1


def test_receiver_message_defaults():
    msg = TCPReceiverMessage()
    assert msg.ackno is None
    assert msg.window_size == 0
    assert msg.rst is False