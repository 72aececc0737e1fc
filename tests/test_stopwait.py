import socket
import struct
import threading

import pytest

from netlab.stopwait import (
    FRAME_SIZE,
    Frame,
    FrameKind,
    Receiver,
    Sender,
    send_messages,
    serve,
)


def test_frame_round_trip():
    frame = Frame(FrameKind.SEQ, 3, 0, "payload")
    assert Frame.unpack(frame.pack()) == frame


def test_frame_wire_layout():
    packed = Frame(FrameKind.ACK, 0, 1).pack()
    assert len(packed) == 1036
    assert packed[:12] == struct.pack("<3i", 0, 0, 1)
    assert packed[12:] == b"\0" * 1024


def test_frame_rejects_long_data():
    with pytest.raises(ValueError):
        Frame(FrameKind.SEQ, 0, 0, "x" * 1024).pack()


def test_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        Frame.unpack(b"\0" * (FRAME_SIZE - 1))


def test_unpack_rejects_unknown_kind():
    data = struct.pack("<3i", 7, 0, 0) + b"\0" * 1024
    with pytest.raises(ValueError):
        Frame.unpack(data)


def test_receiver_acknowledges_expected_frame():
    receiver = Receiver()
    ack = receiver.handle(Frame(FrameKind.SEQ, 0, 0, "a"))
    assert ack == Frame(FrameKind.ACK, 0, 1)
    assert receiver.received == ["a"]
    assert receiver.frame_id == 1


def test_receiver_rejects_out_of_order_and_still_advances():
    receiver = Receiver()
    assert receiver.handle(Frame(FrameKind.SEQ, 1, 0, "late")) is None
    assert receiver.frame_id == 1
    assert receiver.handle(Frame(FrameKind.SEQ, 1, 0, "now")) == Frame(FrameKind.ACK, 0, 2)
    assert receiver.received == ["now"]


def test_receiver_ignores_non_data_frames():
    receiver = Receiver()
    assert receiver.handle(Frame(FrameKind.ACK, 0, 1)) is None
    assert receiver.handle(None) is None
    assert receiver.received == []


def test_sender_numbers_frames():
    sender = Sender()
    first = sender.next_frame("a")
    assert (first.kind, first.seq_no, first.data) == (FrameKind.SEQ, 0, "a")
    assert sender.accept_ack(Frame(FrameKind.ACK, 0, 1)) is True
    assert sender.next_frame("b").seq_no == 1


def test_sender_stops_after_missing_ack():
    sender = Sender()
    sender.next_frame("a")
    assert sender.accept_ack(Frame(FrameKind.ACK, 0, 5)) is False
    with pytest.raises(RuntimeError):
        sender.next_frame("b")


def test_sender_treats_none_as_missing_ack():
    sender = Sender()
    sender.next_frame("a")
    assert sender.accept_ack(None) is False
    assert sender.frame_id == 1


def test_send_and_serve_over_udp():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        result = {}
        thread = threading.Thread(
            target=lambda: result.setdefault("received", serve(sock, 3)), daemon=True
        )
        thread.start()
        acks = send_messages(["one", "two", "three"], sock.getsockname(), 5.0)
        thread.join(5)
    assert acks == [True, True, True]
    assert result["received"] == ["one", "two", "three"]


def test_send_stops_when_no_ack_arrives():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as silent:
        silent.bind(("127.0.0.1", 0))
        acks = send_messages(["one", "two"], silent.getsockname(), 0.2)
    assert acks == [False]