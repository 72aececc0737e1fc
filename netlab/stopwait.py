"""Stop-and-wait protocol over UDP: each frame must be acknowledged before the next."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

PORT = 6666
HOST = "127.0.0.1"
TIMEOUT = 5.0
DATA_SIZE = 1024

_FRAME = struct.Struct(f"<3i{DATA_SIZE}s")
FRAME_SIZE = _FRAME.size


class FrameKind(IntEnum):
    """What a frame carries."""

    ACK = 0
    SEQ = 1
    FIN = 2


@dataclass(frozen=True)
class Frame:
    """One frame: kind, sequence number, acknowledgement and data."""

    kind: FrameKind
    seq_no: int
    ack: int = 0
    data: str = ""

    def pack(self) -> bytes:
        """Encode as three little-endian ints and a 1024-byte data field."""
        payload = self.data.encode("utf-8")
        if len(payload) >= DATA_SIZE:
            raise ValueError(f"frame data must be shorter than {DATA_SIZE} bytes")
        try:
            return _FRAME.pack(int(self.kind), self.seq_no, self.ack, payload)
        except struct.error as exc:
            raise ValueError("frame numbers must fit in 32-bit signed integers") from exc

    @classmethod
    def unpack(cls, data: bytes) -> Frame:
        """Decode a frame, raising ValueError if it is malformed."""
        if len(data) != FRAME_SIZE:
            raise ValueError(f"frame must be {FRAME_SIZE} bytes, got {len(data)}")
        kind, seq_no, ack, raw = _FRAME.unpack(data)
        try:
            frame_kind = FrameKind(kind)
        except ValueError as exc:
            raise ValueError(f"unknown frame kind {kind}") from exc
        return cls(frame_kind, seq_no, ack, raw.split(b"\0", 1)[0].decode("utf-8", errors="replace"))


@dataclass
class Receiver:
    """Accepts frames in sequence; the expected number advances on every frame."""

    frame_id: int = 0
    received: list[str] = field(default_factory=list)

    def handle(self, frame: Frame | None) -> Frame | None:
        """Return the acknowledgement for a frame, or None if it is not accepted."""
        expected = self.frame_id
        self.frame_id += 1
        if frame is not None and frame.kind is FrameKind.SEQ and frame.seq_no == expected:
            self.received.append(frame.data)
            return Frame(FrameKind.ACK, 0, frame.seq_no + 1)
        return None


@dataclass
class Sender:
    """Numbers frames and checks their acknowledgements."""

    frame_id: int = 0
    acknowledged: bool = True

    def next_frame(self, data: str) -> Frame:
        """Build the next data frame; refuses while the last one is unacknowledged."""
        if not self.acknowledged:
            raise RuntimeError("previous frame was not acknowledged")
        return Frame(FrameKind.SEQ, self.frame_id, 0, data)

    def accept_ack(self, frame: Frame | None) -> bool:
        """Check the reply to the current frame and move on to the next number."""
        self.acknowledged = frame is not None and frame.seq_no == 0 and frame.ack == self.frame_id + 1
        self.frame_id += 1
        return self.acknowledged


def _decode(data: bytes) -> Frame | None:
    try:
        return Frame.unpack(data)
    except ValueError:
        return None


def serve(sock: socket.socket, count: int | None = None) -> list[str]:
    """Handle ``count`` datagrams (forever if None); return the accepted data."""
    receiver = Receiver()
    handled = 0
    while count is None or handled < count:
        data, peer = sock.recvfrom(FRAME_SIZE)
        handled += 1
        frame = _decode(data)
        ack = receiver.handle(frame)
        if ack is None:
            print("[-]Frame not received", flush=True)
            continue
        print(f"\n[+]Frame Received: {frame.data}", flush=True)
        sock.sendto(ack.pack(), peer)
        print("[+]Ack Sent", flush=True)
    return receiver.received


def send_messages(
    messages: Iterable[str], address: tuple[str, int] = (HOST, PORT), timeout: float = TIMEOUT
) -> list[bool]:
    """Send each message and wait for its acknowledgement; stop at the first missing one."""
    sender = Sender()
    results: list[bool] = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(timeout)
        for message in messages:
            sock.sendto(sender.next_frame(message).pack(), address)
            print("[+]Frame Sent", flush=True)
            try:
                reply = _decode(sock.recvfrom(FRAME_SIZE)[0])
            except TimeoutError:
                reply = None
            acknowledged = sender.accept_ack(reply)
            print("[+]Ack Received" if acknowledged else "[-]Ack not received", flush=True)
            results.append(acknowledged)
            if not acknowledged:
                break
    return results


def _prompted_words() -> Iterator[str]:
    while True:
        print("Enter Data: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        if line.split():
            yield line.split()[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the receiving server, or send frames as a client."""
    parser = argparse.ArgumentParser(prog="stopwait", description="Stop-and-wait protocol over UDP.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("messages", nargs="*", help="data to send (client only)")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--host", default=HOST)
    args = parser.parse_args(argv)
    try:
        if args.role == "server":
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.bind((args.host, args.port))
                serve(sock)
            return 0
        results = send_messages(args.messages or _prompted_words(), (args.host, args.port))
    except KeyboardInterrupt:
        return 0
    except (OSError, ValueError) as exc:
        print(f"stopwait: {exc}", file=sys.stderr)
        return 1
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())