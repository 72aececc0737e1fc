"""Time service over UDP: a client asks with ``TIME`` and gets the server's clock."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
import time
from collections.abc import Sequence

PORT = 8080
BUFFER_SIZE = 1024
HOST = "127.0.0.1"
TIMEOUT = 5.0
REQUEST = b"TIME"

_TIME = struct.Struct("<q")


def encode_time(timestamp: int) -> bytes:
    """Pack a Unix timestamp as a signed 64-bit little-endian integer."""
    try:
        return _TIME.pack(int(timestamp))
    except struct.error as exc:
        raise ValueError(f"timestamp out of range: {timestamp}") from exc


def decode_time(data: bytes) -> int:
    """Unpack a Unix timestamp sent by the server."""
    if len(data) != _TIME.size:
        raise ValueError(f"time reply must be {_TIME.size} bytes, got {len(data)}")
    return _TIME.unpack(data)[0]


def _request_text(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def handle_request(data: bytes, now: int) -> bytes | None:
    """Return the reply to a request, or None if it is not a time request."""
    if _request_text(data) == REQUEST:
        return encode_time(now)
    return None


def serve(sock: socket.socket, count: int | None = None) -> int:
    """Answer time requests on a bound UDP socket.

    Handles ``count`` datagrams, or runs forever when count is None.
    Returns the number of time replies sent.
    """
    handled = 0
    replies = 0
    while count is None or handled < count:
        data, peer = sock.recvfrom(BUFFER_SIZE)
        handled += 1
        message = _request_text(data).decode("utf-8", errors="replace")
        print(f"Received request '{message}' from {peer[0]}:{peer[1]}", flush=True)
        now = int(time.time())
        reply = handle_request(data, now)
        if reply is None:
            continue
        print(f"Sending current time: {time.ctime(now)}", flush=True)
        sock.sendto(reply, peer)
        replies += 1
    return replies


def request_time(address: tuple[str, int] = (HOST, PORT), timeout: float = TIMEOUT) -> int:
    """Ask a time server for its clock and return it as a Unix timestamp."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(timeout)
        sock.sendto(REQUEST, address)
        data, _ = sock.recvfrom(BUFFER_SIZE)
    return decode_time(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the time server, or ask it for the time as a client."""
    parser = argparse.ArgumentParser(prog="timesvc", description="UDP time server and client.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--host", default=HOST, help="server address (client only)")
    args = parser.parse_args(argv)

    if args.role == "server":
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.bind(("", args.port))
                print(f"UDP Time Server listening on port {args.port}...", flush=True)
                serve(sock)
        except KeyboardInterrupt:
            return 0
        except OSError as exc:
            print(f"Bind failed: {exc}", file=sys.stderr)
            return 1
        return 0

    try:
        now = request_time((args.host, args.port))
    except (OSError, ValueError) as exc:
        print(f"recvfrom failed: {exc}", file=sys.stderr)
        return 1
    print(f"Server time: {time.ctime(now)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())