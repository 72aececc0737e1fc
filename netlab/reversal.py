"""String reversal service over TCP and UDP."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

BUFFER_SIZE = 1024
HOST = "127.0.0.1"
TIMEOUT = 5.0


def reverse_text(text: str) -> str:
    """Return the text with its characters in reverse order."""
    return text[::-1]


def _encode(text: str) -> bytes:
    payload = text.encode("utf-8")
    if len(payload) >= BUFFER_SIZE:
        raise ValueError(f"message must be shorter than {BUFFER_SIZE} bytes")
    return payload


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def serve_tcp_once(server: socket.socket) -> str:
    """Accept one connection, answer with the reversed message, return the message."""
    conn, _ = server.accept()
    with conn:
        received = _decode(conn.recv(BUFFER_SIZE))
        conn.sendall(reverse_text(received).encode("utf-8"))
    return received


def request_tcp(text: str, address: tuple[str, int]) -> str:
    """Send text to a TCP reversal server and return its reply."""
    payload = _encode(text)
    with socket.create_connection(address, timeout=TIMEOUT) as sock:
        sock.sendall(payload)
        return _decode(sock.recv(BUFFER_SIZE))


def serve_udp_once(sock: socket.socket) -> str:
    """Answer one datagram with the reversed message, return the message."""
    data, peer = sock.recvfrom(BUFFER_SIZE)
    received = _decode(data)
    sock.sendto(reverse_text(received).encode("utf-8"), peer)
    return received


def request_udp(text: str, address: tuple[str, int]) -> str:
    """Send text to a UDP reversal server and return its reply."""
    payload = _encode(text)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(TIMEOUT)
        sock.sendto(payload, address)
        data, _ = sock.recvfrom(BUFFER_SIZE)
    return _decode(data)


def _read_word() -> str:
    print("Enter a string: ", end="", flush=True)
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    raise ValueError("no string given")


def main(argv: Sequence[str] | None = None) -> int:
    """Run a reversal server for one request, or send one request as a client."""
    parser = argparse.ArgumentParser(prog="reversal", description="Reverse a string over the network.")
    parser.add_argument("role", choices=("tcp-server", "tcp-client", "udp-server", "udp-client"))
    parser.add_argument("port", type=int)
    parser.add_argument("text", nargs="?", help="string to send (clients only)")
    args = parser.parse_args(argv)

    try:
        if args.role == "tcp-server":
            with socket.create_server(("", args.port), backlog=3) as server:
                print(f"Server listening on port {args.port}...")
                received = serve_tcp_once(server)
        elif args.role == "udp-server":
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.bind(("", args.port))
                print(f"UDP Server listening on port {args.port}...")
                received = serve_udp_once(sock)
        else:
            text = args.text if args.text is not None else _read_word()
            request = request_tcp if args.role == "tcp-client" else request_udp
            print(f"Reversed from server: {request(text, (HOST, args.port))}")
            return 0
    except (OSError, ValueError) as exc:
        print(f"reversal: {exc}", file=sys.stderr)
        return 1

    print(f"Received: {received}")
    print(f"Reversed string sent: {reverse_text(received)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())