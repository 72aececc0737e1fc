"""Echo chat over TCP: one server answers many clients at once."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from collections.abc import Iterable, Iterator, Sequence

PORT = 6666
BUFFER_SIZE = 1024
HOST = "127.0.0.1"
TIMEOUT = 5.0
EXIT = "exit"
_POLL_INTERVAL = 0.05


def _encode(message: str) -> bytes:
    payload = message.encode("utf-8")
    if not payload or len(payload) >= BUFFER_SIZE:
        raise ValueError(f"message must be between 1 and {BUFFER_SIZE - 1} bytes")
    return payload


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def handle_client(conn: socket.socket, peer: tuple[str, int]) -> list[str]:
    """Echo every message from one client until it says ``exit`` or hangs up.

    Returns the messages that were echoed. The connection is closed afterwards.
    """
    host, port = peer[0], peer[1]
    echoed: list[str] = []
    with conn:
        while data := conn.recv(BUFFER_SIZE):
            message = _decode(data)
            if message == EXIT:
                print(f"Disconnected from {host}:{port}", flush=True)
                break
            print(f"Client [{host}:{port}] sent: {message}", flush=True)
            conn.sendall(data)
            echoed.append(message)
    return echoed


def serve(server: socket.socket, stop: threading.Event) -> int:
    """Accept clients on a listening socket until stop is set.

    Each client is served on its own thread. Returns the number of clients accepted.
    """
    server.settimeout(_POLL_INTERVAL)
    accepted = 0
    while not stop.is_set():
        try:
            conn, peer = server.accept()
        except TimeoutError:
            continue
        conn.settimeout(None)
        accepted += 1
        print(f"\nconnection accepted from {peer[0]}:{peer[1]}", flush=True)
        threading.Thread(target=handle_client, args=(conn, peer), daemon=True).start()
    return accepted


def _exchange(sock: socket.socket, messages: Iterable[str]) -> Iterator[str]:
    for message in messages:
        payload = _encode(message)
        sock.sendall(payload)
        if message == EXIT:
            return
        reply = sock.recv(BUFFER_SIZE)
        if not reply:
            raise ConnectionError("server closed the connection")
        yield _decode(reply)
    sock.sendall(_encode(EXIT))


def chat(address: tuple[str, int], messages: Iterable[str]) -> list[str]:
    """Send messages to an echo server one at a time and return its replies.

    The conversation ends at an ``exit`` message, or with one sent after the last.
    """
    with socket.create_connection(address, timeout=TIMEOUT) as sock:
        return list(_exchange(sock, messages))


def _prompted_words() -> Iterator[str]:
    while True:
        print("enter a message : \t", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        words = line.split()
        if words:
            yield words[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the echo server, or chat with it as a client."""
    parser = argparse.ArgumentParser(prog="echo", description="Multi-client TCP echo chat.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--host", default=HOST, help="server address (client only)")
    args = parser.parse_args(argv)

    if args.role == "server":
        try:
            with socket.create_server(("", args.port), backlog=6) as server:
                print("listening...", flush=True)
                serve(server, threading.Event())
        except KeyboardInterrupt:
            return 0
        except OSError as exc:
            print(f"echo: {exc}", file=sys.stderr)
            return 1
        return 0

    try:
        with socket.create_connection((args.host, args.port), timeout=TIMEOUT) as sock:
            sock.settimeout(None)
            print("connected to server")
            for reply in _exchange(sock, _prompted_words()):
                print(f"server: {reply}")
    except (OSError, ValueError) as exc:
        print(f"echo: {exc}", file=sys.stderr)
        return 1
    print("disconnected from server")
    return 0


if __name__ == "__main__":
    sys.exit(main())