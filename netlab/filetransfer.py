"""File transfer over TCP: the client names a file, the server streams it back."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence
from pathlib import Path

BUFFER_SIZE = 1000
CHUNK_SIZE = 4096
HOST = "127.0.0.1"
TIMEOUT = 5.0
COMPLETED = b"completed"
ERROR = b"error"


class TransferError(Exception):
    """The requested file could not be transferred."""


def serve_once(server: socket.socket) -> str:
    """Accept one client, send the file it names and return that name.

    If the file cannot be opened the client is told so and TransferError is raised.
    """
    conn, _ = server.accept()
    with conn:
        name = conn.recv(BUFFER_SIZE).split(b"\0", 1)[0].decode("utf-8", errors="replace")
        try:
            handle = open(name, "rb")
        except OSError as exc:
            conn.sendall(ERROR)
            raise TransferError(f"cannot open {name!r}: {exc.strerror or exc}") from exc
        with handle:
            for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
                conn.sendall(chunk)
        conn.sendall(COMPLETED)
    return name


def fetch(name: str, destination: str | Path, address: tuple[str, int]) -> int:
    """Download the named file from the server into destination.

    Returns the number of bytes written.
    """
    payload = name.encode("utf-8")
    if not payload or len(payload) >= BUFFER_SIZE:
        raise ValueError(f"file name must be between 1 and {BUFFER_SIZE - 1} bytes")
    received = bytearray()
    with socket.create_connection(address, timeout=TIMEOUT) as sock:
        sock.sendall(payload)
        while chunk := sock.recv(BUFFER_SIZE):
            received += chunk
    if received == ERROR:
        raise TransferError(f"server could not open {name!r}")
    if not received.endswith(COMPLETED):
        raise TransferError("connection closed before the transfer completed")
    content = bytes(received[: -len(COMPLETED)])
    Path(destination).write_bytes(content)
    return len(content)


def _ask(prompt: str) -> str:
    print(prompt, end="", flush=True)
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    raise ValueError("no file name given")


def main(argv: Sequence[str] | None = None) -> int:
    """Serve one file request, or fetch a file as a client."""
    parser = argparse.ArgumentParser(prog="filetransfer", description="Transfer a file over TCP.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("port", type=int)
    parser.add_argument("name", nargs="?", help="file to request (client only)")
    parser.add_argument("destination", nargs="?", help="file to write into (client only)")
    args = parser.parse_args(argv)

    try:
        if args.role == "server":
            with socket.create_server(("", args.port), backlog=5) as server:
                print("listening....", flush=True)
                name = serve_once(server)
            print(f"file name received : {name}")
            return 0
        name = args.name if args.name is not None else _ask("Enter file name: ")
        destination = (
            args.destination
            if args.destination is not None
            else _ask("Enter file name to be written into: ")
        )
        size = fetch(name, destination, (HOST, args.port))
    except (OSError, ValueError, TransferError) as exc:
        print(f"filetransfer: {exc}", file=sys.stderr)
        return 1
    print(f"{size} bytes written to {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())