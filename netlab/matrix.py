"""Matrix multiplication service over TCP and UDP.

Matrices travel as 10-by-10 blocks of little-endian 32-bit integers, preceded by
the four dimensions (rows and columns of both operands).
"""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from collections.abc import Iterable, Sequence

MAX_DIM = 10
HOST = "127.0.0.1"
TIMEOUT = 5.0

_DIMENSIONS = struct.Struct("<4i")
_MATRIX = struct.Struct(f"<{MAX_DIM * MAX_DIM}i")
DIMENSIONS_SIZE = _DIMENSIONS.size
MATRIX_SIZE = _MATRIX.size
_DATAGRAM_SIZE = 2048


def _check_size(rows: int, cols: int) -> None:
    if not (0 <= rows <= MAX_DIM and 0 <= cols <= MAX_DIM):
        raise ValueError(f"matrix dimensions must be between 0 and {MAX_DIM}, got {rows}x{cols}")


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    _check_size(rows, cols)
    return rows, cols


def _conformable(a, b) -> tuple[int, int, int, int]:
    (a_rows, a_cols), (b_rows, b_cols) = _shape(a), _shape(b)
    if a_cols != b_rows:
        raise ValueError(f"cannot multiply: first matrix has {a_cols} columns, second has {b_rows} rows")
    return a_rows, a_cols, b_rows, b_cols


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the product of two matrices."""
    _conformable(a, b)
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _checked_dims(values: tuple[int, ...]) -> tuple[int, int, int, int]:
    if len(values) != 4:
        raise ValueError(f"expected 4 dimensions, got {len(values)}")
    _check_size(values[0], values[1])
    _check_size(values[2], values[3])
    return values  # type: ignore[return-value]


def encode_dimensions(dims: Iterable[int]) -> bytes:
    """Pack the rows and columns of both matrices."""
    return _DIMENSIONS.pack(*_checked_dims(tuple(int(d) for d in dims)))


def decode_dimensions(data: bytes) -> tuple[int, int, int, int]:
    """Unpack the rows and columns of both matrices."""
    if len(data) != DIMENSIONS_SIZE:
        raise ValueError(f"dimensions must be {DIMENSIONS_SIZE} bytes, got {len(data)}")
    return _checked_dims(_DIMENSIONS.unpack(data))


def encode_matrix(matrix: Sequence[Sequence[int]]) -> bytes:
    """Pack a matrix into a zero-padded 10-by-10 block."""
    _, cols = _shape(matrix)
    cells = [0] * (MAX_DIM * MAX_DIM)
    for i, row in enumerate(matrix):
        cells[i * MAX_DIM : i * MAX_DIM + cols] = [int(v) for v in row]
    try:
        return _MATRIX.pack(*cells)
    except struct.error as exc:
        raise ValueError("matrix values must fit in 32-bit signed integers") from exc


def decode_matrix(data: bytes, rows: int, cols: int) -> list[list[int]]:
    """Unpack the top-left rows-by-cols part of a 10-by-10 block."""
    if len(data) != MATRIX_SIZE:
        raise ValueError(f"matrix block must be {MATRIX_SIZE} bytes, got {len(data)}")
    _check_size(rows, cols)
    cells = _MATRIX.unpack(data)
    return [list(cells[i * MAX_DIM : i * MAX_DIM + cols]) for i in range(rows)]


def _compute(dims_data: bytes, a_data: bytes, b_data: bytes) -> tuple[list[list[int]], bytes]:
    a_rows, a_cols, b_rows, b_cols = decode_dimensions(dims_data)
    product = multiply(decode_matrix(a_data, a_rows, a_cols), decode_matrix(b_data, b_rows, b_cols))
    return product, encode_matrix(product)


def _recv_exact(conn: socket.socket, size: int) -> bytes:
    buffer = bytearray()
    while len(buffer) < size:
        chunk = conn.recv(size - len(buffer))
        if not chunk:
            raise ConnectionError("connection closed before the whole message arrived")
        buffer += chunk
    return bytes(buffer)


def _request(a, b) -> tuple[int, int, list[bytes]]:
    dims = _conformable(a, b)
    return dims[0], dims[3], [encode_dimensions(dims), encode_matrix(a), encode_matrix(b)]


def serve_tcp_once(server: socket.socket) -> list[list[int]]:
    """Accept one connection, send back the product and return it."""
    conn, _ = server.accept()
    with conn:
        parts = [_recv_exact(conn, size) for size in (DIMENSIONS_SIZE, MATRIX_SIZE, MATRIX_SIZE)]
        product, reply = _compute(*parts)
        conn.sendall(reply)
    return product


def request_tcp(a, b, address: tuple[str, int]) -> list[list[int]]:
    """Ask a TCP matrix server for the product of a and b."""
    rows, cols, payloads = _request(a, b)
    with socket.create_connection(address, timeout=TIMEOUT) as sock:
        for payload in payloads:
            sock.sendall(payload)
        return decode_matrix(_recv_exact(sock, MATRIX_SIZE), rows, cols)


def serve_udp_once(sock: socket.socket) -> list[list[int]]:
    """Read the three request datagrams, send back the product and return it."""
    dims_data, _ = sock.recvfrom(_DATAGRAM_SIZE)
    a_data, _ = sock.recvfrom(_DATAGRAM_SIZE)
    b_data, peer = sock.recvfrom(_DATAGRAM_SIZE)
    product, reply = _compute(dims_data, a_data, b_data)
    sock.sendto(reply, peer)
    return product


def request_udp(a, b, address: tuple[str, int]) -> list[list[int]]:
    """Ask a UDP matrix server for the product of a and b."""
    rows, cols, payloads = _request(a, b)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(TIMEOUT)
        for payload in payloads:
            sock.sendto(payload, address)
        reply, _ = sock.recvfrom(_DATAGRAM_SIZE)
    return decode_matrix(reply, rows, cols)


def _read_operands() -> tuple[list[list[int]], list[list[int]]]:
    print("Enter rows and columns for matrix 1 and 2, then the values of both: ", end="", flush=True)
    numbers = iter(int(t) for t in sys.stdin.read().split())

    def take() -> int:
        value = next(numbers, None)
        if value is None:
            raise ValueError("missing input value")
        return value

    dims = _checked_dims(tuple(take() for _ in range(4)))
    a = [[take() for _ in range(dims[1])] for _ in range(dims[0])]
    b = [[take() for _ in range(dims[3])] for _ in range(dims[2])]
    return a, b


def main(argv: Sequence[str] | None = None) -> int:
    """Run a matrix server for one request, or send one request as a client."""
    parser = argparse.ArgumentParser(prog="matrix", description="Multiply matrices over the network.")
    parser.add_argument("role", choices=("tcp-server", "tcp-client", "udp-server", "udp-client"))
    parser.add_argument("port", type=int)
    args = parser.parse_args(argv)
    try:
        if args.role == "tcp-server":
            with socket.create_server(("", args.port), backlog=3) as server:
                serve_tcp_once(server)
        elif args.role == "udp-server":
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.bind(("", args.port))
                serve_udp_once(sock)
        else:
            a, b = _read_operands()
            if args.role == "tcp-client":
                print("product is : ")
                for row in request_tcp(a, b, (HOST, args.port)):
                    print("".join(f"{v} " for v in row))
            else:
                for row in request_udp(a, b, (HOST, args.port)):
                    print("".join(f" {v}" for v in row))
            return 0
    except (OSError, ValueError) as exc:
        print(f"matrix: {exc}", file=sys.stderr)
        return 1
    print("received rows and columns\nreceived values for matrix 1\nreceived values for matrix 2")
    return 0


if __name__ == "__main__":
    sys.exit(main())