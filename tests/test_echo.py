import socket
import threading

import pytest

from netlab.echo import chat, handle_client, serve


@pytest.fixture
def echo_server():
    server = socket.create_server(("127.0.0.1", 0))
    stop = threading.Event()
    thread = threading.Thread(target=serve, args=(server, stop), daemon=True)
    thread.start()
    try:
        yield server.getsockname()[:2]
    finally:
        stop.set()
        thread.join(5)
        server.close()


def test_handle_client_echoes_until_exit():
    server_side, client_side = socket.socketpair()
    replies = []

    def client():
        with client_side:
            for word in (b"hello", b"world"):
                client_side.sendall(word)
                replies.append(client_side.recv(1024))
            client_side.sendall(b"exit")

    thread = threading.Thread(target=client, daemon=True)
    thread.start()
    with server_side:
        echoed = handle_client(server_side, ("127.0.0.1", 4000))
    thread.join(5)
    assert echoed == ["hello", "world"]
    assert replies == [b"hello", b"world"]


def test_handle_client_stops_when_peer_hangs_up():
    server_side, client_side = socket.socketpair()
    replies = []

    def client():
        client_side.sendall(b"once")
        replies.append(client_side.recv(1024))
        client_side.close()

    thread = threading.Thread(target=client, daemon=True)
    thread.start()
    with server_side:
        echoed = handle_client(server_side, ("127.0.0.1", 4000))
    thread.join(5)
    assert echoed == ["once"]
    assert replies == [b"once"]


def test_chat_returns_echoed_replies(echo_server):
    assert chat(echo_server, ["hi", "there"]) == ["hi", "there"]


def test_chat_stops_at_exit(echo_server):
    assert chat(echo_server, ["first", "exit", "never"]) == ["first"]


def test_chat_rejects_empty_message(echo_server):
    with pytest.raises(ValueError):
        chat(echo_server, ["ok", ""])


def test_chat_rejects_oversized_message(echo_server):
    with pytest.raises(ValueError):
        chat(echo_server, ["x" * 1024])


def test_serve_handles_concurrent_clients():
    server = socket.create_server(("127.0.0.1", 0))
    address = server.getsockname()[:2]
    stop = threading.Event()
    replies = {}

    def client(tag):
        replies[tag] = chat(address, [f"{tag}-1", f"{tag}-2"])

    def drive():
        workers = [threading.Thread(target=client, args=(tag,)) for tag in ("a", "b")]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join(5)
        stop.set()

    driver = threading.Thread(target=drive, daemon=True)
    driver.start()
    with server:
        clients = serve(server, stop)
    driver.join(5)
    assert clients == 2
    assert replies == {"a": ["a-1", "a-2"], "b": ["b-1", "b-2"]}