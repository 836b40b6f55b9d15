import os
import socket
import tempfile
import threading
import time

import pytest

from sysexamples.domain_sock import (
    CLIENT_GREETING,
    SERVER_GREETING,
    client_connect,
    client_main,
    handle_connection,
    server_listen,
    server_main,
)


@pytest.fixture
def socket_path():
    with tempfile.TemporaryDirectory() as directory:
        yield os.path.join(directory, "s")


def _connect_with_retry(path, message=CLIENT_GREETING):
    for _ in range(200):
        try:
            return client_connect(path, message)
        except (FileNotFoundError, ConnectionRefusedError):
            time.sleep(0.01)
    raise AssertionError("server never became ready")


def test_handle_connection_over_socketpair():
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.sendall(b"hi there")
        assert handle_connection(server_side) == "hi there"
        assert client_side.recv(256).decode() == SERVER_GREETING


def test_client_server_round_trip(socket_path):
    results = []
    server = threading.Thread(target=lambda: results.append(server_listen(socket_path, 2)))
    server.start()
    first = _connect_with_retry(socket_path)
    second = _connect_with_retry(socket_path, "another")
    server.join(timeout=10)
    assert first == SERVER_GREETING
    assert second == SERVER_GREETING
    assert results == [2]
    assert not os.path.exists(socket_path)


def test_client_missing_socket(socket_path):
    with pytest.raises(FileNotFoundError):
        client_connect(socket_path)


def test_client_main_usage(capsys):
    assert client_main([]) == 1
    assert "client [socket file]" in capsys.readouterr().out


def test_server_main_usage(capsys):
    assert server_main(["a", "b"]) == 1
    assert "server [socket file]" in capsys.readouterr().out