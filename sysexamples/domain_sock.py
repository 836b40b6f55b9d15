"""A client and server talking over a Unix domain socket."""

from __future__ import annotations

import contextlib
import os
import socket
import sys
import threading

CLIENT_GREETING = "hello from a client"
SERVER_GREETING = "hello from server"
_BUFFER_SIZE = 256
_BACKLOG = 5


def client_connect(path, message: str = CLIENT_GREETING) -> str:
    """Send ``message`` to the server at ``path`` and return its reply."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as conn:
        conn.connect(os.fspath(path))
        conn.sendall(message.encode()[:_BUFFER_SIZE])
        reply = conn.recv(_BUFFER_SIZE).decode(errors="replace")
    print(f"message from server: {reply}")
    return reply


def handle_connection(conn: socket.socket) -> str:
    """Read the client's message, answer it and close the connection."""
    with conn:
        message = conn.recv(_BUFFER_SIZE).decode(errors="replace")
        print(f"message from client: {message}")
        conn.sendall(SERVER_GREETING.encode())
    return message


def server_listen(path, max_connections: int | None = None) -> int:
    """Serve connections on ``path``, each on its own thread.

    Stops after ``max_connections`` when given; returns how many were handled.
    """
    address = os.fspath(path)
    with contextlib.suppress(FileNotFoundError):
        os.unlink(address)
    workers = []
    handled = 0
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as server:
        server.bind(address)
        try:
            server.listen(_BACKLOG)
            while max_connections is None or handled < max_connections:
                conn, _ = server.accept()
                worker = threading.Thread(target=handle_connection, args=(conn,))
                worker.start()
                workers.append(worker)
                handled += 1
        finally:
            for worker in workers:
                worker.join()
            with contextlib.suppress(FileNotFoundError):
                os.unlink(address)
    return handled


def client_main(argv: list[str] | None = None) -> int:
    """Connect to the socket file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage:")
        print("client [socket file]")
        return 1
    client_connect(args[0])
    return 0


def server_main(argv: list[str] | None = None) -> int:
    """Serve on the socket file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage:", end="")
        print("server [socket file]")
        return 1
    server_listen(args[0])
    return 0