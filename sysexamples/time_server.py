"""A TCP server that tells each client the time, with a load ticker."""

from __future__ import annotations

import os
import re
import socket
import sys
import threading
import time
from typing import TextIO

_BACKLOG = 10
_TICK_INTERVAL = 5.0
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _load_average() -> float:
    try:
        return os.getloadavg()[0]
    except (AttributeError, OSError):
        return 0.0


def handle_client(conn: socket.socket) -> str:
    """Send the current local time to ``conn`` and close it."""
    text = time.ctime() + "\n"
    with conn:
        conn.sendall(text.encode())
    return text


def ticker(
    interval: float = _TICK_INTERVAL,
    stop: threading.Event | None = None,
    stream: TextIO | None = None,
) -> int:
    """Report the time and load every ``interval`` seconds until ``stop`` is set.

    Returns how many reports were written.
    """
    halt = threading.Event() if stop is None else stop
    ticks = 0
    while not halt.wait(interval):
        out = sys.stdout if stream is None else stream
        out.write(f"ticker: time: {time.ctime()}, average load: {_load_average():.2f}\n")
        ticks += 1
    return ticks


def serve(port: int, max_connections: int | None = None) -> int:
    """Accept TCP connections on ``port`` and answer each on its own thread.

    Stops after ``max_connections`` when given; returns how many were handled.
    """
    stop = threading.Event()
    tick = threading.Thread(target=ticker, args=(_TICK_INTERVAL, stop), name="ticker", daemon=True)
    tick.start()
    workers = []
    handled = 0
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server.bind(("", port))
            server.listen(_BACKLOG)
            while max_connections is None or handled < max_connections:
                conn, _ = server.accept()
                worker = threading.Thread(target=handle_client, args=(conn,), name="handler")
                worker.start()
                workers.append(worker)
                handled += 1
    finally:
        for worker in workers:
            worker.join()
        stop.set()
        tick.join()
    return handled


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Serve the time on the port given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: time-server PORT\n")
        return 1
    serve(_atoi(args[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())