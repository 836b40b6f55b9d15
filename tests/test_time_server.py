import io
import socket
import threading
import time

from sysexamples.time_server import handle_client, main, serve, ticker


def _parse_ctime(text):
    return time.strptime(text.strip(), "%a %b %d %H:%M:%S %Y")


def _free_port():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _fetch(port):
    for _ in range(200):
        try:
            with socket.create_connection(("127.0.0.1", port), timeout=5) as conn:
                chunks = []
                while data := conn.recv(256):
                    chunks.append(data)
                return b"".join(chunks).decode()
        except ConnectionRefusedError:
            time.sleep(0.01)
    raise AssertionError("server never became ready")


def test_handle_client_sends_time_line():
    server_side, client_side = socket.socketpair()
    with client_side:
        sent = handle_client(server_side)
        received = client_side.recv(256).decode()
    assert received == sent
    assert received.endswith("\n")
    assert _parse_ctime(received).tm_year >= 2000


def test_ticker_stops_immediately_when_stopped():
    stop = threading.Event()
    stop.set()
    out = io.StringIO()
    assert ticker(0.01, stop, out) == 0
    assert out.getvalue() == ""


def test_ticker_writes_reports():
    stop = threading.Event()
    out = io.StringIO()
    results = []
    worker = threading.Thread(target=lambda: results.append(ticker(0.01, stop, out)))
    worker.start()
    time.sleep(0.2)
    stop.set()
    worker.join(timeout=5)
    lines = out.getvalue().splitlines()
    assert results[0] == len(lines)
    assert lines
    for line in lines:
        assert line.startswith("ticker: time: ")
        assert ", average load: " in line


def test_serve_answers_clients():
    port = _free_port()
    results = []
    server = threading.Thread(target=lambda: results.append(serve(port, 2)))
    server.start()
    replies = [_fetch(port), _fetch(port)]
    server.join(timeout=10)
    assert results == [2]
    for reply in replies:
        assert reply.endswith("\n")
        assert _parse_ctime(reply).tm_year >= 2000


def test_main_without_port(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err