import logging
import threading

import pytest

from sysexamples.bounded_buffer import BoundedBuffer, Entry


def test_fifo_order():
    bb = BoundedBuffer(5)
    for value in (7, 8, 9):
        bb.put(Entry(value))
    assert [bb.get().value for _ in range(3)] == [7, 8, 9]


def test_len_tracks_puts_and_gets():
    bb = BoundedBuffer(4)
    assert len(bb) == 0
    bb.put(Entry(1))
    bb.put(Entry(2))
    assert len(bb) == 2
    bb.get()
    assert len(bb) == 1


def test_describe_format():
    bb = BoundedBuffer(3)
    bb.put(Entry(1))
    bb.put(Entry(2))
    assert bb.describe() == (
        "buffer { size: 3, length: 2, head: 0, tail: 2, entries : [1, 2] }"
    )


def test_describe_after_wraparound():
    bb = BoundedBuffer(3)
    for value in (1, 2, 3):
        bb.put(Entry(value))
    bb.get()
    bb.get()
    bb.put(Entry(4))
    bb.put(Entry(5))
    text = bb.describe()
    assert "head: 2" in text
    assert "tail: 5" in text
    assert text.endswith("entries : [3, 4, 5] }")


def test_describe_empty():
    bb = BoundedBuffer(2)
    assert bb.describe().endswith("entries : [] }")


def test_invalid_size():
    with pytest.raises(ValueError):
        BoundedBuffer(0)


def test_put_blocks_when_full():
    bb = BoundedBuffer(1)
    bb.put(Entry(1))
    worker = threading.Thread(target=bb.put, args=(Entry(2),))
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    assert bb.get().value == 1
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert bb.get().value == 2


def test_get_blocks_when_empty():
    bb = BoundedBuffer(2)
    received = []
    worker = threading.Thread(target=lambda: received.append(bb.get().value))
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    bb.put(Entry(42))
    worker.join(timeout=5)
    assert received == [42]


def test_close_reports_leftovers(caplog):
    bb = BoundedBuffer(4)
    bb.put(Entry(1))
    bb.put(Entry(2))
    with caplog.at_level(logging.WARNING):
        assert bb.close() == 2
    assert "2 entries in bounded buffer not freed" in caplog.text


def test_close_empty_buffer():
    bb = BoundedBuffer(2)
    bb.put(Entry(1))
    bb.get()
    assert bb.close() == 0