"""Writing, reading and listing files with low-level calls."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

FILE_DATA = "1234567890abcdefghijklmnopqrstuvwxyz"
FILE_NAME = "temp.dat"
_CHUNK_SIZE = 5


def list_directory(path=".") -> list[str]:
    """Return the names of the entries in ``path``."""
    with os.scandir(path) as entries:
        return [entry.name for entry in entries]


def write_all(fd: int, data: bytes) -> int:
    """Write all of ``data`` to ``fd``, retrying short writes."""
    view = memoryview(data)
    total = 0
    while view:
        written = os.write(fd, view)
        print(f"wrote {written} bytes")
        view = view[written:]
        total += written
    return total


def read_chunks(path, chunk_size: int = _CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the file at ``path`` in pieces of at most ``chunk_size`` bytes."""
    if chunk_size < 1:
        raise ValueError(f"chunk size must be positive: {chunk_size}")
    fd = os.open(path, os.O_RDONLY)
    try:
        while chunk := os.read(fd, chunk_size):
            yield chunk
    finally:
        os.close(fd)


def file_rw_demo(path=FILE_NAME, data: str = FILE_DATA) -> bytes:
    """Write ``data`` to ``path``, echo it back in chunks, then delete it.

    Returns what was read back.
    """
    fd = os.open(path, os.O_CREAT | os.O_TRUNC | os.O_RDWR, 0o666)
    try:
        write_all(fd, data.encode())
    finally:
        os.close(fd)
    print("file contents written.")

    chunks = []
    for chunk in read_chunks(path):
        sys.stdout.write(chunk.decode(errors="replace"))
        chunks.append(chunk)
    print()
    os.unlink(path)
    return b"".join(chunks)


def dir_list_main(argv: list[str] | None = None) -> int:
    """Print the entries of a directory, the root by default."""
    args = sys.argv[1:] if argv is None else list(argv)
    directory = args[0] if args else "/"
    try:
        for name in list_directory(directory):
            print(f"name: {name}")
    except OSError as error:
        print(f"An error has occurred: {error}")
    return 0