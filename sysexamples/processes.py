"""Child processes: forking, pipes, exec pipelines and SIGCHLD reaping."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import time
from collections.abc import Callable
from typing import IO

MAX_PID = 1000
PARENT_MESSAGE = b"1111111"
CHILD_MESSAGE = b"22222222222222\n"
_WAIT_INTERVAL = 1.0
_REAP_POLL = 0.01


class ChildRegistry:
    """Tracks the process ids of running children, up to ``capacity``."""

    def __init__(self, capacity: int = MAX_PID) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive: {capacity}")
        self.capacity = capacity
        self._pids: list[int] = []

    def add(self, pid: int) -> None:
        """Record a running child."""
        print(f"add({pid})")
        if len(self._pids) >= self.capacity:
            raise OverflowError(f"no room to record child pid {pid}")
        self._pids.append(pid)
        print(f"added child pid = {pid}")

    def remove(self, pid: int) -> None:
        """Forget every record of ``pid``."""
        print(f"remove({pid})")
        if pid in self._pids:
            self._pids = [known for known in self._pids if known != pid]
            print(f"removed child pid = {pid}")

    def __len__(self) -> int:
        return len(self._pids)

    def __contains__(self, pid: object) -> bool:
        return pid in self._pids

    def reap(self) -> list[int]:
        """Collect every child that has exited, without blocking.

        Returns the reaped process ids in the order they were collected.
        """
        reaped = []
        while True:
            try:
                pid, _ = os.waitpid(-1, os.WNOHANG)
            except ChildProcessError:
                break
            if pid <= 0:
                break
            print(f"pid {pid} exited")
            self.remove(pid)
            reaped.append(pid)
        return reaped


def better_gets(stream: IO | None = None, length: int = 12):
    """Read one line of at most ``length - 1`` characters.

    Reading stops at a newline, which is consumed but not returned, or at
    end of input.
    """
    if length < 1:
        raise ValueError(f"length must be positive: {length}")
    source = sys.stdin if stream is None else stream
    chars = []
    empty = None
    while len(chars) < length - 1:
        c = source.read(1)
        if empty is None:
            empty = c[:0]
        if not c or c in ("\n", b"\n"):
            break
        chars.append(c)
    return (empty if empty is not None else "").join(chars)


def _run_child(action: Callable[[], None]) -> None:
    status = 0
    try:
        action()
    except BaseException:
        status = 1
    finally:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except Exception:
                pass
        os._exit(status)


def fork_demo(path) -> bytes:
    """Fork; parent and child both open ``path`` and write to it.

    The child writes at once, the parent after two seconds from its own
    offset. Returns the file's final contents.
    """
    some_value = 100
    pid = os.fork()
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
    if pid == 0:

        def child() -> None:
            print("hello from the child process")
            print(f"child's SomeValue = {200}")
            os.write(fd, CHILD_MESSAGE)
            os.close(fd)

        _run_child(child)
    try:
        print(f"hello from the parent process, chid pid = {pid}")
        time.sleep(2)
        print(f"parent's SomeValue = {some_value}")
        os.write(fd, PARENT_MESSAGE)
    finally:
        os.close(fd)
        os.waitpid(pid, 0)
    with open(path, "rb") as written:
        return written.read()


def pipe_value_demo(value: int = 5000) -> int:
    """Have a child send ``value`` through a pipe and return what arrived."""
    read_fd, write_fd = os.pipe()
    pid = os.fork()
    if pid == 0:

        def child() -> None:
            os.close(read_fd)
            with os.fdopen(write_fd, "w") as out:
                out.write(f"{value}\n")

        _run_child(child)
    os.close(write_fd)
    with os.fdopen(read_fd) as incoming:
        line = incoming.readline()
    os.waitpid(pid, 0)
    received = int(line)
    print(f"child sent value = {received}")
    return received


def exec_pipeline_demo() -> int:
    """Run ``echo -ne 'hello\\nworld\\n' | wc -l`` and return the line count."""
    echo = subprocess.Popen(["echo", "-ne", "hello\\nworld\\n"], stdout=subprocess.PIPE)
    try:
        wc = subprocess.run(
            ["wc", "-l"], stdin=echo.stdout, stdout=subprocess.PIPE, text=True, check=True
        )
    finally:
        echo.stdout.close()
        echo.wait()
    print(wc.stdout, end="")
    return int(wc.stdout.split()[0])


def _sleeping_child(delay: float) -> None:
    print("child starting.")
    time.sleep(delay)
    print("child exiting.")


def sigchld_demo(child_delay: float = 5.0) -> int:
    """Fork a child and wait for SIGCHLD; return the child's wait status."""
    statuses: list[int] = []

    def on_sigchld(signum, frame) -> None:
        try:
            _, status = os.wait()
        except ChildProcessError:
            return
        statuses.append(status)

    previous = signal.signal(signal.SIGCHLD, on_sigchld)
    try:
        pid = os.fork()
        if pid == 0:
            _run_child(lambda: _sleeping_child(child_delay))
        print("parent continuing....")
        while not statuses:
            print("parent waiting...")
            time.sleep(_WAIT_INTERVAL)
    finally:
        signal.signal(signal.SIGCHLD, previous)
    print("SIGCHLD received.")
    print(f"child exit status = {statuses[0]}")
    print("parent exiting")
    return statuses[0]


def reaper_demo(children: int = 5, child_delay: float = 5.0) -> list[int]:
    """Fork ``children`` children and reap them as SIGCHLD arrives.

    Returns the process ids in the order they were reaped.
    """
    registry = ChildRegistry()
    signalled = [False]
    reaped: list[int] = []

    def on_sigchld(signum, frame) -> None:
        signalled[0] = True

    previous = signal.signal(signal.SIGCHLD, on_sigchld)
    try:
        signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGCHLD})
        try:
            for _ in range(children):
                pid = os.fork()
                if pid == 0:
                    _run_child(lambda: _sleeping_child(child_delay))
                registry.add(pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, {signal.SIGCHLD})
        print("parent continuing....")
        while len(registry):
            if signalled[0]:
                signalled[0] = False
                print("SIGCHLD received.")
                reaped.extend(registry.reap())
            time.sleep(_REAP_POLL)
    finally:
        signal.signal(signal.SIGCHLD, previous)
    print("parent exiting")
    return reaped