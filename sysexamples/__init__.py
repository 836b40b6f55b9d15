"""Runnable examples of lists, threads, processes, pipes, signals, sockets and files."""

__version__ = "0.1.0"