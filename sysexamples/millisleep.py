"""Sleeping for a whole number of milliseconds."""

import time


def millisecond_sleep(milliseconds: int) -> None:
    """Block the calling thread for ``milliseconds`` milliseconds.

    Raises ValueError for a negative duration. Interrupted sleeps are
    resumed until the full interval has passed.
    """
    if milliseconds < 0:
        raise ValueError(f"sleep duration must not be negative: {milliseconds}")
    time.sleep(milliseconds / 1000)