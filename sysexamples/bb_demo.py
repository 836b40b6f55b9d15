"""Suppliers and consumers exchanging entries through a bounded buffer."""

from __future__ import annotations

import logging
import random
import sys
from concurrent.futures import ThreadPoolExecutor

from sysexamples.bb_options import BBOptions, parse_bb_options
from sysexamples.bounded_buffer import BoundedBuffer, Entry
from sysexamples.millisleep import millisecond_sleep

logger = logging.getLogger(__name__)


def _random_delay(max_delay_ms: int) -> int:
    return random.randrange(max_delay_ms) if max_delay_ms > 0 else 0


def consumer_quota(options: BBOptions, consumer_id: int) -> int:
    """Return how many entries consumer ``consumer_id`` takes.

    The entries produced are shared out evenly; the first consumers take
    one extra each when they do not divide exactly.
    """
    if options.consumers < 1:
        raise ValueError(f"at least one consumer is needed: {options.consumers}")
    total = options.suppliers * options.gen_count
    share, extra = divmod(total, options.consumers)
    return share + 1 if consumer_id < extra else share


def supplier(bb: BoundedBuffer, options: BBOptions, supplier_id: int) -> list[int]:
    """Produce ``gen_count`` entries into ``bb`` and return their values."""
    logger.info('supplier { id: %d, state : "running", gen: %d }', supplier_id, options.gen_count)
    produced = []
    for offset in range(options.gen_count):
        millisecond_sleep(_random_delay(options.supplier_max_delay_ms))
        entry = Entry(supplier_id * options.gen_count + offset)
        bb.put(entry)
        produced.append(entry.value)
        logger.info("supplier { id: %d,  entry: %d }", supplier_id, entry.value)
        logger.info("%s", bb.describe())
    logger.info('supplier { id: %d, state: "exit" }', supplier_id)
    return produced


def consumer(bb: BoundedBuffer, options: BBOptions, consumer_id: int) -> list[int]:
    """Take this consumer's share of entries from ``bb`` and return their values."""
    quota = consumer_quota(options, consumer_id)
    logger.info('consumer { id: %d, state: "running", messages: %d }', consumer_id, quota)
    consumed = []
    for _ in range(quota):
        entry = bb.get()
        millisecond_sleep(_random_delay(options.consumer_max_delay_ms))
        consumed.append(entry.value)
        logger.info("consumer { id: %d, entry: %d }", consumer_id, entry.value)
        logger.info("%s", bb.describe())
    logger.info('consumer { id: %d, state: "exit" }', consumer_id)
    return consumed


def run(options: BBOptions) -> tuple[list[int], list[int]]:
    """Run all suppliers and consumers to completion.

    Returns the values taken by the consumers and those left in the buffer.
    """
    if options.consumers < 1:
        raise ValueError(f"at least one consumer is needed: {options.consumers}")
    bb = BoundedBuffer(options.bsize)
    thread_count = options.suppliers + options.consumers
    with ThreadPoolExecutor(max_workers=thread_count) as pool:
        for supplier_id in range(options.suppliers):
            logger.info(
                'pthread_create ( thread: %d, type: "supplier", id: %d }', supplier_id, supplier_id
            )
            pool.submit(supplier, bb, options, supplier_id)
        consumer_jobs = []
        for consumer_id in range(options.consumers):
            logger.info(
                'pthread_create ( thread: %d, type: "consumer", id: %d }',
                options.suppliers + consumer_id,
                consumer_id,
            )
            consumer_jobs.append(pool.submit(consumer, bb, options, consumer_id))
        logger.info('main { threads:  %d, state: "started" }', thread_count)
        consumed = [value for job in consumer_jobs for value in job.result()]
    logger.info('main { threads:  %d,  state: "joined" }', thread_count)
    logger.info("main { extra_entires:  %d }", len(bb))

    leftover = []
    for _ in range(len(bb)):
        entry = bb.get()
        logger.info("main { removed: %d }", entry.value)
        leftover.append(entry.value)
    bb.close()
    return consumed, leftover


def main(argv: list[str] | None = None) -> int:
    """Parse options, print them and run the demonstration."""
    options = parse_bb_options(argv)
    print(options.describe())
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        run(options)
    except ValueError as error:
        sys.stderr.write(f"bounded-buffer: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())