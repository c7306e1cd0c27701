"""
Concurrency Example
Part 3: Handing lambdas to worker threads

This module demonstrates:
- Submitting independent tasks to a fixed-size ThreadPoolExecutor
- Processing every element of a list on pool workers

Neither demonstration coordinates its tasks: there is no shared state,
no ordering guarantee and no result collection inside the demo.

Usage:
    python -m lambda_examples.concurrency
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Sequence, Tuple

from lambda_examples.helpers import timer

logger = logging.getLogger(__name__)

POOL_SIZE = 2


@timer
def multithreading_example(
    pool_size: int = POOL_SIZE,
) -> Tuple[ThreadPoolExecutor, List[Future]]:
    """
    Submit two print tasks to a two-worker pool, then shut the pool down
    without waiting for them. The closed pool and the futures are returned
    so callers may inspect or wait; the demonstration itself never does.
    """
    executor = ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="pool")
    futures = [
        executor.submit(
            lambda: print(f"Task 1 executed by {threading.current_thread().name}")
        ),
        executor.submit(
            lambda: print(f"Task 2 executed by {threading.current_thread().name}")
        ),
    ]
    executor.shutdown(wait=False)
    logger.debug(f"Submitted {len(futures)} tasks to a pool of {pool_size}")
    return executor, futures


def _process(name: str) -> str:
    line = f"{threading.current_thread().name} processed: {name}"
    print(line)
    return line


@timer
def parallel_stream_example(
    names: Sequence[str] = ("Ram", "Krishna", "Arjun", "Manoj", "Sita", "Meera"),
) -> List[str]:
    """Print every name from whichever worker picks it up"""
    with ThreadPoolExecutor(thread_name_prefix="worker") as executor:
        lines = list(executor.map(_process, names))
    return lines


if __name__ == "__main__":
    multithreading_example()
    parallel_stream_example()
