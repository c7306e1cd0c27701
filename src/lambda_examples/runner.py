#!/usr/bin/env python3
"""
Example Runner
Runs every demonstration in a fixed order, printing a section title first

Usage:
    lambda-examples
    python -m lambda_examples
"""

import logging
from typing import Callable, List, Optional, Tuple

import click

from lambda_examples.collections_demo import (
    database_simulation_example,
    grouping_with_streams,
    method_reference_example,
    optional_example,
    sorting_with_lambda,
    stream_filter_example,
    stream_map_example,
    stream_reduce_example,
)
from lambda_examples.concurrency import (
    multithreading_example,
    parallel_stream_example,
)
from lambda_examples.functional_interfaces import (
    consumer_example,
    custom_functional_interface_example,
    function_example,
    predicate_example,
    supplier_example,
)
from lambda_examples.io_demo import (
    file_operations_example,
    lambda_with_exception_handling,
)
from lambda_examples.network import http_client_example

logger = logging.getLogger(__name__)

EXAMPLES: List[Tuple[str, Callable]] = [
    ("Function Example: Getting String Length", function_example),
    ("Predicate Example: Checking Even Numbers", predicate_example),
    ("Consumer Example: Printing Greetings", consumer_example),
    ("Supplier Example: Generating Messages", supplier_example),
    ("Custom Functional Interface Example", custom_functional_interface_example),
    ("Filtering Names Using Stream API", stream_filter_example),
    ("Mapping Names to Uppercase", stream_map_example),
    ("Reducing Numbers Using Stream API", stream_reduce_example),
    ("Method References Example", method_reference_example),
    ("Handling Nulls Using Optional", optional_example),
    ("Sorting Data Using Lambda", sorting_with_lambda),
    ("Grouping Data Using Streams", grouping_with_streams),
    ("Multithreading Using Lambda", multithreading_example),
    ("Parallel Processing Using Streams", parallel_stream_example),
    ("Exception Handling Inside Lambda", lambda_with_exception_handling),
    ("File Operations Using Lambda", file_operations_example),
    ("Simulating Database Queries Using Lambda", database_simulation_example),
    ("Making HTTP Requests Using Lambda", http_client_example),
]


def run_all(examples: Optional[List[Tuple[str, Callable]]] = None) -> None:
    """Run each example in order; the first unhandled fault stops the run"""
    if examples is None:
        examples = EXAMPLES
    logger.info(f"Running {len(examples)} examples")
    for title, example_func in examples:
        print(title)
        try:
            example_func()
        except Exception:
            logger.exception(f"Exception in {title}")
            raise
    logger.info("All examples completed")


@click.command()
def main():
    """Run all lambda examples"""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    run_all()


if __name__ == "__main__":
    main()
