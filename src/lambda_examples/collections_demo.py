"""
Collection Pipelines Example
Part 2: filter, map, reduce and friends

This module demonstrates:
- Filtering and mapping with lambdas and built-in functions
- Folding a sequence with functools.reduce
- Passing an existing function (print) where a callable is expected
- Defaults for absent values
- Sorting in place and grouping by key
- A linear "database" search returning the first match

Usage:
    python -m lambda_examples.collections_demo
"""

import functools
import logging
import operator
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

NOT_FOUND = "Not Found"


def stream_filter_example(
    names: Sequence[str] = ("Amit", "Rahul", "Sita", "Krishna", "Arjun", "Manoj"),
    letter: str = "A",
) -> List[str]:
    """Keep the names starting with a letter, preserving order"""
    filtered_names = list(filter(lambda name: name.startswith(letter), names))
    print(f"Filtered names: {filtered_names}")
    return filtered_names


def stream_map_example(names: Sequence[str] = ("amit", "rahul", "sita")) -> List[str]:
    upper_names = list(map(str.upper, names))
    print(f"Uppercase names: {upper_names}")
    return upper_names


def stream_reduce_example(numbers: Sequence[int] = (1, 3, 5, 7, 9)) -> int:
    """Sum numbers by associative accumulation starting at 0"""
    total = functools.reduce(operator.add, numbers, 0)
    print(f"Sum of numbers: {total}")
    return total


def method_reference_example(
    names: Sequence[str] = ("Vikram", "Santosh", "Pooja"),
) -> List[str]:
    # map is lazy; list() drives print over every name
    list(map(print, names))
    return list(names)


def optional_example(city: Optional[str] = None, default: str = "Delhi") -> str:
    resolved = city if city is not None else default
    print(f"City (or default): {resolved}")
    return resolved


def sorting_with_lambda(
    cities: Sequence[str] = ("Mumbai", "Kolkata", "Bengaluru", "Delhi"),
) -> List[str]:
    """Sort a fresh list of cities in place"""
    cities = list(cities)
    cities.sort(key=lambda city: city)
    print(f"Sorted cities: {cities}")
    return cities


def grouping_with_streams(
    names: Sequence[str] = ("Raj", "Ramesh", "Sita", "Sanjay", "Arjun", "Asha"),
) -> Dict[str, List[str]]:
    """
    Group names by their first character.

    Members keep input order inside a group. Key order is not part of the
    contract; a dict simply reports keys in order of first appearance.
    """
    key_of = lambda name: name[0]
    grouped: Dict[str, List[str]] = defaultdict(list)
    for name in names:
        grouped[key_of(name)].append(name)

    grouped_names = dict(grouped)
    print(f"Grouped names by first letter: {grouped_names}")
    return grouped_names


def find_first(database: Sequence[str], query: str) -> Optional[str]:
    """Case-insensitive linear search; None when nothing matches"""
    matches = filter(lambda name: name.casefold() == query.casefold(), database)
    return next(matches, None)


def database_simulation_example(
    database: Sequence[str] = ("Ramesh", "Sita", "Rahul", "Amit"),
    search_query: str = "Sita",
) -> str:
    logger.debug(f"Searching {len(database)} records for {search_query!r}")
    match = find_first(database, search_query)
    result = match if match is not None else NOT_FOUND
    print(f"Database Query Result: {result}")
    return result


if __name__ == "__main__":
    stream_filter_example()
    stream_map_example()
    stream_reduce_example()
    method_reference_example()
    optional_example()
    sorting_with_lambda()
    grouping_with_streams()
    database_simulation_example()
