"""
Exceptions and File I/O Example
Part 4: Lambdas that fail, and files that come and go

This module demonstrates:
- Catching an arithmetic fault inside a lambda-style callable
- A temporary file round-trip with OS errors reported, not raised

Usage:
    python -m lambda_examples.io_demo
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)

FILE_LINE = "Hello from Python Lambda!"


def _divide_ten(i: int) -> int:
    if i == 0:
        raise ZeroDivisionError("Division by zero!")
    # truncate toward zero: 10 / -3 gives -3, not -4
    return int(10 / i)


def make_safe_print(
    operation: Callable[[int], int] = _divide_ten,
) -> Callable[[int], Optional[int]]:
    """Wrap an int operation so a ZeroDivisionError is printed, never raised"""

    def safe_print(i: int) -> Optional[int]:
        try:
            result = operation(i)
        except ZeroDivisionError as e:
            print(f"Error: {e}")
            return None
        print(result)
        return result

    return safe_print


def lambda_with_exception_handling(
    inputs: Sequence[int] = (2, 0),
) -> List[Optional[int]]:
    safe_print = make_safe_print()
    return [safe_print(i) for i in inputs]


def file_operations_example(line: str = FILE_LINE) -> Optional[List[str]]:
    """
    Write one line to a temporary file, read it back and delete the file.

    Any OSError along the way is printed as "File Error: ..." and the
    function returns None. The file is removed on both paths.
    """
    try:
        fd, name = tempfile.mkstemp(prefix="lambda", suffix=".txt")
        os.close(fd)
        path = Path(name)
        logger.debug(f"Created temporary file {path}")

        try:
            path.write_text(line + "\n", encoding="utf-8")
            with path.open(encoding="utf-8") as handle:
                lines = [text.rstrip("\n") for text in handle]
        finally:
            path.unlink(missing_ok=True)

        for text in lines:
            print(text)
        return lines
    except OSError as e:
        print(f"File Error: {e}")
        return None


if __name__ == "__main__":
    lambda_with_exception_handling()
    file_operations_example()
