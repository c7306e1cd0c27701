"""
Functional Interfaces Example
Part 1: Functions as values

This module demonstrates:
- A unary transform (str -> int)
- A predicate (int -> bool)
- A consumer that only produces a side effect
- A supplier that takes no arguments
- A custom two-argument operation passed around as a value

Usage:
    python -m lambda_examples.functional_interfaces
"""

import logging
from typing import Callable, Tuple

logger = logging.getLogger(__name__)

# Single-operation callables, named after what they accept and return
Transform = Callable[[str], int]
Predicate = Callable[[int], bool]
Consumer = Callable[[str], None]
Supplier = Callable[[], str]
MathOperation = Callable[[int, int], int]


def function_example(text: str = "Ramesh") -> int:
    """Apply a str -> int lambda to a fixed name"""
    string_length: Transform = lambda s: len(s)
    length = string_length(text)
    print(f"Length of '{text}': {length}")
    return length


def predicate_example(first: int = 8, second: int = 11) -> Tuple[bool, bool]:
    """Test two numbers against an is-even predicate"""
    is_even: Predicate = lambda n: n % 2 == 0
    results = (is_even(first), is_even(second))
    print(f"Is {first} even? {results[0]}")
    print(f"Is {second} even? {results[1]}")
    return results


def consumer_example(name: str = "Vikas") -> None:
    greet: Consumer = lambda who: print(f"Namaste, {who}")
    greet(name)


def supplier_example() -> str:
    supply_greeting: Supplier = lambda: "Welcome to India!"
    message = supply_greeting()
    print(message)
    return message


def operate(operation: MathOperation, a: int, b: int) -> int:
    """Run any two-argument operation; the behaviour arrives as data"""
    logger.debug(f"Applying {getattr(operation, '__name__', operation)} to {a}, {b}")
    return operation(a, b)


def custom_functional_interface_example(a: int = 10, b: int = 5) -> Tuple[int, int]:
    """Pass interchangeable addition and multiplication lambdas to operate()"""
    addition: MathOperation = lambda x, y: x + y
    multiplication: MathOperation = lambda x, y: x * y

    added = operate(addition, a, b)
    multiplied = operate(multiplication, a, b)
    print(f"Addition: {added}")
    print(f"Multiplication: {multiplied}")
    return added, multiplied


if __name__ == "__main__":
    function_example()
    predicate_example()
    consumer_example()
    supplier_example()
    custom_functional_interface_example()
