"""
Tests for the functional interface examples
"""

from lambda_examples.functional_interfaces import (
    consumer_example,
    custom_functional_interface_example,
    function_example,
    operate,
    predicate_example,
    supplier_example,
)


def test_function_example_length(capsys):
    """Length of a six-character name is 6"""
    assert function_example() == 6
    assert capsys.readouterr().out == "Length of 'Ramesh': 6\n"


def test_predicate_example_even_and_odd(capsys):
    """8 is even, 11 is not"""
    assert predicate_example() == (True, False)
    out = capsys.readouterr().out
    assert "Is 8 even? True" in out
    assert "Is 11 even? False" in out


def test_consumer_example_greets(capsys):
    assert consumer_example() is None
    assert capsys.readouterr().out == "Namaste, Vikas\n"


def test_supplier_example_message(capsys):
    assert supplier_example() == "Welcome to India!"
    assert capsys.readouterr().out == "Welcome to India!\n"


def test_custom_operation_example(capsys):
    """Addition and multiplication of 10 and 5"""
    assert custom_functional_interface_example() == (15, 50)
    out = capsys.readouterr().out.splitlines()
    assert out == ["Addition: 15", "Multiplication: 50"]


def test_operate_accepts_any_callable():
    """Behaviour is passed as data"""
    assert operate(lambda a, b: a - b, 10, 5) == 5
    assert operate(max, 3, 9) == 9
