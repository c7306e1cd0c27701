"""
Tests for the example runner and its click entry point
"""

from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from lambda_examples import runner
from lambda_examples.network import http_client_example


@pytest.fixture
def offline_examples():
    """All examples, with the HTTP request replaced by a stub"""
    stub = Mock(return_value="{}")
    examples = [
        (title, stub if func is http_client_example else func)
        for title, func in runner.EXAMPLES
    ]
    return examples, stub


def test_registry_order():
    titles = [title for title, _ in runner.EXAMPLES]
    assert len(titles) == 18
    assert titles[0] == "Function Example: Getting String Length"
    assert titles[5] == "Filtering Names Using Stream API"
    assert titles[-1] == "Making HTTP Requests Using Lambda"


def test_run_all_prints_titles_in_order(offline_examples, capsys):
    examples, stub = offline_examples
    runner.run_all(examples)

    out = capsys.readouterr().out
    positions = [out.index(title) for title, _ in examples]
    assert positions == sorted(positions)
    assert "Sum of numbers: 25" in out
    assert "Error: Division by zero!" in out
    stub.assert_called_once_with()


def test_run_all_stops_on_unhandled_fault(capsys):
    later = Mock()
    examples = [
        ("Broken", Mock(side_effect=ConnectionError("network down"))),
        ("Never reached", later),
    ]
    with pytest.raises(ConnectionError):
        runner.run_all(examples)

    later.assert_not_called()
    assert "Never reached" not in capsys.readouterr().out


def test_cli_exits_zero(offline_examples):
    examples, _ = offline_examples
    with patch.object(runner, "EXAMPLES", examples):
        result = CliRunner().invoke(runner.main, [])

    assert result.exit_code == 0, result.output
    assert "Function Example: Getting String Length" in result.output
    assert "Database Query Result: Sita" in result.output


def test_cli_exits_nonzero_on_fault():
    examples = [("Broken", Mock(side_effect=RuntimeError("boom")))]
    with patch.object(runner, "EXAMPLES", examples):
        result = CliRunner().invoke(runner.main, [])

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
