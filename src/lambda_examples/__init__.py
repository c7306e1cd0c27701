"""
Lambda Examples
Functions as values, collection pipelines, worker pools, file I/O and an
HTTP request, each shown by a small self-contained demonstration.
"""

from lambda_examples.helpers import debug_calls, timer

__version__ = "1.0.0"

__all__ = ["debug_calls", "timer"]
