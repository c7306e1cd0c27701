# helpers.py
import asyncio
import functools
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

# Timing Decorator


def timer(func: Callable) -> Callable:
    """Timing decorator that logs how long a demonstration took"""

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        duration = time.perf_counter() - start
        logger.debug(f"⏱️  {func.__name__} took {duration:.3f} seconds")
        return result

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = await func(*args, **kwargs)
        duration = time.perf_counter() - start
        logger.debug(f"⏱️  {func.__name__} took {duration:.3f} seconds")
        return result

    return async_wrapper if asyncio.iscoroutinefunction(func) else sync_wrapper


def debug_calls(func: Callable) -> Callable:
    """Decorator to trace calls; failures are logged and re-raised"""

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        logger.debug(f"Calling function: {func.__name__}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"✗ {func.__name__} failed: {e}")
            raise
        logger.debug(f"✓ {func.__name__} completed successfully")
        return result

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        logger.debug(f"Calling async function: {func.__name__}")
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"✗ {func.__name__} failed: {e}")
            raise
        logger.debug(f"✓ {func.__name__} completed successfully")
        return result

    return async_wrapper if asyncio.iscoroutinefunction(func) else sync_wrapper
