"""Decorator utilities for timing calls to ImageKit."""
import time
import logging
import functools
from typing import Any, Callable, TypeVar, cast

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def log_execution_time(func: F) -> F:
    """Decorator to log function execution time.

    Args:
        func: The function to decorate

    Returns:
        Decorated function that logs execution time
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"{func.__qualname__} failed after {duration_ms:.1f}ms: {str(e)}")
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"{func.__qualname__} completed in {duration_ms:.1f}ms")
        return result
    return cast(F, wrapper)


def async_log_execution_time(func: F) -> F:
    """Decorator to log async function execution time.

    Args:
        func: The async function to decorate

    Returns:
        Decorated async function that logs execution time
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"{func.__qualname__} failed after {duration_ms:.1f}ms: {str(e)}")
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"{func.__qualname__} completed in {duration_ms:.1f}ms")
        return result
    return cast(F, wrapper)
