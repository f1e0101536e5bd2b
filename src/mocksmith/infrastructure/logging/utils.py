#!/usr/bin/env python3

"""Logging helpers shared by all mocksmith modules."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module (typically called with __name__)."""
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator logging how long parsing and generation steps take.

    Timing is only measured when debug logging is enabled for the module of
    the decorated function. Failures are logged with the exception type and
    re-raised unchanged.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function
    """
    logger = get_logger(func.__module__)

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)

        func_name = func.__qualname__
        logger.debug(f"Starting {func_name}")
        start = perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (perf_counter() - start) * 1000
            logger.debug(f"Failed {func_name} after {elapsed_ms:.1f} ms: {type(e).__name__}: {e}")
            raise
        elapsed_ms = (perf_counter() - start) * 1000
        logger.debug(f"Completed {func_name} in {elapsed_ms:.1f} ms")
        return result

    return cast("F", wrapper)
