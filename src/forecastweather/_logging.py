"""Console logging and call logging for the weather client."""

from __future__ import annotations

import functools
import inspect
import logging
import sys
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "forecastweather"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level, so repeated runs in one
    process never duplicate output.
    """
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def _describe_call(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return f"{fn.__qualname__}({', '.join(arg_parts)})"


def log_api_call(fn: F) -> F:
    """Decorator that logs client calls with their outcome and duration.

    Works on both plain and ``async def`` methods.
    """
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            call = _describe_call(fn, args, kwargs)
            logger.debug("CALL: %s", call)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                logger.error(
                    "FAIL: %s -> %s: %s (%.3fs)",
                    call, type(exc).__name__, exc, time.monotonic() - start,
                )
                raise
            logger.debug("OK: %s (%.3fs)", call, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        call = _describe_call(fn, args, kwargs)
        logger.debug("CALL: %s", call)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                call, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.debug("OK: %s (%.3fs)", call, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]
