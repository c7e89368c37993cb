"""Retry helper for flaky backend writes."""

from __future__ import annotations

import random
import time
from typing import TYPE_CHECKING, TypeVar

import structlog

from littleorigins.metrics import retry_attempts_total, retry_exhausted_total

if TYPE_CHECKING:
    from collections.abc import Callable

logger = structlog.get_logger()

T = TypeVar("T")


class RetryExhaustedError(Exception):
    """All retry attempts failed."""


def with_retry(
    fn: Callable[[], T],
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    jitter: bool = True,
    retryable: tuple[type[Exception], ...] = (Exception,),
) -> T:
    """Execute *fn*, retrying up to *max_retries* times on *retryable* errors.

    Delays grow exponentially from *base_delay*. A *base_delay* of 0 gives
    immediate retries with no backoff.

    Raises RetryExhaustedError after *max_retries* consecutive failures.
    """
    last_exc: Exception | None = None
    fn_label = fn.__name__ if hasattr(fn, "__name__") else "fn"
    for attempt in range(max_retries + 1):
        try:
            return fn()
        except retryable as exc:
            last_exc = exc
            if attempt == max_retries:
                break
            retry_attempts_total.labels(fn_name=fn_label).inc()
            delay = min(base_delay * (2**attempt), max_delay)
            if jitter:
                delay = delay * (0.5 + random.random())
            logger.warning(
                "Retry attempt",
                attempt=attempt + 1,
                max_retries=max_retries,
                fn=fn_label,
                delay_s=round(delay, 2),
                error=str(exc),
            )
            if delay > 0:
                time.sleep(delay)
    retry_exhausted_total.labels(fn_name=fn_label).inc()
    raise RetryExhaustedError(f"Failed after {max_retries + 1} attempts") from last_exc
