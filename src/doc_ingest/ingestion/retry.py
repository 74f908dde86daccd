"""Bounded retry combinator built on tenacity."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from tenacity import RetryCallState, RetryError, Retrying, stop_after_attempt, wait_exponential

from doc_ingest.errors import RetryExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def retry(
    operation: Callable[[], T],
    *,
    max_attempts: int,
    on_attempt_failed: Callable[[int, BaseException], None] | None = None,
    backoff: float = 0.0,
) -> T:
    """Call *operation* until it succeeds or *max_attempts* attempts fail.

    Parameters
    ----------
    operation:
        Zero-argument callable to run.
    max_attempts:
        Total attempts, first call included.  Must be at least 1.
    on_attempt_failed:
        Called as ``on_attempt_failed(attempt_number, exc)`` after every
        failed attempt, the last one included.
    backoff:
        Exponential wait multiplier in seconds; ``0`` retries immediately.

    Returns
    -------
    T
        Whatever *operation* returned on its first successful attempt.

    Raises
    ------
    RetryExhaustedError
        Carrying the last failure's message, chained to that failure.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    def _after(state: RetryCallState) -> None:
        exc = state.outcome.exception() if state.outcome else None
        if on_attempt_failed is not None and exc is not None:
            on_attempt_failed(state.attempt_number, exc)

    retrying = Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=backoff),
        after=_after,
    )
    try:
        return retrying(operation)
    except RetryError as err:
        last = err.last_attempt.exception()
        logger.debug("Giving up after %d attempts", err.last_attempt.attempt_number)
        raise RetryExhaustedError(str(last), attempts=err.last_attempt.attempt_number) from last
