"""Retry utilities using tenacity for collection source calls."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# AnkiConnect runs next to the backend, so waits stay short
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_INITIAL_WAIT = 0.5  # seconds
DEFAULT_MAX_WAIT = 5.0  # seconds
DEFAULT_JITTER = 0.25  # seconds


class RetryableError(Exception):
    """Base class for errors that should trigger retries."""


class TransientError(RetryableError):
    """Anki not running yet, timeouts, server errors."""


class PermanentError(Exception):
    """Rejected requests; never retried, even if raised as a retryable type."""


async def retry_operation(
    operation: Callable[..., Awaitable[T]],
    *args,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_wait: float = DEFAULT_INITIAL_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
    retryable_exceptions: tuple[type[Exception], ...] = (RetryableError,),
    on_retry: Callable[[int, BaseException], None] | None = None,
    **kwargs,
) -> T:
    """Await an operation, backing off between failed attempts.

    Waits grow as min(initial * 2^n + random(0, jitter), max). The last
    failure is re-raised unchanged once attempts run out.

    Args:
        operation: Async function to execute
        *args: Positional arguments for operation
        max_attempts: Maximum number of attempts
        initial_wait: Initial wait time in seconds
        max_wait: Maximum wait time in seconds
        retryable_exceptions: Exception types to retry on
        on_retry: Called before each backoff with (failed attempt, exception)
        **kwargs: Keyword arguments for operation

    Returns:
        Result of the operation
    """
    name = getattr(operation, "__name__", repr(operation))

    def before_sleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        logger.warning(
            f"{name} failed (attempt {retry_state.attempt_number}/{max_attempts}), "
            f"retrying in {retry_state.next_action.sleep:.2f}s: {error}"
        )
        if on_retry:
            on_retry(retry_state.attempt_number, error)

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential_jitter(initial=initial_wait, max=max_wait, jitter=DEFAULT_JITTER),
        retry=(
            retry_if_exception_type(retryable_exceptions)
            & retry_if_not_exception_type(PermanentError)
        ),
        before_sleep=before_sleep,
        reraise=True,
    )
    return await retrying(operation, *args, **kwargs)
