"""Tests for retry_operation."""

import pytest

from deckpicker.infrastructure.retry import (
    PermanentError,
    RetryableError,
    TransientError,
    retry_operation,
)


class Flaky:
    """Async operation failing a fixed number of times before succeeding."""

    def __init__(self, failures: int, error: Exception):
        self.failures = failures
        self.error = error
        self.calls = 0

    async def __call__(self, value):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return value


async def test_returns_result_after_transient_failures():
    operation = Flaky(2, TransientError("not yet"))
    retries = []

    result = await retry_operation(
        operation,
        "ok",
        initial_wait=0.0,
        on_retry=lambda attempt, exc: retries.append((attempt, str(exc))),
    )

    assert result == "ok"
    assert operation.calls == 3
    assert retries == [(1, "not yet"), (2, "not yet")]


async def test_reraises_last_error_when_attempts_run_out():
    operation = Flaky(5, TransientError("still down"))

    with pytest.raises(TransientError, match="still down"):
        await retry_operation(operation, "ok", max_attempts=2, initial_wait=0.0)
    assert operation.calls == 2


async def test_non_retryable_error_raises_immediately():
    operation = Flaky(1, ValueError("bad payload"))

    with pytest.raises(ValueError):
        await retry_operation(operation, "ok", initial_wait=0.0)
    assert operation.calls == 1


async def test_permanent_error_is_never_retried():
    class RejectedError(PermanentError, RetryableError):
        pass

    operation = Flaky(1, RejectedError("rejected"))

    with pytest.raises(RejectedError):
        await retry_operation(operation, "ok", initial_wait=0.0)
    assert operation.calls == 1
