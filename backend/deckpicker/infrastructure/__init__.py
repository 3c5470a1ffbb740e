"""Infrastructure layer - cross-cutting support for external integrations."""

from .retry import (
    PermanentError,
    RetryableError,
    TransientError,
    retry_operation,
)

__all__ = [
    "RetryableError",
    "TransientError",
    "PermanentError",
    "retry_operation",
]
