r"""Retry strategies deciding whether and when to resubmit a request.

Strategies are consulted by the transport after each failed attempt.
They return the delay before the next attempt or ``None`` to stop, and
never perform any I/O themselves.
"""

from __future__ import annotations

__all__ = [
    "TRANSIENT_FAILURES",
    "BackoffRetryStrategy",
    "ExponentialBackoffStrategy",
    "FailureKind",
    "FixedDelayStrategy",
    "JitteredBackoffStrategy",
    "NoRetryStrategy",
    "RetryStrategy",
    "classify_failure",
]

from respec.retry.backoff import (
    BackoffRetryStrategy,
    ExponentialBackoffStrategy,
    FixedDelayStrategy,
    JitteredBackoffStrategy,
)
from respec.retry.base import RetryStrategy
from respec.retry.failure import TRANSIENT_FAILURES, FailureKind, classify_failure
from respec.retry.no_retry import NoRetryStrategy
