r"""Backoff-based retry strategies.

This module provides retry strategies that wait a computed delay
between attempts and stop after a maximum number of retries. All
strategies are immutable and keyed only on the attempt number, so a
single instance can be shared freely.
"""

from __future__ import annotations

__all__ = [
    "BackoffRetryStrategy",
    "ExponentialBackoffStrategy",
    "FixedDelayStrategy",
    "JitteredBackoffStrategy",
]

import random
from abc import abstractmethod
from dataclasses import dataclass, field

from respec.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS, DEFAULT_MULTIPLIER
from respec.retry.base import RetryStrategy
from respec.retry.failure import TRANSIENT_FAILURES, FailureKind
from respec.utils.validation import (
    validate_non_negative,
    validate_positive,
    validate_retry_params,
)


@dataclass(frozen=True, kw_only=True)
class BackoffRetryStrategy(RetryStrategy):
    """Base class for strategies retrying a bounded number of times.

    Args:
        max_attempts: Maximum number of retries. Once the failed attempt
            number exceeds this value the strategy stops. A value of 0
            disables retries. Must be >= 0.
        retry_on: Failure kinds that are retried. Any other failure
            stops immediately. Defaults to the transient failures.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_on: frozenset[FailureKind] = field(default=TRANSIENT_FAILURES)

    def __post_init__(self) -> None:
        validate_retry_params(max_attempts=self.max_attempts)
        object.__setattr__(self, "retry_on", frozenset(self.retry_on))

    @abstractmethod
    def delay_for(self, attempt: int) -> float:
        """Compute the delay after a failed attempt.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).

        Returns:
            The delay in seconds.
        """

    def next_delay(self, attempt: int, failure: FailureKind) -> float | None:
        self._check_attempt(attempt)
        if attempt > self.max_attempts or failure not in self.retry_on:
            return None
        return self.delay_for(attempt)


@dataclass(frozen=True, kw_only=True)
class ExponentialBackoffStrategy(BackoffRetryStrategy):
    """Exponential backoff retry strategy.

    Calculates delay as: base_delay * (multiplier ** (attempt - 1)), with
    optional max_delay cap.

    This is the default retry strategy of a request spec.

    Args:
        max_attempts: Maximum number of retries (default: 3).
        base_delay: The delay after the first failure (default: 0.3).
            Must be > 0.
        multiplier: The growth factor between consecutive delays
            (default: 2.0). Must be > 0.
        max_delay: Optional maximum delay cap in seconds.
        retry_on: Failure kinds that are retried.

    Example:
        ```pycon
        >>> from respec.retry import ExponentialBackoffStrategy, FailureKind
        >>> strategy = ExponentialBackoffStrategy(max_attempts=3, base_delay=1.0)
        >>> [strategy.next_delay(n, FailureKind.SERVER_ERROR) for n in (1, 2, 3, 4)]
        [1.0, 2.0, 4.0, None]
        >>> # With max_delay cap
        >>> strategy = ExponentialBackoffStrategy(max_attempts=10, base_delay=1.0, max_delay=5.0)
        >>> strategy.next_delay(10, FailureKind.TIMEOUT)  # Would be 512.0, but capped
        5.0

        ```
    """

    base_delay: float = DEFAULT_BASE_DELAY
    multiplier: float = DEFAULT_MULTIPLIER
    max_delay: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_retry_params(max_attempts=self.max_attempts, max_delay=self.max_delay)
        validate_positive("base_delay", self.base_delay)
        validate_positive("multiplier", self.multiplier)

    def delay_for(self, attempt: int) -> float:
        try:
            delay = self.base_delay * (self.multiplier ** (attempt - 1))
        except OverflowError:
            # the uncapped delay is beyond float range, so any cap applies
            if self.max_delay is None:
                raise
            return self.max_delay
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    @property
    def description(self) -> str:
        return (
            f"exponential backoff (max_attempts={self.max_attempts}, "
            f"base_delay={self.base_delay}, multiplier={self.multiplier})"
        )


@dataclass(frozen=True, kw_only=True)
class JitteredBackoffStrategy(ExponentialBackoffStrategy):
    """Exponential backoff with random jitter.

    The jitter is calculated as: random.uniform(0, jitter_factor) * delay,
    and is ADDED to the exponential delay. Jitter spreads retries of many
    clients over time to avoid synchronized bursts.

    Args:
        jitter_factor: Factor for the random jitter (default: 0.1).
            Must be >= 0. A value of 0 disables jitter.
    """

    jitter_factor: float = 0.1

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_retry_params(
            max_attempts=self.max_attempts,
            jitter_factor=self.jitter_factor,
            max_delay=self.max_delay,
        )

    def delay_for(self, attempt: int) -> float:
        delay = super().delay_for(attempt)
        if self.jitter_factor > 0:
            delay += random.uniform(0, self.jitter_factor) * delay  # noqa: S311
        return delay

    @property
    def description(self) -> str:
        return f"{super().description} with jitter {self.jitter_factor}"


@dataclass(frozen=True, kw_only=True)
class FixedDelayStrategy(BackoffRetryStrategy):
    """Constant/fixed delay retry strategy.

    Returns the same delay after every failed attempt, regardless of the
    attempt number.

    Args:
        delay: The fixed delay in seconds (default: 1.0). Must be >= 0.
        max_attempts: Maximum number of retries (default: 3).
        retry_on: Failure kinds that are retried.

    Example:
        ```pycon
        >>> from respec.retry import FailureKind, FixedDelayStrategy
        >>> strategy = FixedDelayStrategy(delay=2.5, max_attempts=2)
        >>> [strategy.next_delay(n, FailureKind.CONNECTION) for n in (1, 2, 3)]
        [2.5, 2.5, None]

        ```
    """

    delay: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_non_negative("delay", self.delay)

    def delay_for(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay

    @property
    def description(self) -> str:
        return f"fixed delay {self.delay}s (max_attempts={self.max_attempts})"
