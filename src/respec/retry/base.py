r"""Abstract base class for retry strategies."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from respec.retry.failure import FailureKind


class RetryStrategy(ABC):
    """Abstract base class for retry strategies.

    A retry strategy is a pure decision function: given the number of
    the attempt that just failed and the failure classification, it
    returns how long to wait before the next attempt, or ``None`` to
    stop. It never sleeps or schedules anything itself, the transport
    enacts the returned wait.

    Implementations must not keep per-sequence state so one instance
    can be shared by concurrent attempt sequences.
    """

    @abstractmethod
    def next_delay(self, attempt: int, failure: FailureKind) -> float | None:
        """Return the wait before the next attempt.

        Args:
            attempt: The number of the attempt that just failed
                (1-indexed). For example, attempt=1 is the initial
                request, attempt=2 is the first retry, etc.
            failure: The classification of the failure.

        Returns:
            The delay in seconds before the next attempt, or ``None``
            if no further attempt should be made.
        """

    @property
    def description(self) -> str:
        """A short human-readable description used in log records."""
        return type(self).__name__

    def should_retry(self, attempt: int, failure: FailureKind) -> bool:
        """Indicate whether another attempt should be made.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).
            failure: The classification of the failure.

        Returns:
            ``True`` if ``next_delay`` returns a delay, otherwise ``False``.
        """
        return self.next_delay(attempt, failure) is not None

    @staticmethod
    def _check_attempt(attempt: int) -> None:
        if attempt < 1:
            msg = f"attempt must be >= 1, got {attempt}"
            raise ValueError(msg)
