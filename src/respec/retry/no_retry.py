r"""Retry strategy that never retries."""

from __future__ import annotations

__all__ = ["NoRetryStrategy"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from respec.retry.base import RetryStrategy

if TYPE_CHECKING:
    from respec.retry.failure import FailureKind


@dataclass(frozen=True)
class NoRetryStrategy(RetryStrategy):
    """Retry strategy that stops after the first failure.

    Example:
        ```pycon
        >>> from respec.retry import FailureKind, NoRetryStrategy
        >>> NoRetryStrategy().next_delay(1, FailureKind.SERVER_ERROR) is None
        True

        ```
    """

    def next_delay(self, attempt: int, failure: FailureKind) -> float | None:  # noqa: ARG002
        self._check_attempt(attempt)
        return None

    @property
    def description(self) -> str:
        return "no retry"
