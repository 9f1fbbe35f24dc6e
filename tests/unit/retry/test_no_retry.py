r"""Unit tests for NoRetryStrategy."""

from __future__ import annotations

import pytest

from respec.retry import FailureKind, NoRetryStrategy, RetryStrategy


@pytest.mark.parametrize("failure", list(FailureKind))
def test_no_retry_always_stops(failure: FailureKind) -> None:
    strategy = NoRetryStrategy()
    assert strategy.next_delay(1, failure) is None
    assert not strategy.should_retry(1, failure)


def test_no_retry_invalid_attempt() -> None:
    with pytest.raises(ValueError, match=r"attempt must be >= 1"):
        NoRetryStrategy().next_delay(0, FailureKind.TIMEOUT)


def test_no_retry_description() -> None:
    assert NoRetryStrategy().description == "no retry"


def test_no_retry_is_retry_strategy() -> None:
    assert isinstance(NoRetryStrategy(), RetryStrategy)


def test_custom_retry_strategy() -> None:
    class OnlyOnceOnRateLimit(RetryStrategy):
        def next_delay(self, attempt: int, failure: FailureKind) -> float | None:
            if attempt == 1 and failure is FailureKind.RATE_LIMITED:
                return 30.0
            return None

    strategy = OnlyOnceOnRateLimit()
    assert strategy.next_delay(1, FailureKind.RATE_LIMITED) == 30.0
    assert strategy.should_retry(1, FailureKind.RATE_LIMITED)
    assert not strategy.should_retry(2, FailureKind.RATE_LIMITED)
    assert strategy.description == "OnlyOnceOnRateLimit"
