r"""Parameter validation utilities for retry strategies.

This module provides validation functions that retry strategies call
at construction time, so a malformed configuration is reported where it
is built rather than on first use.
"""

from __future__ import annotations

__all__ = ["validate_non_negative", "validate_positive", "validate_retry_params"]


def validate_positive(name: str, value: float) -> None:
    """Validate that a numeric parameter is strictly positive.

    Args:
        name: The parameter name used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is not > 0.

    Example:
        ```pycon
        >>> from respec.utils.validation import validate_positive
        >>> validate_positive("base_delay", 0.5)
        >>> validate_positive("base_delay", 0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: base_delay must be > 0, got 0

        ```
    """
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is >= 0.

    Args:
        name: The parameter name used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def validate_retry_params(
    max_attempts: int,
    jitter_factor: float = 0.0,
    max_delay: float | None = None,
) -> None:
    """Validate the parameters shared by all backoff strategies.

    Args:
        max_attempts: Maximum number of retries after failed attempts.
            Must be >= 0. A value of 0 disables retries.
        jitter_factor: Factor for adding random jitter to delays.
            Must be >= 0.
        max_delay: Optional cap on a single delay in seconds.
            Must be > 0 if provided.

    Raises:
        ValueError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from respec.utils.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3)
        >>> validate_retry_params(max_attempts=0, jitter_factor=0.1, max_delay=5.0)
        >>> validate_retry_params(max_attempts=-1)  # doctest: +SKIP

        ```
    """
    if max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)
    validate_non_negative("jitter_factor", jitter_factor)
    if max_delay is not None:
        validate_positive("max_delay", max_delay)
