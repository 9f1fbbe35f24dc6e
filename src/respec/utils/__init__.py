r"""Utility functions for parameter validation and structured logging."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "log_request_spec",
    "log_structured",
    "validate_non_negative",
    "validate_positive",
    "validate_retry_params",
]

from respec.utils.structured_logging import (
    StructuredFormatter,
    log_request_spec,
    log_structured,
)
from respec.utils.validation import (
    validate_non_negative,
    validate_positive,
    validate_retry_params,
)
