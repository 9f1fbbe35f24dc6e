r"""Default configuration values for request building and retries.

These constants are the defaults used by ``RequestSpec``, the retry
strategies, and the request builder.
"""

from __future__ import annotations

__all__ = [
    "CONTENT_TYPE_HEADER",
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MULTIPLIER",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
]

# Default timeout in seconds for one request attempt
DEFAULT_TIMEOUT = 10.0

# Default number of retries granted after failed attempts
DEFAULT_MAX_ATTEMPTS = 3

# Default exponential backoff parameters
# Wait time = base_delay * (multiplier ** (attempt - 1))
# With 0.3 and 2.0: 1st failure waits 0.3s, 2nd waits 0.6s, 3rd waits 1.2s
DEFAULT_BASE_DELAY = 0.3
DEFAULT_MULTIPLIER = 2.0

# The header injected from the declared content type
CONTENT_TYPE_HEADER = "Content-Type"

# HTTP status codes classified as transient failures
# 408: Request Timeout
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (408, 429, 500, 502, 503, 504)
