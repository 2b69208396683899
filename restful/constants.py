"""Constants used throughout the pageable resource service."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # Log requests slower than 1 second

# Security Headers
SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

# Paging query parameters
PAGE_NUMBER_PARAM_NAME = "page"
PAGE_SIZE_PARAM_NAME = "size"

# Paging policy bounds (inclusive)
MIN_PAGE_NUMBER = 0
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# Defaults applied when a client omits the paging query parameters
DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 20
