"""Middleware components for the pageable resource service."""

from restful.middleware.process_time import ProcessTimeMiddleware
from restful.middleware.request_id import RequestIDMiddleware
from restful.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
