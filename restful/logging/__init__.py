"""Logging utilities for the pageable resource service."""

from restful.logging.config import setup_logging
from restful.logging.context import clear_request_id, get_request_id, set_request_id

__all__ = [
    "clear_request_id",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
