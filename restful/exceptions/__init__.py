"""Exception handling utilities for the pageable resource service."""

from restful.exceptions.handlers import custom_exception_handler
from restful.exceptions.pagination_exceptions import (
    ConfigurationError,
    InvalidInputError,
)

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "custom_exception_handler",
]
