"""Validation guard for pageable endpoints.

Handlers marked ``@pageable`` are wrapped with :class:`PaginationGuard` when
they are registered on a route. Before the handler runs, the guard checks that
the endpoint is wired correctly (its contract declares ``page`` and ``size``
query parameters and defaults were applied) and that the client supplied
values within the paging policy bounds.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from restful.constants import (
    MAX_PAGE_SIZE,
    MIN_PAGE_NUMBER,
    MIN_PAGE_SIZE,
    PAGE_NUMBER_PARAM_NAME,
    PAGE_SIZE_PARAM_NAME,
)
from restful.contracts import (
    DeclaredParameter,
    declared_parameters,
    handler_identity,
    resolve_contract,
)
from restful.exceptions.pagination_exceptions import (
    ConfigurationError,
    InvalidInputError,
)


@dataclass(frozen=True)
class InterceptedCall:
    """One invocation of a pageable handler, as seen by the guard.

    ``arguments`` holds the bound values in the order the contract declares
    its parameters. ``proceed`` invokes the handler with those arguments.
    """

    view_class: type
    handler_name: str
    arguments: tuple[Any, ...]
    proceed: Callable[[], Any]

    @property
    def handler(self) -> str:
        return handler_identity(self.view_class, self.handler_name)


@dataclass(frozen=True)
class PageableDescriptor:
    """Argument positions of the paging parameters of one handler."""

    page_position: int
    size_position: int


@dataclass(frozen=True)
class PaginationParams:
    page: int | None
    size: int | None


class PaginationGuard:
    """Reject calls to pageable handlers that carry unusable paging inputs.

    Wiring defects raise :class:`ConfigurationError` after an error event is
    emitted through the injected logger. Out-of-bounds values raise
    :class:`InvalidInputError`. Descriptors are cached per handler; a failed
    resolution is never cached, so it is reported again on every call.
    """

    def __init__(self, logger: Any = None) -> None:
        """Initialize the guard.

        Args:
            logger: structlog-compatible logger receiving misconfiguration
                events. Defaults to this module's logger.
        """
        self._logger = logger or structlog.get_logger(__name__)
        self._descriptors: dict[tuple[type, str], PageableDescriptor] = {}

    def intercept(self, call: InterceptedCall) -> Any:
        """Validate the paging inputs of ``call`` and run the handler.

        Args:
            call: The intercepted handler invocation.

        Returns:
            Whatever the handler returns, unchanged.

        Raises:
            ConfigurationError: If the endpoint is wired incorrectly.
            InvalidInputError: If ``page`` or ``size`` is out of bounds.
        """
        descriptor = self.describe(call.view_class, call.handler_name)

        params = PaginationParams(
            page=call.arguments[descriptor.page_position],
            size=call.arguments[descriptor.size_position],
        )
        self._assert_params_have_values(call, params)
        self._assert_params_have_valid_values(params)

        return call.proceed()

    def describe(self, view_cls: type, handler_name: str) -> PageableDescriptor:
        """Return the cached paging descriptor for a handler, computing it once."""
        key = (view_cls, handler_name)
        descriptor = self._descriptors.get(key)
        if descriptor is None:
            descriptor = self._descriptors.setdefault(
                key, self._build_descriptor(view_cls, handler_name)
            )
        return descriptor

    def _build_descriptor(
        self, view_cls: type, handler_name: str
    ) -> PageableDescriptor:
        handler = handler_identity(view_cls, handler_name)

        try:
            contract = resolve_contract(view_cls, handler_name)
            declared = declared_parameters(contract, handler_name)
        except ConfigurationError as e:
            self._report(handler, str(e), missing=[])
            raise

        page_position = self._find_param_position(
            handler, PAGE_NUMBER_PARAM_NAME, declared
        )
        size_position = self._find_param_position(
            handler, PAGE_SIZE_PARAM_NAME, declared
        )

        # Either the contract lacks the query params or @pageable was put on
        # a non-paging endpoint.
        if page_position is None or size_position is None:
            missing = [
                name
                for name, position in (
                    (PAGE_NUMBER_PARAM_NAME, page_position),
                    (PAGE_SIZE_PARAM_NAME, size_position),
                )
                if position is None
            ]
            msg = (
                f"Endpoint is pageable but is missing "
                f"{PAGE_NUMBER_PARAM_NAME}/{PAGE_SIZE_PARAM_NAME} params"
            )
            self._report(handler, msg, missing=missing)
            raise ConfigurationError(msg, handler=handler)

        return PageableDescriptor(
            page_position=page_position, size_position=size_position
        )

    def _find_param_position(
        self,
        handler: str,
        query_name: str,
        declared: tuple[DeclaredParameter, ...],
    ) -> int | None:
        positions = [
            param.position for param in declared if param.query_name == query_name
        ]
        if len(positions) > 1:
            msg = f"Endpoint binds query param '{query_name}' more than once"
            self._report(handler, msg, missing=[])
            raise ConfigurationError(msg, handler=handler)
        return positions[0] if positions else None

    def _assert_params_have_values(
        self, call: InterceptedCall, params: PaginationParams
    ) -> None:
        # Defaults are applied upstream, so a null here is a wiring bug.
        missing = [
            name
            for name, value in (
                (PAGE_NUMBER_PARAM_NAME, params.page),
                (PAGE_SIZE_PARAM_NAME, params.size),
            )
            if value is None
        ]
        if missing:
            msg = (
                f"Endpoint is pageable but is missing default "
                f"{PAGE_SIZE_PARAM_NAME}/{PAGE_NUMBER_PARAM_NAME} values"
            )
            self._report(call.handler, msg, missing=missing)
            raise ConfigurationError(msg, handler=call.handler)

    @staticmethod
    def _assert_params_have_valid_values(params: PaginationParams) -> None:
        if params.page < MIN_PAGE_NUMBER:
            raise InvalidInputError(
                PAGE_NUMBER_PARAM_NAME,
                f"{PAGE_NUMBER_PARAM_NAME} must be >= {MIN_PAGE_NUMBER}",
            )

        if params.size < MIN_PAGE_SIZE or params.size > MAX_PAGE_SIZE:
            raise InvalidInputError(
                PAGE_SIZE_PARAM_NAME,
                f"{PAGE_SIZE_PARAM_NAME} must be between {MIN_PAGE_SIZE} and "
                f"{MAX_PAGE_SIZE} (inclusive).",
            )

    def _report(self, handler: str, message: str, missing: list[str]) -> None:
        self._logger.error(
            "Pageable endpoint misconfigured",
            kind=ConfigurationError.__name__,
            handler=handler,
            missing=missing,
            detail=message,
        )


pagination_guard = PaginationGuard()
