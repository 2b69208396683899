"""Route registration for contract-backed resource views."""

import functools
from typing import Any

from django.urls import path
from rest_framework.views import APIView

from restful.binding import bind_arguments
from restful.contracts import (
    declared_parameters,
    declaring_class,
    find_contracts,
    is_contract,
    is_pageable,
)
from restful.pageable import InterceptedCall, PaginationGuard, pagination_guard


def as_resource_view(view_cls: type[APIView], guard: PaginationGuard | None = None):
    """Build the Django view function for a resource view class.

    Every HTTP handler the view implements is wrapped so it receives the
    arguments its contract declares. Pageable handlers are additionally
    wrapped with the pagination guard.

    Args:
        view_cls: APIView subclass implementing a resource contract.
        guard: Guard used for pageable handlers. Defaults to the shared guard.

    Returns:
        A view function suitable for ``django.urls.path``.
    """
    guard = guard or pagination_guard

    handlers = {}
    for handler_name in view_cls.http_method_names:
        owner = declaring_class(view_cls, handler_name)
        if owner is None or owner is APIView:
            continue
        # Declared on a contract but never implemented
        if is_contract(owner):
            handlers[handler_name] = APIView.http_method_not_allowed
            continue
        impl = getattr(view_cls, handler_name)
        handlers[handler_name] = _resource_handler(view_cls, handler_name, impl, guard)

    resource_cls = type(
        view_cls.__name__,
        (view_cls,),
        {
            **handlers,
            "__module__": view_cls.__module__,
            "__qualname__": view_cls.__qualname__,
        },
    )
    return resource_cls.as_view()


def resource_path(route: str, view_cls: type[APIView], name: str, **kwargs: Any):
    """Register a resource view on a URL route."""
    return path(route, as_resource_view(view_cls, **kwargs), name=name)


def _resource_handler(view_cls, handler_name, impl, guard):
    contracts = find_contracts(view_cls, handler_name)
    declared = ()
    if len(contracts) == 1 and callable(getattr(contracts[0], handler_name, None)):
        declared = declared_parameters(contracts[0], handler_name)
    pageable = is_pageable(view_cls, handler_name)

    @functools.wraps(impl)
    def handler(self, request, *args, **kwargs):
        url_kwargs = dict(kwargs)
        arguments = bind_arguments(request, declared, url_kwargs)

        def proceed():
            return impl(self, request, *arguments, *args, **url_kwargs)

        if not pageable:
            return proceed()

        return guard.intercept(
            InterceptedCall(
                view_class=view_cls,
                handler_name=handler_name,
                arguments=tuple(arguments),
                proceed=proceed,
            )
        )

    return handler
