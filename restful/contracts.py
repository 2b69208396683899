"""Resource contracts and the parameter declarations they carry.

A resource contract is a plain class, marked with ``@resource_contract``, whose
handler methods declare how each argument is bound to the incoming request.
View classes implement exactly one contract; the contract, not the view, is
the authoritative source of the parameter declarations::

    @resource_contract
    class ItemsApi:
        @pageable
        def get(
            self,
            request,
            page: Annotated[int | None, QueryParam("page", default=0)],
            size: Annotated[int | None, QueryParam("size", default=20)],
        ): ...
"""

import inspect
import typing
from dataclasses import dataclass
from typing import Any

from restful.exceptions.pagination_exceptions import ConfigurationError

_CONTRACT_MARKER = "__resource_contract__"
_PAGEABLE_MARKER = "__pageable__"

# Leading handler parameters supplied by the view machinery, not the request
_IMPLICIT_PARAMS = 2  # self, request


@dataclass(frozen=True)
class QueryParam:
    """Binds a handler parameter to a query string input.

    Attributes:
        name: Query string key the value is read from.
        default: Value used when the client omits the key.
    """

    name: str
    default: Any = None


@dataclass(frozen=True)
class DeclaredParameter:
    """A handler parameter as declared on its resource contract."""

    position: int
    name: str
    annotation: Any
    default: Any = None
    query_param: QueryParam | None = None

    @property
    def query_name(self) -> str | None:
        """Query string key this parameter is bound to, if any."""
        return self.query_param.name if self.query_param else None


def resource_contract(cls: type) -> type:
    """Mark a class as a resource contract."""
    setattr(cls, _CONTRACT_MARKER, True)
    return cls


def pageable(func):
    """Mark a handler as pageable so its paging inputs are validated."""
    setattr(func, _PAGEABLE_MARKER, True)
    return func


def is_contract(cls: type) -> bool:
    """Return True if ``cls`` itself (not a parent) is a resource contract."""
    return bool(cls.__dict__.get(_CONTRACT_MARKER, False))


def handler_identity(view_cls: type, handler_name: str) -> str:
    """Return a dotted name identifying a view handler in logs and errors."""
    return f"{view_cls.__module__}.{view_cls.__qualname__}.{handler_name}"


def declaring_class(view_cls: type, handler_name: str) -> type | None:
    """Return the class in the MRO of ``view_cls`` that defines the handler."""
    for klass in view_cls.__mro__:
        if handler_name in klass.__dict__:
            return klass
    return None


def find_contracts(view_cls: type, handler_name: str) -> list[type]:
    """List the contracts directly implemented by the handler's defining class."""
    owner = declaring_class(view_cls, handler_name) or view_cls
    if is_contract(owner):
        return []
    return [base for base in owner.__bases__ if is_contract(base)]


def resolve_contract(view_cls: type, handler_name: str) -> type:
    """Return the single contract that is authoritative for a view handler.

    Raises:
        ConfigurationError: If the view implements zero or several contracts,
            or the contract does not declare the handler.
    """
    handler = handler_identity(view_cls, handler_name)
    contracts = find_contracts(view_cls, handler_name)

    if not contracts:
        raise ConfigurationError(
            "RESTful view class must implement a resource contract",
            handler=handler,
        )
    if len(contracts) > 1:
        names = ", ".join(contract.__qualname__ for contract in contracts)
        raise ConfigurationError(
            f"RESTful view class must implement exactly one resource contract "
            f"(found: {names})",
            handler=handler,
        )

    contract = contracts[0]
    if not callable(getattr(contract, handler_name, None)):
        raise ConfigurationError(
            f"Resource contract {contract.__qualname__} does not declare "
            f"'{handler_name}'",
            handler=handler,
        )
    return contract


def declared_parameters(
    contract: type, handler_name: str
) -> tuple[DeclaredParameter, ...]:
    """Read the parameter declarations of a contract handler.

    Positions count from the first parameter after ``self`` and ``request``,
    which is also how the dispatch layer orders the bound arguments.
    """
    func = getattr(contract, handler_name)
    signature = inspect.signature(func)
    hints = typing.get_type_hints(func, include_extras=True)

    params = list(signature.parameters.values())
    if len(params) < _IMPLICIT_PARAMS:
        raise ConfigurationError(
            f"Handler '{handler_name}' on {contract.__qualname__} must accept "
            f"(self, request, ...)",
            handler=handler_identity(contract, handler_name),
        )

    declared = []
    for position, param in enumerate(params[_IMPLICIT_PARAMS:]):
        annotation = hints.get(param.name, Any)
        query_param = None

        if typing.get_origin(annotation) is typing.Annotated:
            base, *metadata = typing.get_args(annotation)
            annotation = base
            query_param = next(
                (meta for meta in metadata if isinstance(meta, QueryParam)), None
            )

        if query_param is not None:
            default = query_param.default
        elif param.default is not inspect.Parameter.empty:
            default = param.default
        else:
            default = None

        declared.append(
            DeclaredParameter(
                position=position,
                name=param.name,
                annotation=annotation,
                default=default,
                query_param=query_param,
            )
        )
    return tuple(declared)


def is_pageable(view_cls: type, handler_name: str) -> bool:
    """Return True if the handler or its contract declaration is pageable."""
    impl = getattr(view_cls, handler_name, None)
    if getattr(impl, _PAGEABLE_MARKER, False):
        return True
    return any(
        getattr(getattr(contract, handler_name, None), _PAGEABLE_MARKER, False)
        for contract in find_contracts(view_cls, handler_name)
    )
