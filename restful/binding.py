"""Bind request inputs to the parameters a resource contract declares."""

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import ValidationError

from restful.contracts import DeclaredParameter


@lru_cache(maxsize=None)
def _adapter(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)


def bind_arguments(
    request: Any,
    declared: tuple[DeclaredParameter, ...],
    url_kwargs: dict[str, Any],
) -> list[Any]:
    """Build the positional arguments for a contract handler.

    Query-bound parameters are read from ``request.query_params`` and coerced
    to their declared type; omitted ones take their declared default. Other
    parameters are taken by name from the URL keyword arguments, which are
    consumed from ``url_kwargs`` as they are bound.

    Args:
        request: DRF request being dispatched.
        declared: Parameter declarations of the contract handler.
        url_kwargs: Keyword arguments captured by the URL pattern.

    Returns:
        One value per declared parameter, in declaration order.

    Raises:
        ValidationError: If a query value cannot be coerced to its type.
    """
    arguments = []
    for param in declared:
        if param.query_param is None:
            arguments.append(url_kwargs.pop(param.name, param.default))
            continue

        raw = request.query_params.get(param.query_name)
        if raw is None:
            arguments.append(param.default)
            continue

        try:
            arguments.append(_adapter(param.annotation).validate_python(raw))
        except PydanticValidationError as e:
            raise ValidationError(
                {param.query_name: [error["msg"] for error in e.errors()]}
            ) from e
    return arguments
