"""Resource contracts exposed by the service.

Each contract declares the request parameters of its handlers; views in
``restful.views`` implement them.
"""

from typing import Annotated

from restful.constants import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    PAGE_NUMBER_PARAM_NAME,
    PAGE_SIZE_PARAM_NAME,
)
from restful.contracts import QueryParam, pageable, resource_contract


@resource_contract
class PagingProbeApi:
    """Echoes back the paging inputs of a request once they pass validation."""

    @pageable
    def get(
        self,
        request,
        page: Annotated[
            int | None, QueryParam(PAGE_NUMBER_PARAM_NAME, default=DEFAULT_PAGE_NUMBER)
        ],
        size: Annotated[
            int | None, QueryParam(PAGE_SIZE_PARAM_NAME, default=DEFAULT_PAGE_SIZE)
        ],
    ):
        raise NotImplementedError
