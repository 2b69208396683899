"""Validated page request schema."""

from pydantic import Field

from restful.constants import MAX_PAGE_SIZE, MIN_PAGE_NUMBER, MIN_PAGE_SIZE
from restful.schemas.base_schema_model import BaseSchemaModel


class PageRequest(BaseSchemaModel):
    """Paging inputs accepted by a pageable endpoint."""

    page: int = Field(..., ge=MIN_PAGE_NUMBER, description="Zero-based page index")
    size: int = Field(
        ..., ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE, description="Requested page length"
    )
