"""Response schemas for the pageable resource service."""

from restful.schemas.base_schema_model import BaseSchemaModel
from restful.schemas.liveness_response import LivenessResponse
from restful.schemas.page_request import PageRequest

__all__ = ["BaseSchemaModel", "LivenessResponse", "PageRequest"]
