"""Base pydantic model shared by all response schemas."""

from pydantic import BaseModel, ConfigDict


class BaseSchemaModel(BaseModel):
    """Base pydantic model holding the common schema configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
