"""Shared schema configuration."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InsertResult(CamelModel):
    """Schema for a successful insert."""

    success: bool = True
    inserted_id: str


class SuccessResult(CamelModel):
    """Schema for a successful update or delete."""

    success: bool = True


class MessageResult(CamelModel):
    """Schema for an operation that reports a message."""

    message: str
