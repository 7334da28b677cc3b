"""Common schema types."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True, validate_default=True)


class PartialSchema(BaseSchema):
    """Schema where omitted fields mean "leave unchanged".

    Fields listed in ``required_fields`` back NOT NULL columns and may be
    omitted but not explicitly set to None.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime
