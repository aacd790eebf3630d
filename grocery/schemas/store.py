"""Store schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grocery.schemas.common import require_text
from grocery.services.stores import TAG_SEPARATOR


class StoreCreate(BaseModel):
    """Register a store name."""

    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = require_text(value, "name")
        if TAG_SEPARATOR in name:
            raise ValueError("Store name cannot contain commas")
        return name


class StoreDelete(BaseModel):
    """Remove a store by exact name."""

    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return require_text(value, "name")


class StoreResponse(BaseModel):
    """Store response."""

    model_config = ConfigDict(from_attributes=True)

    name: str
