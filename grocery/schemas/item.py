"""Item schemas."""

from datetime import datetime

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    computed_field,
    field_validator,
    model_validator,
)

from grocery.schemas.common import API_MODEL_CONFIG, require_text, to_epoch_millis
from grocery.services.stores import DEFAULT_SUPERMARKET, normalize_supermarket, parse_store_tags


class ItemCreate(BaseModel):
    """Create a new item."""

    name: str = Field(..., max_length=500)
    supermarket: str | None = Field(None, max_length=500, validate_default=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return require_text(value, "name")

    @field_validator("supermarket")
    @classmethod
    def validate_supermarket(cls, value: str | None) -> str:
        return normalize_supermarket(value)


class ItemUpdate(BaseModel):
    """Update an item. Only fields that are present are written."""

    name: str | None = Field(None, max_length=500)
    supermarket: str | None = Field(None, max_length=500)
    completed: StrictBool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return require_text(value, "name")

    @field_validator("supermarket")
    @classmethod
    def validate_supermarket(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_supermarket(value)

    @model_validator(mode="after")
    def require_any_field(self) -> "ItemUpdate":
        # An explicit null is a bad value, not an omitted field
        if "completed" in self.model_fields_set and self.completed is None:
            raise ValueError("completed must be a boolean")
        if not self.changes():
            raise ValueError("No fields to update")
        return self

    def changes(self) -> dict:
        """Column values to write."""
        return self.model_dump(exclude_none=True)


class IngredientInput(BaseModel):
    """An ingredient as submitted for a recipe or for import onto the list."""

    name: str = Field(..., max_length=255)
    supermarket: str | None = Field(None, max_length=500, validate_default=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return require_text(value, "ingredient.name")

    @field_validator("supermarket")
    @classmethod
    def validate_supermarket(cls, value: str | None) -> str:
        return normalize_supermarket(value)


class ItemImport(BaseModel):
    """Bulk import of ingredients as new list items."""

    ingredients: list[IngredientInput] = Field(default_factory=list, validate_default=True)

    @field_validator("ingredients")
    @classmethod
    def validate_ingredients(cls, value: list[IngredientInput]) -> list[IngredientInput]:
        if not value:
            raise ValueError("ingredients must be a non-empty array")
        return value


class ItemResponse(BaseModel):
    """Item response."""

    model_config = API_MODEL_CONFIG

    id: str
    name: str
    supermarket: str
    completed: bool
    created_at: int

    @field_validator("supermarket", mode="before")
    @classmethod
    def default_supermarket(cls, value: str | None) -> str:
        return value or DEFAULT_SUPERMARKET

    @field_validator("created_at", mode="before")
    @classmethod
    def epoch_created_at(cls, value: datetime | int) -> int:
        return to_epoch_millis(value)

    @computed_field
    @property
    def stores(self) -> list[str]:
        """Store tags parsed from ``supermarket``."""
        return parse_store_tags(self.supermarket)
