"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from grocery.schemas.common import API_MODEL_CONFIG, require_text, to_epoch_millis
from grocery.schemas.item import IngredientInput
from grocery.services.stores import DEFAULT_SUPERMARKET

# --- Recipe Ingredient ---


class RecipeIngredientResponse(BaseModel):
    """Recipe ingredient response."""

    model_config = API_MODEL_CONFIG

    id: str
    name: str
    supermarket: str

    @field_validator("supermarket", mode="before")
    @classmethod
    def default_supermarket(cls, value: str | None) -> str:
        return value or DEFAULT_SUPERMARKET


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe with its ingredients."""

    name: str = Field(..., max_length=255)
    notes: str = Field("", max_length=50000)
    ingredients: list[IngredientInput] = []

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return require_text(value, "name")

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, value: str | None) -> str:
        return "" if value is None else value


class RecipeUpdate(RecipeCreate):
    """Replace a recipe's name, notes and full ingredient list."""


class RecipeResponse(BaseModel):
    """Recipe response with ingredients."""

    model_config = API_MODEL_CONFIG

    id: str
    name: str
    notes: str
    created_at: int
    ingredients: list[RecipeIngredientResponse] = []

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, value: str | None) -> str:
        return value or ""

    @field_validator("created_at", mode="before")
    @classmethod
    def epoch_created_at(cls, value: datetime | int) -> int:
        return to_epoch_millis(value)
