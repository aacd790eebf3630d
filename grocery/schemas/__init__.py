"""Pydantic schemas for API requests and responses."""

from grocery.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from grocery.schemas.bootstrap import BootstrapResponse, DerivedViewsResponse, StoreGroup
from grocery.schemas.common import OkResponse
from grocery.schemas.item import (
    IngredientInput,
    ItemCreate,
    ItemImport,
    ItemResponse,
    ItemUpdate,
)
from grocery.schemas.recipe import (
    RecipeCreate,
    RecipeIngredientResponse,
    RecipeResponse,
    RecipeUpdate,
)
from grocery.schemas.store import StoreCreate, StoreDelete, StoreResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "BootstrapResponse",
    "DerivedViewsResponse",
    "StoreGroup",
    "OkResponse",
    "IngredientInput",
    "ItemCreate",
    "ItemUpdate",
    "ItemImport",
    "ItemResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeIngredientResponse",
    "RecipeResponse",
    "StoreCreate",
    "StoreDelete",
    "StoreResponse",
]
