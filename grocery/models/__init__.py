"""SQLAlchemy models."""

from grocery.models.item import GroceryItem
from grocery.models.recipe import Recipe, RecipeIngredient
from grocery.models.store import Store
from grocery.models.user import User

__all__ = [
    "User",
    "GroceryItem",
    "Recipe",
    "RecipeIngredient",
    "Store",
]
