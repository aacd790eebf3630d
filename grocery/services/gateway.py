"""Persistence gateway for a single user's grocery data."""

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, selectinload

from grocery.models.item import GroceryItem
from grocery.models.recipe import Recipe, RecipeIngredient
from grocery.models.store import Store
from grocery.schemas.item import IngredientInput, ItemCreate, ItemUpdate
from grocery.schemas.recipe import RecipeCreate, RecipeUpdate


class GroceryGateway:
    """Row-level reads and writes scoped to one owning user.

    Every query filters on ``user_id``; a row owned by someone else behaves
    exactly like a row that does not exist.
    """

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    # --- Items ---

    def list_items(self) -> list[GroceryItem]:
        """All items, newest first."""
        return (
            self.db.query(GroceryItem)
            .filter(GroceryItem.user_id == self.user_id)
            .order_by(GroceryItem.created_at.desc())
            .all()
        )

    def get_item(self, item_id: str) -> GroceryItem:
        item = (
            self.db.query(GroceryItem)
            .filter(GroceryItem.id == item_id, GroceryItem.user_id == self.user_id)
            .first()
        )
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
        return item

    def create_item(self, command: ItemCreate) -> GroceryItem:
        item = GroceryItem(
            user_id=self.user_id,
            name=command.name,
            supermarket=command.supermarket,
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update_item(self, item_id: str, command: ItemUpdate) -> GroceryItem:
        item = self.get_item(item_id)
        for field, value in command.changes().items():
            setattr(item, field, value)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_item(self, item_id: str) -> int:
        """Delete an item if the caller owns it. Returns rows removed."""
        deleted = (
            self.db.query(GroceryItem)
            .filter(GroceryItem.id == item_id, GroceryItem.user_id == self.user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def clear_completed(self) -> int:
        """Delete every completed item. Repeating it is a no-op."""
        deleted = (
            self.db.query(GroceryItem)
            .filter(GroceryItem.user_id == self.user_id, GroceryItem.completed.is_(True))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def import_items(self, ingredients: list[IngredientInput]) -> list[GroceryItem]:
        """Insert one list item per ingredient in a single batch."""
        items = [
            GroceryItem(
                user_id=self.user_id,
                name=ingredient.name,
                supermarket=ingredient.supermarket,
            )
            for ingredient in ingredients
        ]
        self.db.add_all(items)
        self.db.commit()
        for item in items:
            self.db.refresh(item)
        return items

    # --- Recipes ---

    def list_recipes(self) -> list[Recipe]:
        """All recipes with ingredients, newest first."""
        return (
            self.db.query(Recipe)
            .options(selectinload(Recipe.ingredients))
            .filter(Recipe.user_id == self.user_id)
            .order_by(Recipe.created_at.desc())
            .all()
        )

    def get_recipe(self, recipe_id: str) -> Recipe:
        recipe = (
            self.db.query(Recipe)
            .filter(Recipe.id == recipe_id, Recipe.user_id == self.user_id)
            .first()
        )
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    def create_recipe(self, command: RecipeCreate) -> Recipe:
        recipe = Recipe(user_id=self.user_id, name=command.name, notes=command.notes)
        recipe.ingredients = self._build_ingredients(command.ingredients)
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def update_recipe(self, recipe_id: str, command: RecipeUpdate) -> Recipe:
        """Rewrite a recipe and replace all of its ingredients.

        Existing ingredient rows are deleted and the submitted list inserted
        fresh, so ingredient ids change on every update. Both steps share one
        commit; a failure leaves the previous recipe untouched and a retry
        converges on the same result.
        """
        recipe = self.get_recipe(recipe_id)
        recipe.name = command.name
        recipe.notes = command.notes

        self.db.query(RecipeIngredient).filter(RecipeIngredient.recipe_id == recipe.id).delete(
            synchronize_session=False
        )
        self.db.expire(recipe, ["ingredients"])
        recipe.ingredients = self._build_ingredients(command.ingredients)

        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def delete_recipe(self, recipe_id: str) -> int:
        """Delete a recipe and its ingredients if the caller owns it."""
        recipe = (
            self.db.query(Recipe)
            .filter(Recipe.id == recipe_id, Recipe.user_id == self.user_id)
            .first()
        )
        if recipe is None:
            return 0
        self.db.delete(recipe)
        self.db.commit()
        return 1

    @staticmethod
    def _build_ingredients(ingredients: list[IngredientInput]) -> list[RecipeIngredient]:
        return [
            RecipeIngredient(name=ingredient.name, supermarket=ingredient.supermarket, position=i)
            for i, ingredient in enumerate(ingredients)
        ]

    # --- Stores ---

    def list_store_names(self) -> list[str | None]:
        """Raw stored store names, newest first."""
        rows = (
            self.db.query(Store.name)
            .filter(Store.user_id == self.user_id)
            .order_by(Store.created_at.desc())
            .all()
        )
        return [name for (name,) in rows]

    def create_store(self, name: str) -> Store:
        """Register a store name; an exact duplicate returns the existing row."""
        existing = (
            self.db.query(Store).filter(Store.user_id == self.user_id, Store.name == name).first()
        )
        if existing:
            return existing

        store = Store(user_id=self.user_id, name=name)
        self.db.add(store)
        self.db.commit()
        self.db.refresh(store)
        return store

    def delete_store(self, name: str) -> int:
        """Delete the caller's store with exactly this name."""
        deleted = (
            self.db.query(Store)
            .filter(Store.user_id == self.user_id, Store.name == name)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
