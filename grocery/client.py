"""HTTP client and local state for the grocery API.

``GroceryClient`` wraps each endpoint. ``GroceryState`` keeps a user's
snapshot in memory, applies the result of each call only after the server
confirms it, and recomputes derived views on demand.
"""

import logging
from typing import Any

import httpx

from grocery.schemas.bootstrap import BootstrapResponse, DerivedViewsResponse
from grocery.schemas.item import ItemResponse
from grocery.schemas.recipe import RecipeResponse
from grocery.services.stores import DEFAULT_SUPERMARKET, DEFAULT_STORES, is_default_store
from grocery.services.views import build_views

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ApiError(Exception):
    """A request failed; ``message`` is the server's error text when it sent one."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GroceryClient:
    """Thin wrapper over the REST endpoints."""

    def __init__(
        self,
        base_url: str = "",
        token: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.token = token
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def _request(self, method: str, path: str, body: Any = None) -> Any:
        if not self.token:
            raise ApiError("Missing auth session")

        response = self.http.request(
            method,
            f"{API_PREFIX}{path}",
            headers={"Authorization": f"Bearer {self.token}"},
            json=body,
        )
        if response.is_error:
            message = f"Request failed: {response.status_code}"
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if isinstance(payload, dict) and payload.get("error"):
                message = payload["error"]
            logger.warning(f"{method} {path} failed: {message}")
            raise ApiError(message, response.status_code)
        return response.json()

    def get_bootstrap(self) -> BootstrapResponse:
        return BootstrapResponse.model_validate(self._request("GET", "/bootstrap"))

    def create_item(self, name: str, supermarket: str = DEFAULT_SUPERMARKET) -> ItemResponse:
        data = self._request("POST", "/items", {"name": name, "supermarket": supermarket})
        return ItemResponse.model_validate(data)

    def update_item(self, item_id: str, **changes: Any) -> ItemResponse:
        data = self._request("PATCH", f"/items/{item_id}", changes)
        return ItemResponse.model_validate(data)

    def delete_item(self, item_id: str) -> None:
        self._request("DELETE", f"/items/{item_id}")

    def clear_completed(self) -> None:
        self._request("DELETE", "/items/clear-completed")

    def import_items(self, ingredients: list[dict[str, str]]) -> list[ItemResponse]:
        data = self._request("POST", "/items/import", {"ingredients": ingredients})
        return [ItemResponse.model_validate(row) for row in data]

    def create_store(self, name: str) -> str:
        return self._request("POST", "/stores", {"name": name})["name"]

    def delete_store(self, name: str) -> None:
        self._request("DELETE", "/stores", {"name": name})

    def create_recipe(
        self, name: str, ingredients: list[dict[str, str]], notes: str = ""
    ) -> RecipeResponse:
        data = self._request(
            "POST", "/recipes", {"name": name, "notes": notes, "ingredients": ingredients}
        )
        return RecipeResponse.model_validate(data)

    def update_recipe(
        self, recipe_id: str, name: str, ingredients: list[dict[str, str]], notes: str = ""
    ) -> RecipeResponse:
        data = self._request(
            "PATCH",
            f"/recipes/{recipe_id}",
            {"name": name, "notes": notes, "ingredients": ingredients},
        )
        return RecipeResponse.model_validate(data)

    def delete_recipe(self, recipe_id: str) -> None:
        self._request("DELETE", f"/recipes/{recipe_id}")


class GroceryState:
    """In-memory snapshot kept in step with the server.

    Every mutation goes to the server first; local state changes only when
    the call succeeds, so an ApiError leaves the snapshot as it was.
    """

    def __init__(self, client: GroceryClient):
        self.client = client
        self.items: list[ItemResponse] = []
        self.recipes: list[RecipeResponse] = []
        self.stores: list[str] = []
        self.user_id: str | None = None

    def load(self) -> None:
        snapshot = self.client.get_bootstrap()
        self.items = list(snapshot.items)
        self.recipes = list(snapshot.recipes)
        self.stores = list(snapshot.stores)
        self.user_id = snapshot.user_id

    def snapshot(self) -> BootstrapResponse:
        return BootstrapResponse(
            items=self.items,
            recipes=self.recipes,
            stores=self.stores,
            user_id=self.user_id or "",
        )

    def views(self, query: str = "") -> DerivedViewsResponse:
        return build_views(self.snapshot(), query)

    # --- Items ---

    def _replace_item(self, updated: ItemResponse) -> None:
        self.items = [updated if item.id == updated.id else item for item in self.items]

    def add_item(self, name: str, supermarket: str = "") -> ItemResponse:
        item = self.client.create_item(name, supermarket or DEFAULT_SUPERMARKET)
        self.items = [item, *self.items]
        return item

    def edit_item(self, item_id: str, name: str, supermarket: str = "") -> ItemResponse:
        updated = self.client.update_item(
            item_id, name=name, supermarket=supermarket or DEFAULT_SUPERMARKET
        )
        self._replace_item(updated)
        return updated

    def toggle_item(self, item_id: str) -> ItemResponse | None:
        target = next((item for item in self.items if item.id == item_id), None)
        if target is None:
            return None
        updated = self.client.update_item(item_id, completed=not target.completed)
        self._replace_item(updated)
        return updated

    def delete_item(self, item_id: str) -> None:
        self.client.delete_item(item_id)
        self.items = [item for item in self.items if item.id != item_id]

    def clear_completed(self) -> None:
        self.client.clear_completed()
        self.items = [item for item in self.items if not item.completed]

    def import_ingredients(self, ingredients: list[dict[str, str]]) -> list[ItemResponse]:
        if not ingredients:
            return []
        new_items = self.client.import_items(ingredients)
        self.items = [*new_items, *self.items]
        return new_items

    # --- Stores ---

    def add_store(self, name: str) -> str | None:
        """Register a store unless it is blank, has a comma, or is already known."""
        normalized = name.strip()
        if not normalized or "," in normalized:
            return None

        known = {store.casefold() for store in (*DEFAULT_STORES, *self.stores)}
        if normalized.casefold() in known:
            return None

        created = self.client.create_store(normalized)
        if created not in self.stores:
            self.stores = [*self.stores, created]
        return created

    def remove_store(self, name: str) -> bool:
        """Remove a registered store. Default stores are refused."""
        trimmed = name.strip()
        if not trimmed or is_default_store(trimmed):
            return False

        self.client.delete_store(trimmed)
        self.stores = [store for store in self.stores if store.casefold() != trimmed.casefold()]
        return True

    # --- Recipes ---

    def add_recipe(
        self, name: str, ingredients: list[dict[str, str]], notes: str = ""
    ) -> RecipeResponse:
        recipe = self.client.create_recipe(name, ingredients, notes)
        self.recipes = [recipe, *self.recipes]
        return recipe

    def update_recipe(
        self, recipe_id: str, name: str, ingredients: list[dict[str, str]], notes: str = ""
    ) -> RecipeResponse:
        updated = self.client.update_recipe(recipe_id, name, ingredients, notes)
        self.recipes = [updated if r.id == recipe_id else r for r in self.recipes]
        return updated

    def delete_recipe(self, recipe_id: str) -> None:
        self.client.delete_recipe(recipe_id)
        self.recipes = [recipe for recipe in self.recipes if recipe.id != recipe_id]
