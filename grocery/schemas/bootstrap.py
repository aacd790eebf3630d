"""Bootstrap snapshot and derived view schemas."""

from pydantic import BaseModel

from grocery.schemas.common import API_MODEL_CONFIG
from grocery.schemas.item import ItemResponse
from grocery.schemas.recipe import RecipeResponse


class BootstrapResponse(BaseModel):
    """Everything a client needs to render: items, recipes, stores."""

    model_config = API_MODEL_CONFIG

    items: list[ItemResponse]
    recipes: list[RecipeResponse]
    stores: list[str]
    user_id: str


class StoreGroup(BaseModel):
    """Items tagged with one store."""

    model_config = API_MODEL_CONFIG

    store: str
    items: list[ItemResponse]


class DerivedViewsResponse(BaseModel):
    """Views computed from a snapshot."""

    model_config = API_MODEL_CONFIG

    candidate_stores: list[str]
    managed_stores: list[str]
    filtered_items: list[ItemResponse]
    items_by_store: list[StoreGroup]
    item_colors: dict[str, str]
    completed_count: int
