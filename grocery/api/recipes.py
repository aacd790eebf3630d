"""Recipe API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from grocery.api.dependencies import get_gateway
from grocery.schemas.common import OkResponse
from grocery.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from grocery.services.gateway import GroceryGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])

Gateway = Annotated[GroceryGateway, Depends(get_gateway)]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(payload: RecipeCreate, gateway: Gateway):
    """Create a new recipe with ingredients."""
    recipe = gateway.create_recipe(payload)
    logger.info(
        f"Created recipe {recipe.id} with {len(payload.ingredients)} ingredients "
        f"for user {gateway.user_id}"
    )
    return recipe


@router.patch("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(recipe_id: str, payload: RecipeUpdate, gateway: Gateway):
    """Replace a recipe's name, notes and ingredient list."""
    recipe = gateway.update_recipe(recipe_id, payload)
    logger.info(f"Updated recipe {recipe_id} for user {gateway.user_id}")
    return recipe


@router.delete("/{recipe_id}", response_model=OkResponse)
def delete_recipe(recipe_id: str, gateway: Gateway):
    """Delete a recipe and its ingredients."""
    gateway.delete_recipe(recipe_id)
    logger.info(f"Deleted recipe {recipe_id} for user {gateway.user_id}")
    return OkResponse()
