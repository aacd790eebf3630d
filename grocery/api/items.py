"""Item API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from grocery.api.dependencies import get_gateway
from grocery.schemas.common import OkResponse
from grocery.schemas.item import ItemCreate, ItemImport, ItemResponse, ItemUpdate
from grocery.services.gateway import GroceryGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/items", tags=["items"])

Gateway = Annotated[GroceryGateway, Depends(get_gateway)]


# --- Static routes first (before /{item_id}) ---


@router.delete("/clear-completed", response_model=OkResponse)
def clear_completed(gateway: Gateway):
    """Delete all completed items."""
    deleted = gateway.clear_completed()
    logger.info(f"Cleared {deleted} completed items for user {gateway.user_id}")
    return OkResponse()


@router.post("/import", response_model=list[ItemResponse], status_code=status.HTTP_201_CREATED)
def import_items(payload: ItemImport, gateway: Gateway):
    """Add a batch of ingredients to the list as new items."""
    items = gateway.import_items(payload.ingredients)
    logger.info(f"Imported {len(items)} items for user {gateway.user_id}")
    return items


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(payload: ItemCreate, gateway: Gateway):
    """Create a new item."""
    item = gateway.create_item(payload)
    logger.info(f"Created item {item.id} for user {gateway.user_id}")
    return item


@router.patch("/{item_id}", response_model=ItemResponse)
def update_item(item_id: str, payload: ItemUpdate, gateway: Gateway):
    """Update an item's name, stores or completion."""
    item = gateway.update_item(item_id, payload)
    logger.info(f"Updated item {item_id} for user {gateway.user_id}")
    return item


@router.delete("/{item_id}", response_model=OkResponse)
def delete_item(item_id: str, gateway: Gateway):
    """Delete an item."""
    gateway.delete_item(item_id)
    logger.info(f"Deleted item {item_id} for user {gateway.user_id}")
    return OkResponse()
