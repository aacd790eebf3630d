"""Store API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, status

from grocery.api.dependencies import get_gateway
from grocery.schemas.common import OkResponse
from grocery.schemas.store import StoreCreate, StoreDelete, StoreResponse
from grocery.services.gateway import GroceryGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/stores", tags=["stores"])

Gateway = Annotated[GroceryGateway, Depends(get_gateway)]


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(payload: StoreCreate, gateway: Gateway):
    """Register a store name. Names containing commas are rejected."""
    store = gateway.create_store(payload.name)
    logger.info(f"Created store {store.name!r} for user {gateway.user_id}")
    return store


@router.delete("", response_model=OkResponse)
def delete_store(payload: Annotated[StoreDelete, Body()], gateway: Gateway):
    """Remove the caller's store with exactly this name."""
    deleted = gateway.delete_store(payload.name)
    logger.info(f"Deleted {deleted} store(s) named {payload.name!r} for user {gateway.user_id}")
    return OkResponse()
