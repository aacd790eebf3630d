"""Bootstrap aggregation: one consistent snapshot of a user's data."""

import asyncio
import logging
from collections.abc import Callable
from typing import TypeVar

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session, sessionmaker

from grocery.schemas.bootstrap import BootstrapResponse
from grocery.schemas.item import ItemResponse
from grocery.schemas.recipe import RecipeResponse
from grocery.services.gateway import GroceryGateway
from grocery.services.stores import sanitize_store_names

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BootstrapError(Exception):
    """One of the bootstrap sub-fetches failed; nothing is returned."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(str(getattr(cause, "orig", None) or cause))


def _fetch_items(gateway: GroceryGateway) -> list[ItemResponse]:
    return [ItemResponse.model_validate(item) for item in gateway.list_items()]


def _fetch_recipes(gateway: GroceryGateway) -> list[RecipeResponse]:
    return [RecipeResponse.model_validate(recipe) for recipe in gateway.list_recipes()]


def _fetch_stores(gateway: GroceryGateway) -> list[str]:
    raw = gateway.list_store_names()
    stores = sanitize_store_names(raw)
    dropped = [name for name in raw if name and "," in name]
    if dropped:
        logger.warning(f"Dropped {len(dropped)} store name(s) containing commas: {dropped}")
    return stores


def _run_scoped(
    session_factory: sessionmaker,
    user_id: int,
    source: str,
    fetch: Callable[[GroceryGateway], T],
) -> T:
    """Run one fetch in its own session so fetches can proceed side by side."""
    session: Session = session_factory()
    try:
        return fetch(GroceryGateway(session, user_id))
    except Exception as e:
        raise BootstrapError(source, e) from e
    finally:
        session.close()


async def build_bootstrap(session_factory: sessionmaker, user_id: int) -> BootstrapResponse:
    """Fetch items, recipes and stores concurrently and reshape them.

    If any fetch fails the whole snapshot fails with that fetch's message.
    """
    items, recipes, stores = await asyncio.gather(
        run_in_threadpool(_run_scoped, session_factory, user_id, "items", _fetch_items),
        run_in_threadpool(_run_scoped, session_factory, user_id, "recipes", _fetch_recipes),
        run_in_threadpool(_run_scoped, session_factory, user_id, "stores", _fetch_stores),
    )
    logger.info(
        f"Bootstrap for user {user_id}: "
        f"{len(items)} items, {len(recipes)} recipes, {len(stores)} stores"
    )
    return BootstrapResponse(items=items, recipes=recipes, stores=stores, user_id=str(user_id))
