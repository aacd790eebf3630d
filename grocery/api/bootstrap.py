"""Bootstrap and derived view endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import sessionmaker

from grocery.api.dependencies import get_current_user
from grocery.database import get_session_factory
from grocery.models.user import User
from grocery.schemas.bootstrap import BootstrapResponse, DerivedViewsResponse
from grocery.services.bootstrap import build_bootstrap
from grocery.services.views import build_views

router = APIRouter(prefix="/api/v1", tags=["bootstrap"])


@router.get("/bootstrap", response_model=BootstrapResponse)
async def get_bootstrap(
    current_user: Annotated[User, Depends(get_current_user)],
    session_factory: Annotated[sessionmaker, Depends(get_session_factory)],
):
    """Items, recipes and stores for the caller in one snapshot."""
    return await build_bootstrap(session_factory, current_user.id)


@router.get("/views", response_model=DerivedViewsResponse)
async def get_views(
    current_user: Annotated[User, Depends(get_current_user)],
    session_factory: Annotated[sessionmaker, Depends(get_session_factory)],
    q: str = Query(default="", description="Search text applied to name and stores"),
):
    """Store picker list, by-store grouping and duplicate highlights."""
    snapshot = await build_bootstrap(session_factory, current_user.id)
    return build_views(snapshot, q)
