"""User Routes — form endpoints for user mutations plus the cached listing.

Invariants:
    - Routes only read form fields and translate results; logic lives in UserHandlers
    - Absent form fields are passed as None so validation reports them
    - Listing never includes password hashes
"""

import logging

from fastapi import APIRouter, Depends, Form
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.deps import get_route_cache, get_user_handlers
from dashboard.api.routes.action_responses import to_http_response
from dashboard.config import Settings, get_settings
from dashboard.core.domain_types import UserId
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.view_cache import RouteCache
from dashboard.schemas.user import UserResponse
from dashboard.services.handle_users import UserHandlers
from dashboard.services.user_store import SqlUserRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("")
async def list_users(
    db: AsyncSession = Depends(get_db),
    cache: RouteCache = Depends(get_route_cache),
    settings: Settings = Depends(get_settings),
):
    """Users listing, served from the route cache until a mutation invalidates it."""
    users = cache.get(settings.users_route)
    if users is None:
        generation = cache.generation(settings.users_route)
        rows = await SqlUserRepository(db).list_all()
        users = [
            UserResponse(id=u.id, name=u.name, email=u.email).model_dump()
            for u in rows
        ]
        cache.put(settings.users_route, users, generation)
    return {"users": users}


@router.post("")
async def create_user(
    name: str | None = Form(None),
    email: str | None = Form(None),
    password: str | None = Form(None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    result = await handlers.create_user(
        {"name": name, "email": email, "password": password},
    )
    return to_http_response(result)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    name: str | None = Form(None),
    email: str | None = Form(None),
    password: str | None = Form(None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    result = await handlers.update_user(
        UserId(user_id), {"name": name, "email": email, "password": password},
    )
    return to_http_response(result)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return to_http_response(await handlers.delete_user(UserId(user_id)))
