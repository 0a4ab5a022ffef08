"""API Dependencies — builds handlers per request from settings, DB session and cache.

Invariants:
    - One AsyncSession per request, shared by every repository the handler uses
    - Handlers receive the route cache only through the ViewInvalidator protocol

Design Decisions:
    - FastAPI Depends chain over a service locator: tests override get_db or
      get_route_cache and every handler follows
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.config import Settings, get_settings
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.identity_provider import CredentialsIdentityProvider
from dashboard.infrastructure.password_hashing import BcryptPasswordHasher
from dashboard.infrastructure.view_cache import RouteCache, route_cache
from dashboard.services.handle_auth import AuthHandlers
from dashboard.services.handle_invoices import InvoiceHandlers
from dashboard.services.handle_users import UserHandlers
from dashboard.services.invoice_store import SqlInvoiceRepository
from dashboard.services.user_store import SqlUserRepository


def get_route_cache() -> RouteCache:
    return route_cache


def get_password_hasher(
    settings: Settings = Depends(get_settings),
) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_user_handlers(
    db: AsyncSession = Depends(get_db),
    cache: RouteCache = Depends(get_route_cache),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> UserHandlers:
    return UserHandlers(
        SqlUserRepository(db), hasher, cache,
        listing_route=settings.users_route,
        password_policy=settings.password_update_policy,
    )


def get_invoice_handlers(
    db: AsyncSession = Depends(get_db),
    cache: RouteCache = Depends(get_route_cache),
    settings: Settings = Depends(get_settings),
) -> InvoiceHandlers:
    return InvoiceHandlers(
        SqlInvoiceRepository(db), cache, listing_route=settings.invoices_route,
    )


def get_auth_handlers(
    db: AsyncSession = Depends(get_db),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> AuthHandlers:
    provider = CredentialsIdentityProvider(SqlUserRepository(db), hasher)
    return AuthHandlers(provider, signed_in_route=settings.signed_in_route)
