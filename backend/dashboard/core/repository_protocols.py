"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - View invalidation is a protocol too: handlers never touch a global cache
"""

import datetime
from collections.abc import Mapping
from typing import Protocol

from dashboard.core.domain_types import (
    CustomerId, InvoiceId, InvoiceStatus, MinorUnits, PasswordHash, UserId,
)


class UserRecord(Protocol):
    """Structural contract for a stored user row."""
    id: str
    name: str
    email: str
    password: str


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def count_by_email(self, email: str) -> int: ...
    async def get(self, user_id: UserId) -> UserRecord | None: ...
    async def get_by_email(self, email: str) -> UserRecord | None: ...
    async def insert(
        self, name: str, email: str, password_hash: PasswordHash,
    ) -> UserId: ...
    async def update(
        self, user_id: UserId, name: str, email: str,
        password_hash: PasswordHash | None,
    ) -> None: ...
    async def delete(self, user_id: UserId) -> None: ...


class InvoiceRepository(Protocol):
    """Contract for invoice persistence — implemented by shell."""
    async def insert(
        self, customer_id: CustomerId, amount: MinorUnits,
        status: InvoiceStatus, date: datetime.date,
    ) -> InvoiceId: ...
    async def update(
        self, invoice_id: InvoiceId, customer_id: CustomerId,
        amount: MinorUnits, status: InvoiceStatus,
    ) -> None: ...
    async def delete(self, invoice_id: InvoiceId) -> None: ...


class PasswordHasher(Protocol):
    """Contract for salted password hashing."""
    async def hash(self, password: str) -> PasswordHash: ...
    async def verify(self, password: str, password_hash: str) -> bool: ...


class ViewInvalidator(Protocol):
    """Marks a route's cached render stale."""
    def invalidate(self, route: str) -> None: ...


class IdentityProvider(Protocol):
    """External sign-in mechanism. Raises AuthProviderError on failure."""
    async def sign_in(
        self, provider_id: str, credentials: Mapping[str, str | None],
    ) -> UserId: ...
