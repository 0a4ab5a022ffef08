"""Service test fixtures — in-memory fakes for the handler boundary protocols.

Invariants:
    - Fakes satisfy the Protocols in core/repository_protocols.py structurally
    - fail_on lets a test make a single store operation raise DatabaseError
    - RecordingInvalidator records every invalidated route, in order

Design Decisions:
    - Fakes over AsyncMock for repositories: uniqueness and not-found behavior
      must actually hold, not be scripted per test
"""

from dataclasses import dataclass

import pytest

from dashboard.core.errors import DatabaseError


@dataclass
class FakeUser:
    id: str
    name: str
    email: str
    password: str


class FakeUserRepository:
    def __init__(self):
        self.rows: dict[str, FakeUser] = {}
        self.fail_on: set[str] = set()

    def seed(self, user_id, name, email, password_hash):
        self.rows[user_id] = FakeUser(user_id, name, email, password_hash)
        return user_id

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise DatabaseError("simulated failure", operation)

    async def count_by_email(self, email):
        self._maybe_fail("query")
        return sum(1 for u in self.rows.values() if u.email == email)

    async def get(self, user_id):
        self._maybe_fail("query")
        return self.rows.get(user_id)

    async def get_by_email(self, email):
        self._maybe_fail("query")
        return next((u for u in self.rows.values() if u.email == email), None)

    async def insert(self, name, email, password_hash):
        self._maybe_fail("insert")
        user_id = f"user-{len(self.rows) + 1}"
        self.rows[user_id] = FakeUser(user_id, name, email, password_hash)
        return user_id

    async def update(self, user_id, name, email, password_hash):
        self._maybe_fail("update")
        user = self.rows.get(user_id)
        if user is None:
            return
        user.name = name
        user.email = email
        if password_hash is not None:
            user.password = password_hash

    async def delete(self, user_id):
        self._maybe_fail("delete")
        self.rows.pop(user_id, None)


@dataclass
class FakeInvoice:
    id: str
    customer_id: str
    amount: int
    status: str
    date: object


class FakeInvoiceRepository:
    def __init__(self):
        self.rows: dict[str, FakeInvoice] = {}
        self.fail_on: set[str] = set()

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise DatabaseError("simulated failure", operation)

    async def insert(self, customer_id, amount, status, date):
        self._maybe_fail("insert")
        invoice_id = f"inv-{len(self.rows) + 1}"
        self.rows[invoice_id] = FakeInvoice(
            invoice_id, customer_id, amount, status.value, date,
        )
        return invoice_id

    async def update(self, invoice_id, customer_id, amount, status):
        self._maybe_fail("update")
        invoice = self.rows.get(invoice_id)
        if invoice is None:
            return
        invoice.customer_id = customer_id
        invoice.amount = amount
        invoice.status = status.value

    async def delete(self, invoice_id):
        self._maybe_fail("delete")
        self.rows.pop(invoice_id, None)


class FakeHasher:
    """Deterministic, recognisable hashes; records every plaintext it saw."""

    def __init__(self):
        self.hashed: list[str] = []

    async def hash(self, password):
        self.hashed.append(password)
        return f"hashed:{password}:{len(self.hashed)}"

    async def verify(self, password, password_hash):
        return password_hash.startswith(f"hashed:{password}:")


class RecordingInvalidator:
    def __init__(self):
        self.routes: list[str] = []

    def invalidate(self, route):
        self.routes.append(route)


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def invoice_repo():
    return FakeInvoiceRepository()


@pytest.fixture
def hasher():
    return FakeHasher()


@pytest.fixture
def views():
    return RecordingInvalidator()
