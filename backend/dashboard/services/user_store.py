"""User Store — SQLAlchemy implementation of UserRepository.

Invariants:
    - Every statement is a SQLAlchemy expression (bound parameters, no string SQL)
    - Each write commits on its own: one handler call == at most one write transaction
    - users.email unique violation -> EmailConflictError; any other failure -> DatabaseError
    - delete() of an unknown id is a silent no-op
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import PasswordHash, UserId
from dashboard.core.errors import EmailConflictError
from dashboard.infrastructure.database import map_db_errors
from dashboard.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by the `users` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def count_by_email(self, email: str) -> int:
        async with map_db_errors(self.db, "query"):
            result = await self.db.execute(
                select(func.count()).select_from(User).where(User.email == email),
            )
            count = result.scalar_one()
        logger.debug(f"Email count: {count}")
        return count

    async def get(self, user_id: UserId) -> User | None:
        async with map_db_errors(self.db, "query"):
            result = await self.db.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        async with map_db_errors(self.db, "query"):
            result = await self.db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    async def insert(
        self, name: str, email: str, password_hash: PasswordHash,
    ) -> UserId:
        async with map_db_errors(self.db, "insert"):
            user_id = UserId(str(uuid.uuid4()))
            async with self._unique_email():
                self.db.add(User(
                    id=user_id, name=name, email=email, password=password_hash,
                ))
                await self.db.commit()
            return user_id

    async def update(
        self, user_id: UserId, name: str, email: str,
        password_hash: PasswordHash | None,
    ) -> None:
        values: dict = {"name": name, "email": email}
        if password_hash is not None:
            values["password"] = password_hash
        async with map_db_errors(self.db, "update"):
            async with self._unique_email():
                await self.db.execute(
                    update(User).where(User.id == user_id).values(**values),
                )
                await self.db.commit()

    async def delete(self, user_id: UserId) -> None:
        async with map_db_errors(self.db, "delete"):
            await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()

    async def list_all(self) -> list[User]:
        async with map_db_errors(self.db, "query"):
            result = await self.db.execute(select(User).order_by(User.name))
            return list(result.scalars().all())

    @asynccontextmanager
    async def _unique_email(self) -> AsyncGenerator[None, None]:
        # The only unique constraint on users besides the primary key is email
        try:
            yield
        except IntegrityError:
            await self.db.rollback()
            raise EmailConflictError()
