"""User ORM — dashboard operator account.

Invariants:
    - id is an opaque string (uuid4 text), generated server-side
    - email is UNIQUE at the store level: a lost check-then-insert race fails the
      write instead of creating a duplicate row
    - password holds a bcrypt hash, never plaintext
"""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base


class User(Base):
    """User entity — name, unique email, password hash."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
