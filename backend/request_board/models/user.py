"""User ORM — public identity rows owned by the User Directory.

Invariants:
    - id is UUID primary key
    - handle is unique across the platform
    - The board only reads name/handle/college fields for the creator view

Design Decisions:
    - Kept minimal: credentials and profile data live with the auth collaborator
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from request_board.db.base import Base


class User(Base):
    """Platform user as seen by the board."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    handle: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    college_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    college_domain: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
