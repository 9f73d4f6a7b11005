"""HelpRequest ORM — a single open ask for help on the board.

Invariants:
    - id is UUID primary key, generated at creation, immutable
    - creator_id is UNIQUE: at most one request per user at any time
    - tags stored as a JSON list of normalized slugs (max 10)
    - urgency is one of low | medium | high
    - Deleting a request cascades to its likes and help offers (DB-level ON DELETE CASCADE)

Design Decisions:
    - Unique constraint on creator_id: closes the check-then-insert race on create
    - passive_deletes on relationships: bulk deletes (retention sweep) rely on the DB cascade,
      so the ORM never loads children just to delete them
    - created_at indexed: every board read orders and filters by it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, String, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from request_board.db.base import Base


class HelpRequest(Base):
    """Open request for help: one per creator."""
    __tablename__ = "requests"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    creator_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_remote: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    urgency: Mapped[str] = mapped_column(
        String(10), nullable=False, default="low",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    # Relationships
    likes: Mapped[list["RequestLike"]] = relationship(
        "RequestLike", back_populates="request",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    help_offers: Mapped[list["RequestHelpOffer"]] = relationship(
        "RequestHelpOffer", back_populates="request",
        cascade="all, delete-orphan", passive_deletes=True,
    )
