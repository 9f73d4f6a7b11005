"""RequestLike ORM — membership fact: this user currently likes this request.

Invariants:
    - Composite primary key (request_id, user_id): at most one like per user per request
    - Row presence is the whole state: no counter column anywhere
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from request_board.db.base import Base


class RequestLike(Base):
    """Like toggle row."""
    __tablename__ = "request_likes"

    request_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("requests.id", ondelete="CASCADE"),
        primary_key=True, index=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    request: Mapped["HelpRequest"] = relationship(
        "HelpRequest", back_populates="likes",
    )
