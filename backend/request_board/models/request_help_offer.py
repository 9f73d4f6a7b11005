"""RequestHelpOffer ORM — membership fact: helper has offered to help with this request.

Invariants:
    - Composite primary key (request_id, helper_id): repeat offers collapse to one row
    - Inserted with ON CONFLICT DO NOTHING so "already offered" is observable as zero rows
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from request_board.db.base import Base


class RequestHelpOffer(Base):
    """Help offer row."""
    __tablename__ = "request_help_offers"

    request_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("requests.id", ondelete="CASCADE"),
        primary_key=True, index=True,
    )
    helper_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    request: Mapped["HelpRequest"] = relationship(
        "HelpRequest", back_populates="help_offers",
    )
