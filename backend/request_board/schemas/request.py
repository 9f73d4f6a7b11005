"""Request Board Schemas — Pydantic models for the request card and board envelopes.

Invariants:
    - Wire names are camelCase (alias_generator), Python names snake_case
    - RequestCreate is lenient on purpose: field rules and their messages live in
      core/validate_request.py, so the schema only guards JSON types
    - likeCount/likedByUser/helpedByUser are read-model fields, never accepted as input

Design Decisions:
    - tags typed Any on input: a non-list value normalizes to [] instead of a 400
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for board schemas: camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestCreate(CamelModel):
    """Body of POST /requests."""
    title: str | None = None
    description: str | None = None
    location: str | None = None
    city: str | None = None
    is_remote: bool = False
    tags: Any = None
    urgency: str | None = None


class CreatorSummary(CamelModel):
    """Public identity of the request creator."""
    id: UUID
    name: str
    handle: str
    college_name: str | None = None
    college_domain: str | None = None


class RequestCard(CamelModel):
    """A request as rendered to one viewer."""
    id: UUID
    title: str
    description: str
    location: str
    city: str | None = None
    is_remote: bool = False
    tags: list[str] = Field(default_factory=list)
    urgency: str = "low"
    created_at: datetime
    creator: CreatorSummary
    like_count: int = 0
    liked_by_user: bool = False
    helped_by_user: bool = False


class RequestEnvelope(CamelModel):
    """Single-request response."""
    request: RequestCard


class RequestListMeta(CamelModel):
    """Board-level flags for a listing."""
    auto_prune_active: bool = False


class RequestPage(CamelModel):
    """Response of GET /requests."""
    requests: list[RequestCard]
    meta: RequestListMeta


class LikeToggleResult(CamelModel):
    """Response of POST /requests/{id}/like."""
    like_count: int
    liked: bool


class HelpOfferStatus(CamelModel):
    """Response of POST /requests/{id}/help."""
    status: str = "notified"
