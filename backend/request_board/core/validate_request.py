"""Request Validation — pure checks applied before a request touches the store.

Invariants:
    - build_request_draft enforces, in order: title, description, effective location,
      city-for-in-person. Fails fast with BadRequestError on the first violation
    - parse_urgency runs separately: the single-active-request check sits between the two
    - No IO, no clock, no randomness

Design Decisions:
    - Non-text values are treated as empty text: the HTTP schema already rejects them,
      but the core stays total for direct callers
    - Effective location is the first non-blank of location, city; "Remote" only when remote
"""

from dataclasses import dataclass, field

from request_board.core.domain_types import Urgency
from request_board.core.errors import BadRequestError
from request_board.core.normalize_tags import normalize_tags

REMOTE_LOCATION: str = "Remote"


@dataclass(frozen=True)
class RequestDraft:
    """Validated, normalized request fields ready to persist."""
    title: str
    description: str
    location: str
    city: str | None
    is_remote: bool
    tags: list[str] = field(default_factory=list)


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def resolve_location(
    location: object, city: object, is_remote: bool,
) -> str:
    """Explicit location, else city, else 'Remote' for remote requests."""
    resolved = _text(location) or _text(city)
    if not resolved and is_remote:
        return REMOTE_LOCATION
    return resolved


def build_request_draft(
    title: object,
    description: object,
    location: object = None,
    city: object = None,
    is_remote: bool = False,
    tags: object = None,
) -> RequestDraft:
    """Validate and normalize request fields. Raises BadRequestError."""
    clean_title = _text(title)
    if not clean_title:
        raise BadRequestError("Title is required", field="title")

    clean_description = _text(description)
    if not clean_description:
        raise BadRequestError("Description is required", field="description")

    is_remote = bool(is_remote)
    effective_location = resolve_location(location, city, is_remote)
    if not effective_location:
        raise BadRequestError("Location is required", field="location")

    clean_city = _text(city) or None
    if not is_remote and not clean_city:
        raise BadRequestError(
            "City is required for in-person requests", field="city",
        )

    return RequestDraft(
        title=clean_title,
        description=clean_description,
        location=effective_location,
        city=clean_city,
        is_remote=is_remote,
        tags=normalize_tags(tags),
    )


def parse_urgency(raw: object) -> Urgency:
    """Case-insensitive urgency, defaulting to LOW when absent."""
    if raw is None:
        return Urgency.LOW
    if isinstance(raw, str):
        try:
            return Urgency(raw.strip().lower())
        except ValueError:
            pass
    raise BadRequestError(
        "Urgency must be low, medium, or high", field="urgency",
    )
