"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RequestId, UserId wrap UUIDs: never use bare UUID in domain logic
    - Urgency and ListOrder encode all valid states: no raw string matching
    - AuthenticatedUser is the only identity shape the core ever receives

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RequestId = NewType("RequestId", UUID)
UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Urgency(str, Enum):
    """How soon the creator needs help: maps to DB `urgency` column."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ListOrder(str, Enum):
    """Board ordering by created_at."""
    NEWEST = "newest"
    OLDEST = "oldest"


class NotificationType(str, Enum):
    """Notification kinds written by the board."""
    REQUEST_HELP = "request_help"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved by the User Directory from a bearer token."""
    id: UserId
    is_admin: bool = False
