"""Boundary Protocols — contracts between the board core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure: dependency arrows point inward only
    - Collaborators (user lookup, notification delivery) accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - NotificationGateway methods are fire-and-forget: they return None and must not
      raise into the caller: delivery failures are the gateway's to log
"""

from typing import Protocol

from request_board.core.domain_types import AuthenticatedUser, RequestId, UserId


class UserDirectory(Protocol):
    """Resolves a bearer token to a user identity: implemented by shell."""
    async def resolve_user(self, token: str) -> AuthenticatedUser | None: ...


class NotificationGateway(Protocol):
    """Receives help-offer lifecycle events: implemented by shell."""
    async def notify_help_offered(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        request_id: RequestId,
        title: str,
        description: str,
    ) -> None: ...

    async def notify_help_withdrawn(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        request_id: RequestId,
    ) -> None: ...
