"""Request Board Routes — thin HTTP layer over the Request Store and ledgers.

Invariants:
    - Routes never contain business logic: parse, resolve identity, delegate, shape response
    - GET routes accept anonymous viewers; every mutation requires a resolved user
    - Malformed request ids fail Pydantic path validation (400 VALIDATION_ERROR)

Design Decisions:
    - Unknown `order` values fall back to newest rather than failing the listing
    - limit bounded by settings.board_max_limit: a single bounded page, no cursor
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from request_board.api.dependencies import (
    get_current_user, get_help_offer_ledger, get_like_ledger,
    get_optional_user, get_request_store,
)
from request_board.config import get_settings
from request_board.core.domain_types import (
    AuthenticatedUser, ListOrder, RequestId,
)
from request_board.schemas.request import (
    HelpOfferStatus, LikeToggleResult, RequestCreate, RequestEnvelope, RequestPage,
)
from request_board.services.help_offer_ledger import HelpOfferLedger
from request_board.services.like_ledger import LikeLedger
from request_board.services.request_store import RequestStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/requests", tags=["requests"])

_settings = get_settings()


@router.get("", response_model=RequestPage)
async def list_requests(
    since_hours: float | None = Query(None, alias="sinceHours"),
    order: str = Query(ListOrder.NEWEST.value),
    limit: int | None = Query(None, ge=1, le=_settings.board_max_limit),
    viewer: AuthenticatedUser | None = Depends(get_optional_user),
    store: RequestStore = Depends(get_request_store),
):
    """List the board, newest first by default."""
    return await store.list(
        since_hours=since_hours,
        order=ListOrder.OLDEST if order == ListOrder.OLDEST.value else ListOrder.NEWEST,
        limit=limit,
        viewer_id=viewer.id if viewer else None,
    )


@router.post(
    "", response_model=RequestEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_request(
    body: RequestCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    store: RequestStore = Depends(get_request_store),
):
    """Post the caller's single active request."""
    card = await store.create(
        creator_id=user.id,
        title=body.title,
        description=body.description,
        location=body.location,
        city=body.city,
        is_remote=body.is_remote,
        tags=body.tags,
        urgency=body.urgency,
    )
    return RequestEnvelope(request=card)


@router.get("/{request_id}", response_model=RequestEnvelope)
async def get_request(
    request_id: UUID,
    viewer: AuthenticatedUser | None = Depends(get_optional_user),
    store: RequestStore = Depends(get_request_store),
):
    card = await store.get(
        RequestId(request_id), viewer_id=viewer.id if viewer else None,
    )
    return RequestEnvelope(request=card)


@router.post("/{request_id}/like", response_model=LikeToggleResult)
async def like_request(
    request_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    ledger: LikeLedger = Depends(get_like_ledger),
):
    """Flip the caller's like."""
    return await ledger.toggle(RequestId(request_id), user.id)


@router.post(
    "/{request_id}/help", response_model=HelpOfferStatus,
    status_code=status.HTTP_201_CREATED,
)
async def offer_help(
    request_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    ledger: HelpOfferLedger = Depends(get_help_offer_ledger),
):
    """Offer help; the creator is notified on the first offer only."""
    await ledger.offer(RequestId(request_id), user.id)
    return HelpOfferStatus()


@router.delete(
    "/{request_id}/help", status_code=status.HTTP_204_NO_CONTENT,
)
async def withdraw_help(
    request_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    ledger: HelpOfferLedger = Depends(get_help_offer_ledger),
):
    await ledger.withdraw(RequestId(request_id), user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{request_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_request(
    request_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    store: RequestStore = Depends(get_request_store),
):
    """Delete the caller's own request."""
    await store.delete(RequestId(request_id), user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
