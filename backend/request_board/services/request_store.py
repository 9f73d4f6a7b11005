"""Request Store — create, list, read and delete board requests with per-viewer social counters.

Invariants:
    - create validates everything before writing: title, description, location, city,
      single-active-request, urgency (in that order, first failure wins)
    - At most one request per creator: checked up front, and enforced by the unique
      constraint on requests.creator_id when two creates race
    - list runs the Retention Sweeper before reading, and reports its flag in meta
    - likeCount/likedByUser/helpedByUser are computed per read; both flags are False
      for anonymous viewers
    - delete removes only the caller's own request; likes and help offers cascade

Design Decisions:
    - Counters via correlated subqueries, not LEFT JOIN + GROUP BY: joining likes and
      help offers together would multiply like counts by the number of offers
    - Ties on created_at keep whatever order the database returns (undefined)
    - sinceHours that is non-positive, non-finite or reaches past datetime.min applies no filter
    - get_request_or_404 exported for the ledgers (one lookup, one error message)
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from sqlalchemy import delete, exists, false, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.domain_types import ListOrder, RequestId, UserId
from request_board.core.errors import ActiveRequestExistsError, ResourceNotFoundError
from request_board.core.retention import PRUNE_THRESHOLD, RETENTION_DAYS
from request_board.core.validate_request import build_request_draft, parse_urgency
from request_board.models.help_request import HelpRequest
from request_board.models.request_help_offer import RequestHelpOffer
from request_board.models.request_like import RequestLike
from request_board.models.user import User
from request_board.schemas.request import (
    CreatorSummary, RequestCard, RequestListMeta, RequestPage,
)
from request_board.services.retention_sweeper import RetentionSweeper

logger = logging.getLogger(__name__)

DEFAULT_LIMIT: int = 50


async def get_request_or_404(db: AsyncSession, request_id: UUID) -> HelpRequest:
    """Load a request or raise ResourceNotFoundError."""
    result = await db.execute(
        select(HelpRequest).where(HelpRequest.id == request_id),
    )
    request = result.scalar_one_or_none()
    if not request:
        raise ResourceNotFoundError("Request not found")
    return request


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _since_cutoff(now: datetime, since_hours: float | None) -> datetime | None:
    """Lower bound for created_at, or None when the window is absent or unbounded."""
    if since_hours is None or not math.isfinite(since_hours) or since_hours <= 0:
        return None
    try:
        return now - timedelta(hours=since_hours)
    except OverflowError:
        # window reaches past datetime.min: every request is inside it
        return None


def _card_query(viewer_id: UUID | None):
    """SELECT request, creator and the viewer-scoped social counters."""
    like_count = (
        select(func.count())
        .select_from(RequestLike)
        .where(RequestLike.request_id == HelpRequest.id)
        .scalar_subquery()
    )
    if viewer_id is None:
        liked_by_user = false()
        helped_by_user = false()
    else:
        liked_by_user = exists().where(
            RequestLike.request_id == HelpRequest.id,
            RequestLike.user_id == viewer_id,
        )
        helped_by_user = exists().where(
            RequestHelpOffer.request_id == HelpRequest.id,
            RequestHelpOffer.helper_id == viewer_id,
        )
    return (
        select(
            HelpRequest,
            User,
            like_count.label("like_count"),
            liked_by_user.label("liked_by_user"),
            helped_by_user.label("helped_by_user"),
        )
        .join(User, User.id == HelpRequest.creator_id)
    )


def _to_card(row) -> RequestCard:
    request, creator = row[0], row[1]
    return RequestCard(
        id=request.id,
        title=request.title,
        description=request.description,
        location=request.location,
        city=request.city,
        is_remote=bool(request.is_remote),
        tags=list(request.tags or []),
        urgency=request.urgency or "low",
        created_at=_as_utc(request.created_at),
        creator=CreatorSummary(
            id=creator.id,
            name=creator.name,
            handle=creator.handle,
            college_name=creator.college_name,
            college_domain=creator.college_domain,
        ),
        like_count=int(row.like_count or 0),
        liked_by_user=bool(row.liked_by_user),
        helped_by_user=bool(row.helped_by_user),
    )


class RequestStore:
    """Owns the requests table: lifecycle plus the joined read model."""

    def __init__(
        self,
        db: AsyncSession,
        prune_threshold: int = PRUNE_THRESHOLD,
        retention_days: int = RETENTION_DAYS,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.db = db
        self.default_limit = default_limit
        self.sweeper = RetentionSweeper(db, prune_threshold, retention_days)

    async def _has_active_request(self, creator_id: UUID) -> bool:
        found = await self.db.scalar(
            select(HelpRequest.id)
            .where(HelpRequest.creator_id == creator_id)
            .limit(1),
        )
        return found is not None

    async def create(
        self,
        creator_id: UserId,
        title: object,
        description: object,
        location: object = None,
        city: object = None,
        is_remote: bool = False,
        tags: object = None,
        urgency: object = None,
    ) -> RequestCard:
        """Validate and persist a new request, returning its rendered card."""
        draft = build_request_draft(
            title, description, location=location, city=city,
            is_remote=is_remote, tags=tags,
        )
        if await self._has_active_request(creator_id):
            raise ActiveRequestExistsError()
        level = parse_urgency(urgency)

        request_id = uuid4()
        self.db.add(HelpRequest(
            id=request_id,
            creator_id=creator_id,
            title=draft.title,
            description=draft.description,
            location=draft.location,
            city=draft.city,
            is_remote=draft.is_remote,
            tags=draft.tags,
            urgency=level.value,
        ))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if await self._has_active_request(creator_id):
                logger.warning(
                    "Concurrent create rejected by unique creator constraint",
                    extra={"user_id": creator_id},
                )
                raise ActiveRequestExistsError()
            raise

        logger.info(
            f"Request {request_id} created",
            extra={"request_id": request_id, "user_id": creator_id},
        )
        return await self.get(RequestId(request_id))

    async def get(
        self, request_id: RequestId, viewer_id: UserId | None = None,
    ) -> RequestCard:
        """Render one request for a viewer, or raise ResourceNotFoundError."""
        result = await self.db.execute(
            _card_query(viewer_id).where(HelpRequest.id == request_id),
        )
        row = result.first()
        if row is None:
            raise ResourceNotFoundError("Request not found")
        return _to_card(row)

    async def list(
        self,
        since_hours: float | None = None,
        order: ListOrder | str = ListOrder.NEWEST,
        limit: int | None = None,
        viewer_id: UserId | None = None,
    ) -> RequestPage:
        """One bounded page of the board, after the inline retention sweep."""
        auto_prune_active = await self.sweeper.sweep()

        query = _card_query(viewer_id)
        since = _since_cutoff(datetime.now(timezone.utc), since_hours)
        if since is not None:
            query = query.where(HelpRequest.created_at >= since)

        if order == ListOrder.OLDEST:
            query = query.order_by(HelpRequest.created_at.asc())
        else:
            query = query.order_by(HelpRequest.created_at.desc())
        query = query.limit(limit if limit is not None else self.default_limit)

        result = await self.db.execute(query)
        return RequestPage(
            requests=[_to_card(row) for row in result.all()],
            meta=RequestListMeta(auto_prune_active=auto_prune_active),
        )

    async def delete(self, request_id: RequestId, user_id: UserId) -> None:
        """Delete the caller's own request. Likes and help offers cascade."""
        result = await self.db.execute(
            delete(HelpRequest)
            .where(HelpRequest.id == request_id)
            .where(HelpRequest.creator_id == user_id)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise ResourceNotFoundError("Request not found or not yours")
        await self.db.commit()
        logger.info(
            f"Request {request_id} deleted",
            extra={"request_id": request_id, "user_id": user_id},
        )
