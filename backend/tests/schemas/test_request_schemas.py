"""Request Board Schemas — verifies camelCase wire names in both directions."""

from datetime import datetime, timezone
from uuid import uuid4

from request_board.schemas.request import (
    CreatorSummary, LikeToggleResult, RequestCard, RequestCreate,
    RequestListMeta, RequestPage,
)


def test_create_accepts_camel_case_body():
    body = RequestCreate.model_validate({
        "title": "t", "description": "d", "isRemote": True, "tags": "not-a-list",
    })
    assert body.is_remote is True
    assert body.tags == "not-a-list"
    assert body.urgency is None


def test_create_accepts_snake_case_names():
    assert RequestCreate(is_remote=True).is_remote is True


def test_card_serializes_camel_case():
    card = RequestCard(
        id=uuid4(), title="t", description="d", location="Remote",
        is_remote=True, created_at=datetime.now(timezone.utc),
        creator=CreatorSummary(id=uuid4(), name="Ada", handle="ada"),
        like_count=2, liked_by_user=True,
    )
    data = card.model_dump(by_alias=True)
    assert data["likeCount"] == 2
    assert data["likedByUser"] is True
    assert data["helpedByUser"] is False
    assert data["isRemote"] is True
    assert data["creator"]["collegeName"] is None
    assert "createdAt" in data


def test_page_meta_and_like_result_names():
    page = RequestPage(requests=[], meta=RequestListMeta(auto_prune_active=True))
    assert page.model_dump(by_alias=True) == {
        "requests": [], "meta": {"autoPruneActive": True},
    }
    assert LikeToggleResult(like_count=0, liked=False).model_dump(by_alias=True) == {
        "likeCount": 0, "liked": False,
    }
