"""Domain Types — verifies identity wrappers, enum values and the identity value object.

Tests:
    - NewType wrappers exist and are callable
    - Enums have expected members and serialize to string
    - AuthenticatedUser is immutable
"""

import dataclasses
from uuid import uuid4

import pytest

from request_board.core.domain_types import (
    RequestId, UserId, Urgency, ListOrder, NotificationType, AuthenticatedUser,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert RequestId(uid) == uid
    assert UserId(uid) == uid


def test_urgency_has_three_levels():
    assert [u.value for u in Urgency] == ["low", "medium", "high"]


def test_list_order_values():
    assert ListOrder("newest") is ListOrder.NEWEST
    assert ListOrder("oldest") is ListOrder.OLDEST


def test_enums_are_str_subclasses():
    assert isinstance(Urgency.HIGH, str)
    assert Urgency.HIGH == "high"
    assert NotificationType.REQUEST_HELP == "request_help"


def test_authenticated_user_is_frozen():
    user = AuthenticatedUser(id=UserId(uuid4()))
    assert user.is_admin is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.is_admin = True
