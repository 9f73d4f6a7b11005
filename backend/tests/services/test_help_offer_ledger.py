"""Help Offer Ledger — idempotent offers, self-help rejection, best-effort notifications."""

from uuid import uuid4

import pytest

from request_board.core.errors import BadRequestError, ResourceNotFoundError
from request_board.models.request_help_offer import RequestHelpOffer
from request_board.services.help_offer_ledger import HelpOfferLedger


@pytest.fixture
def ledger(test_db, gateway):
    return HelpOfferLedger(test_db, gateway)


async def test_offer_records_row_and_notifies_creator(
    ledger, gateway, make_user, seed_request, count_rows,
):
    creator = await make_user()
    helper = await make_user()
    request = await seed_request(creator, title="Move a couch")

    await ledger.offer(request.id, helper.id)

    assert await count_rows(RequestHelpOffer) == 1
    assert gateway.offered == [{
        "recipient_id": creator.id,
        "actor_id": helper.id,
        "request_id": request.id,
        "title": "Move a couch",
        "description": "Details inside",
    }]


async def test_repeat_offer_is_silent_noop(
    ledger, gateway, make_user, seed_request, count_rows,
):
    request = await seed_request(await make_user())
    helper = await make_user()

    await ledger.offer(request.id, helper.id)
    await ledger.offer(request.id, helper.id)

    assert await count_rows(RequestHelpOffer) == 1
    assert len(gateway.offered) == 1


async def test_self_help_rejected_without_side_effects(
    ledger, gateway, make_user, seed_request, count_rows,
):
    creator = await make_user()
    request = await seed_request(creator)

    with pytest.raises(BadRequestError) as exc:
        await ledger.offer(request.id, creator.id)

    assert exc.value.message == "You cannot help your own request"
    assert await count_rows(RequestHelpOffer) == 0
    assert gateway.offered == []


async def test_offer_on_missing_request_is_not_found(ledger, make_user):
    helper = await make_user()
    with pytest.raises(ResourceNotFoundError):
        await ledger.offer(uuid4(), helper.id)


async def test_notification_failure_does_not_fail_offer(
    ledger, gateway, make_user, seed_request, count_rows,
):
    gateway.fail = True
    request = await seed_request(await make_user())
    helper = await make_user()

    await ledger.offer(request.id, helper.id)

    assert await count_rows(RequestHelpOffer) == 1


async def test_withdraw_removes_row_and_notifies(
    ledger, gateway, make_user, seed_request, count_rows,
):
    creator = await make_user()
    helper = await make_user()
    request = await seed_request(creator)
    await ledger.offer(request.id, helper.id)

    await ledger.withdraw(request.id, helper.id)

    assert await count_rows(RequestHelpOffer) == 0
    assert gateway.withdrawn == [{
        "recipient_id": creator.id,
        "actor_id": helper.id,
        "request_id": request.id,
    }]


async def test_withdraw_without_offer_still_notifies(
    ledger, gateway, make_user, seed_request,
):
    request = await seed_request(await make_user())
    helper = await make_user()

    await ledger.withdraw(request.id, helper.id)

    assert len(gateway.withdrawn) == 1


async def test_withdraw_on_missing_request_is_not_found(ledger, gateway, make_user):
    helper = await make_user()
    with pytest.raises(ResourceNotFoundError):
        await ledger.withdraw(uuid4(), helper.id)
    assert gateway.withdrawn == []


async def test_withdraw_survives_notification_failure(
    ledger, gateway, make_user, seed_request, count_rows,
):
    request = await seed_request(await make_user())
    helper = await make_user()
    await ledger.offer(request.id, helper.id)
    gateway.fail = True

    await ledger.withdraw(request.id, helper.id)

    assert await count_rows(RequestHelpOffer) == 0
