"""Notification Gateway — inbox writes and background-task scheduling."""

from fastapi import BackgroundTasks
from sqlalchemy import select

from request_board.core.domain_types import NotificationType
from request_board.infrastructure.notification_gateway import (
    BackgroundNotificationGateway, HelpNotificationWriter,
)
from request_board.models.notification import Notification
import request_board.infrastructure.database as db_module


async def test_record_offered_writes_request_help_row(test_db, make_user):
    creator = await make_user()
    helper = await make_user()
    request_id = creator.id  # any UUID works: context_id has no FK

    written = await HelpNotificationWriter(test_db).record_offered(
        recipient_id=creator.id, actor_id=helper.id, request_id=request_id,
        title="Need a ride", description="  Airport on Friday  ",
    )

    assert written is True
    row = (await test_db.execute(select(Notification))).scalar_one()
    assert row.user_id == creator.id
    assert row.actor_id == helper.id
    assert row.type == NotificationType.REQUEST_HELP.value
    assert row.message_id == request_id
    assert row.context_id == request_id
    assert row.message_preview == "Airport on Friday"
    assert row.read_at is None


async def test_record_offered_skips_self_notification(test_db, make_user, count_rows):
    user = await make_user()
    written = await HelpNotificationWriter(test_db).record_offered(
        recipient_id=user.id, actor_id=user.id, request_id=user.id,
        title="t", description="d",
    )
    assert written is False
    assert await count_rows(Notification) == 0


async def test_clear_offered_removes_only_matching_rows(test_db, make_user, count_rows):
    creator = await make_user()
    helper = await make_user()
    other = await make_user()
    writer = HelpNotificationWriter(test_db)
    await writer.record_offered(creator.id, helper.id, creator.id, "t", "d")
    await writer.record_offered(creator.id, other.id, creator.id, "t", "d")

    removed = await writer.clear_offered(creator.id, helper.id, creator.id)

    assert removed == 1
    assert await count_rows(Notification) == 1
    assert await writer.clear_offered(creator.id, helper.id, creator.id) == 0


async def test_gateway_defers_work_to_background_tasks(
    test_engine, test_session_factory, make_user, count_rows, monkeypatch,
):
    manager = db_module.DatabaseSessionManager.__new__(db_module.DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    monkeypatch.setattr(db_module, "db_manager", manager)

    creator = await make_user()
    helper = await make_user()
    tasks = BackgroundTasks()
    gateway = BackgroundNotificationGateway(tasks)

    await gateway.notify_help_offered(
        recipient_id=creator.id, actor_id=helper.id, request_id=creator.id,
        title="t", description="d",
    )
    assert len(tasks.tasks) == 1
    assert await count_rows(Notification) == 0

    await tasks()
    assert await count_rows(Notification) == 1

    withdraw_tasks = BackgroundTasks()
    await BackgroundNotificationGateway(withdraw_tasks).notify_help_withdrawn(
        recipient_id=creator.id, actor_id=helper.id, request_id=creator.id,
    )
    await withdraw_tasks()
    assert await count_rows(Notification) == 0


async def test_background_task_without_database_is_dropped(make_user, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    tasks = BackgroundTasks()
    user = await make_user()
    await BackgroundNotificationGateway(tasks).notify_help_withdrawn(
        recipient_id=user.id, actor_id=user.id, request_id=user.id,
    )
    # logs and returns instead of raising
    await tasks()
