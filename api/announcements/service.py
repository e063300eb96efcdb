"""
Announcement business logic.

Rows are normalized on the way out: NULL text columns become "" and `urgent`
(a boolean or a 0/1 integer depending on the column type) becomes a bool.
"""

from __future__ import annotations

import logging

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

SUCCESS = {"status": "success"}


def _to_announcement(row: dict) -> schemas.AnnouncementResponse:
    return schemas.AnnouncementResponse(
        id=int(row.get("id") or 0),
        announcements=str(row.get("announcements") or ""),
        description=str(row.get("description") or ""),
        date=str(row.get("date") or ""),
        location=str(row.get("location") or ""),
        urgent=bool(row.get("urgent")),
    )


async def list_announcements(database: db.Database) -> list[dict]:
    rows = await repository.list_announcements(database)
    return [_to_announcement(row).model_dump() for row in rows]


async def create_announcement(database: db.Database, payload: schemas.AnnouncementWrite) -> dict:
    await repository.create_announcement(database, **payload.model_dump())
    return dict(SUCCESS)


async def update_announcement(
    database: db.Database,
    announcement_id: int,
    payload: schemas.AnnouncementWrite,
) -> dict:
    updated = await repository.update_announcement(database, announcement_id, **payload.model_dump())
    if updated == 0:
        logger.debug("announcement_update_noop id=%s", announcement_id)
    return dict(SUCCESS)


async def delete_announcement(database: db.Database, announcement_id: int) -> dict:
    deleted = await repository.delete_announcement(database, announcement_id)
    if deleted == 0:
        logger.debug("announcement_delete_noop id=%s", announcement_id)
    return dict(SUCCESS)
