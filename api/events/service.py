"""
Event business logic.
"""

from __future__ import annotations

import logging

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

SUCCESS = {"status": "success"}


def _to_event(row: dict) -> schemas.EventResponse:
    return schemas.EventResponse(
        id=int(row.get("id") or 0),
        name=str(row.get("name") or ""),
        date=str(row.get("date") or ""),
        location=str(row.get("location") or ""),
        description=str(row.get("description") or ""),
    )


async def list_events(database: db.Database) -> list[dict]:
    rows = await repository.list_events(database)
    return [_to_event(row).model_dump() for row in rows]


async def create_event(database: db.Database, payload: schemas.EventWrite) -> dict:
    await repository.create_event(database, **payload.model_dump())
    return dict(SUCCESS)


async def update_event(database: db.Database, event_id: int, payload: schemas.EventWrite) -> dict:
    updated = await repository.update_event(database, event_id, **payload.model_dump())
    if updated == 0:
        logger.debug("event_update_noop id=%s", event_id)
    return dict(SUCCESS)


async def delete_event(database: db.Database, event_id: int) -> dict:
    deleted = await repository.delete_event(database, event_id)
    if deleted == 0:
        logger.debug("event_delete_noop id=%s", event_id)
    return dict(SUCCESS)
