"""
Event API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core import db
from core import dependencies as core_dependencies

from . import schemas, service

router = APIRouter()


@router.get("/events")
async def list_events(
    database: db.Database = Depends(core_dependencies.get_database),
) -> list[dict]:
    return await service.list_events(database)


@router.post("/events")
async def create_event(
    payload: schemas.EventWrite,
    database: db.Database = Depends(core_dependencies.get_database),
) -> dict:
    return await service.create_event(database, payload)


@router.put("/events/{item_id}")
async def update_event(
    payload: schemas.EventWrite,
    event_id: int = Depends(core_dependencies.get_record_id),
    database: db.Database = Depends(core_dependencies.get_database),
) -> dict:
    return await service.update_event(database, event_id, payload)


@router.delete("/events/{item_id}")
async def delete_event(
    event_id: int = Depends(core_dependencies.get_record_id),
    database: db.Database = Depends(core_dependencies.get_database),
) -> dict:
    return await service.delete_event(database, event_id)
