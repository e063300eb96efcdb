"""
Announcement API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core import db
from core import dependencies as core_dependencies

from . import schemas, service

router = APIRouter()


@router.get("/announcements")
async def list_announcements(
    database: db.Database = Depends(core_dependencies.get_database),
) -> list[dict]:
    return await service.list_announcements(database)


@router.post("/announcements")
async def create_announcement(
    payload: schemas.AnnouncementWrite,
    database: db.Database = Depends(core_dependencies.get_database),
) -> dict:
    return await service.create_announcement(database, payload)


@router.put("/announcements/{item_id}")
async def update_announcement(
    payload: schemas.AnnouncementWrite,
    announcement_id: int = Depends(core_dependencies.get_record_id),
    database: db.Database = Depends(core_dependencies.get_database),
) -> dict:
    """
    Full overwrite: fields missing from the body are reset to their defaults.
    """
    return await service.update_announcement(database, announcement_id, payload)


@router.delete("/announcements/{item_id}")
async def delete_announcement(
    announcement_id: int = Depends(core_dependencies.get_record_id),
    database: db.Database = Depends(core_dependencies.get_database),
) -> dict:
    return await service.delete_announcement(database, announcement_id)
