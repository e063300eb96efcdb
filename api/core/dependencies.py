"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import HTTPException, Path, Request, status

from .db import Database

# Ids are stored in a signed 32-bit integer column.
MAX_RECORD_ID = 2**31 - 1


def get_database(request: Request) -> Database:
    return request.app.state.database


def parse_record_id(raw: str) -> int:
    raw = raw or ""
    if not (raw.isascii() and raw.isdigit()):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
    value = int(raw)
    if value > MAX_RECORD_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
    return value


def get_record_id(item_id: str = Path(...)) -> int:
    return parse_record_id(item_id)
