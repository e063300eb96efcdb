"""
Event API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class EventWrite(BaseModel):
    name: str = ""
    date: str = ""
    location: str = ""
    description: str = ""


class EventResponse(BaseModel):
    id: int
    name: str
    date: str
    location: str
    description: str
