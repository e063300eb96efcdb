"""
Announcement API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictBool


class AnnouncementWrite(BaseModel):
    # Missing fields are written as empty/false rather than rejected.
    announcements: str = ""
    description: str = ""
    date: str = ""
    location: str = ""
    urgent: StrictBool = False


class AnnouncementResponse(BaseModel):
    id: int
    announcements: str
    description: str
    date: str
    location: str
    urgent: bool
