"""
Announcement persistence (raw SQL).

Each function runs exactly one statement on its own connection.
"""

from __future__ import annotations

from core import db


async def list_announcements(database: db.Database) -> list[dict]:
    # No ORDER BY: rows come back in storage order.
    return await database.fetch_all(
        """
        SELECT id, announcements, description, date, location, urgent
        FROM announcements
        """
    )


async def create_announcement(
    database: db.Database,
    *,
    announcements: str,
    description: str,
    date: str,
    location: str,
    urgent: bool,
) -> int:
    return await database.execute(
        """
        INSERT INTO announcements (announcements, description, date, location, urgent)
        VALUES ($1, $2, $3, $4, $5)
        """,
        announcements,
        description,
        date,
        location,
        urgent,
    )


async def update_announcement(
    database: db.Database,
    announcement_id: int,
    *,
    announcements: str,
    description: str,
    date: str,
    location: str,
    urgent: bool,
) -> int:
    return await database.execute(
        """
        UPDATE announcements
        SET announcements = $1,
            description = $2,
            date = $3,
            location = $4,
            urgent = $5
        WHERE id = $6
        """,
        announcements,
        description,
        date,
        location,
        urgent,
        announcement_id,
    )


async def delete_announcement(database: db.Database, announcement_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM announcements
        WHERE id = $1
        """,
        announcement_id,
    )
