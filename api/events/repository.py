"""
Event persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_events(database: db.Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT id, name, date, location, description
        FROM events
        """
    )


async def create_event(
    database: db.Database,
    *,
    name: str,
    date: str,
    location: str,
    description: str,
) -> int:
    return await database.execute(
        """
        INSERT INTO events (name, date, location, description)
        VALUES ($1, $2, $3, $4)
        """,
        name,
        date,
        location,
        description,
    )


async def update_event(
    database: db.Database,
    event_id: int,
    *,
    name: str,
    date: str,
    location: str,
    description: str,
) -> int:
    return await database.execute(
        """
        UPDATE events
        SET name = $1,
            date = $2,
            location = $3,
            description = $4
        WHERE id = $5
        """,
        name,
        date,
        location,
        description,
        event_id,
    )


async def delete_event(database: db.Database, event_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM events
        WHERE id = $1
        """,
        event_id,
    )
