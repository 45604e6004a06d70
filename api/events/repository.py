"""
Event persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date

from core import db


async def list_events_by_section(section_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT *
        FROM eventtable
        WHERE id_1 = $1
        """,
        section_id,
    )


async def get_event(event_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM eventtable
        WHERE id = $1
        """,
        event_id,
    )


async def insert_event(*, nom: str, date_debut: date, date_fin: date, section_id: int) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO eventtable (nom, date_debut, date_fin, id_1)
        VALUES ($1, $2, $3, $4)
        RETURNING id
        """,
        nom,
        date_debut,
        date_fin,
        section_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert event.")
    return int(row["id"])


async def update_event(event_id: int, *, nom: str, date_debut: date, date_fin: date) -> bool:
    """
    Returns False when no row has this id.
    """
    row = await db.fetch_one(
        """
        UPDATE eventtable
        SET nom = $1,
            date_debut = $2,
            date_fin = $3
        WHERE id = $4
        RETURNING id
        """,
        nom,
        date_debut,
        date_fin,
        event_id,
    )
    return row is not None


async def delete_event(event_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM eventtable
        WHERE id = $1
        RETURNING id
        """,
        event_id,
    )
    return row is not None
