"""
Chef persistence (raw SQL).

`id_1` is the owning-section reference.
"""

from __future__ import annotations

from core import db


async def list_chefs_by_section(section_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT *
        FROM chef
        WHERE id_1 = $1
        """,
        section_id,
    )


async def get_chef(chef_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM chef
        WHERE id = $1
        """,
        chef_id,
    )


async def insert_chef(
    *,
    nom: str | None,
    etudes: str | None,
    annee_arrivee: int | None,
    contact: str | None,
    role: str | None,
    photo: str | None,
    age: int | None,
    id_1: int | None,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO chef (nom, etudes, annee_arrivee, contact, role, photo, age, id_1)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING id
        """,
        nom,
        etudes,
        annee_arrivee,
        contact,
        role,
        photo,
        age,
        id_1,
    )
    if row is None:
        raise RuntimeError("Failed to insert chef.")
    return int(row["id"])


async def delete_chef(chef_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM chef
        WHERE id = $1
        RETURNING id
        """,
        chef_id,
    )
    return row is not None
