"""
Section persistence (raw SQL).

Section rows are pre-existing: there is no insert or delete here.
"""

from __future__ import annotations

from core import db


async def list_sections() -> list[dict]:
    return await db.fetch_all("SELECT * FROM section")


async def get_section(section_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM section
        WHERE id = $1
        """,
        section_id,
    )


async def list_backgrounds() -> list[dict]:
    return await db.fetch_all("SELECT background FROM section")


async def list_description_images() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, first_picture, second_picture
        FROM section
        WHERE first_picture IS NOT NULL
           OR second_picture IS NOT NULL
        """
    )


async def update_section(
    section_id: int,
    *,
    nom: str | None,
    description: str | None,
    mail: str | None,
    compte: str | None,
    lien_drive: str | None,
    background: str | None,
    first_picture: str | None,
    second_picture: str | None,
    uniforme: str | None,
) -> bool:
    """
    Overwrite the given columns; a None value keeps the stored one.
    This applies to the text columns as well as the four image columns.

    Returns False when no row has this id.
    """
    row = await db.fetch_one(
        """
        UPDATE section
        SET nom = COALESCE($1, nom),
            description = COALESCE($2, description),
            mail = COALESCE($3, mail),
            compte = COALESCE($4, compte),
            lien_drive = COALESCE($5, lien_drive),
            background = COALESCE($6, background),
            first_picture = COALESCE($7, first_picture),
            second_picture = COALESCE($8, second_picture),
            uniforme = COALESCE($9, uniforme)
        WHERE id = $10
        RETURNING id
        """,
        nom,
        description,
        mail,
        compte,
        lien_drive,
        background,
        first_picture,
        second_picture,
        uniforme,
        section_id,
    )
    return row is not None
