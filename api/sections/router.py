"""
Section API endpoints.

Sections are read and updated only; rows are provisioned outside the API.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, Request, UploadFile

from . import service

router = APIRouter()


@router.get("/api/sections")
async def list_sections() -> list[dict]:
    return await service.list_sections()


@router.get("/api/sections/{section_id}")
async def get_section(section_id: int) -> dict:
    return await service.get_section(section_id)


@router.put("/api/sections/{section_id}")
async def update_section(
    section_id: int,
    request: Request,
    nom: str | None = Form(default=None, alias="Nom"),
    description: str | None = Form(default=None),
    mail: str | None = Form(default=None),
    compte: str | None = Form(default=None),
    lien_drive: str | None = Form(default=None),
    background: UploadFile | None = File(default=None),
    first_picture: UploadFile | None = File(default=None),
    second_picture: UploadFile | None = File(default=None),
    uniforme: UploadFile | None = File(default=None),
    background_url: str | None = Form(default=None, alias="backgroundUrl"),
    first_picture_url: str | None = Form(default=None, alias="first_pictureUrl"),
    second_picture_url: str | None = Form(default=None, alias="second_pictureUrl"),
    uniforme_url: str | None = Form(default=None, alias="uniformeUrl"),
) -> dict:
    """
    Multipart (or urlencoded) update. Each image may come as a file or as a
    `<field>Url` value; fields that are not sent keep their stored value.
    Any other content type is read as a JSON body with the same field names.
    """
    if not service.is_form_request(request.headers.get("content-type")):
        payload = service.parse_json_update(await request.body())
        update = await service.build_update(
            text_fields=payload.text_fields(),
            uploads={},
            urls=payload.urls(),
        )
        return await service.update_section(section_id, update)

    update = await service.build_update(
        text_fields={
            "nom": nom,
            "description": description,
            "mail": mail,
            "compte": compte,
            "lien_drive": lien_drive,
        },
        uploads={
            "background": background,
            "first_picture": first_picture,
            "second_picture": second_picture,
            "uniforme": uniforme,
        },
        urls={
            "background": background_url,
            "first_picture": first_picture_url,
            "second_picture": second_picture_url,
            "uniforme": uniforme_url,
        },
    )
    return await service.update_section(section_id, update)


@router.get("/api/section/backgrounds")
async def list_backgrounds() -> list[dict]:
    return await service.list_backgrounds()


@router.get("/api/section/descriptions")
async def list_description_images() -> list[dict]:
    return await service.list_description_images()
