"""
Section "service layer".

Image fields accept either an uploaded file or a plain URL:
- an uploaded file is stored inline as `data:<mime>;base64,<payload>`
- otherwise a non-empty URL is stored as-is
- otherwise the stored value is left untouched
"""

from __future__ import annotations

import base64
import os
from dataclasses import asdict, dataclass

from fastapi import HTTPException, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from . import repository, schemas

SECTION_NOT_FOUND = "Section not found"
IMAGE_FIELDS = ("background", "first_picture", "second_picture", "uniforme")
FALLBACK_MIME_TYPE = "application/octet-stream"

# Images end up inline in a table row; keep them reasonably small.
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MiB
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@dataclass(frozen=True)
class SectionUpdate:
    nom: str | None = None
    description: str | None = None
    mail: str | None = None
    compte: str | None = None
    lien_drive: str | None = None
    background: str | None = None
    first_picture: str | None = None
    second_picture: str | None = None
    uniforme: str | None = None


def max_upload_bytes_from_env() -> int:
    """
    Read MAX_UPLOAD_BYTES from env, falling back to a sane default.
    """
    raw = os.environ.get("MAX_UPLOAD_BYTES", "")
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES

    try:
        value = int(raw)
    except ValueError:
        raise HTTPException(
            status_code=500,
            detail="Invalid MAX_UPLOAD_BYTES. It must be an integer.",
        )

    if value <= 0:
        raise HTTPException(
            status_code=500,
            detail="Invalid MAX_UPLOAD_BYTES. It must be > 0.",
        )

    return value


async def read_upload_bytes(file: UploadFile, max_bytes: int) -> bytes:
    """
    Read the upload into memory, enforcing a maximum size.
    """
    chunk_size = 1024 * 1024  # 1 MiB
    buf = bytearray()

    while True:
        chunk = await file.read(chunk_size)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Max is {max_bytes} bytes.",
            )

    return bytes(buf)


def to_data_uri(data: bytes, content_type: str | None) -> str:
    mime = (content_type or "").strip() or FALLBACK_MIME_TYPE
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"


def _has_upload(file: UploadFile | None) -> bool:
    # Browsers send an empty, unnamed part for an untouched file input.
    return file is not None and bool(file.filename)


async def resolve_image(file: UploadFile | None, url: str | None, *, max_bytes: int) -> str | None:
    """
    New value for one image column, or None to keep the stored one.
    """
    if _has_upload(file):
        data = await read_upload_bytes(file, max_bytes=max_bytes)
        return to_data_uri(data, file.content_type)
    if url:
        return url
    return None


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SECTION_NOT_FOUND)


async def list_sections() -> list[dict]:
    return await repository.list_sections()


async def get_section(section_id: int) -> dict:
    row = await repository.get_section(section_id)
    if row is None:
        raise _not_found()
    return row


async def list_backgrounds() -> list[dict]:
    return await repository.list_backgrounds()


async def list_description_images() -> list[dict]:
    return await repository.list_description_images()


async def build_update(
    *,
    text_fields: dict[str, str | None],
    uploads: dict[str, UploadFile | None],
    urls: dict[str, str | None],
) -> SectionUpdate:
    """
    Collect the request fields into a SectionUpdate, encoding uploads along the way.
    """
    max_bytes = max_upload_bytes_from_env()
    images: dict[str, str | None] = {}
    for field in IMAGE_FIELDS:
        images[field] = await resolve_image(uploads.get(field), urls.get(field), max_bytes=max_bytes)
    return SectionUpdate(**text_fields, **images)


def is_form_request(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type in FORM_CONTENT_TYPES


def parse_json_update(body: bytes) -> schemas.SectionUpdateRequest:
    """
    Validate a JSON update body. An empty body means "change nothing".
    """
    if not body.strip():
        return schemas.SectionUpdateRequest()
    try:
        return schemas.SectionUpdateRequest.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(
            [{**e, "loc": ("body", *e["loc"])} for e in exc.errors(include_url=False)]
        ) from exc


async def update_section(section_id: int, update: SectionUpdate) -> dict:
    if not await repository.update_section(section_id, **asdict(update)):
        raise _not_found()
    return {"message": "Section updated successfully"}
