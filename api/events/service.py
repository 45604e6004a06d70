"""
Event business logic.

Request bodies are validated by the schemas before anything here runs, so a
missing field never reaches the database.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from . import repository, schemas

EVENT_NOT_FOUND = "Event not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EVENT_NOT_FOUND)


async def events_for_section(section_id: int) -> list[dict]:
    return await repository.list_events_by_section(section_id)


async def get_event(event_id: int) -> dict:
    row = await repository.get_event(event_id)
    if row is None:
        raise _not_found()
    return row


async def create_event(payload: schemas.EventCreateRequest) -> dict:
    insert_id = await repository.insert_event(
        nom=payload.nom,
        date_debut=payload.date_debut,
        date_fin=payload.date_fin,
        section_id=payload.sectionId,
    )
    return {"message": "Event created successfully", "insertId": insert_id}


async def update_event(event_id: int, payload: schemas.EventUpdateRequest) -> dict:
    updated = await repository.update_event(
        event_id,
        nom=payload.nom,
        date_debut=payload.date_debut,
        date_fin=payload.date_fin,
    )
    if not updated:
        raise _not_found()
    return {"message": "Event updated successfully"}


async def delete_event(event_id: int) -> dict:
    if not await repository.delete_event(event_id):
        raise _not_found()
    return {"message": "Event deleted successfully"}
