"""
Event API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter(prefix="/api/events")


@router.get("/section/{section_id}")
async def list_events_by_section(section_id: int) -> list[dict]:
    return await service.events_for_section(section_id)


@router.get("/{event_id}")
async def get_event(event_id: int) -> dict:
    return await service.get_event(event_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(request: schemas.EventCreateRequest) -> dict:
    return await service.create_event(request)


@router.put("/{event_id}")
async def update_event(event_id: int, request: schemas.EventUpdateRequest) -> dict:
    return await service.update_event(event_id, request)


@router.delete("/{event_id}")
async def delete_event(event_id: int) -> dict:
    return await service.delete_event(event_id)
