"""
Staff-member (chef) API endpoints.

There is no update endpoint for chefs: rows are created and deleted only.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter(prefix="/api/chefs")


@router.get("/section/{section_id}")
async def list_chefs_by_section(section_id: int) -> list[dict]:
    return await service.chefs_for_section(section_id)


@router.get("/{chef_id}")
async def get_chef(chef_id: int) -> dict:
    return await service.get_chef(chef_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_chef(request: schemas.ChefCreateRequest) -> dict:
    return await service.create_chef(request)


@router.delete("/{chef_id}")
async def delete_chef(chef_id: int) -> dict:
    return await service.delete_chef(chef_id)
