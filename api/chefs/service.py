"""
Chef business logic: not-found policy and response shaping.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from . import repository, schemas

CHEF_NOT_FOUND = "Chef not found"


async def chefs_for_section(section_id: int) -> list[dict]:
    return await repository.list_chefs_by_section(section_id)


async def get_chef(chef_id: int) -> dict:
    row = await repository.get_chef(chef_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHEF_NOT_FOUND)
    return row


async def create_chef(payload: schemas.ChefCreateRequest) -> dict:
    insert_id = await repository.insert_chef(**payload.model_dump())
    return {"message": "Chef created successfully", "insertId": insert_id}


async def delete_chef(chef_id: int) -> dict:
    deleted = await repository.delete_chef(chef_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHEF_NOT_FOUND)
    return {"message": "Chef deleted successfully"}
