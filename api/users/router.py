"""
Account listing endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository

router = APIRouter()


@router.get("/api/users")
async def list_users() -> list[dict]:
    return await repository.list_users()
