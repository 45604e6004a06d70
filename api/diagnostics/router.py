"""
Connectivity checks.

`/health` never touches the database; `/api/test` runs a trivial query
through the shared pool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from core import db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/api/test")
async def test_connection() -> dict:
    rows = await db.fetch_all("SELECT 1 AS test")
    logger.info("db_check_ok rows=%s", len(rows))
    return {"message": "Database connected successfully", "data": rows}
