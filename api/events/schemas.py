"""
Pydantic schemas for event endpoints.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class EventUpdateRequest(BaseModel):
    nom: str = Field(..., min_length=1)
    date_debut: date
    date_fin: date


class EventCreateRequest(EventUpdateRequest):
    # Owning section; stored in the `id_1` column.
    sectionId: int
