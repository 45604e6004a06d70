"""
Pydantic schemas for staff-member (chef) endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class ChefCreateRequest(BaseModel):
    # Every column is optional on insert; missing values are stored as NULL.
    nom: str | None = None
    etudes: str | None = None
    annee_arrivee: int | None = None
    contact: str | None = None
    role: str | None = None
    photo: str | None = None
    age: int | None = None
    id_1: int | None = None
