"""
Pydantic schemas for section endpoints.

Multipart updates are read straight from the form; this model covers the
same fields when the update arrives as a JSON body.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SectionUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nom: str | None = Field(default=None, alias="Nom")
    description: str | None = None
    mail: str | None = None
    compte: str | None = None
    lien_drive: str | None = None
    background_url: str | None = Field(default=None, alias="backgroundUrl")
    first_picture_url: str | None = Field(default=None, alias="first_pictureUrl")
    second_picture_url: str | None = Field(default=None, alias="second_pictureUrl")
    uniforme_url: str | None = Field(default=None, alias="uniformeUrl")

    def text_fields(self) -> dict[str, str | None]:
        return {
            "nom": self.nom,
            "description": self.description,
            "mail": self.mail,
            "compte": self.compte,
            "lien_drive": self.lien_drive,
        }

    def urls(self) -> dict[str, str | None]:
        return {
            "background": self.background_url,
            "first_picture": self.first_picture_url,
            "second_picture": self.second_picture_url,
            "uniforme": self.uniforme_url,
        }
