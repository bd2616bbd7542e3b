"""
Schémas Pydantic pour les étudiants.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from campusdesk.schemas.common import CamelModel, strip_optional, strip_required


class StudentCreate(CamelModel):
    """Schéma de création d'un étudiant (POST /studentForm)."""
    student_id: int
    first_name: str
    last_name: str
    section: str

    @field_validator("first_name", "last_name", "section")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return strip_required(v)


class StudentUpdate(CamelModel):
    """Schéma de mise à jour d'un étudiant (PUT /students/{id})."""
    student_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    section: Optional[str] = None

    @field_validator("student_id", "first_name", "last_name", "section", mode="before")
    @classmethod
    def no_null(cls, v):
        # Les colonnes sont NOT NULL : un null explicite est refusé comme un champ vide
        if v is None:
            raise ValueError("Le champ ne peut pas être vide.")
        return v

    @field_validator("first_name", "last_name", "section")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_optional(v)


class StudentResponse(CamelModel):
    """Schéma de réponse pour un étudiant."""
    id: uuid.UUID
    student_id: int
    first_name: str
    last_name: str
    section: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
