"""
Schémas Pydantic pour les administrateurs.

Les formulaires admin arrivent en multipart (photo optionnelle) : les routers
construisent ces schémas à partir des champs de formulaire.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from campusdesk.schemas.common import CamelModel, strip_optional, strip_required


class AdminCreate(CamelModel):
    """Schéma de création d'un administrateur (POST /adminForm)."""
    admin_id: int
    first_name: str
    last_name: str
    department: str

    @field_validator("first_name", "last_name", "department")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return strip_required(v)


class AdminUpdate(CamelModel):
    """Schéma de mise à jour d'un administrateur (PUT /admins/{id})."""
    admin_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    department: Optional[str] = None

    @field_validator("first_name", "last_name", "department")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_optional(v)


class AdminResponse(CamelModel):
    """Schéma de réponse pour un administrateur."""
    id: uuid.UUID
    admin_id: int
    first_name: str
    last_name: str
    department: str
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
