"""
Éléments communs aux schémas Pydantic.
Les champs sont exposés en camelCase dans le JSON (studentId, createdAt, ...),
les noms snake_case restent acceptés en entrée.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Confirmation renvoyée après une suppression."""
    message: str


def strip_required(v: str) -> str:
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip()


def strip_optional(v: Optional[str]) -> Optional[str]:
    if v is not None and not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip() if v else v
