"""
Conversion de l'identifiant opaque reçu dans l'URL.
"""

import uuid


class InvalidRecordId(ValueError):
    """Identifiant de chemin qui n'est pas un UUID (traduit en 500 par l'application)."""


def parse_record_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except (ValueError, AttributeError, TypeError):
        raise InvalidRecordId(f"Identifiant mal formé : {raw!r}")
