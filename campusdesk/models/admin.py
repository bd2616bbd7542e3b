"""
Modèle SQLAlchemy pour la table admins.
profile_image contient le chemin du fichier envoyé, NULL si aucune photo.
"""

import uuid
from sqlalchemy import BigInteger, Column, DateTime, String, Uuid, func

from campusdesk.database import Base, utcnow


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    admin_id = Column(BigInteger, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    department = Column(String(100), nullable=False)
    profile_image = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow)
