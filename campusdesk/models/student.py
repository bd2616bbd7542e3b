"""
Modèle SQLAlchemy pour la table students.
"""

import uuid
from sqlalchemy import BigInteger, Column, DateTime, String, Uuid, func

from campusdesk.database import Base, utcnow


class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    student_id = Column(BigInteger, nullable=False)  # matricule fourni par l'utilisateur, non unique
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    section = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow)
