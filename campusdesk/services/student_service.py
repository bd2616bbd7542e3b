"""
Service métier pour les étudiants.
Une opération BDD par fonction ; les fonctions retournent None / False
quand l'identifiant ne correspond à aucun enregistrement.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from campusdesk.models.student import Student
from campusdesk.schemas.student import StudentCreate, StudentUpdate
from campusdesk.services.identifiers import parse_record_id

logger = logging.getLogger(__name__)


def create_student(db: Session, data: StudentCreate) -> Student:
    student = Student(
        student_id=data.student_id,
        first_name=data.first_name,
        last_name=data.last_name,
        section=data.section,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("Étudiant créé : %s %s (%s)", student.first_name, student.last_name, student.id)
    return student


def get_students(db: Session) -> List[Student]:
    """Retourne tous les étudiants, du plus récent au plus ancien."""
    return db.execute(
        select(Student).order_by(Student.created_at.desc())
    ).scalars().all()


def get_student(db: Session, record_id: str) -> Optional[Student]:
    return db.get(Student, parse_record_id(record_id))


def update_student(db: Session, record_id: str, data: StudentUpdate) -> Optional[Student]:
    """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
    student = db.get(Student, parse_record_id(record_id))
    if student is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(student, field, value)

    db.commit()
    db.refresh(student)
    logger.info("Étudiant mis à jour : %s", student.id)
    return student


def delete_student(db: Session, record_id: str) -> bool:
    """Supprime définitivement un étudiant. Retourne False s'il n'existe pas."""
    student = db.get(Student, parse_record_id(record_id))
    if student is None:
        return False

    db.delete(student)
    db.commit()
    logger.info("Étudiant supprimé : %s", record_id)
    return True
