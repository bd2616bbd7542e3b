"""
Router pour les étudiants.
POST   /api/studentForm    — création
GET    /api/students       — liste (plus récents d'abord)
GET    /api/students/{id}  — détail
PUT    /api/students/{id}  — mise à jour partielle
DELETE /api/students/{id}  — suppression
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from campusdesk.config import settings
from campusdesk.database import get_db
from campusdesk.schemas.common import MessageResponse
from campusdesk.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from campusdesk.services import student_service

router = APIRouter(prefix=settings.API_PREFIX, tags=["Étudiants"])

NOT_FOUND = "Étudiant introuvable."


@router.post("/studentForm", response_model=StudentResponse, status_code=201, summary="Inscrire un étudiant")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    """Crée un étudiant. Les quatre champs sont obligatoires (400 sinon)."""
    return student_service.create_student(db, data)


@router.get("/students", response_model=List[StudentResponse], summary="Lister les étudiants")
def list_students(db: Session = Depends(get_db)):
    """Retourne tous les étudiants, du plus récent au plus ancien."""
    return student_service.get_students(db)


@router.get("/students/{record_id}", response_model=StudentResponse, summary="Détail d'un étudiant")
def get_student(record_id: str, db: Session = Depends(get_db)):
    student = student_service.get_student(db, record_id)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return student


@router.put("/students/{record_id}", response_model=StudentResponse, summary="Modifier un étudiant")
def update_student(record_id: str, data: StudentUpdate, db: Session = Depends(get_db)):
    """Met à jour les champs fournis d'un étudiant. Les champs absents ne sont pas modifiés."""
    student = student_service.update_student(db, record_id, data)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return student


@router.delete("/students/{record_id}", response_model=MessageResponse, summary="Supprimer un étudiant")
def delete_student(record_id: str, db: Session = Depends(get_db)):
    if not student_service.delete_student(db, record_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return MessageResponse(message="Étudiant supprimé avec succès.")
