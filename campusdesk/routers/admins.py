"""
Router pour les administrateurs.
POST   /api/adminForm    — création (multipart, photo optionnelle)
GET    /api/admins       — liste (plus récents d'abord)
GET    /api/admins/{id}  — détail
PUT    /api/admins/{id}  — mise à jour (multipart, photo optionnelle)
DELETE /api/admins/{id}  — suppression

Le champ fichier s'appelle `file`. Sans fichier, la photo existante est conservée.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from campusdesk.config import settings
from campusdesk.database import get_db
from campusdesk.schemas.admin import AdminCreate, AdminResponse, AdminUpdate
from campusdesk.schemas.common import MessageResponse
from campusdesk.services import admin_service
from campusdesk.uploads import discard_upload, has_file, save_upload

router = APIRouter(prefix=settings.API_PREFIX, tags=["Administrateurs"])

NOT_FOUND = "Administrateur introuvable."


def admin_create_form(
    admin_id: Optional[str] = Form(None, alias="adminId"),
    first_name: Optional[str] = Form(None, alias="firstName"),
    last_name: Optional[str] = Form(None, alias="lastName"),
    department: Optional[str] = Form(None),
) -> AdminCreate:
    """Construit le schéma de création depuis le formulaire multipart."""
    try:
        return AdminCreate(
            admin_id=admin_id,
            first_name=first_name,
            last_name=last_name,
            department=department,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())


def admin_update_form(
    admin_id: Optional[str] = Form(None, alias="adminId"),
    first_name: Optional[str] = Form(None, alias="firstName"),
    last_name: Optional[str] = Form(None, alias="lastName"),
    department: Optional[str] = Form(None),
) -> AdminUpdate:
    """Seuls les champs présents dans le formulaire sont pris en compte."""
    values = {
        "admin_id": admin_id,
        "first_name": first_name,
        "last_name": last_name,
        "department": department,
    }
    try:
        return AdminUpdate(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())


@router.post("/adminForm", response_model=AdminResponse, status_code=201, summary="Inscrire un administrateur")
def create_admin(
    data: AdminCreate = Depends(admin_create_form),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """
    Crée un administrateur. adminId, firstName, lastName et department sont obligatoires.
    Si un fichier est joint, son chemin de stockage devient profileImage.
    """
    profile_image = save_upload(file) if has_file(file) else None
    try:
        return admin_service.create_admin(db, data, profile_image)
    except Exception:
        discard_upload(profile_image)
        raise


@router.get("/admins", response_model=List[AdminResponse], summary="Lister les administrateurs")
def list_admins(db: Session = Depends(get_db)):
    """Retourne tous les administrateurs, du plus récent au plus ancien."""
    return admin_service.get_admins(db)


@router.get("/admins/{record_id}", response_model=AdminResponse, summary="Détail d'un administrateur")
def get_admin(record_id: str, db: Session = Depends(get_db)):
    admin = admin_service.get_admin(db, record_id)
    if admin is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return admin


@router.put("/admins/{record_id}", response_model=AdminResponse, summary="Modifier un administrateur")
def update_admin(
    record_id: str,
    data: AdminUpdate = Depends(admin_update_form),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """
    Met à jour les champs fournis. La photo n'est remplacée que si un nouveau
    fichier est joint à la requête.
    """
    profile_image = save_upload(file) if has_file(file) else None
    try:
        admin = admin_service.update_admin(db, record_id, data, profile_image)
    except Exception:
        discard_upload(profile_image)
        raise

    if admin is None:
        discard_upload(profile_image)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return admin


@router.delete("/admins/{record_id}", response_model=MessageResponse, summary="Supprimer un administrateur")
def delete_admin(record_id: str, db: Session = Depends(get_db)):
    if not admin_service.delete_admin(db, record_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return MessageResponse(message="Administrateur supprimé avec succès.")
