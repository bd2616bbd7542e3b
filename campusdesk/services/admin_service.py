"""
Service métier pour les administrateurs.

La photo de profil est déjà écrite sur disque par le router : le service
ne reçoit que son chemin. En mise à jour, un chemin None laisse la photo
existante intacte.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from campusdesk.models.admin import Admin
from campusdesk.schemas.admin import AdminCreate, AdminUpdate
from campusdesk.services.identifiers import parse_record_id

logger = logging.getLogger(__name__)


def create_admin(db: Session, data: AdminCreate, profile_image: Optional[str] = None) -> Admin:
    admin = Admin(
        admin_id=data.admin_id,
        first_name=data.first_name,
        last_name=data.last_name,
        department=data.department,
        profile_image=profile_image,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Administrateur créé : %s %s (%s)", admin.first_name, admin.last_name, admin.id)
    return admin


def get_admins(db: Session) -> List[Admin]:
    """Retourne tous les administrateurs, du plus récent au plus ancien."""
    return db.execute(
        select(Admin).order_by(Admin.created_at.desc())
    ).scalars().all()


def get_admin(db: Session, record_id: str) -> Optional[Admin]:
    return db.get(Admin, parse_record_id(record_id))


def update_admin(
    db: Session,
    record_id: str,
    data: AdminUpdate,
    profile_image: Optional[str] = None,
) -> Optional[Admin]:
    admin = db.get(Admin, parse_record_id(record_id))
    if admin is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(admin, field, value)

    if profile_image is not None:
        admin.profile_image = profile_image

    db.commit()
    db.refresh(admin)
    logger.info("Administrateur mis à jour : %s", admin.id)
    return admin


def delete_admin(db: Session, record_id: str) -> bool:
    admin = db.get(Admin, parse_record_id(record_id))
    if admin is None:
        return False

    db.delete(admin)
    db.commit()
    logger.info("Administrateur supprimé : %s", record_id)
    return True
