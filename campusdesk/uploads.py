"""
Stockage local des fichiers envoyés (photos de profil des administrateurs).

Nom généré : <horodatage ms>-<jeton aléatoire>-<nom client nettoyé>.
Le jeton évite les collisions entre deux envois simultanés du même fichier.
"""

import logging
import os
import shutil
import time
import uuid
from typing import Optional

from fastapi import UploadFile
from werkzeug.utils import secure_filename

from campusdesk.config import settings

logger = logging.getLogger(__name__)


def ensure_upload_dir(directory: Optional[str] = None) -> str:
    """Crée le dossier d'upload s'il n'existe pas et retourne son chemin."""
    directory = directory or settings.UPLOAD_DIR
    os.makedirs(directory, exist_ok=True)
    return directory


def build_filename(original: str) -> str:
    safe_name = secure_filename(original) or "upload"
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}-{safe_name}"


def has_file(file: Optional[UploadFile]) -> bool:
    """Un champ fichier soumis vide (sans nom) équivaut à aucun fichier."""
    return file is not None and bool(file.filename)


def save_upload(file: UploadFile, directory: Optional[str] = None) -> str:
    """
    Écrit le fichier sur disque et retourne son chemin de stockage
    (ex. uploads/1700000000000-3f2a9c1b7d4e-photo.png), tel que stocké en base.
    Appel bloquant : à utiliser depuis un handler def (exécuté dans le threadpool).
    """
    directory = ensure_upload_dir(directory)
    path = os.path.join(directory, build_filename(file.filename))

    with open(path, "wb") as out:
        shutil.copyfileobj(file.file, out)
        size = out.tell()

    logger.info("Fichier reçu : %s (%d octets)", path, size)
    return path


def discard_upload(path: Optional[str]) -> None:
    """Supprime un fichier écrit pour une requête qui a finalement échoué."""
    if not path:
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    else:
        logger.info("Fichier orphelin supprimé : %s", path)

