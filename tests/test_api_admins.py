"""
Tests d'intégration API pour les administrateurs (BDD mockée).
Formulaires multipart avec photo de profil optionnelle (champ `file`).
"""

import os
import uuid
from datetime import datetime
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError

from campusdesk.database import get_db
from campusdesk.main import app
from campusdesk.models.admin import Admin


# --- Helpers ---

def make_admin(**kwargs) -> Admin:
    a = MagicMock(spec=Admin)
    a.id = kwargs.get("id", uuid.uuid4())
    a.admin_id = kwargs.get("admin_id", 7)
    a.first_name = kwargs.get("first_name", "Claire")
    a.last_name = kwargs.get("last_name", "Lambert")
    a.department = kwargs.get("department", "Scolarité")
    a.profile_image = kwargs.get("profile_image", None)
    a.created_at = kwargs.get("created_at", datetime.now())
    a.updated_at = kwargs.get("updated_at", datetime.now())
    return a


def form_data(**overrides) -> dict:
    data = {"adminId": "7", "firstName": "Claire", "lastName": "Lambert", "department": "Scolarité"}
    data.update(overrides)
    return data


PHOTO = {"file": ("photo.png", b"\x89PNG fake", "image/png")}


# ============================================================
# POST /api/adminForm
# ============================================================

def test_create_admin_sans_photo(client, upload_dir):
    """Création sans fichier → 201, profile_image transmis à None."""
    with patch("campusdesk.services.admin_service.Admin") as mock_cls:
        mock_cls.return_value = make_admin()

        response = client.post("/api/adminForm", data=form_data())

    assert response.status_code == 201
    assert response.json()["profileImage"] is None
    assert mock_cls.call_args.kwargs["profile_image"] is None
    assert mock_cls.call_args.kwargs["admin_id"] == 7
    assert os.listdir(upload_dir) == []


def test_create_admin_avec_photo(client, upload_dir):
    """Création avec fichier → le chemin de stockage devient profileImage."""
    with patch("campusdesk.services.admin_service.Admin") as mock_cls:
        mock_cls.side_effect = lambda **kw: make_admin(profile_image=kw["profile_image"])

        response = client.post("/api/adminForm", data=form_data(), files=PHOTO)

    assert response.status_code == 201
    path = response.json()["profileImage"]
    assert path.startswith(str(upload_dir))
    assert path.endswith("-photo.png")
    assert os.path.exists(path)


def test_create_admin_champ_manquant(client, upload_dir):
    """Champ obligatoire absent → 400, aucun fichier écrit."""
    data = form_data()
    del data["department"]

    response = client.post("/api/adminForm", data=data, files=PHOTO)

    assert response.status_code == 400
    assert os.listdir(upload_dir) == []


def test_create_admin_identifiant_non_entier(client):
    response = client.post("/api/adminForm", data=form_data(adminId="abc"))
    assert response.status_code == 400


def test_create_admin_prenom_vide(client):
    response = client.post("/api/adminForm", data=form_data(firstName=" "))
    assert response.status_code == 400


def test_create_admin_erreur_bdd_supprime_photo(client, upload_dir):
    """Échec de l'enregistrement → 500 et le fichier déjà écrit est supprimé."""
    mock_db = MagicMock()
    mock_db.commit.side_effect = OperationalError("INSERT", {}, Exception("disque plein"))
    app.dependency_overrides[get_db] = lambda: mock_db

    response = client.post("/api/adminForm", data=form_data(), files=PHOTO)

    assert response.status_code == 500
    assert "disque plein" in response.json()["error"]
    assert os.listdir(upload_dir) == []


# ============================================================
# GET /api/admins, GET /api/admins/{id}
# ============================================================

def test_list_admins(client):
    db_mock = MagicMock()
    db_mock.execute.return_value.scalars.return_value.all.return_value = [
        make_admin(first_name="Claire", profile_image="uploads/1-a-photo.png"),
        make_admin(first_name="Paul"),
    ]
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.get("/api/admins")

    assert response.status_code == 200
    data = response.json()
    assert [a["firstName"] for a in data] == ["Claire", "Paul"]
    assert data[0]["profileImage"] == "uploads/1-a-photo.png"
    assert data[1]["profileImage"] is None


def test_get_admin_introuvable(client):
    db_mock = MagicMock()
    db_mock.get.return_value = None
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.get(f"/api/admins/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Administrateur introuvable."


def test_get_admin_identifiant_mal_forme(client):
    response = client.get("/api/admins/123")
    assert response.status_code == 500


# ============================================================
# PUT /api/admins/{id}
# ============================================================

def test_update_admin_sans_photo_conserve_image(client):
    """Mise à jour sans fichier → profileImage inchangé."""
    aid = uuid.uuid4()
    admin = make_admin(id=aid, profile_image="uploads/ancienne.png")
    db_mock = MagicMock()
    db_mock.get.return_value = admin
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.put(f"/api/admins/{aid}", data={"department": "Finances"})

    assert response.status_code == 200
    assert response.json()["department"] == "Finances"
    assert response.json()["profileImage"] == "uploads/ancienne.png"


def test_update_admin_avec_photo_remplace_image(client, upload_dir):
    aid = uuid.uuid4()
    admin = make_admin(id=aid, profile_image="uploads/ancienne.png")
    db_mock = MagicMock()
    db_mock.get.return_value = admin
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.put(f"/api/admins/{aid}", files=PHOTO)

    assert response.status_code == 200
    new_path = response.json()["profileImage"]
    assert new_path != "uploads/ancienne.png"
    assert os.path.exists(new_path)


def test_update_admin_introuvable_supprime_photo(client, upload_dir):
    """Administrateur inexistant → 404, la photo reçue n'est pas conservée."""
    db_mock = MagicMock()
    db_mock.get.return_value = None
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.put(f"/api/admins/{uuid.uuid4()}", data=form_data(), files=PHOTO)

    assert response.status_code == 404
    assert os.listdir(upload_dir) == []


def test_update_admin_identifiant_mal_forme(client, upload_dir):
    response = client.put("/api/admins/xyz", data=form_data(), files=PHOTO)

    assert response.status_code == 500
    assert os.listdir(upload_dir) == []


def test_update_admin_champ_vide(client):
    response = client.put(f"/api/admins/{uuid.uuid4()}", data={"lastName": "  "})
    assert response.status_code == 400


# ============================================================
# DELETE /api/admins/{id}
# ============================================================

def test_delete_admin_succes(client):
    admin = make_admin()
    db_mock = MagicMock()
    db_mock.get.return_value = admin
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.delete(f"/api/admins/{admin.id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Administrateur supprimé avec succès."}


def test_delete_admin_introuvable(client):
    db_mock = MagicMock()
    db_mock.get.return_value = None
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.delete(f"/api/admins/{uuid.uuid4()}")

    assert response.status_code == 404


# ============================================================
# Paramètre de chemin et champ de formulaire adminId
# ============================================================

def test_update_admin_identifiant_metier_distinct_du_chemin(client):
    """L'identifiant opaque du chemin et le champ adminId du formulaire ne se confondent pas."""
    aid = uuid.uuid4()
    admin = make_admin(id=aid, admin_id=7)
    db_mock = MagicMock()
    db_mock.get.return_value = admin
    app.dependency_overrides[get_db] = lambda: db_mock

    response = client.put(f"/api/admins/{aid}", data={"adminId": "99"})

    assert response.status_code == 200
    assert response.json()["id"] == str(aid)
    assert response.json()["adminId"] == 99
    db_mock.get.assert_called_once_with(Admin, aid)


def test_handlers_upload_synchrones():
    """Les handlers avec écriture disque et commit BDD tournent dans le threadpool."""
    import inspect

    from campusdesk.routers import admins

    assert not inspect.iscoroutinefunction(admins.create_admin)
    assert not inspect.iscoroutinefunction(admins.update_admin)
