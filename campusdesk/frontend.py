"""
Pages du navigateur : table déclarative chemin → composant de page.

Chaque page est un template Jinja2 qui appelle l'API via fetch.
Pas de garde, pas de chargement différé, pas de routes imbriquées.
"""

import os
from typing import List, NamedTuple

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from campusdesk.config import settings

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)


class Page(NamedTuple):
    path: str
    name: str
    template: str
    title: str


PAGES: List[Page] = [
    Page("/", "Home", "home.html", "Accueil"),
    Page("/adminForm", "Admin", "admin_form.html", "Nouvel administrateur"),
    Page("/studentForm", "Student", "student_form.html", "Nouvel étudiant"),
    Page("/admins", "AdminList", "admin_list.html", "Administrateurs"),
    Page("/students", "StudentList", "student_list.html", "Étudiants"),
]


def _make_endpoint(page: Page):
    def render(request: Request):
        return templates.TemplateResponse(
            request,
            page.template,
            {
                "page": page,
                "pages": PAGES,
                "api_prefix": settings.API_PREFIX,
                "upload_prefix": settings.UPLOAD_URL_PREFIX,
            },
        )

    render.__name__ = f"page_{page.name.lower()}"
    return render


def register_pages(app: FastAPI) -> None:
    """Enregistre une route GET par page, avant le montage du bundle statique."""
    for page in PAGES:
        app.add_api_route(
            page.path,
            _make_endpoint(page),
            methods=["GET"],
            name=page.name,
            include_in_schema=False,
        )
