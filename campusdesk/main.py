"""
Point d'entrée principal de l'API CampusDesk.
Démarrage : python -m campusdesk  (ou uvicorn campusdesk.main:app --reload)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

import campusdesk.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant init_db
from campusdesk import __version__
from campusdesk.config import settings
from campusdesk.database import init_db
from campusdesk.frontend import register_pages
from campusdesk.routers import admins, students
from campusdesk.services.identifiers import InvalidRecordId
from campusdesk.uploads import ensure_upload_dir

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connexion BDD au démarrage : un échec est journalisé, le serveur démarre quand même."""
    init_db()
    yield


app = FastAPI(
    title="CampusDesk API",
    description="Gestion des étudiants et des administrateurs",
    version=__version__,
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(students.router)
app.include_router(admins.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Champ obligatoire absent, vide ou mal typé → 400 avec un message fixe."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Tous les champs obligatoires doivent être renseignés.",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(InvalidRecordId)
async def invalid_id_handler(request: Request, exc: InvalidRecordId) -> JSONResponse:
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Erreur de base de données : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Erreur de base de données.", "error": str(exc)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue.", "error": str(exc)},
    )


@app.get(f"{settings.API_PREFIX}/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "CampusDesk API", "version": __version__}


# Fichiers statiques : photos envoyées, pages, puis bundle front-end éventuel à la racine
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=ensure_upload_dir()), name="uploads")

register_pages(app)

if os.path.isdir(settings.FRONTEND_DIR):
    app.mount("/", StaticFiles(directory=settings.FRONTEND_DIR, html=True), name="frontend")
else:
    logger.warning("Bundle front-end absent (%s) : seules les pages intégrées sont servies.", settings.FRONTEND_DIR)
