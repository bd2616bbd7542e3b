"""
Configuration de la connexion à la base de données.
PostgreSQL par défaut, SQLite accepté en local et dans les tests.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from campusdesk.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utcnow() -> datetime:
    """Horodatage UTC naïf à la microseconde (CURRENT_TIMESTAMP de SQLite s'arrête à la seconde)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> bool:
    """
    Vérifie la connexion et crée les tables manquantes.
    N'interrompt jamais le démarrage : un échec est journalisé et False est retourné.
    """
    bind = bind if bind is not None else engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as exc:
        logger.error("Échec de la connexion à la base de données : %s", exc)
        return False
    logger.info("Connexion à la base de données établie.")
    return True
