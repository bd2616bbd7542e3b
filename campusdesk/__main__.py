"""
Lance le serveur : python -m campusdesk
Hôte et port lus depuis la configuration (HOST, PORT).
"""

import logging

import uvicorn

from campusdesk.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Serveur démarré sur http://localhost:%d", settings.PORT)
    uvicorn.run("campusdesk.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
