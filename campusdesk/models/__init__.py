# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant l'appel à create_all au démarrage.

from campusdesk.models.student import Student  # noqa: F401
from campusdesk.models.admin import Admin  # noqa: F401
