"""CampusDesk — gestion des étudiants et des administrateurs."""

__version__ = "0.1.0"
