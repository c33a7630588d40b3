"""Erreurs typées du Project Store — traduites en codes HTTP par la couche transport."""


class StoreError(Exception):
    """Base de toutes les erreurs du store."""


class ProjectNotFound(StoreError):
    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Projet {project_id} introuvable")


class ProjectValidationError(StoreError):
    """Données refusées (champ non nullable, contrainte violée)."""


class StorageIOError(StoreError):
    """Échec du backend (fichier, base de données)."""
