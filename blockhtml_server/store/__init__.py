"""
Project Store — un contrat, trois backends, choisi une fois au démarrage.

BLOCKHTML_STORE       memory (défaut) | json | sql
BLOCKHTML_STORE_PATH  fichier JSON (défaut data/projects.json)
DB_PATH               fichier SQLite (défaut data/blockhtml.db)
"""
import logging
import os
from typing import Optional

from .base import ProjectStore, apply_update, build_project
from .errors import ProjectNotFound, ProjectValidationError, StorageIOError, StoreError
from .json_file import JsonFileProjectStore
from .memory import MemoryProjectStore
from .sql import SqlProjectStore

log = logging.getLogger(__name__)

BACKENDS = ("memory", "json", "sql")

_STORE: Optional[ProjectStore] = None


def create_store(backend: Optional[str] = None) -> ProjectStore:
    """Instancie le backend demandé (argument, sinon BLOCKHTML_STORE)."""
    from ..database import DATA_DIR

    backend = (backend or os.getenv("BLOCKHTML_STORE", "memory")).strip().lower()
    if backend == "memory":
        return MemoryProjectStore()
    if backend == "json":
        return JsonFileProjectStore(os.getenv("BLOCKHTML_STORE_PATH", str(DATA_DIR / "projects.json")))
    if backend == "sql":
        return SqlProjectStore(os.getenv("DB_PATH", str(DATA_DIR / "blockhtml.db")))
    raise ValueError(f"Backend de stockage inconnu : {backend!r} (attendu : {', '.join(BACKENDS)})")


def init_store(store: Optional[ProjectStore] = None) -> ProjectStore:
    """Fixe le store du process (appelé au démarrage de l'app)."""
    global _STORE
    _STORE = store or create_store()
    log.info("Project store initialisé : %s", type(_STORE).__name__)
    return _STORE


def get_store() -> ProjectStore:
    """Dépendance FastAPI."""
    if _STORE is None:
        return init_store()
    return _STORE


__all__ = [
    "ProjectStore", "MemoryProjectStore", "JsonFileProjectStore", "SqlProjectStore",
    "StoreError", "ProjectNotFound", "ProjectValidationError", "StorageIOError",
    "create_store", "init_store", "get_store", "apply_update", "build_project",
]
