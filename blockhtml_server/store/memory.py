"""Backend mémoire — dict + compteur d'ids propre à l'instance, protégés par un verrou."""
import threading
from typing import Dict, List, Optional

from ..models import Project, ProjectCreate, ProjectUpdate
from .base import apply_update, build_project


class MemoryProjectStore:
    def __init__(self):
        self._projects: Dict[int, Project] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_all(self) -> List[Project]:
        with self._lock:
            return [self._projects[pid].model_copy(deep=True) for pid in sorted(self._projects)]

    def get_by_user(self, user_id: int) -> List[Project]:
        with self._lock:
            return [self._projects[pid].model_copy(deep=True) for pid in sorted(self._projects)
                    if self._projects[pid].user_id == user_id]

    def get(self, project_id: int) -> Optional[Project]:
        with self._lock:
            project = self._projects.get(project_id)
            return project.model_copy(deep=True) if project else None

    def create(self, data: ProjectCreate) -> Project:
        with self._lock:
            project = build_project(self._next_id, data)
            self._next_id += 1
            self._projects[project.id] = project
            return project.model_copy(deep=True)

    def update(self, project_id: int, data: ProjectUpdate) -> Optional[Project]:
        with self._lock:
            existing = self._projects.get(project_id)
            if existing is None:
                return None
            project = apply_update(existing, data)
            self._projects[project_id] = project
            return project.model_copy(deep=True)

    def delete(self, project_id: int) -> bool:
        with self._lock:
            return self._projects.pop(project_id, None) is not None
