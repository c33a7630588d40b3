"""
Backend fichier JSON — persistance clé/valeur locale.

Un seul fichier : {"projects": [...], "project_counter": N}.
Le compteur est persisté : un id n'est jamais réattribué, même après redémarrage.
Écriture atomique (fichier temporaire + os.replace) ; l'état mémoire n'est
remplacé qu'une fois l'écriture réussie.
"""
import json
import logging
import os
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from ..models import Project, ProjectCreate, ProjectUpdate
from .base import apply_update, build_project
from .errors import StorageIOError

log = logging.getLogger(__name__)

PROJECTS_KEY = "projects"
COUNTER_KEY  = "project_counter"


class JsonFileProjectStore:
    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._projects, self._next_id = self._load()

    # ── Lecture / écriture fichier ──

    def _load(self) -> Tuple[Dict[int, Project], int]:
        if not self.path.exists():
            return {}, 1
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Lecture impossible : {self.path}") from e
        try:
            data = json.loads(raw or "{}")
        except ValueError:
            log.warning("Fichier projets illisible, démarrage à vide : %s", self.path)
            return {}, 1
        if not isinstance(data, dict):
            log.warning("Format inattendu, démarrage à vide : %s", self.path)
            return {}, 1

        projects: Dict[int, Project] = {}
        for item in data.get(PROJECTS_KEY) or []:
            try:
                project = Project.model_validate(item)
            except ValidationError as e:
                log.warning("Projet ignoré au chargement : %s", e.error_count())
                continue
            projects[project.id] = project

        try:
            counter = int(data.get(COUNTER_KEY, 1))
        except (TypeError, ValueError):
            counter = 1
        # le compteur ne redescend jamais sous un id déjà attribué
        next_id = max([counter, *(pid + 1 for pid in projects)])
        return projects, next_id

    def _write(self, projects: Dict[int, Project], next_id: int):
        payload = {
            PROJECTS_KEY: [projects[pid].model_dump(mode="json", by_alias=True) for pid in sorted(projects)],
            COUNTER_KEY:  next_id,
        }
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            log.error("Écriture impossible %s : %s", self.path, e)
            raise StorageIOError(f"Écriture impossible : {self.path}") from e

    # ── Contrat ProjectStore ──

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
            projects = {**self._projects, project.id: project}
            self._write(projects, self._next_id + 1)
            self._projects, self._next_id = projects, self._next_id + 1
            return project.model_copy(deep=True)

    def update(self, project_id: int, data: ProjectUpdate) -> Optional[Project]:
        with self._lock:
            existing = self._projects.get(project_id)
            if existing is None:
                return None
            project = apply_update(existing, data)
            projects = {**self._projects, project_id: project}
            self._write(projects, self._next_id)
            self._projects = projects
            return project.model_copy(deep=True)

    def delete(self, project_id: int) -> bool:
        with self._lock:
            if project_id not in self._projects:
                return False
            projects = {pid: p for pid, p in self._projects.items() if pid != project_id}
            self._write(projects, self._next_id)
            self._projects = projects
            return True
