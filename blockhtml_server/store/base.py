"""
Contrat ProjectStore — implémenté à l'identique par les backends mémoire, fichier JSON et SQL.
"""
from typing import List, Optional, Protocol, runtime_checkable

from pydantic import ValidationError

from ..models import Project, ProjectCreate, ProjectUpdate, touch, utcnow
from .errors import ProjectValidationError


@runtime_checkable
class ProjectStore(Protocol):
    def get_all(self) -> List[Project]: ...
    def get_by_user(self, user_id: int) -> List[Project]: ...
    def get(self, project_id: int) -> Optional[Project]: ...
    def create(self, data: ProjectCreate) -> Project: ...
    def update(self, project_id: int, data: ProjectUpdate) -> Optional[Project]: ...
    def delete(self, project_id: int) -> bool: ...


def build_project(project_id: int, data: ProjectCreate) -> Project:
    """Nouveau projet : id attribué par le store, created_at == updated_at."""
    now = utcnow()
    return Project(
        id=project_id,
        name=data.name,
        description=data.description,
        user_id=data.user_id,
        blocks=data.blocks,
        created_at=now,
        updated_at=now,
    )


def apply_update(project: Project, data: ProjectUpdate) -> Project:
    """Fusionne les champs fournis sur l'existant, conserve les autres, rafraîchit updated_at."""
    merged = {**project.model_dump(), **data.changes(), "updated_at": touch(project.updated_at)}
    try:
        return Project.model_validate(merged)
    except ValidationError as e:
        raise ProjectValidationError(str(e)) from e
