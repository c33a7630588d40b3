"""
Projets — CRUD des listes de blocs nommées + export HTML.
GET    /api/projects            ?userId= → projets de cet utilisateur
GET    /api/projects/{id}
POST   /api/projects            {name, description?, blocks, userId?}
PUT    /api/projects/{id}       champs partiels
DELETE /api/projects/{id}
GET    /api/projects/{id}/html  ?download=true → pièce jointe {name}.html
"""
import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse

from blockhtml import HtmlRenderer

from ...models import Project, ProjectCreate, ProjectUpdate
from ...store import ProjectNotFound, ProjectStore, get_store

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["Projects"])

_UNSAFE_FILENAME = re.compile(r"[^\w\-. ]+")


def _export_filename(name: str) -> str:
    return (_UNSAFE_FILENAME.sub("_", name).strip(" .") or "untitled") + ".html"


def _get_or_404(store: ProjectStore, project_id: int) -> Project:
    project = store.get(project_id)
    if project is None:
        raise ProjectNotFound(project_id)
    return project


@router.get("", response_model=List[Project])
def list_projects(
    user_id: Optional[int] = Query(None, alias="userId", description="Projets d'un utilisateur"),
    store: ProjectStore = Depends(get_store),
):
    if user_id is None:
        return store.get_all()
    return store.get_by_user(user_id)


@router.get("/{project_id}", response_model=Project)
def get_project(project_id: int, store: ProjectStore = Depends(get_store)):
    return _get_or_404(store, project_id)


@router.post("", response_model=Project, status_code=201)
def create_project(payload: ProjectCreate, store: ProjectStore = Depends(get_store)):
    project = store.create(payload)
    log.info("Projet %s créé (%d blocs)", project.id, len(project.blocks))
    return project


@router.put("/{project_id}", response_model=Project)
def update_project(project_id: int, payload: ProjectUpdate, store: ProjectStore = Depends(get_store)):
    """Fusion partielle : les champs absents du body sont conservés."""
    project = store.update(project_id, payload)
    if project is None:
        raise ProjectNotFound(project_id)
    log.info("Projet %s mis à jour (%s)", project_id, ", ".join(payload.changes()) or "aucun champ")
    return project


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: int, store: ProjectStore = Depends(get_store)):
    if not store.delete(project_id):
        raise ProjectNotFound(project_id)
    log.info("Projet %s supprimé", project_id)
    return Response(status_code=204)


@router.get("/{project_id}/html", response_class=HTMLResponse)
def export_project_html(
    project_id: int,
    download: bool = Query(False, description="Servir en pièce jointe {name}.html"),
    store: ProjectStore = Depends(get_store),
):
    """Document HTML du projet, titré avec son nom."""
    project = _get_or_404(store, project_id)
    html = HtmlRenderer(title=project.name).render_document(project.blocks)
    headers = None
    if download:
        headers = {"Content-Disposition": f'attachment; filename="{_export_filename(project.name)}"'}
    return HTMLResponse(content=html, headers=headers)
