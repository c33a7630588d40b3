"""
Router FastAPI — endpoints du moteur blockhtml.

GET  /api/blocks/catalog        → palette : catégories + blocs + défauts + JSON schemas
POST /api/blocks/render         → {"blocks": [...], "title"?} → HTMLResponse
POST /api/blocks/{block_type}   → nouveau bloc avec ses défauts (400 si type inconnu)
"""
import copy
from typing import Any, List

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .blocks import BlockDefinition, CATEGORIES, search_blocks
from .factory import UnknownBlockType, create_block
from .renderer.html import DEFAULT_TITLE, HtmlRenderer

router = APIRouter(prefix="/api/blocks", tags=["blocks"])


class RenderRequest(BaseModel):
    # Any : un bloc mal formé doit être rendu (marqueur), pas rejeté en 400
    blocks: List[Any] = []
    title: str = DEFAULT_TITLE


def _catalog_entry(d: BlockDefinition) -> dict:
    return {
        "type":              d.type.value,
        "name":              d.name,
        "contentKind":       d.content_kind.value,
        "defaultContent":    copy.deepcopy(d.default_content),
        "defaultProperties": d.default_properties(),
        "schema":            d.properties_model.model_json_schema(by_alias=True) if d.properties_model else None,
    }


@router.get("/catalog", summary="Liste les blocs disponibles, groupés par catégorie")
def catalog(q: str = Query("", description="Filtre sur le nom du bloc")) -> dict:
    """Retourne la palette (ordre d'affichage) avec défauts et JSON schemas des propriétés."""
    matches = search_blocks(q)
    categories = []
    for cid, label in CATEGORIES:
        blocks = [_catalog_entry(d) for d in matches if d.category == cid]
        if blocks:
            categories.append({"id": cid, "name": label, "blocks": blocks})
    return {"categories": categories}


@router.post("/render", response_class=HTMLResponse, summary="Rend une liste de blocs en HTML")
def render(req: RenderRequest) -> HTMLResponse:
    """Reçoit une liste de blocs JSON, retourne le document HTML complet."""
    return HTMLResponse(content=HtmlRenderer(title=req.title).render_document(req.blocks))


@router.post("/{block_type}", status_code=201, summary="Crée un bloc avec les défauts de son type")
def new_block(block_type: str) -> dict:
    try:
        block = create_block(block_type)
    except UnknownBlockType as e:
        raise HTTPException(400, str(e))
    return block.model_dump()
