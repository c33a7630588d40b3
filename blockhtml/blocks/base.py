"""
Blocs de base pour blockhtml.
Block générique (persisté tel quel) + BlockProperties typées par type de bloc.
"""
import uuid
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BlockType(str, Enum):
    """Ensemble fermé des types de blocs connus."""
    HEADING     = "heading"
    PARAGRAPH   = "paragraph"
    LIST        = "list"
    IMAGE       = "image"
    VIDEO       = "video"
    CONTAINER   = "container"
    SECTION     = "section"
    ROW         = "row"
    INPUT       = "input"
    BUTTON      = "button"
    FORM        = "form"
    CUSTOM_HTML = "customHtml"
    LINK        = "link"


class ContentKind(str, Enum):
    TEXT  = "text"
    LIST  = "list"
    HTML  = "html"
    NONE  = "none"


def new_block_id() -> str:
    return str(uuid.uuid4())


class BlockProperties(BaseModel):
    """Propriétés d'affichage d'un bloc. Clés JSON en camelCase (maxWidth, backgroundColor…)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Block(BaseModel):
    """
    Bloc tel qu'il circule entre l'éditeur, le store et le renderer.

    `type` reste une chaîne libre : un bloc persisté d'un type inconnu doit
    pouvoir être relu puis rendu (marqueur commentaire), pas rejeté.
    `children` est réservé : déclaré et persisté, jamais rendu récursivement.
    """
    id: str = Field(default_factory=new_block_id)
    type: str
    content: Any = None
    properties: Optional[Dict[str, Any]] = None
    children: List["Block"] = Field(default_factory=list)


Block.model_rebuild()


class BlockDefinition(BaseModel):
    """Entrée du registry : tout ce qu'il faut pour instancier et décrire un type."""
    model_config = ConfigDict(frozen=True)

    type: BlockType
    name: str
    category: str
    content_kind: ContentKind = ContentKind.NONE
    default_content: Any = None
    properties_model: Optional[Type[BlockProperties]] = None

    def default_properties(self) -> Dict[str, Any]:
        if self.properties_model is None:
            return {}
        return self.properties_model().to_dict()
