"""
Registry des blocs — une BlockDefinition par BlockType, dans l'ordre de la palette.
Source unique des contenus et propriétés par défaut (factory + renderer).
"""
from typing import Dict, List, Optional

from .base import BlockDefinition, BlockType, ContentKind
from .text import HeadingProperties, ParagraphProperties, ListProperties
from .media import ImageProperties, VideoProperties
from .structure import ContainerProperties, SectionProperties, RowProperties
from .forms import InputProperties, ButtonProperties, FormProperties
from .advanced import LinkProperties

# (id, libellé) dans l'ordre d'affichage de la palette
CATEGORIES = [
    ("structure", "Structure"),
    ("text",      "Text"),
    ("media",     "Media"),
    ("forms",     "Forms"),
    ("advanced",  "Advanced"),
]

_DEFINITIONS: List[BlockDefinition] = [
    # Structure
    BlockDefinition(type=BlockType.CONTAINER, name="Container", category="structure",
                    properties_model=ContainerProperties),
    BlockDefinition(type=BlockType.SECTION, name="Section", category="structure",
                    properties_model=SectionProperties),
    BlockDefinition(type=BlockType.ROW, name="Row", category="structure",
                    properties_model=RowProperties),
    # Texte
    BlockDefinition(type=BlockType.HEADING, name="Heading", category="text",
                    content_kind=ContentKind.TEXT, default_content="Sample Heading",
                    properties_model=HeadingProperties),
    BlockDefinition(type=BlockType.PARAGRAPH, name="Paragraph", category="text",
                    content_kind=ContentKind.TEXT,
                    default_content="Lorem ipsum dolor sit amet, consectetur adipiscing elit. Nullam in dui mauris.",
                    properties_model=ParagraphProperties),
    BlockDefinition(type=BlockType.LIST, name="List", category="text",
                    content_kind=ContentKind.LIST, default_content=["Item 1", "Item 2", "Item 3"],
                    properties_model=ListProperties),
    # Média
    BlockDefinition(type=BlockType.IMAGE, name="Image", category="media",
                    properties_model=ImageProperties),
    BlockDefinition(type=BlockType.VIDEO, name="Video", category="media",
                    properties_model=VideoProperties),
    # Formulaires
    BlockDefinition(type=BlockType.INPUT, name="Input Field", category="forms",
                    properties_model=InputProperties),
    BlockDefinition(type=BlockType.BUTTON, name="Button", category="forms",
                    properties_model=ButtonProperties),
    BlockDefinition(type=BlockType.FORM, name="Form", category="forms",
                    properties_model=FormProperties),
    # Avancé
    BlockDefinition(type=BlockType.CUSTOM_HTML, name="Custom HTML", category="advanced",
                    content_kind=ContentKind.HTML, default_content="<div>Custom HTML goes here</div>"),
    BlockDefinition(type=BlockType.LINK, name="Link", category="advanced",
                    content_kind=ContentKind.TEXT, default_content="Click here",
                    properties_model=LinkProperties),
]

BLOCK_REGISTRY: Dict[BlockType, BlockDefinition] = {d.type: d for d in _DEFINITIONS}


def lookup(block_type: str) -> Optional[BlockDefinition]:
    """Retourne la définition d'un type (chaîne ou BlockType), None si inconnu."""
    try:
        return BLOCK_REGISTRY.get(BlockType(block_type))
    except ValueError:
        return None


def all_definitions() -> List[BlockDefinition]:
    return list(_DEFINITIONS)


def block_categories() -> List[dict]:
    """Définitions groupées par catégorie, dans l'ordre de la palette."""
    return [
        {"id": cid, "name": label, "blocks": [d for d in _DEFINITIONS if d.category == cid]}
        for cid, label in CATEGORIES
    ]


def search_blocks(query: str) -> List[BlockDefinition]:
    """Filtre la palette par nom (insensible à la casse). Requête vide → tout."""
    q = (query or "").strip().lower()
    if not q:
        return all_definitions()
    return [d for d in _DEFINITIONS if q in d.name.lower()]
