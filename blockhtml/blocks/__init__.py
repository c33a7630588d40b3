"""
Blocs — exports publics : Block, BlockType, propriétés typées et registry.
"""
from .base import Block, BlockDefinition, BlockProperties, BlockType, ContentKind, new_block_id
from .text import HeadingProperties, ParagraphProperties, ListProperties
from .media import ImageProperties, VideoProperties
from .structure import ContainerProperties, SectionProperties, RowProperties
from .forms import InputProperties, ButtonProperties, FormProperties
from .advanced import LinkProperties
from .registry import (
    BLOCK_REGISTRY, CATEGORIES,
    lookup, all_definitions, block_categories, search_blocks,
)

__all__ = [
    # Base
    "Block", "BlockDefinition", "BlockProperties", "BlockType", "ContentKind", "new_block_id",
    # Texte
    "HeadingProperties", "ParagraphProperties", "ListProperties",
    # Média
    "ImageProperties", "VideoProperties",
    # Structure
    "ContainerProperties", "SectionProperties", "RowProperties",
    # Formulaires
    "InputProperties", "ButtonProperties", "FormProperties",
    # Avancé
    "LinkProperties",
    # Registry
    "BLOCK_REGISTRY", "CATEGORIES",
    "lookup", "all_definitions", "block_categories", "search_blocks",
]
