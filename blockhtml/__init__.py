"""
blockhtml — schéma de blocs typés + moteur de génération HTML.

Usage:
    >>> from blockhtml import create_block, generate_html
    >>> title = create_block("heading")
    >>> html = generate_html([title])

Usage (édition d'une liste de blocs):
    >>> from blockhtml import add_block, move_block
    >>> blocks, para = add_block(blocks, "paragraph")
    >>> blocks = move_block(blocks, len(blocks) - 1, 0)
"""

from .blocks import (
    Block, BlockDefinition, BlockProperties, BlockType, ContentKind,
    BLOCK_REGISTRY, block_categories, search_blocks,
)
from .factory import (
    UnknownBlockType,
    create_block, get_block_definition, get_default_content, get_default_properties,
)
from .editing import add_block, update_block, remove_block, move_block, find_block
from .renderer import Renderer, HtmlRenderer, generate_html, render_block, escape_html

__version__ = "0.1.0"

__all__ = [
    # Blocs
    "Block", "BlockDefinition", "BlockProperties", "BlockType", "ContentKind",
    "BLOCK_REGISTRY", "block_categories", "search_blocks",
    # Factory
    "UnknownBlockType",
    "create_block", "get_block_definition", "get_default_content", "get_default_properties",
    # Édition
    "add_block", "update_block", "remove_block", "move_block", "find_block",
    # Rendu
    "Renderer", "HtmlRenderer", "generate_html", "render_block", "escape_html",
]
