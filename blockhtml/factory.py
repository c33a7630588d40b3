"""
Factory — instancie un Block depuis son type.
Garde-fou à la création : un type hors registry lève UnknownBlockType
(le renderer, lui, tolère les types inconnus déjà persistés).
"""
import copy
from typing import Any, Dict, Optional

from .blocks import Block, BlockDefinition, lookup, new_block_id


class UnknownBlockType(ValueError):
    """Type de bloc absent du registry."""

    def __init__(self, block_type: Any):
        self.block_type = block_type
        super().__init__(f"Unknown block type: {block_type!r}")


def get_block_definition(block_type: str) -> BlockDefinition:
    definition = lookup(block_type)
    if definition is None:
        raise UnknownBlockType(block_type)
    return definition


def get_default_content(block_type: str) -> Any:
    """Contenu par défaut (copie profonde), None pour les blocs sans contenu."""
    return copy.deepcopy(get_block_definition(block_type).default_content)


def get_default_properties(block_type: str) -> Dict[str, Any]:
    return get_block_definition(block_type).default_properties()


def create_block(block_type: str, block_id: Optional[str] = None) -> Block:
    """
    Crée un bloc neuf avec le contenu et les propriétés par défaut de son type.

    Args:
        block_type: Tag du type ("heading", "customHtml"…)
        block_id: Id imposé (tests, imports) — sinon UUID4

    Raises:
        UnknownBlockType: type hors registry
    """
    definition = get_block_definition(block_type)
    return Block(
        id=block_id or new_block_id(),
        type=definition.type.value,
        content=copy.deepcopy(definition.default_content),
        properties=definition.default_properties(),
        children=[],
    )
