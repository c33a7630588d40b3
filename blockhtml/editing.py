"""
Édition d'une liste de blocs — ajout, mise à jour, suppression, déplacement.
Fonctions pures : la liste d'entrée n'est jamais modifiée, une nouvelle liste est retournée.
"""
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .blocks import Block
from .factory import create_block

# Champs qu'une mise à jour ne peut pas toucher : changer de type = remplacer le bloc
_FROZEN_FIELDS = ("id", "type")


def add_block(blocks: Sequence[Block], block_type: str) -> Tuple[List[Block], Block]:
    """Ajoute un bloc neuf en fin de liste. Retourne (nouvelle liste, bloc créé)."""
    block = create_block(block_type)
    return [*blocks, block], block


def find_block(blocks: Sequence[Block], block_id: str) -> Optional[Block]:
    return next((b for b in blocks if b.id == block_id), None)


def update_block(blocks: Sequence[Block], block_id: str, updates: Dict[str, Any]) -> List[Block]:
    """Fusionne `updates` (content, properties, children) sur le bloc ciblé. Id inconnu → liste inchangée."""
    changes = {k: v for k, v in updates.items() if k not in _FROZEN_FIELDS}
    result = []
    for block in blocks:
        if block.id == block_id:
            block = Block.model_validate({**block.model_dump(), **changes})
        result.append(block)
    return result


def remove_block(blocks: Sequence[Block], block_id: str) -> List[Block]:
    return [b for b in blocks if b.id != block_id]


def move_block(blocks: Sequence[Block], source_index: int, destination_index: int) -> List[Block]:
    """
    Réordonne : retire à source_index puis insère à destination_index
    (sémantique drag-and-drop). Source hors limites → IndexError.
    """
    result = list(blocks)
    if not -len(result) <= source_index < len(result):
        raise IndexError(f"source_index hors limites : {source_index}")
    moved = result.pop(source_index)
    result.insert(destination_index, moved)
    return result
