"""
Protocol Renderer — interface pluggable pour les renderers (HTML aujourd'hui, autres formats ensuite).
"""
from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    def render_document(self, blocks: Sequence[Any]) -> str: ...
    def render_block(self, block: Any) -> str: ...
