"""
Blocs de structure — container, section, row.
Rendus comme placeholders statiques : `children` n'est pas parcouru.
"""
from pydantic import Field

from .base import BlockProperties


class ContainerProperties(BlockProperties):
    max_width: str = "100%"
    padding: str = "1rem"
    margin: str = "0 auto"
    background_color: str = ""
    text_color: str = ""


class SectionProperties(BlockProperties):
    height: str = "auto"
    padding: str = "2rem 1rem"
    background_color: str = ""
    background_image: str = ""


class RowProperties(BlockProperties):
    columns: int = Field(default=2, ge=1)
    gap: str = "1rem"
    alignment: str = "stretch"     # stretch, flex-start, center, flex-end…
