"""Blocs avancés — customHtml (passthrough HTML brut) et link."""
from .base import BlockProperties


class LinkProperties(BlockProperties):
    href: str = "#"
    target: str = "_self"
    style: str = "default"      # default, button, underlined, subtle
