"""Blocs texte — heading, paragraph, list."""
from typing import Literal

from pydantic import Field

from .base import BlockProperties

Align = Literal["left", "center", "right", "justify"]


class HeadingProperties(BlockProperties):
    level: int = Field(default=2, ge=1, le=6)
    align: Align = "left"


class ParagraphProperties(BlockProperties):
    align: Align = "left"


class ListProperties(BlockProperties):
    type: Literal["ordered", "unordered"] = "unordered"
