"""Renderers — HTML (document complet ou fragment par bloc)."""
from .base import Renderer
from .html import DEFAULT_TITLE, HtmlRenderer, escape_html, generate_html, render_block, youtube_video_id

__all__ = [
    "Renderer", "HtmlRenderer", "DEFAULT_TITLE",
    "generate_html", "render_block", "escape_html", "youtube_video_id",
]
