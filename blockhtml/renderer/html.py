"""
Renderer HTML — génère le document HTML complet d'une liste ordonnée de blocs.

Fonction pure : même liste (ordre compris) → même chaîne, sans I/O ni état partagé.
Dispatch par BlockType ; type inconnu → commentaire HTML, les blocs suivants sont rendus.
Ne lève jamais sur des données de bloc mal formées : propriétés fusionnées sur les
défauts du registry, valeurs invalides ignorées.
"""
import html
import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Type

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from ..blocks import Block, BlockProperties, BlockType, lookup
from ..blocks.text import HeadingProperties, ParagraphProperties, ListProperties
from ..blocks.media import ImageProperties, VideoProperties
from ..blocks.structure import ContainerProperties, SectionProperties, RowProperties
from ..blocks.forms import InputProperties, ButtonProperties, FormProperties
from ..blocks.advanced import LinkProperties
from . import styles

log = logging.getLogger(__name__)

DEFAULT_TITLE = "BlockHTML Generated Page"

_YOUTUBE_URL = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
_YOUTUBE_ID_LENGTH = 11


# ── Point d'entrée public ───────────────────────────────────────────────────

def generate_html(blocks: Optional[Sequence[Any]], *, title: str = DEFAULT_TITLE) -> str:
    """
    Génère le HTML complet d'une liste de blocs.

    Args:
        blocks: Blocs (Block ou dict JSON) dans l'ordre d'affichage
        title: Contenu de <title> (échappé)

    Returns:
        Document HTML complet, fragments séparés par un saut de ligne
    """
    if blocks is None or isinstance(blocks, (str, bytes)):
        blocks = []
    elif isinstance(blocks, Mapping):
        blocks = [blocks]

    body = "\n".join(render_block(b) for b in blocks)

    return f"""<!DOCTYPE html>
<html>
<head>
  <title>{escape_html(title)}</title>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <style>
    {styles.DOCUMENT_BODY_CSS}
  </style>
</head>
<body>
{body}</body>
</html>"""


def render_block(block: Any) -> str:
    """Dispatch vers le renderer du type ; type inconnu → marqueur commentaire."""
    block_type, content, raw_properties = _block_fields(block)
    definition = lookup(block_type) if isinstance(block_type, str) else None
    if definition is None:
        log.debug("Type de bloc inconnu ignoré au rendu : %r", block_type)
        return f"<!-- Unknown block type: {escape_html(block_type)} -->"

    properties = None
    if definition.properties_model is not None:
        properties = merge_properties(definition.properties_model, raw_properties)
    return _RENDERERS[definition.type](content, properties)


class HtmlRenderer:
    """Implémentation du Protocol Renderer (titre du document paramétrable)."""

    def __init__(self, title: str = DEFAULT_TITLE):
        self.title = title

    def render_document(self, blocks: Sequence[Any]) -> str:
        return generate_html(blocks, title=self.title)

    def render_block(self, block: Any) -> str:
        return render_block(block)


# ── Helpers ─────────────────────────────────────────────────────────────────

def escape_html(value: Any) -> str:
    """Échappe & < > " ' (texte et attributs)."""
    return html.escape("" if value is None else str(value), quote=True)


def merge_properties(model: Type[BlockProperties], raw: Any) -> BlockProperties:
    """
    Fusionne les propriétés fournies sur les défauts du type.
    None = absent ; une clé dont la valeur ne valide pas retombe sur son défaut.
    """
    data = {}
    if isinstance(raw, Mapping):
        data = {k: v for k, v in raw.items() if isinstance(k, str) and v is not None}
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        invalid = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        cleaned = {k: v for k, v in data.items() if k not in invalid and to_camel(k) not in invalid}
    try:
        return model.model_validate(cleaned)
    except ValidationError:
        return model()


def _block_fields(block: Any) -> Tuple[Any, Any, Any]:
    """(type, content, properties) depuis un Block, un dict JSON ou tout autre objet."""
    if isinstance(block, Block):
        return block.type, block.content, block.properties
    if isinstance(block, Mapping):
        return block.get("type"), block.get("content"), block.get("properties")
    return (getattr(block, "type", None),
            getattr(block, "content", None),
            getattr(block, "properties", None))


def _text(content: Any, fallback: str = "") -> str:
    if content is None or content == "":
        return fallback
    return content if isinstance(content, str) else str(content)


def _align_style(align: str) -> str:
    return f' style="text-align: {escape_html(align)};"' if align and align != "left" else ""


def youtube_video_id(url: str) -> Optional[str]:
    """Extrait l'id (11 caractères) d'une URL YouTube ; None si aucune forme connue."""
    match = _YOUTUBE_URL.match(url or "")
    if match and len(match.group(2)) == _YOUTUBE_ID_LENGTH:
        return match.group(2)
    return None


# ── Renderers texte ─────────────────────────────────────────────────────────

def render_heading_block(content: Any, p: HeadingProperties) -> str:
    level = p.level if 1 <= p.level <= 6 else 2
    return f"<h{level}{_align_style(p.align)}>{escape_html(_text(content))}</h{level}>"


def render_paragraph_block(content: Any, p: ParagraphProperties) -> str:
    return f"<p{_align_style(p.align)}>{escape_html(_text(content))}</p>"


def render_list_block(content: Any, p: ListProperties) -> str:
    if isinstance(content, (list, tuple)):
        items = content
    elif isinstance(content, str):
        items = [content]
    else:
        items = [""]
    tag = "ol" if p.type == "ordered" else "ul"
    lis = "\n".join(f"  <li>{escape_html(_text(item))}</li>" for item in items)
    return f"<{tag}>\n{lis}\n</{tag}>"


# ── Renderers média ─────────────────────────────────────────────────────────

def render_image_block(content: Any, p: ImageProperties) -> str:
    if p.align == "center":
        wrapper = '<div style="text-align: center;">'
    elif p.align == "right":
        wrapper = '<div style="text-align: right;">'
    else:
        wrapper = "<div>"

    width = escape_html(p.width or "100%")
    height = escape_html(p.height or "auto")
    return f"""{wrapper}
  <img src="{escape_html(p.src)}" alt="{escape_html(p.alt)}" style="width: {width}; height: {height}; max-width: 100%;">
</div>"""


def render_video_block(content: Any, p: VideoProperties) -> str:
    width = escape_html(p.width or "100%")
    height = escape_html(p.height or "315")

    if p.type == "youtube":
        video_id = youtube_video_id(p.src)
        if video_id is None:
            return "<!-- Invalid YouTube URL -->"
        autoplay = "?autoplay=1" if p.autoplay else ""
        return f"""<div style="text-align: center;">
  <iframe width="{width}" height="{height}" src="https://www.youtube.com/embed/{escape_html(video_id)}{autoplay}" frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture" allowfullscreen></iframe>
</div>"""

    flags = (" controls" if p.controls else "") + (" autoplay" if p.autoplay else "")
    return f"""<div style="text-align: center;">
  <video src="{escape_html(p.src)}" width="{width}" height="{height}"{flags}></video>
</div>"""


# ── Renderers structure (placeholders, pas de récursion sur children) ───────

def render_container_block(content: Any, p: ContainerProperties) -> str:
    style = f"max-width: {p.max_width}; padding: {p.padding}; margin: {p.margin};"
    if p.background_color:
        style += f" background-color: {p.background_color};"
    if p.text_color:
        style += f" color: {p.text_color};"
    return f"""<div style="{escape_html(style)}">
  <!-- Container content here -->
</div>"""


def render_section_block(content: Any, p: SectionProperties) -> str:
    style = f"height: {p.height}; padding: {p.padding};"
    if p.background_color:
        style += f" background-color: {p.background_color};"
    if p.background_image:
        style += (f" background-image: url({p.background_image});"
                  " background-size: cover; background-position: center;")
    return f"""<section style="{escape_html(style)}">
  <!-- Section content here -->
</section>"""


def render_row_block(content: Any, p: RowProperties) -> str:
    style = (f"display: grid; grid-template-columns: repeat({p.columns}, 1fr); "
             f"gap: {p.gap}; align-items: {p.alignment};")
    columns = "".join(f"  <div><!-- Column {i} content --></div>\n" for i in range(1, p.columns + 1))
    return f'<div style="{escape_html(style)}">\n{columns}</div>'


# ── Renderers formulaire ────────────────────────────────────────────────────

def render_input_block(content: Any, p: InputProperties) -> str:
    name = escape_html(p.name or "input-name")
    placeholder = escape_html(p.placeholder)
    required = " required" if p.required else ""

    label_html = ""
    if p.label:
        marker = styles.REQUIRED_MARKER if p.required else ""
        label_html = (f'<label for="{name}" style="{styles.FIELD_LABEL}">'
                      f"{escape_html(p.label)}{marker}</label>\n  ")

    if p.type == "textarea":
        control = (f'<textarea name="{name}" id="{name}" placeholder="{placeholder}"{required} '
                   f'style="{styles.FIELD_CONTROL}"></textarea>')
    else:
        control = (f'<input type="{escape_html(p.type or "text")}" name="{name}" id="{name}" '
                   f'placeholder="{placeholder}"{required} style="{styles.FIELD_CONTROL}">')

    return f"""<div style="{styles.FIELD_WRAPPER}">
  {label_html}{control}
</div>"""


def render_button_block(content: Any, p: ButtonProperties) -> str:
    style = styles.button_style(p.variant, p.size)
    return f"""<div style="text-align: center;">
  <button type="{escape_html(p.type or "submit")}" style="{style}">{escape_html(p.text or "Submit")}</button>
</div>"""


def render_form_block(content: Any, p: FormProperties) -> str:
    return f"""<form action="{escape_html(p.action)}" method="{escape_html(p.method or "post")}">
  <!-- Form inputs here -->
</form>"""


# ── Renderers avancés ───────────────────────────────────────────────────────

def render_custom_html_block(content: Any, p: None) -> str:
    # Passthrough HTML brut : jamais échappé
    return _text(content)


def render_link_block(content: Any, p: LinkProperties) -> str:
    target = p.target or "_self"
    marker = styles.EXTERNAL_LINK_MARKER if target == "_blank" else ""
    return (f'<a href="{escape_html(p.href or "#")}" target="{escape_html(target)}" '
            f'style="{styles.link_style(p.style)}">{escape_html(_text(content, "Click here"))}{marker}</a>')


_RENDERERS: Dict[BlockType, Callable[[Any, Any], str]] = {
    BlockType.HEADING:     render_heading_block,
    BlockType.PARAGRAPH:   render_paragraph_block,
    BlockType.LIST:        render_list_block,
    BlockType.IMAGE:       render_image_block,
    BlockType.VIDEO:       render_video_block,
    BlockType.CONTAINER:   render_container_block,
    BlockType.SECTION:     render_section_block,
    BlockType.ROW:         render_row_block,
    BlockType.INPUT:       render_input_block,
    BlockType.BUTTON:      render_button_block,
    BlockType.FORM:        render_form_block,
    BlockType.CUSTOM_HTML: render_custom_html_block,
    BlockType.LINK:        render_link_block,
}
