"""
Tables de styles inline — variantes de boutons et de liens, shell du document.
Valeurs figées : le rendu doit rester déterministe.
"""

DOCUMENT_BODY_CSS = (
    'body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, '
    'Helvetica, Arial, sans-serif; margin: 0; padding: 0; }'
)

# ── Boutons ─────────────────────────────────────────────────────────────────

BUTTON_VARIANTS = {
    "primary":   "background-color: #3b82f6; color: white; border: none;",
    "secondary": "background-color: #e5e7eb; color: #1f2937; border: none;",
    "success":   "background-color: #10b981; color: white; border: none;",
    "danger":    "background-color: #ef4444; color: white; border: none;",
    "outline":   "background-color: transparent; color: #3b82f6; border: 1px solid #3b82f6;",
}

BUTTON_SIZES = {
    "small":  "padding: 0.25rem 0.5rem; font-size: 0.875rem;",
    "medium": "padding: 0.5rem 1rem; font-size: 1rem;",
    "large":  "padding: 0.75rem 1.5rem; font-size: 1.125rem;",
}

BUTTON_COMMON = "border-radius: 0.25rem; font-weight: 500; cursor: pointer; transition: all 0.2s;"

# ── Liens ───────────────────────────────────────────────────────────────────

LINK_STYLES = {
    "default":    "color: #3b82f6; text-decoration: none;",
    "button":     ("display: inline-block; padding: 0.5rem 1rem; background-color: #3b82f6; "
                   "color: white; text-decoration: none; border-radius: 0.25rem;"),
    "underlined": "color: #3b82f6; text-decoration: underline;",
    "subtle":     "color: #6b7280; text-decoration: none;",
}

EXTERNAL_LINK_MARKER = ' <span style="font-size: 0.75em;">↗</span>'

# ── Formulaires ─────────────────────────────────────────────────────────────

FIELD_WRAPPER = "margin-bottom: 1rem;"
FIELD_LABEL   = "display: block; margin-bottom: 0.5rem; font-weight: 500;"
FIELD_CONTROL = "width: 100%; padding: 0.5rem; border: 1px solid #d1d5db; border-radius: 0.25rem;"
REQUIRED_MARKER = ' <span style="color: #dc2626;">*</span>'


def button_style(variant: str, size: str) -> str:
    """Variante inconnue → primary, taille inconnue → medium."""
    color = BUTTON_VARIANTS.get(variant, BUTTON_VARIANTS["primary"])
    spacing = BUTTON_SIZES.get(size, BUTTON_SIZES["medium"])
    return f"{color} {spacing} {BUTTON_COMMON}"


def link_style(style: str) -> str:
    return LINK_STYLES.get(style, LINK_STYLES["default"])
