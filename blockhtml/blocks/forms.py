"""Blocs formulaire — input, button, form."""
from .base import BlockProperties


class InputProperties(BlockProperties):
    label: str = "Input Label"
    name: str = "input-name"
    type: str = "text"          # text, email, number, password, tel, textarea…
    placeholder: str = "Enter value..."
    required: bool = False


class ButtonProperties(BlockProperties):
    text: str = "Submit"
    type: str = "submit"
    variant: str = "primary"    # inconnu → primary au rendu
    size: str = "medium"        # inconnu → medium au rendu


class FormProperties(BlockProperties):
    action: str = ""
    method: str = "post"
