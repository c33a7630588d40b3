"""Blocs média — image et vidéo (YouTube ou fichier natif)."""

from .base import BlockProperties


class ImageProperties(BlockProperties):
    src: str = ""
    alt: str = ""
    width: str = "100%"
    height: str = "auto"
    align: str = "center"      # center, right ; autre valeur → wrapper sans style


class VideoProperties(BlockProperties):
    src: str = ""
    type: str = "youtube"      # tout autre valeur → balise <video> native
    width: str = "100%"
    height: str = "315"
    controls: bool = True
    autoplay: bool = False
