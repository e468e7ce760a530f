"""
Génération d'avatars à initiales (membres de l'équipe sans photo, logo par défaut).

La couleur de fond dépend uniquement du nom : un même nom donne toujours la même image.
"""

import io
import logging
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from vitrine.services import upload_service

logger = logging.getLogger(__name__)

# Couleurs pastel, lisibles avec un texte foncé
PALETTE = [
    "#F4BFBF",  # rose clair
    "#FFD9C0",  # pêche
    "#FAF0D7",  # crème
    "#8CC0DE",  # bleu clair
    "#CCCCFF",  # lavande
    "#D8F8B7",  # vert clair
    "#FF9999",  # saumon
    "#FFDAB9",  # peachpuff
    "#B0E0E6",  # powderblue
    "#FFC0CB",  # rose
]
TEXT_COLOR = "#333333"


def initials(name: str) -> str:
    """Jusqu'à deux initiales en majuscules (« Ada Lovelace » → « AL »)."""
    return "".join(part[0] for part in name.split() if part).upper()[:2]


def pick_color(name: str) -> str:
    return PALETTE[sum(ord(c) for c in name) % len(PALETTE)]


def generate_letter_avatar(name: str, size: int = 200, height: Optional[int] = None) -> bytes:
    """Retourne une image PNG (size × height, carrée par défaut) avec les initiales centrées."""
    height = height or size
    img = Image.new("RGB", (size, height), pick_color(name))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default(size=min(size, height) // 2)
    draw.text((size / 2, height / 2), initials(name), fill=TEXT_COLOR, font=font, anchor="mm")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def save_avatar(name: str, kind: str = "team", size: int = 200, height: Optional[int] = None) -> str:
    """Génère l'avatar, l'écrit dans le dossier public du type donné et retourne son chemin public."""
    content = generate_letter_avatar(name, size, height)
    prefix = "logo" if kind == "logo" else "avatar"
    path = upload_service.write_file(content, kind, ".png", prefix=prefix)
    logger.info("Avatar généré pour « %s » : %s", name, path)
    return path
