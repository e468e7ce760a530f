"""
Enregistrement des médias uploadés (images et vidéo d'accueil) sur le disque local.

Le type réel est détecté à partir du contenu (filetype), pas du Content-Type déclaré.
Les fichiers sont nommés <timestamp ms>-<aléatoire>.<ext> dans un dossier fixe par type
d'entité, sous PUBLIC_DIR. Les anciens fichiers ne sont jamais supprimés.
"""

import logging
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import filetype

from vitrine.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadKind:
    subdir: str
    mime_prefix: str


UPLOAD_KINDS = {
    "team": UploadKind("images/team", "image/"),
    "about": UploadKind("images/about", "image/"),
    "project": UploadKind("images/projects", "image/"),
    "logo": UploadKind("images/logo", "image/"),
    "hero-video": UploadKind("videos/hero", "video/"),
}


class InvalidFileType(ValueError):
    pass


class FileTooLarge(ValueError):
    pass


def max_bytes(kind: str) -> int:
    """Taille maximale autorisée pour un type d'upload."""
    mb = settings.MAX_VIDEO_MB if UPLOAD_KINDS[kind].mime_prefix == "video/" else settings.MAX_IMAGE_MB
    return mb * 1024 * 1024


def check_size(size: int, kind: str) -> None:
    if size > max_bytes(kind):
        raise FileTooLarge(f"File too large (max {max_bytes(kind) // (1024 * 1024)} MB)")


def detect_mime_and_ext(content: bytes) -> Tuple[Optional[str], Optional[str]]:
    kind = filetype.guess(content)
    if kind is None:
        return None, None
    return kind.mime, "." + kind.extension


def validate(content: bytes, kind: str) -> str:
    """
    Vérifie la taille puis le type réel du fichier.
    Retourne l'extension à utiliser. Lève FileTooLarge ou InvalidFileType.
    """
    upload_kind = UPLOAD_KINDS[kind]
    check_size(len(content), kind)
    if not content:
        raise InvalidFileType("Empty file")

    mime, ext = detect_mime_and_ext(content)
    if mime is None or not mime.startswith(upload_kind.mime_prefix):
        label = "image" if upload_kind.mime_prefix == "image/" else "video"
        raise InvalidFileType(f"Only {label} files are allowed!")
    return ext


def unique_filename(ext: str, prefix: Optional[str] = None) -> str:
    name = f"{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}{ext}"
    return f"{prefix}-{name}" if prefix else name


def write_file(content: bytes, kind: str, ext: str, prefix: Optional[str] = None) -> str:
    """Écrit le contenu dans le dossier du type donné et retourne le chemin public (/images/...)."""
    subdir = UPLOAD_KINDS[kind].subdir
    directory = Path(settings.PUBLIC_DIR) / subdir
    directory.mkdir(parents=True, exist_ok=True)

    filename = unique_filename(ext, prefix)
    (directory / filename).write_bytes(content)
    return f"/{subdir}/{filename}"


def save_upload(content: bytes, kind: str) -> str:
    """Valide puis enregistre un fichier uploadé. Retourne son chemin public."""
    ext = validate(content, kind)
    path = write_file(content, kind, ext)
    logger.info("Fichier enregistré (%s, %d octets) : %s", kind, len(content), path)
    return path
