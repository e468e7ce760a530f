"""
Lecture et édition des fichiers de traduction du frontend (PUBLIC_DIR/locales/<langue>/*.json).
"""

import json
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, List

from vitrine.config import settings

logger = logging.getLogger(__name__)

LOCALES = ("en", "fr")


class LocaleFileNotFound(LookupError):
    pass


def locales_dir() -> Path:
    return Path(settings.PUBLIC_DIR) / "locales"


def safe_filename(filename: str) -> str:
    """N'accepte qu'un nom de fichier .json simple (aucun séparateur de chemin)."""
    name = (filename or "").strip()
    if not name or name != Path(name).name or name.startswith(".") or not name.endswith(".json"):
        raise ValueError("Invalid filename")
    return name


def _read_json(path: Path) -> Dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def list_translation_pairs() -> List[dict]:
    """
    Retourne les fichiers présents dans les deux langues, sous la forme
    {"en": {"name", "content"}, "fr": {"name", "content"}}.
    Un fichier illisible est ignoré (journalisé).
    """
    en_dir = locales_dir() / "en"
    fr_dir = locales_dir() / "fr"
    if not en_dir.is_dir():
        return []

    pairs = []
    for en_path in sorted(en_dir.glob("*.json")):
        fr_path = fr_dir / en_path.name
        if not fr_path.is_file():
            continue
        try:
            pairs.append({
                "en": {"name": en_path.name, "content": _read_json(en_path)},
                "fr": {"name": fr_path.name, "content": _read_json(fr_path)},
            })
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Fichier de traduction illisible %s: %s", en_path.name, exc)
    return pairs


def update_translation_file(locale: str, filename: str, content: Dict[str, Any]) -> None:
    """
    Remplace le contenu d'un fichier de traduction existant.

    Une copie .bak est faite avant l'écriture et restaurée si l'écriture échoue.
    Lève ValueError (langue ou nom invalide) ou LocaleFileNotFound.
    """
    if locale not in LOCALES:
        raise ValueError("Invalid locale")
    name = safe_filename(filename)

    path = locales_dir() / locale / name
    if not path.is_file():
        raise LocaleFileNotFound(f"Translation file {locale}/{name} not found")

    backup = path.with_name(name + ".bak")
    shutil.copy2(path, backup)
    try:
        path.write_text(json.dumps(content, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        shutil.copy2(backup, path)
        logger.error("Échec de l'écriture de %s/%s, sauvegarde restaurée", locale, name, exc_info=True)
        raise
    finally:
        backup.unlink(missing_ok=True)

    logger.info("Fichier de traduction mis à jour : %s/%s", locale, name)
