"""
Tests de la génération d'avatars à initiales.
"""

import io

from PIL import Image

from vitrine.services import avatar_service


def test_initials_deux_premiers_mots():
    assert avatar_service.initials("ada lovelace") == "AL"
    assert avatar_service.initials("Jean Paul Sartre") == "JP"
    assert avatar_service.initials("  Plato ") == "P"


def test_couleur_deterministe_et_dans_la_palette():
    color = avatar_service.pick_color("Ada Lovelace")
    assert color == avatar_service.pick_color("Ada Lovelace")
    assert color in avatar_service.PALETTE


def test_avatar_png_carre_par_defaut():
    img = Image.open(io.BytesIO(avatar_service.generate_letter_avatar("Ada Lovelace")))
    assert img.format == "PNG"
    assert img.size == (200, 200)


def test_avatar_meme_nom_meme_image():
    assert avatar_service.generate_letter_avatar("Grace Hopper") == avatar_service.generate_letter_avatar("Grace Hopper")


def test_logo_rectangulaire(public_dir):
    path = avatar_service.save_avatar("Company Name", "logo", size=200, height=100)

    assert path.startswith("/images/logo/logo-")
    img = Image.open(public_dir / path.lstrip("/"))
    assert img.size == (200, 100)
