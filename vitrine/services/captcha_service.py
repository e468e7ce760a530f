"""
Génération des défis CAPTCHA du formulaire de contact (image SVG).

Le texte est tiré avec `secrets` parmi des caractères non ambigus
(pas de 0/o, 1/i/l). Les caractères sont rendus en PNG avec Pillow puis
intégrés au SVG : le balisage ne contient jamais la réponse, et la session
n'en garde qu'une empreinte (voir session_state).
"""

import base64
import io
import logging
import secrets

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

CHARSET = "abcdefghjkmnpqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ23456789"
LENGTH = 6
WIDTH = 200
HEIGHT = 100
FONT_SIZE = 60
NOISE_LINES = 2

_rng = secrets.SystemRandom()


def generate_text(length: int = LENGTH) -> str:
    return "".join(secrets.choice(CHARSET) for _ in range(length))


def _random_color(low: int = 40, high: int = 160) -> str:
    r, g, b = (_rng.randint(low, high) for _ in range(3))
    return f"#{r:02x}{g:02x}{b:02x}"


def _noise_path() -> str:
    """Courbe de Bézier cubique traversant l'image de gauche à droite."""
    start = (_rng.randint(0, 20), _rng.randint(10, HEIGHT - 10))
    c1 = (_rng.randint(WIDTH // 4, WIDTH // 2), _rng.randint(0, HEIGHT))
    c2 = (_rng.randint(WIDTH // 2, 3 * WIDTH // 4), _rng.randint(0, HEIGHT))
    end = (_rng.randint(WIDTH - 20, WIDTH), _rng.randint(10, HEIGHT - 10))
    return (
        f'<path d="M{start[0]} {start[1]} C{c1[0]} {c1[1]},{c2[0]} {c2[1]},{end[0]} {end[1]}" '
        f'stroke="{_random_color()}" stroke-width="2" fill="none"/>'
    )


def render_glyphs(text: str) -> bytes:
    """PNG transparent (WIDTH × HEIGHT), chaque caractère tourné et décalé aléatoirement."""
    img = Image.new("RGBA", (WIDTH, HEIGHT), (0, 0, 0, 0))
    font = ImageFont.load_default(size=FONT_SIZE)
    step = WIDTH / (len(text) + 1)

    for index, char in enumerate(text):
        tile = Image.new("RGBA", (FONT_SIZE, FONT_SIZE), (0, 0, 0, 0))
        ImageDraw.Draw(tile).text(
            (FONT_SIZE / 2, FONT_SIZE / 2), char, fill=_random_color(), font=font, anchor="mm"
        )
        tile = tile.rotate(_rng.randint(-30, 30), resample=Image.Resampling.BICUBIC, expand=True)
        x = int(step * (index + 1) - tile.width / 2 + _rng.uniform(-4, 4))
        y = int(HEIGHT / 2 - tile.height / 2 + _rng.uniform(-8, 8))
        img.paste(tile, (x, y), tile)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def render_svg(text: str) -> str:
    """Fond, caractères en image PNG embarquée, puis courbes de bruit par-dessus."""
    glyphs = base64.b64encode(render_glyphs(text)).decode("ascii")
    noise = [_noise_path() for _ in range(NOISE_LINES)]

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" '
        f'viewBox="0 0 {WIDTH} {HEIGHT}">'
        f'<rect width="100%" height="100%" fill="#f0f0f0"/>'
        f'<image width="{WIDTH}" height="{HEIGHT}" href="data:image/png;base64,{glyphs}"/>'
        + "".join(noise)
        + "</svg>"
    )


def create_captcha() -> tuple[str, str]:
    """Retourne (texte attendu, image SVG)."""
    text = generate_text()
    return text, render_svg(text)


def to_data_url(svg: str) -> str:
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"
