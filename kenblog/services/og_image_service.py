import io
import logging
import re
from pathlib import Path
from typing import Callable, List

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

OG_WIDTH, OG_HEIGHT = 1200, 630
PADDING = 60

GRADIENT_START = (0x1A, 0x1A, 0x2E)
GRADIENT_END = (0x16, 0x21, 0x3E)

TITLE_SIZE = 56
TITLE_LINE_HEIGHT = 1.3
TITLE_COLOR = (255, 255, 255)

LABEL_SIZE = 24
LABEL_LINE_HEIGHT = 1.2
LABEL_COLOR = (0x88, 0x88, 0x88)
LABEL_MARGIN_TOP = 30

CACHE_CONTROL = "public, max-age=31536000, immutable"

FontLoader = Callable[[int], ImageFont.FreeTypeFont]

# Words stay together, CJK characters may break anywhere
_TOKEN_RE = re.compile(
    r"\s+"
    r"|[\u3000-\u9fff\uac00-\ud7af\uff00-\uffef]"
    r"|[^\s\u3000-\u9fff\uac00-\ud7af\uff00-\uffef]+"
)


def truetype_loader(font_path: str) -> FontLoader:
    """Read the font file on first use and hand out sized faces from it."""
    cache: dict = {}

    def load(size: int) -> ImageFont.FreeTypeFont:
        if "data" not in cache:
            cache["data"] = Path(font_path).read_bytes()
        return ImageFont.truetype(io.BytesIO(cache["data"]), size)

    return load


def render_og_image(title: str, site_label: str, font_loader: FontLoader) -> bytes:
    """
    Render the OG card: gradient background, the title and the site label
    stacked in a vertically centered column.
    """
    title_font = font_loader(TITLE_SIZE)
    label_font = font_loader(LABEL_SIZE)

    img = _diagonal_gradient(OG_WIDTH, OG_HEIGHT, GRADIENT_START, GRADIENT_END)
    draw = ImageDraw.Draw(img)

    content_width = OG_WIDTH - PADDING * 2
    lines = wrap_text(title, title_font, content_width)

    title_lh = TITLE_SIZE * TITLE_LINE_HEIGHT
    label_lh = LABEL_SIZE * LABEL_LINE_HEIGHT
    total_height = len(lines) * title_lh + LABEL_MARGIN_TOP + label_lh
    y = (OG_HEIGHT - total_height) / 2

    for line in lines:
        draw.text((PADDING, y + title_lh / 2), line, font=title_font, fill=TITLE_COLOR, anchor="lm")
        y += title_lh

    y += LABEL_MARGIN_TOP
    if site_label:
        draw.text((PADDING, y + label_lh / 2), site_label, font=label_font, fill=LABEL_COLOR, anchor="lm")

    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()


def wrap_text(text: str, font: ImageFont.FreeTypeFont, max_width: int) -> List[str]:
    lines: List[str] = []
    current = ""

    for token in _TOKEN_RE.findall(text.strip()):
        candidate = current + token
        if _text_width(font, candidate) <= max_width:
            current = candidate
            continue
        if token.isspace():
            if current.strip():
                lines.append(current.rstrip())
            current = ""
            continue
        if current.strip():
            lines.append(current.rstrip())
        current = ""
        # A single token wider than the line is broken by character
        for ch in token:
            if current and _text_width(font, current + ch) > max_width:
                lines.append(current)
                current = ch
            else:
                current += ch

    if current.strip():
        lines.append(current.rstrip())
    return lines


def _text_width(font: ImageFont.FreeTypeFont, text: str) -> float:
    return font.getlength(text)


def _diagonal_gradient(width: int, height: int, start, end) -> Image.Image:
    """135deg linear gradient, top-left to bottom-right."""
    span = max(width + height - 2, 1)
    mask = Image.new("L", (width, height))
    mask.putdata([(x + y) * 255 // span for y in range(height) for x in range(width)])
    return Image.composite(
        Image.new("RGB", (width, height), end),
        Image.new("RGB", (width, height), start),
        mask,
    )
