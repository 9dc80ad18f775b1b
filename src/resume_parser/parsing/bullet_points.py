"""Bullet and description detection shared by the section extractors."""

import re

from ..config import DEFAULT_CONFIG, ParserConfig
from .parser_models import Line

BULLET_POINTS = (
    "•", "●", "◦", "▪", "▸", "►", "‣", "⋅", "∙", "⦁", "⚬", "○", "■", "➢", "⬤", "🞄",
)
# Only treated as markers at the start of a line; elsewhere they are hyphens
DASH_MARKERS = ("- ", "– ", "* ")
# Middle dot and the Symbol-font bullet; mid-line they stay in the text
LEADING_ONLY_BULLETS = ("·", "\uf0b7")

_INLINE_BULLETS = re.compile("|".join(re.escape(b) for b in BULLET_POINTS))
_LEADING_MARKER = re.compile(
    r"^\s*(?:"
    + "|".join(re.escape(b) for b in BULLET_POINTS + LEADING_ONLY_BULLETS)
    + r"|[-–*](?=\s))\s*"
)


def starts_with_bullet(text: str) -> bool:
    stripped = text.lstrip()
    return stripped.startswith(BULLET_POINTS + LEADING_ONLY_BULLETS) or stripped.startswith(
        DASH_MARKERS
    )


def is_bullet_line(line: Line) -> bool:
    return starts_with_bullet(line.text)


def strip_bullet(text: str) -> str:
    return _LEADING_MARKER.sub("", text, count=1).strip()


def get_descriptions_line_idx(
    lines: list[Line], config: ParserConfig = DEFAULT_CONFIG
) -> int | None:
    """Find the index where description lines begin.

    The first line that starts with a bullet marks the boundary. Without
    any bullet, the first line long enough to be a wrapped paragraph does.

    Returns:
        The boundary index, or None when neither heuristic matches.
    """
    for idx, line in enumerate(lines):
        if is_bullet_line(line):
            return idx
    for idx, line in enumerate(lines):
        if len(line.text.split()) >= config.paragraph_min_words:
            return idx
    return None


def get_bullet_points_from_lines(lines: list[Line]) -> list[str]:
    """Turn description lines into one string per bullet.

    Without any bullet line every non-blank line is its own description.
    Otherwise a bullet line opens a new item and the lines that follow it
    are appended as wrapped continuation. Markers are stripped and glyphs
    in the middle of an item split it further.
    """
    texts = [line.text.strip() for line in lines]
    texts = [t for t in texts if t]
    if not any(starts_with_bullet(t) for t in texts):
        return texts

    items: list[str] = []
    for text in texts:
        if starts_with_bullet(text) or not items:
            items.append(strip_bullet(text))
        else:
            items[-1] = f"{items[-1]} {text}".strip()

    descriptions = []
    for item in items:
        descriptions.extend(p.strip() for p in _INLINE_BULLETS.split(item) if p.strip())
    return descriptions
