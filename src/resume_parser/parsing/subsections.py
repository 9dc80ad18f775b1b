"""Split experience and education sections into entries.

An entry starts with one or more header lines (company and title, or
school and degree, usually with a date range in a right-hand column) and
continues with description lines until the next entry's header.
"""

import re
from collections import Counter
from itertools import pairwise

from pydantic import BaseModel, Field

from ..config import DEFAULT_CONFIG, ParserConfig
from .bullet_points import get_descriptions_line_idx, is_bullet_line
from .lines import join_fragment_text
from .parser_models import Line
from .stats import DocumentStats

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?,?"
)
_POINT = rf"(?:\b{_MONTH}\s+|\b\d{{1,2}}/)?\b(?:19|20)\d{{2}}"
_YEAR = re.compile(r"\b(?:19|20)\d{2}\b")
_PRESENT = re.compile(r"\b(?:present|current|now)\b", re.IGNORECASE)
_INLINE_RANGE = re.compile(
    rf"{_POINT}\s*(?:—|–|-|\bto\b)\s*(?:{_POINT}|present|current|now)\b",
    re.IGNORECASE,
)
# Everything a date-only line may consist of
_DATE_TOKENS = re.compile(
    rf"\b{_MONTH}|\b(?:19|20)\d{{2}}\b|\b(?:present|current|now)\b|\d{{1,2}}/|\bto\b|[—–\-,./\s]",
    re.IGNORECASE,
)
# A date column is short; longer text with a year in it is prose
_MAX_DATE_WORDS = 6


class EntryHeader(BaseModel):
    """Header texts and date of one entry, plus its description lines."""

    texts: list[str] = Field(default_factory=list)
    date: str = ""
    description_lines: list[Line] = Field(default_factory=list)


def is_date_text(text: str) -> bool:
    """True for short text holding a year or a present/current/now marker."""
    text = text.strip()
    if not text or len(text.split()) > _MAX_DATE_WORDS:
        return False
    return bool(_YEAR.search(text) or _PRESENT.search(text))


def split_columns(
    line: Line, stats: DocumentStats, config: ParserConfig = DEFAULT_CONFIG
) -> tuple[str, str]:
    """Split a line at its largest horizontal gap.

    Returns:
        (left, right) texts. ``right`` is empty when the line has a single
        fragment or no gap is wide enough to separate two columns.
    """
    fragments = line.fragments
    if len(fragments) < 2:
        return line.text, ""

    widest, split_at = max(
        ((cur.x - prev.x_end, idx) for idx, (prev, cur) in enumerate(pairwise(fragments), start=1)),
        key=lambda gap: (gap[0], -gap[1]),
    )
    if widest < stats.typical_char_width * config.column_gap_ratio:
        return line.text, ""

    left = join_fragment_text(fragments[:split_at], stats, config)
    right = join_fragment_text(fragments[split_at:], stats, config)
    return left, right


def _split_line_date(
    line: Line, stats: DocumentStats, config: ParserConfig
) -> tuple[list[str], str]:
    """Separate a header line into its non-date texts and its date text."""
    left, right = split_columns(line, stats, config)
    if right:
        if is_date_text(right):
            return [left], right
        if is_date_text(left):
            return [right], left
        return [left, right], ""

    match = _INLINE_RANGE.search(left)
    if match:
        rest = (left[: match.start()] + left[match.end():]).strip(" |,;")
        return ([rest] if rest else []), match.group(0)

    if is_date_text(left) and not _DATE_TOKENS.sub("", left):
        return [], left
    return [left], ""


def line_date(
    line: Line, stats: DocumentStats, config: ParserConfig = DEFAULT_CONFIG
) -> str:
    """Date text carried by a non-bullet line, or an empty string."""
    if is_bullet_line(line):
        return ""
    return _split_line_date(line, stats, config)[1]


def _typical_line_gap(lines: list[Line]) -> float | None:
    gaps: Counter[int] = Counter()
    for prev, cur in pairwise(lines):
        if prev.page_number == cur.page_number and cur.y > prev.y:
            gaps[round(cur.y - prev.y)] += 1
    if not gaps:
        return None
    # Ties go to the tighter spacing
    return float(min(gaps, key=lambda gap: (-gaps[gap], gap)))


def _starts_subsection(
    prev: Line,
    line: Line,
    entry_has_date: bool,
    line_gap: float | None,
    stats: DocumentStats,
    config: ParserConfig,
) -> bool:
    if is_bullet_line(line):
        return False
    if line.leads_bold and not prev.leads_bold:
        return True
    if (
        line.font_size >= stats.body_font_size * config.subheading_size_ratio
        and line.font_size > prev.font_size
    ):
        return True
    if is_bullet_line(prev) and line.x <= prev.x + stats.typical_char_width:
        return True
    if entry_has_date and line_date(line, stats, config):
        return True
    if (
        line_gap
        and line.page_number == prev.page_number
        and line.y - prev.y > line_gap * config.subsection_gap_ratio
    ):
        return True
    return False


def split_lines_into_subsections(
    lines: list[Line],
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> list[list[Line]]:
    """Split a section's lines into per-entry groups.

    A non-bullet line opens a new entry when it starts bold after a non-bold
    line, uses a larger font than the line before it, returns to the left
    margin after a bullet, carries a second date for the current entry, or
    sits after an unusually large vertical gap.

    Returns:
        Non-empty groups of lines in document order; empty for no lines.
    """
    if not lines:
        return []

    line_gap = _typical_line_gap(lines)
    subsections = [[lines[0]]]
    entry_has_date = bool(line_date(lines[0], stats, config))

    for prev, line in pairwise(lines):
        if _starts_subsection(prev, line, entry_has_date, line_gap, stats, config):
            subsections.append([line])
            entry_has_date = bool(line_date(line, stats, config))
        else:
            subsections[-1].append(line)
            entry_has_date = entry_has_date or bool(line_date(line, stats, config))

    return subsections


def parse_entry_header(
    lines: list[Line],
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
    default_header_lines: int | None = 2,
) -> EntryHeader:
    """Separate an entry into header texts, a raw date and description lines.

    Header lines are the lines before the first description line. When no
    description boundary exists, the first ``default_header_lines`` lines
    are the header (all lines when None).

    The first date-like column found in the header is the entry's date,
    kept verbatim; every other column becomes a header text.
    """
    if not lines:
        return EntryHeader()

    idx = get_descriptions_line_idx(lines[1:], config)
    if idx is not None:
        header_count = idx + 1
    elif default_header_lines is None:
        header_count = len(lines)
    else:
        header_count = min(default_header_lines, len(lines))

    texts: list[str] = []
    date = ""
    for line in lines[:header_count]:
        line_texts, line_date_text = _split_line_date(line, stats, config)
        if line_date_text and not date:
            date = line_date_text
        elif line_date_text:
            line_texts.append(line_date_text)
        texts.extend(t for t in line_texts if t)

    return EntryHeader(texts=texts, date=date, description_lines=lines[header_count:])
