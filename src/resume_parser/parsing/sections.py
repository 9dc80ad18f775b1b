"""Partition lines into canonical résumé sections."""

import re

from ..config import DEFAULT_CONFIG, ParserConfig
from ..logger import logger
from .bullet_points import is_bullet_line
from .parser_models import Line, Section, SectionMap
from .stats import DocumentStats

PROFILE = "profile"
EXPERIENCE = "experience"
EDUCATION = "education"
SKILLS = "skills"
OTHERS = "others"

# Priority order: when a heading matches several sections, the earliest wins.
# Keywords are case-insensitive regex fragments searched anywhere in the
# heading; a bare "summary" only counts at the start of the heading.
SECTION_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        PROFILE,
        (
            "profile",
            r"^summary",
            r"(?:professional|career|executive) summary",
            "objective",
            "about me",
            "contact",
        ),
    ),
    (EXPERIENCE, ("experience", "employment", "work history", "career")),
    (EDUCATION, ("education", "academic", "qualification")),
    (SKILLS, ("skill", "competenc", "expertise")),
    (
        OTHERS,
        (
            "project",
            "certification",
            "award",
            "honor",
            "publication",
            "language",
            "interest",
            "volunteer",
            "activit",
            "leadership",
            "reference",
            "course",
        ),
    ),
)

_SECTION_PATTERNS = tuple(
    (name, re.compile("|".join(keywords), re.IGNORECASE)) for name, keywords in SECTION_KEYWORDS
)

_HEADING_TEXT = re.compile(r"[A-Za-z][A-Za-z &/'-]*:?")
# Body-size headings found by keyword alone are this short at most
_KEYWORD_HEADING_MAX_WORDS = 2


def match_section_name(text: str) -> str | None:
    """Return the highest-priority section whose keyword occurs in text."""
    text = text.strip()
    for name, pattern in _SECTION_PATTERNS:
        if pattern.search(text):
            return name
    return None


def _is_all_caps(text: str) -> bool:
    letters = [c for c in text if c.isalpha()]
    return bool(letters) and all(c.isupper() for c in letters)


def is_section_heading(
    line: Line,
    index: int,
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> bool:
    """Decide whether a line is a top-level section heading.

    Only short, letters-only lines qualify. Among those, a line is a
    heading if its font is clearly larger than the body text, if it is
    both bold and all caps, or if it starts with a capital letter and
    has at most two words and contains a section keyword.

    Args:
        line: The candidate line.
        index: Position of the line in the document.
        stats: Document statistics for the body font size.
        config: Heuristic thresholds.
    """
    if index < config.leading_lines_without_heading:
        return False
    text = line.text.strip()
    if not text or is_bullet_line(line) or not _HEADING_TEXT.fullmatch(text):
        return False
    words = [w for w in text.split() if w != "&"]
    if len(words) > config.heading_max_words:
        return False

    if line.font_size >= stats.body_font_size * config.heading_size_ratio:
        return True
    if line.is_bold and _is_all_caps(text):
        return True
    return (
        text[0].isupper()
        and len(words) <= _KEYWORD_HEADING_MAX_WORDS
        and match_section_name(text) is not None
    )


def group_lines_into_sections(
    lines: list[Line],
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> SectionMap:
    """Assign every line to a section.

    Lines before the first heading form the profile section. Each heading
    opens a section named after its keywords, or ``others`` when none
    match, that lasts until the next heading.

    Returns:
        SectionMap whose sections, headings included, cover every input
        line exactly once.
    """
    buckets: list[tuple[str, Line | None, list[Line]]] = [(PROFILE, None, [])]

    for index, line in enumerate(lines):
        if is_section_heading(line, index, stats, config):
            name = match_section_name(line.text) or OTHERS
            buckets.append((name, line, []))
        else:
            buckets[-1][2].append(line)

    if not buckets[0][2]:
        buckets.pop(0)

    sections = [Section(name=name, heading=heading, lines=body) for name, heading, body in buckets]
    logger.debug(
        "sections grouped",
        sections=[s.name for s in sections],
        total_lines=len(lines),
    )
    return SectionMap(sections=sections)
