"""Education section extraction."""

import re

from ..config import DEFAULT_CONFIG, ParserConfig
from .bullet_points import get_bullet_points_from_lines
from .models import ResumeEducation
from .parser_models import SectionMap
from .sections import EDUCATION
from .stats import DocumentStats
from .subsections import parse_entry_header, split_lines_into_subsections

SCHOOL_KEYWORDS = ("university", "college", "institute", "school", "academy", "polytechnic")
DEGREE_KEYWORDS = (
    "associate", "bachelor", "master", "doctor", "diploma", "degree", "certificate",
    "ph.d", "phd", "mba", "b.s", "b.a", "b.sc", "m.s", "m.a", "m.sc", "b.eng", "m.eng",
    "bs", "ba", "bsc", "ms", "msc", "beng", "meng",
)

_PART_SEPARATORS = re.compile(r"\s+[—–|-]\s+")
_SCHOOL = re.compile(r"\b(?:" + "|".join(SCHOOL_KEYWORDS) + r")\b", re.IGNORECASE)
_DEGREE = re.compile(
    r"(?<![\w.])(?:" + "|".join(re.escape(k) for k in DEGREE_KEYWORDS) + r")\b\.?",
    re.IGNORECASE,
)
_GPA = re.compile(r"\bGPA\b[:\s]*([0-4](?:\.\d{1,2})?)", re.IGNORECASE)


def has_school(text: str) -> bool:
    return bool(_SCHOOL.search(text))


def has_degree(text: str) -> bool:
    return bool(_DEGREE.search(text))


def split_school_and_degree(texts: list[str]) -> tuple[str, str]:
    """Pick the school and degree out of an entry's header texts.

    Returns:
        (school, degree), either possibly empty.
    """
    parts = [
        part.strip()
        for text in texts
        for part in _PART_SEPARATORS.split(text)
        if part.strip() and not _GPA.search(part)
    ]
    if not parts:
        return "", ""

    school = next((p for p in parts if has_school(p)), None)
    if school is None:
        school = next((p for p in parts if not has_degree(p)), "")

    degree = next((p for p in parts if p != school and has_degree(p)), None)
    if degree is None:
        degree = next((p for p in parts if p != school), "")

    return school, degree


def extract_education(
    sections: SectionMap,
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> list[ResumeEducation]:
    """Turn the education section into one record per school."""
    educations = []
    lines = sections.lines_for(EDUCATION)

    for subsection in split_lines_into_subsections(lines, stats, config):
        header = parse_entry_header(subsection, stats, config, default_header_lines=None)
        school, degree = split_school_and_degree(header.texts)
        gpa_match = next(
            (m for m in (_GPA.search(line.text) for line in subsection) if m), None
        )
        descriptions = [
            d for d in get_bullet_points_from_lines(header.description_lines)
            if not _GPA.fullmatch(d.strip())
        ]
        if not (school or degree or header.date):
            continue
        educations.append(
            ResumeEducation(
                school=school,
                degree=degree,
                date=header.date,
                gpa=gpa_match.group(1) if gpa_match else "",
                descriptions=tuple(descriptions),
            )
        )

    return educations
