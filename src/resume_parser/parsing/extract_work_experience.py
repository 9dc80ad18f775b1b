"""Work experience section extraction."""

import re

from ..config import DEFAULT_CONFIG, ParserConfig
from .bullet_points import get_bullet_points_from_lines
from .models import ResumeWorkExperience
from .parser_models import SectionMap
from .sections import EXPERIENCE
from .stats import DocumentStats
from .subsections import parse_entry_header, split_lines_into_subsections

# (separator, title_first) pairs tried in order on the first header text
TITLE_SEPARATORS: tuple[tuple[str, bool], ...] = (
    (" — ", False),
    (" – ", False),
    (" | ", False),
    (" - ", False),
    (" at ", True),
    (" @ ", True),
)

JOB_TITLE_KEYWORDS = (
    "accountant", "administrator", "analyst", "architect", "assistant", "associate",
    "consultant", "coordinator", "designer", "developer", "director", "engineer",
    "founder", "head", "intern", "lead", "manager", "officer", "president",
    "programmer", "researcher", "scientist", "specialist", "teacher", "technician",
)

_JOB_TITLE = re.compile(r"\b(?:" + "|".join(JOB_TITLE_KEYWORDS) + r")s?\b", re.IGNORECASE)


def has_job_title(text: str) -> bool:
    return bool(_JOB_TITLE.search(text))


def split_company_and_title(texts: list[str]) -> tuple[str, str]:
    """Pick the company and job title out of an entry's header texts.

    Returns:
        (company, job_title), either possibly empty.
    """
    if not texts:
        return "", ""

    first = texts[0]
    for separator, title_first in TITLE_SEPARATORS:
        if separator in first:
            left, right = (part.strip() for part in first.split(separator, 1))
            return (right, left) if title_first else (left, right)

    if len(texts) >= 2:
        second = texts[1]
        if has_job_title(first) and not has_job_title(second):
            return second, first
        return first, second

    if has_job_title(first):
        return "", first
    return first, ""


def extract_work_experience(
    sections: SectionMap,
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> list[ResumeWorkExperience]:
    """Turn the experience section into one record per job.

    Date ranges are captured verbatim; normalization happens later.
    """
    experiences = []
    lines = sections.lines_for(EXPERIENCE)

    for subsection in split_lines_into_subsections(lines, stats, config):
        header = parse_entry_header(subsection, stats, config, default_header_lines=2)
        company, job_title = split_company_and_title(header.texts)
        descriptions = get_bullet_points_from_lines(header.description_lines)
        if not (company or job_title or header.date or descriptions):
            continue
        experiences.append(
            ResumeWorkExperience(
                company=company,
                job_title=job_title,
                date=header.date,
                descriptions=tuple(descriptions),
            )
        )

    return experiences
