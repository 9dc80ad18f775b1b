"""Résumé parsing pipeline: PDF bytes to a ParsedResume."""

import hashlib
import time

from ..config import ParserConfig, load_config
from ..logger import log_context, logger
from .dates import parse_date_range
from .extract_resume import extract_resume_from_sections
from .lines import group_fragments_into_lines
from .models import DateRange, EducationEntry, ExperienceEntry, ParsedResume, Resume
from .parser_models import TextFragment
from .pdf_reader import read_pdf
from .sections import group_lines_into_sections
from .stats import compute_document_stats


def _normalize_range(raw: str, kind: str, index: int) -> DateRange:
    date_range = parse_date_range(raw)
    if raw.strip() and not (date_range.start_date or date_range.end_date):
        logger.debug("could not normalize date", raw=raw, entry=kind, index=index)
    return date_range


def to_parsed_resume(resume: Resume) -> ParsedResume:
    """Normalize dates and flatten descriptions into the output contract."""
    experiences = []
    for index, exp in enumerate(resume.work_experiences):
        date_range = _normalize_range(exp.date, "experience", index)
        experiences.append(
            ExperienceEntry(
                company=exp.company,
                position=exp.job_title,
                start_date=date_range.start_date,
                end_date=date_range.end_date,
                description="\n".join(exp.descriptions),
            )
        )

    education = []
    for index, edu in enumerate(resume.educations):
        date_range = _normalize_range(edu.date, "education", index)
        education.append(
            EducationEntry(
                institution=edu.school,
                degree=edu.degree,
                # Field of study is not separable from the degree line
                field_of_study="",
                start_date=date_range.start_date,
                end_date=date_range.end_date,
            )
        )

    return ParsedResume(
        experiences=experiences,
        education=education,
        certifications=[],
        skills=list(resume.skills.descriptions),
    )


def parse_resume_from_fragments(
    fragments: list[TextFragment], config: ParserConfig | None = None
) -> Resume:
    """Run line grouping, section grouping and field extraction.

    Args:
        fragments: Fragments from text extraction.
        config: Heuristic thresholds; environment-derived when omitted.

    Returns:
        Resume with every field the heuristics could recover.
    """
    config = config or load_config()
    stats = compute_document_stats(fragments)
    lines = group_fragments_into_lines(fragments, stats, config)
    sections = group_lines_into_sections(lines, stats, config)
    resume = extract_resume_from_sections(sections, stats, config)

    logger.debug(
        "resume extracted",
        body_font_size=stats.body_font_size,
        total_lines=len(lines),
        sections=sections.names(),
    )
    return resume


def parse_resume_from_pdf(data: bytes, config: ParserConfig | None = None) -> ParsedResume:
    """Parse a PDF résumé into structured data.

    Each call works only on its own buffer, so concurrent calls need no
    coordination. Identical bytes always give identical output.

    Args:
        data: Raw PDF bytes.
        config: Heuristic thresholds; environment-derived when omitted.

    Returns:
        ParsedResume, possibly with empty lists.

    Raises:
        PdfDecodeError: If the buffer is not a readable PDF.
    """
    config = config or load_config()
    digest = hashlib.sha256(data or b"").hexdigest()[:12]

    with log_context(resume_sha256=digest):
        start = time.perf_counter()
        fragments = read_pdf(data, config)
        resume = parse_resume_from_fragments(fragments, config)
        parsed = to_parsed_resume(resume)

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "resume parsed",
            experiences=len(parsed.experiences),
            education=len(parsed.education),
            skills=len(parsed.skills),
            has_name=bool(resume.profile.name),
            duration_ms=round(duration_ms, 2),
        )
        return parsed
