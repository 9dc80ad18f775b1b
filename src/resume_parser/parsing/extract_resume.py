"""Run every field extractor over a section map."""

from ..config import DEFAULT_CONFIG, ParserConfig
from .extract_education import extract_education
from .extract_profile import extract_profile
from .extract_skills import extract_skills
from .extract_work_experience import extract_work_experience
from .models import Resume
from .parser_models import SectionMap
from .stats import DocumentStats


def extract_resume_from_sections(
    sections: SectionMap,
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> Resume:
    return Resume(
        profile=extract_profile(sections),
        work_experiences=extract_work_experience(sections, stats, config),
        educations=extract_education(sections, stats, config),
        skills=extract_skills(sections, config),
    )
