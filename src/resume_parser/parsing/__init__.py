from .parser_models import TextFragment, Line, Section, SectionMap
from .models import (
    FEATURED_SKILLS_CAPACITY,
    FeaturedSkill,
    ResumeProfile,
    ResumeWorkExperience,
    ResumeEducation,
    ResumeSkills,
    Resume,
    DateRange,
    ExperienceEntry,
    EducationEntry,
    CertificationEntry,
    ParsedResume,
    make_featured_skills,
)
from .pdf_reader import read_pdf, PdfDecodeError
from .stats import DocumentStats, compute_document_stats
from .lines import group_fragments_into_lines, join_fragment_text
from .sections import (
    SECTION_KEYWORDS,
    group_lines_into_sections,
    is_section_heading,
    match_section_name,
)
from .bullet_points import get_bullet_points_from_lines, get_descriptions_line_idx
from .subsections import split_columns, split_lines_into_subsections
from .extract_profile import extract_profile
from .extract_skills import extract_skills
from .extract_work_experience import extract_work_experience
from .extract_education import extract_education
from .extract_resume import extract_resume_from_sections
from .dates import normalize_date, parse_date_range
from .pipeline import parse_resume_from_pdf, parse_resume_from_fragments, to_parsed_resume

__all__ = [
    # Layout models
    "TextFragment",
    "Line",
    "Section",
    "SectionMap",
    # Résumé models
    "FEATURED_SKILLS_CAPACITY",
    "FeaturedSkill",
    "ResumeProfile",
    "ResumeWorkExperience",
    "ResumeEducation",
    "ResumeSkills",
    "Resume",
    "make_featured_skills",
    # Output contract
    "DateRange",
    "ExperienceEntry",
    "EducationEntry",
    "CertificationEntry",
    "ParsedResume",
    # Text extraction
    "read_pdf",
    "PdfDecodeError",
    # Statistics
    "DocumentStats",
    "compute_document_stats",
    # Lines
    "group_fragments_into_lines",
    "join_fragment_text",
    # Sections
    "SECTION_KEYWORDS",
    "group_lines_into_sections",
    "is_section_heading",
    "match_section_name",
    # Field extraction
    "get_bullet_points_from_lines",
    "get_descriptions_line_idx",
    "split_columns",
    "split_lines_into_subsections",
    "extract_profile",
    "extract_skills",
    "extract_work_experience",
    "extract_education",
    "extract_resume_from_sections",
    # Dates
    "normalize_date",
    "parse_date_range",
    # Pipeline
    "parse_resume_from_pdf",
    "parse_resume_from_fragments",
    "to_parsed_resume",
]
