"""Skills section extraction."""

from ..config import DEFAULT_CONFIG, ParserConfig
from .bullet_points import get_bullet_points_from_lines, get_descriptions_line_idx
from .models import FEATURED_SKILLS_CAPACITY, ResumeSkills, make_featured_skills
from .parser_models import SectionMap
from .sections import SKILLS


def extract_skills(
    sections: SectionMap, config: ParserConfig = DEFAULT_CONFIG
) -> ResumeSkills:
    """Split the skills section into featured skills and description bullets.

    Lines before the first description line are short skill tokens; their
    first six non-blank fragments fill the featured slots. Lines from the
    boundary on become descriptions. Without a boundary every line is a
    description and the featured slots stay at their defaults.
    """
    lines = sections.lines_for(SKILLS)
    descriptions_line_idx = get_descriptions_line_idx(lines, config) or 0
    descriptions = get_bullet_points_from_lines(lines[descriptions_line_idx:])

    featured: list[str] = []
    if descriptions_line_idx != 0:
        featured = [
            fragment.text.strip()
            for line in lines[:descriptions_line_idx]
            for fragment in line.fragments
            if fragment.text.strip()
        ][:FEATURED_SKILLS_CAPACITY]

    return ResumeSkills(
        featured_skills=make_featured_skills(featured),
        descriptions=descriptions,
    )
