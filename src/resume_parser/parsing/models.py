"""Résumé records produced by field extraction and the final output contract."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FEATURED_SKILLS_CAPACITY = 6


class FeaturedSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str = ""
    rating: int = 0


# Exactly six slots; pydantic rejects tuples of any other length.
FeaturedSkillSlots = tuple[
    FeaturedSkill,
    FeaturedSkill,
    FeaturedSkill,
    FeaturedSkill,
    FeaturedSkill,
    FeaturedSkill,
]


def make_featured_skills(names: list[str] | None = None) -> FeaturedSkillSlots:
    """Fill the fixed slots with the first six names, defaults after that."""
    names = (names or [])[:FEATURED_SKILLS_CAPACITY]
    filled = [FeaturedSkill(skill=name) for name in names]
    filled.extend(FeaturedSkill() for _ in range(FEATURED_SKILLS_CAPACITY - len(filled)))
    return tuple(filled)  # type: ignore[return-value]


class ResumeProfile(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    url: str = ""
    location: str = ""
    summary: str = ""


class ResumeWorkExperience(BaseModel):
    """One job; ``date`` is the raw range string as printed."""

    model_config = ConfigDict(frozen=True)

    company: str = ""
    job_title: str = ""
    date: str = ""
    descriptions: tuple[str, ...] = ()


class ResumeEducation(BaseModel):
    """One school entry; ``date`` is the raw range string as printed."""

    model_config = ConfigDict(frozen=True)

    school: str = ""
    degree: str = ""
    date: str = ""
    gpa: str = ""
    descriptions: tuple[str, ...] = ()


class ResumeSkills(BaseModel):
    featured_skills: FeaturedSkillSlots = Field(default_factory=make_featured_skills)
    descriptions: list[str] = Field(default_factory=list)


class Resume(BaseModel):
    """Everything field extraction recovered from one document."""

    profile: ResumeProfile = Field(default_factory=ResumeProfile)
    work_experiences: list[ResumeWorkExperience] = Field(default_factory=list)
    educations: list[ResumeEducation] = Field(default_factory=list)
    skills: ResumeSkills = Field(default_factory=ResumeSkills)


# --- Output contract (camelCase on the wire) ---


class _OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DateRange(_OutputModel):
    """Normalized dates: ``YYYY-MM-DD``, ``"Present"`` or ``""`` for unknown."""

    start_date: str = ""
    end_date: str = ""


class ExperienceEntry(_OutputModel):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


class EducationEntry(_OutputModel):
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""


class CertificationEntry(_OutputModel):
    name: str = ""
    issuing_organization: str = ""
    issue_date: str = ""
    expiration_date: str | None = None


class ParsedResume(_OutputModel):
    """Structured résumé handed to profile storage."""

    experiences: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
