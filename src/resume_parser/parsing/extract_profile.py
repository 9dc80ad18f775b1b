"""Profile (name and contact block) extraction."""

import re

from .models import ResumeProfile
from .parser_models import Line, SectionMap
from .sections import PROFILE

EMAIL = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
PHONE = re.compile(r"(?:\+\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")
URL = re.compile(
    r"(?:https?://)?(?:www\.)?[\w-]+(?:\.[\w-]+)*\.(?:com|org|net|io|dev|me|co|ai|edu)"
    r"(?:/[\w./%-]*)?",
    re.IGNORECASE,
)
LOCATION = re.compile(r"\b[A-Z][a-zA-Z.]+(?: [A-Z][a-zA-Z.]+)*, [A-Z]{2}\b")
NAME = re.compile(r"[A-Za-z][A-Za-z .'-]*")

_NAME_MAX_WORDS = 4
_TOKEN_SPLIT = re.compile(r"[\s|,;]+")


def _find_url(text: str) -> str:
    for token in _TOKEN_SPLIT.split(text):
        if "@" in token:
            continue
        match = URL.fullmatch(token.strip("()<>"))
        if match:
            return match.group(0)
    return ""


def _contact_fields(text: str) -> dict[str, str]:
    fields = {}
    for key, pattern in (("email", EMAIL), ("phone", PHONE), ("location", LOCATION)):
        match = pattern.search(text)
        if match:
            fields[key] = match.group(0).strip()
    url = _find_url(text)
    if url:
        fields["url"] = url
    return fields


def _is_name_line(line: Line) -> bool:
    text = line.text.strip()
    return bool(NAME.fullmatch(text)) and 1 <= len(text.split()) <= _NAME_MAX_WORDS


def extract_profile(sections: SectionMap) -> ResumeProfile:
    """Read name, contact details and summary from the profile section.

    The name is the largest-font line made only of name characters (the
    earliest one on ties). Contact fields take the first match of each
    pattern. Remaining lines form the summary.
    """
    lines = sections.lines_for(PROFILE)
    if not lines:
        return ResumeProfile()

    name_line: Line | None = None
    for line in lines:
        if _is_name_line(line) and (name_line is None or line.font_size > name_line.font_size):
            name_line = line

    contact: dict[str, str] = {}
    summary_parts = []
    for line in lines:
        if line is name_line:
            continue
        found = _contact_fields(line.text)
        if found:
            for key, value in found.items():
                contact.setdefault(key, value)
            continue
        summary_parts.append(line.text.strip())

    return ResumeProfile(
        name=name_line.text.strip() if name_line else "",
        summary=" ".join(p for p in summary_parts if p),
        **contact,
    )
