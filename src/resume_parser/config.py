"""Heuristic thresholds for the résumé extraction pipeline.

Every ratio is relative to a per-document measurement (body font size or
typical character width), never an absolute point value, so the same
configuration works for 9pt and 12pt résumés alike.
"""

import os
from dataclasses import dataclass, fields

ENV_PREFIX = "RESUME_PARSER_"

# Fields that may be zero; every other override must be positive
ZERO_ALLOWED_FIELDS = frozenset({"leading_lines_without_heading"})


@dataclass(frozen=True)
class ParserConfig:
    """Thresholds used by the extraction, grouping and segmentation stages.

    Attributes:
        fragment_gap_ratio: Gap between two characters of one PDF span, in
            multiples of the span's font size, that cuts the span into two
            fragments.
        line_tolerance_ratio: Maximum distance between vertical centers, in
            multiples of the smaller font size, for fragments on one line.
        word_gap_ratio: Gaps below this multiple of the typical character
            width join fragments without a space.
        column_gap_ratio: Minimum gap, in typical character widths, for a
            line to be split into a left and a right column.
        heading_size_ratio: Font size, relative to the body size, from which
            a short line counts as a section heading.
        heading_max_words: Longest section heading, in words.
        leading_lines_without_heading: Lines at the top of the document that
            can never be section headings (name and contact block).
        subheading_size_ratio: Font size, relative to the body size, from
            which a line opens a new experience or education entry.
        subsection_gap_ratio: Vertical gap, in typical line gaps, that opens
            a new experience or education entry.
        paragraph_min_words: Word count from which a line is treated as a
            wrapped description paragraph.
    """

    fragment_gap_ratio: float = 0.5
    line_tolerance_ratio: float = 0.5
    word_gap_ratio: float = 0.3
    column_gap_ratio: float = 1.0
    heading_size_ratio: float = 1.2
    heading_max_words: int = 4
    leading_lines_without_heading: int = 2
    subheading_size_ratio: float = 1.05
    subsection_gap_ratio: float = 1.4
    paragraph_min_words: int = 8


DEFAULT_CONFIG = ParserConfig()


def load_config() -> ParserConfig:
    """Build a ParserConfig from defaults and environment overrides.

    Each field can be overridden with ``RESUME_PARSER_<FIELD_NAME>``, for
    example ``RESUME_PARSER_HEADING_SIZE_RATIO=1.3``.

    Raises:
        ValueError: If an override cannot be converted to the field's type
            or is out of range (zero or negative; negative only for
            ``leading_lines_without_heading``).
    """
    overrides = {}
    for field in fields(ParserConfig):
        env_name = f"{ENV_PREFIX}{field.name.upper()}"
        raw = os.getenv(env_name)
        if raw is None or not raw.strip():
            continue
        cast = int if field.type in (int, "int") else float
        try:
            value = cast(raw)
        except ValueError as e:
            raise ValueError(f"invalid value for {env_name}: {raw!r}") from e
        if field.name in ZERO_ALLOWED_FIELDS:
            if value < 0:
                raise ValueError(f"{env_name} must be non-negative, got {raw!r}")
        elif value <= 0:
            raise ValueError(f"{env_name} must be positive, got {raw!r}")
        overrides[field.name] = value
    return ParserConfig(**overrides)
