"""Group text fragments into visual lines."""

from itertools import groupby, pairwise

from ..config import DEFAULT_CONFIG, ParserConfig
from .parser_models import Line, TextFragment
from .stats import DocumentStats


def join_fragment_text(
    fragments: list[TextFragment] | tuple[TextFragment, ...],
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> str:
    """Join left-to-right fragments into one string.

    Fragments that almost touch are glued without a space (a word split
    across font runs); any wider gap becomes a single space.
    """
    if not fragments:
        return ""
    threshold = stats.typical_char_width * config.word_gap_ratio
    parts = [fragments[0].text]
    for prev, cur in pairwise(fragments):
        if cur.x - prev.x_end >= threshold:
            parts.append(" ")
        parts.append(cur.text)
    return " ".join("".join(parts).split())


def _on_same_row(anchor: TextFragment, fragment: TextFragment, config: ParserConfig) -> bool:
    tolerance = config.line_tolerance_ratio * min(anchor.font_size, fragment.font_size)
    return abs(fragment.y_center - anchor.y_center) <= tolerance


def group_fragments_into_lines(
    fragments: list[TextFragment],
    stats: DocumentStats,
    config: ParserConfig = DEFAULT_CONFIG,
) -> list[Line]:
    """Cluster fragments into lines by vertical position.

    Pages are processed in order. Within a page, fragments are visited top to
    bottom and each one joins the current row when its vertical center is
    close enough to the row's first fragment; otherwise it starts a new row.

    Args:
        fragments: Fragments from text extraction.
        stats: Document statistics for the word-gap threshold.
        config: Heuristic thresholds.

    Returns:
        Lines in document order. Every fragment belongs to exactly one line.
    """
    lines: list[Line] = []
    by_page = sorted(fragments, key=lambda f: f.page_number)

    for _, page_fragments in groupby(by_page, key=lambda f: f.page_number):
        ordered = sorted(page_fragments, key=lambda f: (f.y_center, f.x))
        rows: list[list[TextFragment]] = []
        for fragment in ordered:
            if rows and _on_same_row(rows[-1][0], fragment, config):
                rows[-1].append(fragment)
            else:
                rows.append([fragment])

        for row in rows:
            row.sort(key=lambda f: (f.x, f.y))
            lines.append(
                Line(fragments=tuple(row), text=join_fragment_text(row, stats, config))
            )

    return lines
