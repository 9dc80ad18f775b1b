"""Per-document layout statistics computed once and passed to later stages."""

from collections import Counter
from dataclasses import dataclass

from .parser_models import TextFragment

DEFAULT_FONT_SIZE = 12.0


@dataclass(frozen=True)
class DocumentStats:
    """Body text measurements that heading and gap thresholds are relative to.

    Attributes:
        body_font_size: Most common font size, weighted by character count.
        typical_char_width: Average character width of body-size text.
    """

    body_font_size: float = DEFAULT_FONT_SIZE
    typical_char_width: float = DEFAULT_FONT_SIZE / 2


def _round_size(size: float) -> float:
    return round(size * 2) / 2


def compute_document_stats(fragments: list[TextFragment]) -> DocumentStats:
    """Measure the body font size and character width of a document.

    Args:
        fragments: All fragments of the document.

    Returns:
        DocumentStats; defaults when there are no fragments.
    """
    sizes: Counter[float] = Counter()
    for fragment in fragments:
        chars = len(fragment.text.strip())
        if chars and fragment.font_size > 0:
            sizes[_round_size(fragment.font_size)] += chars

    if not sizes:
        return DocumentStats()

    # Ties go to the smaller size: body text is rarely the largest on the page
    body_size = min(sizes, key=lambda size: (-sizes[size], size))

    total_width = 0.0
    total_chars = 0
    for fragment in fragments:
        if _round_size(fragment.font_size) != body_size:
            continue
        chars = len(fragment.text)
        if chars and fragment.width > 0:
            total_width += fragment.width
            total_chars += chars

    char_width = total_width / total_chars if total_chars else body_size / 2
    return DocumentStats(body_font_size=body_size, typical_char_width=char_width)
