"""PDF text extraction using PyMuPDF character data."""

import fitz  # PyMuPDF

from ..config import DEFAULT_CONFIG, ParserConfig
from ..logger import logger
from .parser_models import TextFragment

# Threshold for detecting garbage text (corrupted font encodings)
GARBAGE_CONTROL_CHAR_RATIO = 0.1  # >10% control chars = garbage

# rawdict keeps whitespace so gaps inside a span stay measurable
_RAWDICT_FLAGS = (
    fitz.TEXT_PRESERVE_WHITESPACE | fitz.TEXT_PRESERVE_LIGATURES | fitz.TEXT_MEDIABOX_CLIP
)


class PdfDecodeError(ValueError):
    """Raised when a buffer cannot be decoded as a PDF document."""

    pass


def _is_garbage_text(text: str) -> bool:
    """Detect if extracted text is binary garbage from corrupted font encodings.

    Args:
        text: The extracted text to check.

    Returns:
        True if the text appears to be garbage (high ratio of control characters).
    """
    if not text or len(text) < 20:
        return False
    control_chars = sum(1 for c in text if ord(c) < 32 and c not in "\n\t\r ")
    ratio = control_chars / len(text)
    return ratio > GARBAGE_CONTROL_CHAR_RATIO


def _is_bold(span: dict) -> bool:
    flags = span.get("flags", 0)
    font_name = span.get("font", "").lower()
    return bool(flags & 2**4) or "bold" in font_name


def _split_span_chars(chars: list[dict], max_gap: float) -> list[list[dict]]:
    """Cut a span's characters into runs separated by wide horizontal gaps.

    Blank characters never start a run, and a run is closed when the next
    visible character starts more than ``max_gap`` points after the end of
    the previous visible one. Trailing blanks are dropped from each run.

    Args:
        chars: The ``chars`` list of a rawdict span.
        max_gap: Largest gap, in points, kept inside one run.

    Returns:
        List of character runs, each non-empty and starting and ending with
        a visible character.
    """
    runs: list[list[dict]] = []
    current: list[dict] = []
    last_visible_end: float | None = None

    for char in chars:
        c = char.get("c", "")
        if not c or c.isspace():
            if current:
                current.append(char)
            continue
        x0 = char["bbox"][0]
        if current and last_visible_end is not None and x0 - last_visible_end > max_gap:
            runs.append(current)
            current = []
        current.append(char)
        last_visible_end = char["bbox"][2]

    if current:
        runs.append(current)

    for run in runs:
        while run and run[-1].get("c", " ").isspace():
            run.pop()
    return [run for run in runs if run]


def _fragments_from_span(
    span: dict, page_number: int, config: ParserConfig
) -> list[TextFragment]:
    font_size = float(span.get("size", 0.0)) or 12.0
    span_bbox = span.get("bbox", (0.0, 0.0, 0.0, 0.0))
    y0, y1 = span_bbox[1], span_bbox[3]
    fragments = []

    for run in _split_span_chars(span.get("chars", []), config.fragment_gap_ratio * font_size):
        # NULs show up with broken font encodings
        text = "".join(c.get("c", "") for c in run).replace("\x00", "").strip()
        if not text:
            continue
        x0 = run[0]["bbox"][0]
        x1 = run[-1]["bbox"][2]
        fragments.append(
            TextFragment(
                text=text,
                x=x0,
                y=y0,
                width=max(x1 - x0, 0.0),
                height=max(y1 - y0, 0.0),
                font_name=span.get("font", ""),
                font_size=font_size,
                is_bold=_is_bold(span),
                page_number=page_number,
            )
        )
    return fragments


def _extract_page_fragments(
    page_dict: dict, page_number: int, config: ParserConfig
) -> list[TextFragment]:
    fragments: list[TextFragment] = []
    for block in page_dict.get("blocks", []):
        if block.get("type") != 0:  # Skip non-text blocks (images, etc.)
            continue
        for line in block.get("lines", []):
            direction = line.get("dir", (1.0, 0.0))
            if abs(direction[1]) > 1e-3 or direction[0] <= 0:
                logger.debug(
                    "skipping non-horizontal text line",
                    page_number=page_number,
                    direction=list(direction),
                )
                continue
            for span in line.get("spans", []):
                fragments.extend(_fragments_from_span(span, page_number, config))
    return fragments


def read_pdf(data: bytes, config: ParserConfig = DEFAULT_CONFIG) -> list[TextFragment]:
    """Decode a PDF buffer into positioned text fragments.

    Fragments are returned page by page in PyMuPDF's reading order, with
    page-relative coordinates where y grows downward.

    Args:
        data: Raw PDF bytes.
        config: Heuristic thresholds; only ``fragment_gap_ratio`` is used.

    Returns:
        List of TextFragments, possibly empty for PDFs without a text layer.

    Raises:
        PdfDecodeError: If the buffer is empty, not a PDF, encrypted, has no
            pages, or a page's text layer cannot be decoded.
    """
    if not data:
        raise PdfDecodeError("empty PDF buffer")

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise PdfDecodeError(f"buffer is not a readable PDF: {e}") from e

    try:
        if doc.needs_pass:
            raise PdfDecodeError("PDF is encrypted")
        if doc.page_count == 0:
            raise PdfDecodeError("PDF has no pages")

        fragments: list[TextFragment] = []
        skipped_pages = 0
        for page_index, page in enumerate(doc):
            page_number = page_index + 1
            try:
                page_dict = page.get_text("rawdict", flags=_RAWDICT_FLAGS)
            except Exception as e:
                raise PdfDecodeError(
                    f"failed to decode text on page {page_number}: {e}"
                ) from e

            page_fragments = _extract_page_fragments(page_dict, page_number, config)
            if _is_garbage_text(" ".join(f.text for f in page_fragments)):
                logger.warn(
                    "garbage text detected, skipping page",
                    page_number=page_number,
                    fragments=len(page_fragments),
                )
                skipped_pages += 1
                continue
            fragments.extend(page_fragments)

        if not fragments:
            logger.warn("no text layer found", total_pages=doc.page_count)

        logger.info(
            "pdf read",
            total_pages=doc.page_count,
            total_fragments=len(fragments),
            skipped_pages=skipped_pages,
        )
        return fragments
    finally:
        doc.close()
