"""Shared fixtures: fragment/line factories and in-memory résumé PDFs."""

import fitz  # PyMuPDF
import pytest

from resume_parser.parsing import DocumentStats, Line, TextFragment, join_fragment_text

BODY_SIZE = 11.0


@pytest.fixture
def stats() -> DocumentStats:
    """Statistics matching fragments built by make_fragment at 11pt."""
    return DocumentStats(body_font_size=BODY_SIZE, typical_char_width=BODY_SIZE / 2)


@pytest.fixture
def make_fragment():
    """Build a fragment whose width is half an em per character."""

    def _make(
        text: str,
        x: float = 72.0,
        y: float = 100.0,
        size: float = BODY_SIZE,
        bold: bool = False,
        page: int = 1,
    ) -> TextFragment:
        return TextFragment(
            text=text,
            x=x,
            y=y,
            width=len(text) * size / 2,
            height=size,
            font_name="Helvetica-Bold" if bold else "Helvetica",
            font_size=size,
            is_bold=bold,
            page_number=page,
        )

    return _make


@pytest.fixture
def line_from(stats):
    """Build a Line from fragments already ordered left to right."""

    def _make(*fragments: TextFragment) -> Line:
        return Line(fragments=tuple(fragments), text=join_fragment_text(fragments, stats))

    return _make


@pytest.fixture
def make_line(make_fragment, line_from):
    """Build a single-fragment Line."""

    def _make(text: str, **kwargs) -> Line:
        return line_from(make_fragment(text, **kwargs))

    return _make


# Built-in base-14 fonts cannot encode "•" or "—"; special glyphs use this one
UNICODE_FONT = "F0"
_UNICODE_FONT_FILE = fitz.Font("cjk")


def _new_page(doc: fitz.Document) -> fitz.Page:
    page = doc.new_page()
    page.insert_font(fontname=UNICODE_FONT, fontbuffer=_UNICODE_FONT_FILE.buffer)
    return page


def _text_width(text: str, fontname: str, fontsize: float) -> float:
    if fontname == UNICODE_FONT:
        return _UNICODE_FONT_FILE.text_length(text, fontsize=fontsize)
    return fitz.get_text_length(text, fontname=fontname, fontsize=fontsize)


def _insert_runs(page: fitz.Page, x: float, y: float, runs, fontsize: float = 11) -> None:
    """Write (text, fontname) runs left to right, one space apart."""
    space = fitz.get_text_length(" ", fontname="helv", fontsize=fontsize)
    for text, fontname in runs:
        page.insert_text((x, y), text, fontsize=fontsize, fontname=fontname)
        x += _text_width(text, fontname, fontsize) + space


def _insert_bullet(page: fitz.Page, y: float, text: str) -> None:
    _insert_runs(page, 72, y, [("•", UNICODE_FONT), (text, "helv")])


def _resume_doc() -> fitz.Document:
    doc = fitz.open()
    page = _new_page(doc)

    page.insert_text((72, 60), "Jane Doe", fontsize=20, fontname="hebo")
    page.insert_text(
        (72, 80),
        "jane.doe@example.com | (555) 123-4567 | Seattle, WA",
        fontsize=11,
        fontname="helv",
    )

    page.insert_text((72, 110), "EXPERIENCE", fontsize=14, fontname="hebo")
    page.insert_text((72, 130), "Acme Corp | Senior Engineer", fontsize=11, fontname="hebo")
    page.insert_text((400, 130), "Jan 2020 - Present", fontsize=11, fontname="helv")
    _insert_bullet(page, 145, "Built the billing platform")
    _insert_bullet(page, 160, "Mentored four engineers")
    page.insert_text((72, 180), "Beta LLC | Engineer", fontsize=11, fontname="hebo")
    page.insert_text((400, 180), "2017-2019", fontsize=11, fontname="helv")
    _insert_bullet(page, 195, "Shipped the mobile app")
    _insert_bullet(page, 210, "Cut build times in half")

    page.insert_text((72, 240), "EDUCATION", fontsize=14, fontname="hebo")
    page.insert_text((72, 260), "State University", fontsize=11, fontname="hebo")
    page.insert_text((400, 260), "2013 - 2017", fontsize=11, fontname="helv")
    page.insert_text(
        (72, 275),
        "Bachelor of Science in Computer Science",
        fontsize=11,
        fontname="helv",
    )

    page.insert_text((72, 305), "SKILLS", fontsize=14, fontname="hebo")
    page.insert_text((72, 325), "Python", fontsize=11, fontname="helv")
    page.insert_text((200, 325), "Go", fontsize=11, fontname="helv")
    page.insert_text((300, 325), "SQL", fontsize=11, fontname="helv")
    _insert_bullet(page, 340, "Languages: Python, Go, SQL")
    _insert_bullet(page, 355, "Cloud: AWS, Docker")
    return doc


def _em_dash_resume_doc() -> fitz.Document:
    doc = fitz.open()
    page = _new_page(doc)

    page.insert_text((72, 60), "Jane Doe", fontsize=20, fontname="hebo")
    page.insert_text((72, 80), "jane.doe@example.com", fontsize=11, fontname="helv")

    page.insert_text((72, 110), "EXPERIENCE", fontsize=14, fontname="hebo")
    _insert_runs(
        page, 72, 130, [("Acme Corp", "hebo"), ("—", UNICODE_FONT), ("Senior Engineer", "hebo")]
    )
    page.insert_text((400, 130), "Jan 2020 - Present", fontsize=11, fontname="helv")
    _insert_bullet(page, 145, "Built the billing platform")
    _insert_bullet(page, 160, "Led a team of four")
    _insert_runs(page, 72, 180, [("Beta LLC", "hebo"), ("—", UNICODE_FONT), ("Engineer", "hebo")])
    page.insert_text((400, 180), "2017-2019", fontsize=11, fontname="helv")
    _insert_bullet(page, 195, "Shipped the mobile app")
    _insert_bullet(page, 210, "Cut build times in half")
    return doc


@pytest.fixture(scope="session")
def resume_pdf_bytes() -> bytes:
    """A one-page résumé with experience, education and skills sections."""
    doc = _resume_doc()
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture(scope="session")
def em_dash_resume_pdf_bytes() -> bytes:
    """A two-job résumé whose headers read "Company — Title" beside a date."""
    doc = _em_dash_resume_doc()
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture(scope="session")
def blank_pdf_bytes() -> bytes:
    """A valid PDF with a single empty page."""
    doc = fitz.open()
    doc.new_page()
    data = doc.tobytes()
    doc.close()
    return data
