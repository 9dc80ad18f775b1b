"""Heuristic résumé PDF parser."""

from .config import ParserConfig, load_config
from .parsing import ParsedResume, PdfDecodeError, parse_resume_from_pdf

__version__ = "0.1.0"

__all__ = [
    "ParserConfig",
    "load_config",
    "ParsedResume",
    "PdfDecodeError",
    "parse_resume_from_pdf",
]
