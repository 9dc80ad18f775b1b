#!/usr/bin/env python3
"""Verification script for résumé extraction quality.

Usage:
    python scripts/verify_extraction.py <pdf_path> [--lines]

Prints the detected sections and the parsed résumé for manual verification.
"""

import argparse
import json
import sys
from pathlib import Path

from resume_parser import load_config
from resume_parser.parsing import (
    PdfDecodeError,
    compute_document_stats,
    group_fragments_into_lines,
    group_lines_into_sections,
    parse_resume_from_fragments,
    read_pdf,
    to_parsed_resume,
)


def main():
    parser = argparse.ArgumentParser(description="Verify résumé extraction quality")
    parser.add_argument("pdf_path", help="Path to PDF file")
    parser.add_argument(
        "--lines", action="store_true", help="Print every line under its section"
    )
    args = parser.parse_args()

    pdf_path = Path(args.pdf_path)
    if not pdf_path.exists():
        print(f"Error: File not found: {pdf_path}")
        sys.exit(1)

    config = load_config()
    print(f"Parsing: {pdf_path}")
    print("=" * 80)

    try:
        fragments = read_pdf(pdf_path.read_bytes(), config)
    except PdfDecodeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    stats = compute_document_stats(fragments)
    lines = group_fragments_into_lines(fragments, stats, config)
    sections = group_lines_into_sections(lines, stats, config)

    print(f"Fragments: {len(fragments)}, Lines: {len(lines)}")
    print(f"Body font size: {stats.body_font_size:.1f}")
    print("=" * 80)

    for section in sections.sections:
        heading = section.heading.text if section.heading else "(no heading)"
        print(f"\n--- [{section.name}] {heading} ({len(section.lines)} lines) ---")
        if args.lines:
            for line in section.lines:
                marker = "[B]" if line.is_bold else "   "
                text = line.text[:100] + "..." if len(line.text) > 100 else line.text
                print(f"  {marker} (size={line.font_size:.1f}) {text}")

    resume = parse_resume_from_fragments(fragments, config)
    print("\n" + "=" * 80)
    print("Profile:")
    print(json.dumps(resume.profile.model_dump(), indent=2, ensure_ascii=False))
    print("Featured skills:")
    print(", ".join(s.skill for s in resume.skills.featured_skills if s.skill) or "(none)")
    print("Parsed résumé:")
    print(json.dumps(to_parsed_resume(resume).to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
