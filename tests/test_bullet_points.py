"""Tests for bullet and description detection."""

import pytest

from resume_parser.config import ParserConfig
from resume_parser.parsing import get_bullet_points_from_lines, get_descriptions_line_idx
from resume_parser.parsing.bullet_points import starts_with_bullet, strip_bullet


class TestBulletMarkers:
    """Tests for bullet marker recognition."""

    @pytest.mark.parametrize(
        "text",
        [
            "• Built things",
            "●Led team",
            "  ▪ Shipped",
            "- Led team",
            "* Mentored",
            "· Built",
            "\uf0b7 Built",
        ],
    )
    def test_bullets(self, text):
        """Test that glyphs and leading dash markers count as bullets."""
        assert starts_with_bullet(text) is True

    @pytest.mark.parametrize("text", ["Well-known product", "-5% churn", "2019 - 2021", ""])
    def test_not_bullets(self, text):
        """Test that hyphens inside or without a following space are not bullets."""
        assert starts_with_bullet(text) is False

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("• Built the billing platform", "Built the billing platform"),
            ("- Led a team of four", "Led a team of four"),
            ("–  Shipped the app", "Shipped the app"),
            ("· Built it", "Built it"),
            ("\uf0b7 Built it", "Built it"),
            ("Plain text", "Plain text"),
        ],
    )
    def test_strip_bullet(self, text, expected):
        """Test that only the leading marker is removed."""
        assert strip_bullet(text) == expected


class TestGetDescriptionsLineIdx:
    """Tests for get_descriptions_line_idx."""

    def test_first_bullet(self, make_line):
        """Test that the first bullet line marks the boundary."""
        lines = [make_line("Acme Corp"), make_line("Senior Engineer"), make_line("• Built it")]
        assert get_descriptions_line_idx(lines) == 2

    def test_paragraph_fallback(self, make_line):
        """Test that a long line marks the boundary when there are no bullets."""
        lines = [
            make_line("Acme Corp"),
            make_line("Built and operated the billing platform for the payments team"),
        ]
        assert get_descriptions_line_idx(lines) == 1

    def test_bullet_beats_earlier_paragraph(self, make_line):
        """Test that a bullet anywhere wins over the paragraph heuristic."""
        lines = [
            make_line("Built and operated the billing platform for the payments team"),
            make_line("• Led a team"),
        ]
        assert get_descriptions_line_idx(lines) == 1

    def test_none(self, make_line):
        """Test that short lines without bullets have no boundary."""
        assert get_descriptions_line_idx([make_line("Python"), make_line("Go")]) is None

    def test_paragraph_threshold_configurable(self, make_line):
        """Test that the paragraph word count comes from the config."""
        lines = [make_line("Acme Corp"), make_line("Built the billing platform")]
        assert get_descriptions_line_idx(lines) is None
        assert get_descriptions_line_idx(lines, ParserConfig(paragraph_min_words=4)) == 1

    def test_empty(self):
        """Test that no lines has no boundary."""
        assert get_descriptions_line_idx([]) is None


class TestGetBulletPointsFromLines:
    """Tests for get_bullet_points_from_lines."""

    def test_one_item_per_bullet(self, make_line):
        """Test that each bullet becomes one description without its marker."""
        lines = [make_line("• Built the billing platform"), make_line("• Led a team of four")]
        assert get_bullet_points_from_lines(lines) == [
            "Built the billing platform",
            "Led a team of four",
        ]

    def test_continuation_lines_joined(self, make_line):
        """Test that wrapped lines are appended to the bullet above them."""
        lines = [
            make_line("• Built the billing platform"),
            make_line("for the payments team"),
            make_line("• Led a team"),
        ]
        assert get_bullet_points_from_lines(lines) == [
            "Built the billing platform for the payments team",
            "Led a team",
        ]

    def test_inline_bullets_split(self, make_line):
        """Test that glyphs in the middle of a line split it into items."""
        lines = [make_line("• Python • Go • SQL")]
        assert get_bullet_points_from_lines(lines) == ["Python", "Go", "SQL"]

    def test_middle_dot_only_leading(self, make_line):
        """Test that a middle dot opens an item but does not split one."""
        lines = [make_line("· Python · Go"), make_line("· Docker")]
        assert get_bullet_points_from_lines(lines) == ["Python · Go", "Docker"]

    def test_no_bullets_one_item_per_line(self, make_line):
        """Test that without bullets every non-blank line is its own item."""
        lines = [make_line("Python, Go"), make_line("   "), make_line("SQL")]
        assert get_bullet_points_from_lines(lines) == ["Python, Go", "SQL"]

    def test_text_before_first_bullet_kept(self, make_line):
        """Test that a leading non-bullet line becomes its own item."""
        lines = [make_line("Payments team"), make_line("• Led a team")]
        assert get_bullet_points_from_lines(lines) == ["Payments team", "Led a team"]

    def test_empty(self):
        """Test that no lines gives no descriptions."""
        assert get_bullet_points_from_lines([]) == []
