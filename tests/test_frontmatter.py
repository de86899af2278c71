"""Tests for frontmatter decoding and context loading."""

import datetime
import logging
from pathlib import Path

from obsidian_postprocessors.core.frontmatter import (
    date_string,
    extract_content,
    load_context,
    parse_frontmatter,
)

NOTE = """---
title: Test Note
date: 2024-01-15
tags:
  - evergreen
  - domain/cs
export_to: posts/:title.md
---
# Test Note

Body text.
"""


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_parses_fields(self):
        fm = parse_frontmatter(NOTE)

        assert fm["title"] == "Test Note"
        assert fm["tags"] == ["evergreen", "domain/cs"]
        assert fm["export_to"] == "posts/:title.md"

    def test_unquoted_dates_are_dates(self):
        assert parse_frontmatter(NOTE)["date"] == datetime.date(2024, 1, 15)

    def test_no_frontmatter(self):
        assert parse_frontmatter("# Heading\n") == {}

    def test_unterminated_frontmatter(self):
        assert parse_frontmatter("---\ntitle: x\n") == {}

    def test_non_mapping_frontmatter(self):
        assert parse_frontmatter("---\n- a\n- b\n---\nbody\n") == {}

    def test_invalid_yaml_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            fm = parse_frontmatter("---\ntitle: [unclosed\n---\nbody\n")

        assert fm == {}
        assert "Failed to parse YAML" in caplog.text


class TestExtractContent:
    """Tests for extract_content."""

    def test_strips_frontmatter(self):
        assert extract_content(NOTE) == "# Test Note\n\nBody text.\n"

    def test_without_frontmatter(self):
        assert extract_content("Just text\n") == "Just text\n"


class TestDateString:
    """Tests for date_string."""

    def test_string_unchanged(self):
        assert date_string("2024-01-02") == "2024-01-02"

    def test_date(self):
        assert date_string(datetime.date(2024, 1, 2)) == "2024-01-02"

    def test_datetime(self):
        assert date_string(datetime.datetime(2024, 1, 2, 10, 30)) == "2024-01-02"

    def test_other_values(self):
        assert date_string(None) is None
        assert date_string(20240102) is None


class TestLoadContext:
    """Tests for load_context."""

    def test_builds_context(self, tmp_path):
        note = tmp_path / "note.md"
        note.write_text(NOTE, encoding="utf-8")

        context = load_context(note, tmp_path / "out" / "note.md")

        assert context.current_file == note
        assert context.destination == tmp_path / "out" / "note.md"
        assert context.frontmatter["title"] == "Test Note"
        assert context.tags() == ["evergreen", "domain/cs"]
        assert context.errors == []

    def test_accepts_strings(self, tmp_path):
        note = tmp_path / "plain.md"
        note.write_text("no frontmatter\n", encoding="utf-8")

        context = load_context(str(note), str(tmp_path / "out.md"))

        assert context.current_file == Path(note)
        assert context.frontmatter == {}
