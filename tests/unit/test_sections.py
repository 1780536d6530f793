"""Unit tests for issue form section parsing."""

from __future__ import annotations

from repo_gardening.triage.sections import Section, find_section, parse_sections


def test_parse_sections_splits_on_headers_in_order() -> None:
    body = "Intro text\n\n### First\n\none\n\n### Second\n\ntwo\n"

    sections = parse_sections(body)

    assert [s.header for s in sections] == ["First", "Second"]
    assert sections[0].value == "one"
    assert sections[1].value == "two"


def test_parse_sections_normalizes_crlf() -> None:
    sections = parse_sections("### Impact\r\n\r\nAll\r\n\r\n")

    assert sections == [Section(header="Impact", lines=("", "All", "", ""))]


def test_parse_sections_empty_body() -> None:
    assert parse_sections("") == []
    assert parse_sections(None) == []


def test_value_requires_blank_separator() -> None:
    (section,) = parse_sections("### Impact\nAll\n")

    assert section.value is None
    assert section.paragraph == ()


def test_paragraph_stops_at_blank_line() -> None:
    (section,) = parse_sections("### Notes\n\nline one\nline two\n\nlater\n")

    assert section.value == "line one"
    assert section.paragraph == ("line one", "line two")


def test_find_section_matches_exact_header() -> None:
    sections = parse_sections("### Impacted plugins\n\nA\n\n### Impacted plugin\n\nB\n\n")

    found = find_section(sections, "Impacted plugin")

    assert found is not None
    assert found.value == "B"
    assert find_section(sections, "Missing") is None
