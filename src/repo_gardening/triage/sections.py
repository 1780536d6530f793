"""Split issue form bodies into headed sections.

GitHub issue forms render every field as:

    ### <Field label>

    <value>

This module only knows that grammar. It does not interpret any field; lookups
by header name live in `signals`.
"""

from __future__ import annotations

from dataclasses import dataclass

HEADER_MARKER = "### "


@dataclass(frozen=True, slots=True)
class Section:
    """A single `### ` headed section and the raw lines below it."""

    header: str
    lines: tuple[str, ...]

    @property
    def value(self) -> str | None:
        """The line following the blank separator under the header.

        Returns None when the header is not followed by a blank line and a value
        line (the form was edited by hand, or the section is truncated).
        """

        if len(self.lines) < 2 or self.lines[0].strip():
            return None
        return self.lines[1]

    @property
    def paragraph(self) -> tuple[str, ...]:
        """Lines of the first paragraph after the blank separator."""

        if self.value is None:
            return ()
        out: list[str] = []
        for line in self.lines[1:]:
            if not line.strip():
                break
            out.append(line)
        return tuple(out)


def parse_sections(body: str | None) -> list[Section]:
    """Return the sections of a body in document order.

    Text before the first header is ignored. Header names are stripped; content
    lines are kept verbatim apart from line-ending normalisation.
    """

    if not body:
        return []

    text = body.replace("\r\n", "\n").replace("\r", "\n")

    sections: list[Section] = []
    header: str | None = None
    lines: list[str] = []
    for line in text.split("\n"):
        if line.startswith(HEADER_MARKER):
            if header is not None:
                sections.append(Section(header=header, lines=tuple(lines)))
            header = line[len(HEADER_MARKER) :].strip()
            lines = []
            continue
        if header is not None:
            lines.append(line)

    if header is not None:
        sections.append(Section(header=header, lines=tuple(lines)))
    return sections


def find_section(sections: list[Section], header: str) -> Section | None:
    """Return the first section whose header matches exactly."""

    for section in sections:
        if section.header == header:
            return section
    return None
