"""MediaWiki section parsing.

This module splits wikitext into contiguous, non-overlapping sections at
heading lines (== Title ==, === Subsection ===, etc.). Headings must start
at the beginning of a line. A heading deeper than the section it appears in
stays part of that section's content instead of starting a new one. When
the runs of equals signs differ in length, the shorter run sets the level
and the surplus signs stay in the header text, as MediaWiki renders them.
"""

from __future__ import annotations

import re
from typing import Final

from mwtext.wikitext.types import Section

MAX_SECTION_LEVEL: Final[int] = 6

# Section heading line: leading "=" run, header text, trailing "=" run;
# the trailing class admits the \r of CRLF line endings
SECTION_HEADER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(=+)(.+?)(=+)[ \t\r]*$", re.MULTILINE
)


def _level_and_header(match: re.Match[str]) -> tuple[int, str]:
    lead, middle, trail = match.group(1), match.group(2), match.group(3)
    level = min(len(lead), len(trail), MAX_SECTION_LEVEL)
    return level, (lead[level:] + middle + trail[level:]).strip()


def is_section_header(line: str) -> bool:
    """Check if a line is a MediaWiki section heading.

    Args:
        line: The line to check

    Returns:
        True if the line is a section heading, False otherwise

    Examples:
        >>> is_section_header("== Introduction ==")
        True
        >>> is_section_header("===3-2==")
        True
        >>> is_section_header(" == Indented ==")
        False
    """
    return SECTION_HEADER_PATTERN.fullmatch(line.rstrip("\r\n")) is not None


def extract_section_title(line: str) -> str:
    """Extract the header text from a section heading line.

    Args:
        line: A section heading line (must pass is_section_header check)

    Returns:
        The header text with whitespace stripped

    Example:
        >>> extract_section_title("== Introduction ==")
        'Introduction'
        >>> extract_section_title("===3-2==")
        '=3-2'
    """
    match = SECTION_HEADER_PATTERN.fullmatch(line.rstrip("\r\n"))
    if match:
        return _level_and_header(match)[1]
    return ""


def extract_sections(text: str) -> list[Section]:
    """Split wikitext into sections.

    The untitled lead section always comes first (level 1, header None,
    possibly empty) and runs up to the first heading of any level. After
    that, a heading starts a new section only if its level is the same as or
    shallower than the open section's; deeper headings are absorbed into the
    open section's content. Sections are contiguous: each one ends where the
    next begins.

    Args:
        text: Raw wikitext.

    Returns:
        Sections in document order.

    Examples:
        >>> [(s.level, s.header) for s in extract_sections("Intro\\n== A ==\\n=== B ===\\n")]
        [(1, None), (2, 'A')]
    """
    starts: list[tuple[int, str, int]] = []
    open_level: int | None = None
    for match in SECTION_HEADER_PATTERN.finditer(text):
        level, header = _level_and_header(match)
        if open_level is None or level <= open_level:
            starts.append((level, header, match.start()))
            open_level = level

    lead_end = starts[0][2] if starts else len(text)
    sections = [Section(level=1, header=None, index=0, content=text[:lead_end])]

    for position, (level, header, index) in enumerate(starts):
        end = starts[position + 1][2] if position + 1 < len(starts) else len(text)
        sections.append(Section(level=level, header=header, index=index, content=text[index:end]))

    return sections
