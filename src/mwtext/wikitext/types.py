"""Shared type definitions for the wikitext parsers.

This module contains the records produced by the link, template and section
parsers. Every record keeps the verbatim wikitext it was parsed from, so
callers can locate it again (for example with ``Wikitext.remove_entity``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mwtext.title import Title


@dataclass(frozen=True)
class Link:
    """An ordinary wikilink, [[Target]] or [[Target|Display]].

    Attributes:
        target: Resolved link target.
        wikitext: Verbatim source, including the brackets.
        display_text: Text after the first pipe, or the target text
            (minus a leading colon) when there is none.
        start: Offset of the opening brackets in the source text.
        end: Offset just past the closing brackets.
    """

    target: Title
    wikitext: str
    display_text: str
    start: int | None = None
    end: int | None = None


@dataclass(frozen=True)
class FileEmbed:
    """A file embed, [[File:Name.jpg|thumb|Caption]].

    Attributes:
        target: Resolved file title.
        wikitext: Verbatim source, including the brackets.
        props: Everything after the first pipe, unsplit ("thumb|Caption").
        start: Offset of the opening brackets in the source text.
        end: Offset just past the closing brackets.
    """

    target: Title
    wikitext: str
    props: str = ""
    start: int | None = None
    end: int | None = None


@dataclass(frozen=True)
class CategoryMembership:
    """A category membership, [[Category:Name]] or [[Category:Name|Sort key]].

    Attributes:
        target: Resolved category title.
        wikitext: Verbatim source, including the brackets.
        sort_key: Text after the first pipe; None when there is no pipe
            (an empty string means an explicitly empty sort key).
        start: Offset of the opening brackets in the source text.
        end: Offset just past the closing brackets.
    """

    target: Title
    wikitext: str
    sort_key: str | None = None
    start: int | None = None
    end: int | None = None


@dataclass
class LinkSet:
    """Result of :func:`mwtext.wikitext.extract_links`."""

    links: list[Link] = field(default_factory=list)
    files: list[FileEmbed] = field(default_factory=list)
    categories: list[CategoryMembership] = field(default_factory=list)


@dataclass(frozen=True)
class Parameter:
    """A template parameter.

    Attributes:
        name: Position (int) for unnamed parameters, otherwise the trimmed name.
        value: Trimmed parameter value.
        wikitext: Full source, including the leading pipe and any whitespace.
    """

    name: int | str
    value: str
    wikitext: str


@dataclass(frozen=True)
class Template:
    """A template transclusion, {{Name|param|key=value}}.

    Built once by the template parser and not modified afterwards.

    Attributes:
        name: Trimmed template name as written (not resolved to a title).
        wikitext: Full source of the transclusion, including the braces.
        parameters: Parameters in source order.
    """

    name: str
    wikitext: str
    parameters: tuple[Parameter, ...] = ()

    def get_param(self, name: int | str) -> Parameter | None:
        """Find a parameter by name; 2 and "2" are the same parameter.

        Examples:
            >>> template.get_param(1).value
            'foo'
        """
        key = str(name)
        for param in self.parameters:
            if str(param.name) == key:
                return param
        return None

    def get_value(self, name: int | str) -> str | None:
        param = self.get_param(name)
        return param.value if param is not None else None


@dataclass(frozen=True)
class Section:
    """A document section.

    Attributes:
        level: Heading level 1-6. The untitled lead section is level 1.
        header: Trimmed heading text; None for the lead section.
        index: Offset where the section (its heading line) starts.
        content: Source from the heading up to the next heading of the same
            or a shallower level; includes the heading itself.
    """

    level: int
    header: str | None
    index: int
    content: str
