"""Template transclusion parser for MediaWiki markup.

This module extracts {{template|param|key=value}} transclusions from wikitext
with a character scanner that tracks four modes:
- normal text, where {{ and }} open and close templates
- <!-- comments -->
- <nowiki>...</nowiki> spans
- {{{triple-brace parameters}}}

Pipes that belong to nested templates, comments, nowiki spans, parameters or
[[links|with display text]] are swapped for a sentinel character before the
template body is split into parameters, and swapped back afterwards.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Final

from mwtext.wikitext.types import Parameter, Template

logger = logging.getLogger(__name__)

# Stands in for protected pipes while a template body is split
PIPE_SENTINEL: Final[str] = "\x01"

# Compile patterns once at module level for performance
NOWIKI_OPEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"<nowiki ?>")
NOWIKI_CLOSE_PATTERN: Final[re.Pattern[str]] = re.compile(r"</nowiki ?>")

# First pipe inside a [[link]]; [[File:]] links can hold several, so apply repeatedly
LINK_PIPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\[\[[^\]]*?)\|(.*?\]\])")

# A template body worth re-scanning in recursive mode
NESTED_TEMPLATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{.*\}\}", re.DOTALL)

NamePredicate = Callable[[str], bool]
TemplatePredicate = Callable[[Template], bool]


def _iter_template_bodies(text: str) -> Iterator[str]:
    """Scan text for top-level templates, lazily.

    Args:
        text: Wikitext to scan.

    Yields:
        Template bodies without the outer braces, with protected pipes
        replaced by PIPE_SENTINEL.
    """
    chars = list(text)
    n = len(chars)
    unclosed = 0
    in_comment = False
    in_nowiki = False
    in_parameter = False
    start = 0

    i = 0
    while i < n:
        if not (in_comment or in_nowiki or in_parameter):
            if text.startswith("{{{", i) and text[i + 3 : i + 4] != "{":
                in_parameter = True
                i += 3
                continue
            if text.startswith("{{", i):
                if unclosed == 0:
                    start = i + 2
                unclosed += 2
                i += 2
                continue
            if text.startswith("}}", i):
                if unclosed == 2:
                    yield "".join(chars[start:i])
                # Stray closing braces outside any template are ignored
                unclosed = max(unclosed - 2, 0)
                i += 2
                continue
            if chars[i] == "|" and unclosed > 2:
                chars[i] = PIPE_SENTINEL
            elif text.startswith("<!--", i):
                in_comment = True
                i += 4
                continue
            else:
                match = NOWIKI_OPEN_PATTERN.match(text, i)
                if match:
                    in_nowiki = True
                    i = match.end()
                    continue
        else:
            if chars[i] == "|":
                chars[i] = PIPE_SENTINEL
            elif in_comment and text.startswith("-->", i):
                in_comment = False
                i += 3
                continue
            elif in_nowiki and (match := NOWIKI_CLOSE_PATTERN.match(text, i)):
                in_nowiki = False
                i = match.end()
                continue
            elif in_parameter and text.startswith("}}}", i):
                in_parameter = False
                i += 3
                continue
        i += 1


def _protect_link_pipes(body: str) -> str:
    while LINK_PIPE_PATTERN.search(body):
        body = LINK_PIPE_PATTERN.sub(lambda m: m.group(1) + PIPE_SENTINEL + m.group(2), body)
    return body


def _restore_pipes(text: str) -> str:
    return text.replace(PIPE_SENTINEL, "|")


def _is_positional(chunk: str) -> bool:
    """Check if a parameter chunk is unnamed.

    A chunk is positional without "=", or when a nested template starts before
    the first "=" ({{x|{{y|a=b}}}} passes {{y|a=b}} as parameter 1).

    Examples:
        >>> _is_positional("foo")
        True
        >>> _is_positional("key=value")
        False
        >>> _is_positional("{{y|a=b}}")
        True
    """
    equals = chunk.find("=")
    if equals == -1:
        return True
    braces = chunk.find("{{")
    return braces != -1 and braces < equals


def _build_template(
    body: str,
    name_predicate: NamePredicate | None,
    template_predicate: TemplatePredicate | None,
) -> Template | None:
    """Turn one template body into a Template, or None if a predicate rejects it."""
    wikitext = "{{" + _restore_pipes(body) + "}}"

    name_chunk, *chunks = _protect_link_pipes(body).split("|")
    name = _restore_pipes(name_chunk).strip()
    if name_predicate is not None and not name_predicate(name):
        return None

    parameters: list[Parameter] = []
    claimed: set[str] = set()
    next_position = 1
    for raw_chunk in chunks:
        chunk = _restore_pipes(raw_chunk)
        if _is_positional(chunk):
            # Lowest number not already taken by |n=... or an earlier positional
            while str(next_position) in claimed:
                next_position += 1
            param = Parameter(name=next_position, value=chunk.strip(), wikitext="|" + chunk)
        else:
            equals = chunk.index("=")
            param = Parameter(
                name=chunk[:equals].strip(),
                value=chunk[equals + 1 :].strip(),
                wikitext="|" + chunk,
            )
        parameters.append(param)
        claimed.add(str(param.name))

    template = Template(name=name, wikitext=wikitext, parameters=tuple(parameters))
    if template_predicate is not None and not template_predicate(template):
        return None
    return template


def extract_templates(
    text: str,
    *,
    recursive: bool = False,
    name_predicate: NamePredicate | None = None,
    template_predicate: TemplatePredicate | None = None,
    count: int | None = None,
) -> list[Template]:
    """Extract template transclusions from wikitext.

    Args:
        text: Raw wikitext.
        recursive: Also extract templates nested inside other templates.
            Nested templates are looked for inside every top-level template,
            including ones the predicates filtered out.
        name_predicate: Keep only templates whose trimmed name passes.
            Cheaper than template_predicate since parameters are not parsed
            for rejected names.
        template_predicate: Keep only templates that pass.
        count: Stop scanning after this many top-level templates were kept.
            None or a value below 1 means no limit. In recursive mode the
            budget applies to each nesting level separately.

    Returns:
        Templates in document order; in recursive mode a template is
        followed by the templates nested inside it.

    Examples:
        >>> [t.name for t in extract_templates("{{ipsum|{{dorem}}}}")]
        ['ipsum']
        >>> [t.name for t in extract_templates("{{ipsum|{{dorem}}}}", recursive=True)]
        ['ipsum', 'dorem']
    """
    if count is not None and count <= 0:
        count = None

    result: list[Template] = []
    kept = 0
    for body in _iter_template_bodies(text):
        template = _build_template(body, name_predicate, template_predicate)
        if template is not None:
            result.append(template)
            kept += 1

        if recursive:
            interior = _restore_pipes(body)
            if NESTED_TEMPLATE_PATTERN.search(interior):
                result.extend(
                    extract_templates(
                        interior,
                        recursive=True,
                        name_predicate=name_predicate,
                        template_predicate=template_predicate,
                        count=count,
                    )
                )

        if count is not None and kept >= count:
            logger.debug(f"Template scan budget of {count} reached, skipping the rest")
            break

    return result
