"""Link parser for MediaWiki markup.

This module extracts bracketed links from wikitext and sorts them by what
the target resolves to:
- [[Target]], [[Target|Display]] - Ordinary link
- [[File:Name.jpg|thumb|Caption]] - File embed (also via the Image: alias)
- [[Category:Name]], [[Category:Name|Sort key]] - Category membership
- [[:File:Name.jpg]], [[:Category:Name]] - Colon-escaped, always an ordinary link

Brackets are matched with a stack rather than a regex, so links inside file
captions ([[File:X.jpg|thumb|A [[hill]]]]) are found as well.
"""

from __future__ import annotations

import logging

from mwtext.title import NS_CATEGORY, NS_FILE, NamespaceRegistry, parse_title
from mwtext.title.namespaces import resolve_registry
from mwtext.wikitext.types import CategoryMembership, FileEmbed, Link, LinkSet

logger = logging.getLogger(__name__)

LINK_OPEN: str = "[["
LINK_CLOSE: str = "]]"


def _find_bracket_pairs(text: str) -> list[tuple[int, int]]:
    """Locate every matched [[...]] pair.

    Args:
        text: Wikitext to scan.

    Returns:
        (start, end) spans including the brackets, sorted by start.

    Examples:
        >>> _find_bracket_pairs("[[a]] [[b|[[c]]]]")
        [(0, 5), (6, 17), (10, 15)]
    """
    pairs: list[tuple[int, int]] = []
    stack: list[int] = []
    i = 0
    n = len(text)
    while i < n - 1:
        if text.startswith(LINK_OPEN, i):
            stack.append(i)
            i += 2
        elif text.startswith(LINK_CLOSE, i) and stack:
            pairs.append((stack.pop(), i + 2))
            i += 2
        else:
            i += 1
    pairs.sort()
    return pairs


def _split_target(inner: str) -> tuple[str, str | None]:
    """Split link contents on the first pipe outside nested [[...]] or {{...}}.

    Returns:
        (target, remainder); remainder is None when there is no such pipe.

    Examples:
        >>> _split_target("File:X.jpg|thumb|A [[hill|Hill]]")
        ('File:X.jpg', 'thumb|A [[hill|Hill]]')
        >>> _split_target("Foo")
        ('Foo', None)
    """
    depth = 0
    i = 0
    n = len(inner)
    while i < n:
        pair = inner[i : i + 2]
        if pair in ("[[", "{{"):
            depth += 1
            i += 2
            continue
        if pair in ("]]", "}}") and depth > 0:
            depth -= 1
            i += 2
            continue
        if inner[i] == "|" and depth == 0:
            return inner[:i], inner[i + 1 :]
        i += 1
    return inner, None


def _classify(
    wikitext: str,
    start: int,
    end: int,
    registry: NamespaceRegistry,
    result: LinkSet,
) -> None:
    """Resolve one [[...]] span and append it to the matching list."""
    target_text, remainder = _split_target(wikitext[2:-2])

    title = parse_title(target_text, registry=registry)
    if title is None:
        logger.debug(f"Dropping link with unparseable target: {wikitext!r}")
        return

    escaped = target_text.startswith(":")
    if not escaped and title.namespace == NS_FILE:
        result.files.append(
            FileEmbed(
                target=title,
                wikitext=wikitext,
                props=remainder if remainder is not None else "",
                start=start,
                end=end,
            )
        )
        return

    if not escaped and title.namespace == NS_CATEGORY:
        result.categories.append(
            CategoryMembership(
                target=title,
                wikitext=wikitext,
                sort_key=remainder,
                start=start,
                end=end,
            )
        )
        return

    # Empty remainder ([[Foo|]]) falls back to the target like a missing pipe
    display_text = remainder if remainder else (target_text[1:] if escaped else target_text)
    result.links.append(
        Link(
            target=title,
            wikitext=wikitext,
            display_text=display_text,
            start=start,
            end=end,
        )
    )


def extract_links(text: str, *, registry: NamespaceRegistry | None = None) -> LinkSet:
    """Extract links, file embeds and category memberships from wikitext.

    Args:
        text: Raw wikitext.
        registry: Namespace configuration; the process default if None.

    Returns:
        LinkSet whose three lists are each in document order of the
        opening brackets. Links with unparseable targets are omitted.

    Raises:
        RegistryNotLoadedError: If no registry is given and no default is installed.

    Examples:
        >>> links = extract_links("See [[Foo|the foo]] [[Category:Bar]]")
        >>> links.links[0].display_text
        'the foo'
        >>> links.categories[0].sort_key is None
        True
    """
    registry = resolve_registry(registry)
    result = LinkSet()
    for start, end in _find_bracket_pairs(text):
        _classify(text[start:end], start, end, registry, result)
    return result


def get_unique_targets(link_set: LinkSet) -> set[str]:
    """Get the set of distinct ordinary link targets in database form.

    Fragments are ignored, so [[Foo#a]] and [[Foo#b]] count once.
    """
    return {link.target.prefixed_db for link in link_set.links}
