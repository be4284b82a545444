"""Wikitext builders for links and template transclusions."""

from __future__ import annotations

from collections.abc import Mapping

from mwtext.title import NS_MAIN, NS_TEMPLATE, Title


def make_link(target: str | Title, display_text: str | None = None) -> str:
    """Build wikitext for a link.

    Args:
        target: Page name as written, or a Title (rendered in display form,
            with its fragment).
        display_text: Optional text after the pipe.

    Returns:
        Link wikitext.

    Examples:
        >>> make_link("Main Page", "homepage")
        '[[Main Page|homepage]]'
    """
    if isinstance(target, Title):
        target_text = target.prefixed_text
        if target.fragment:
            target_text += "#" + target.fragment
    else:
        target_text = target
    pipe = "|" + display_text if display_text else ""
    return f"[[{target_text}{pipe}]]"


def make_template(title: str | Title, parameters: Mapping[int | str, str] | None = None) -> str:
    """Build wikitext for a template transclusion.

    A Title in the Template namespace is written without its prefix, a Title
    in the main namespace gets a leading colon. Fragments are dropped.
    Parameters with empty values are skipped; the rest are written as
    name=value in mapping order.

    Examples:
        >>> make_template("cite", {1: "web", "author": "John Doe", "date": ""})
        '{{cite|1=web|author=John Doe}}'
    """
    if isinstance(title, Title):
        if title.namespace == NS_TEMPLATE:
            name = title.text
        elif title.namespace == NS_MAIN:
            name = ":" + title.prefixed_text
        else:
            name = title.prefixed_text
    else:
        name = title

    params = "".join(
        f"|{key}={value}" for key, value in (parameters or {}).items() if value
    )
    return "{{" + name + params + "}}"
