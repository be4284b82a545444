"""Page title canonicalization.

This module turns user-supplied page names into :class:`Title` values the way
MediaWiki does:

- Unicode bidi controls are stripped, whitespace and underscores collapse to
  single underscores
- A leading ``:`` forces the main namespace
- A known namespace prefix (canonical, localized or alias, any case) selects
  the namespace
- Everything after the first ``#`` becomes the fragment
- Illegal characters, directory navigation, ``~~~`` and oversized titles are
  rejected
- The first letter is uppercased unless the namespace is case-sensitive

Invalid text yields ``None``; only a missing namespace registry raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from mwtext.config import load_config
from mwtext.errors import InvalidTitleError
from mwtext.title.case_map import PHP_UPPER_OVERRIDES
from mwtext.title.namespaces import (
    NS_MAIN,
    NS_SPECIAL,
    NS_TALK,
    NamespaceRegistry,
    resolve_registry,
)

# Compile patterns once at module level for performance
UNICODE_BIDI_PATTERN: Final[re.Pattern[str]] = re.compile("[\u200e\u200f\u202a-\u202e]+")

# Every whitespace variant MediaWiki folds into an underscore
WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(
    "[ _\u00a0\u1680\u180e\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)

# "prefix:rest", tolerating underscores around the colon
NAMESPACE_SPLIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"(.+?)_*:_*(.*)")

# Titles that browsers or servers might resolve as directory navigation
DIRECTORY_NAVIGATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\.\.?$|^\.\.?/|/\.\.?/|/\.\.?$"
)


def byte_length(text: str) -> int:
    """Size of text in MediaWiki's byte accounting.

    ASCII counts 1, U+0080-U+07FF counts 2, the rest of the BMP counts 3 and
    astral characters count 4 (two UTF-16 surrogates at 2 each).

    Examples:
        >>> byte_length("abc")
        3
        >>> byte_length("é")
        2
        >>> byte_length("𝄞")
        4
    """
    total = 0
    for char in text:
        code = ord(char)
        if code < 0x80:
            total += 1
        elif code < 0x800 or 0xD800 <= code <= 0xDFFF:
            total += 2
        elif code <= 0xFFFF:
            total += 3
        else:
            total += 4
    return total


def php_char_to_upper(char: str) -> str:
    """Uppercase a single character the way PHP's mb_strtoupper does.

    Args:
        char: A single character.

    Returns:
        The uppercased character (possibly more than one code point).

    Examples:
        >>> php_char_to_upper("a")
        'A'
        >>> php_char_to_upper("ß")
        'ß'
        >>> php_char_to_upper("ǆ")
        'ǅ'
    """
    override = PHP_UPPER_OVERRIDES.get(char)
    if override == "":
        return char
    return override or char.upper()


def is_talk_namespace(namespace: int) -> bool:
    """Check if a namespace id is a talk namespace (odd and positive)."""
    return namespace > NS_MAIN and namespace % 2 == 1


def _fold_first_letter(main: str, namespace: int, registry: NamespaceRegistry) -> str:
    if not main or registry.is_case_sensitive(namespace):
        return main
    return php_char_to_upper(main[0]) + main[1:]


@dataclass(frozen=True)
class Title:
    """A canonical page title.

    Build titles with :func:`parse_title` or :func:`make_title`; the
    constructor itself performs no validation.

    Attributes:
        namespace: Namespace id.
        main_text: Page name without namespace, underscores for spaces,
            first letter already case-folded (e.g. "Foo_bar.JPG").
        fragment: Text after "#" with underscores as spaces, or None.
        registry: Registry used to render the namespace prefix. Not part of
            equality; None means the process default.
    """

    namespace: int
    main_text: str
    fragment: str | None = None
    registry: NamespaceRegistry | None = field(default=None, compare=False, repr=False)

    def _registry(self) -> NamespaceRegistry:
        return resolve_registry(self.registry)

    @property
    def namespace_prefix(self) -> str:
        """Namespace prefix in database form, e.g. "File:" ("" in the main namespace)."""
        return self._registry().namespace_prefix(self.namespace)

    @property
    def main(self) -> str:
        """Main text in database form, e.g. "Foo_bar.JPG"."""
        return self.main_text

    @property
    def text(self) -> str:
        """Main text with spaces, e.g. "Foo bar.JPG"."""
        return self.main_text.replace("_", " ")

    @property
    def prefixed_db(self) -> str:
        """Full name in database form, e.g. "File:Foo_bar.JPG"."""
        return self.namespace_prefix + self.main_text

    @property
    def prefixed_text(self) -> str:
        """Full name in display form, e.g. "File:Foo bar.JPG"."""
        return self.prefixed_db.replace("_", " ")

    @property
    def extension(self) -> str | None:
        """Text after the last dot of the main text, if any.

        Examples:
            "Vector.js" -> "js"; "Foo." -> None; "Foo" -> None
        """
        last_dot = self.main_text.rfind(".")
        if last_dot == -1:
            return None
        return self.main_text[last_dot + 1 :] or None

    @property
    def dot_extension(self) -> str:
        """The extension with its dot (".json"), or "" if there is none."""
        ext = self.extension
        return "" if ext is None else "." + ext

    def to_canonical_string(self) -> str:
        """Database form plus the fragment, if any.

        Parsing this string again yields an equal Title.
        """
        if self.fragment is None:
            return self.prefixed_db
        return f"{self.prefixed_db}#{self.fragment}"

    def has_fragment(self) -> bool:
        return self.fragment is not None

    def is_talk_page(self) -> bool:
        return is_talk_namespace(self.namespace)

    def can_have_talk_page(self) -> bool:
        return self.namespace >= NS_MAIN

    def talk_page(self) -> Title | None:
        """Title of the associated talk page.

        Returns:
            self for talk pages, None for virtual namespaces (and for
            namespaces whose talk namespace the registry does not know),
            otherwise the talk page without fragment.
        """
        if not self.can_have_talk_page():
            return None
        if self.is_talk_page():
            return self
        return self._with_namespace(self.namespace + 1)

    def subject_page(self) -> Title | None:
        """Title of the subject page; self unless this is a talk page."""
        if not self.is_talk_page():
            return self
        return self._with_namespace(self.namespace - 1)

    def _with_namespace(self, namespace: int) -> Title | None:
        registry = self._registry()
        if not registry.has_namespace(namespace):
            return None
        return Title(
            namespace=namespace,
            main_text=_fold_first_letter(self.main_text, namespace, registry),
            fragment=None,
            registry=self.registry,
        )

    def __str__(self) -> str:
        return self.prefixed_db


def parse_title(
    text: str,
    default_namespace: int = NS_MAIN,
    *,
    registry: NamespaceRegistry | None = None,
) -> Title | None:
    """Parse text into a canonical Title.

    Note that default_namespace is only a default: a namespace prefix in text
    overrides it, and a leading colon resets it to the main namespace.

    Args:
        text: Raw page name, e.g. "user talk:example#Section".
        default_namespace: Namespace used when text has no prefix.
        registry: Namespace configuration; the process default if None.

    Returns:
        A Title, or None if text is not a valid title.

    Raises:
        RegistryNotLoadedError: If no registry is given and no default is installed.

    Examples:
        >>> parse_title("File:Foo bar.JPG").prefixed_db
        'File:Foo_bar.JPG'
        >>> parse_title("Talk:File:Example.svg") is None
        True
    """
    registry = resolve_registry(registry)
    namespace = default_namespace

    title = UNICODE_BIDI_PATTERN.sub("", text)
    title = WHITESPACE_PATTERN.sub("_", title).strip("_")

    # Initial colon means main namespace instead of the default
    if title.startswith(":"):
        namespace = NS_MAIN
        title = title[1:].strip("_")

    if not title:
        return None

    match = NAMESPACE_SPLIT_PATTERN.fullmatch(title)
    if match:
        prefix_id = registry.namespace_id(match.group(1))
        if prefix_id is not None:
            namespace = prefix_id
            title = match.group(2)
            # Talk:File:X must be spelled File_talk:X so the subject round-trips
            if namespace == NS_TALK:
                inner = NAMESPACE_SPLIT_PATTERN.fullmatch(title)
                if inner and registry.namespace_id(inner.group(1)) is not None:
                    return None

    fragment: str | None = None
    hash_index = title.find("#")
    if hash_index != -1:
        # Not trimmed: "Example#_foo" differs from "Example#foo"
        fragment = title[hash_index + 1 :].replace("_", " ")
        title = title[:hash_index].strip("_")

    if not _is_valid_main_text(title, namespace, registry):
        return None

    return Title(
        namespace=namespace,
        main_text=_fold_first_letter(title, namespace, registry),
        fragment=fragment,
        registry=registry,
    )


def _is_valid_main_text(title: str, namespace: int, registry: NamespaceRegistry) -> bool:
    if not registry.has_namespace(namespace):
        return False
    if registry.illegal_pattern.search(title):
        return False
    if "." in title and DIRECTORY_NAVIGATION_PATTERN.search(title):
        return False
    if "~~~" in title:
        return False
    # Special pages may exceed the page_title column size
    if namespace != NS_SPECIAL and byte_length(title) > load_config().title_max_bytes:
        return False
    # Can't link to a namespace alone
    if not title and namespace != NS_MAIN:
        return False
    return not title.startswith(":")


# MediaWiki's JS API calls this newFromText
new_from_text = parse_title


def require_title(
    text: str,
    default_namespace: int = NS_MAIN,
    *,
    registry: NamespaceRegistry | None = None,
) -> Title:
    """Like :func:`parse_title`, but raise instead of returning None.

    Raises:
        InvalidTitleError: If text is not a valid title.
    """
    title = parse_title(text, default_namespace, registry=registry)
    if title is None:
        raise InvalidTitleError(f"Unable to parse title: {text!r}")
    return title


def make_title(
    namespace: int,
    text: str,
    *,
    registry: NamespaceRegistry | None = None,
) -> Title | None:
    """Build a title in a fixed namespace.

    Unlike parse_title, a namespace prefix in text cannot move the title to
    another namespace ("Category:Foo" in the Template namespace becomes
    "Template:Category:Foo"). In the main namespace text is parsed as-is.

    Returns:
        A Title, or None if the result is invalid or the namespace unknown.
    """
    registry = resolve_registry(registry)
    if not registry.has_namespace(namespace):
        return None
    return parse_title(registry.namespace_prefix(namespace) + text, registry=registry)
