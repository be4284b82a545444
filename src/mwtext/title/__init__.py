"""Page title canonicalization for MediaWiki.

This package normalizes raw page names into structured :class:`Title` values:

- **Namespaces**: :class:`NamespaceRegistry` built from a wiki's siteinfo
- **Titles**: parsing, validation, case folding, talk/subject derivation

Example usage::

    from mwtext.title import load_default_registry, parse_title

    registry = load_default_registry()
    title = parse_title("user talk:example#Replies", registry=registry)
    title.prefixed_text  # 'User talk:Example'
    title.fragment       # 'Replies'

Public API:
    Types:
        - Title: Canonical page title
        - NamespaceRegistry: Immutable namespace configuration
        - SiteInfo: Validated siteinfo payload

    Functions:
        - parse_title / new_from_text: Parse text, None if invalid
        - require_title: Parse text, raise InvalidTitleError if invalid
        - make_title: Build a title in a fixed namespace
        - is_talk_namespace, php_char_to_upper, byte_length
        - load_registry, load_default_registry
        - set_default_registry, get_default_registry, reset_default_registry
"""

from mwtext.title.namespaces import (
    NS_CATEGORY,
    NS_FILE,
    NS_HELP,
    NS_MAIN,
    NS_MEDIA,
    NS_MEDIAWIKI,
    NS_PROJECT,
    NS_SPECIAL,
    NS_TALK,
    NS_TEMPLATE,
    NS_USER,
    NS_USER_TALK,
    NamespaceRegistry,
    SiteInfo,
    get_default_registry,
    load_default_registry,
    load_registry,
    reset_default_registry,
    set_default_registry,
)
from mwtext.title.title import (
    Title,
    byte_length,
    is_talk_namespace,
    make_title,
    new_from_text,
    parse_title,
    php_char_to_upper,
    require_title,
)

__all__ = [
    "NS_CATEGORY",
    "NS_FILE",
    "NS_HELP",
    "NS_MAIN",
    "NS_MEDIA",
    "NS_MEDIAWIKI",
    "NS_PROJECT",
    "NS_SPECIAL",
    "NS_TALK",
    "NS_TEMPLATE",
    "NS_USER",
    "NS_USER_TALK",
    "NamespaceRegistry",
    "SiteInfo",
    "Title",
    "byte_length",
    "get_default_registry",
    "is_talk_namespace",
    "load_default_registry",
    "load_registry",
    "make_title",
    "new_from_text",
    "parse_title",
    "php_char_to_upper",
    "require_title",
    "reset_default_registry",
    "set_default_registry",
]
