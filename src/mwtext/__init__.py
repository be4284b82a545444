"""mwtext - MediaWiki title canonicalization and wikitext structure parsing."""

from mwtext.errors import (
    InvalidTitleError,
    MWTextError,
    RegistryAlreadyLoadedError,
    RegistryConfigError,
    RegistryNotLoadedError,
)
from mwtext.title import (
    NamespaceRegistry,
    Title,
    load_default_registry,
    load_registry,
    make_title,
    parse_title,
    require_title,
    set_default_registry,
)
from mwtext.wikitext import (
    Wikitext,
    extract_links,
    extract_sections,
    extract_templates,
    make_link,
    make_template,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidTitleError",
    "MWTextError",
    "NamespaceRegistry",
    "RegistryAlreadyLoadedError",
    "RegistryConfigError",
    "RegistryNotLoadedError",
    "Title",
    "Wikitext",
    "extract_links",
    "extract_sections",
    "extract_templates",
    "load_default_registry",
    "load_registry",
    "make_link",
    "make_template",
    "make_title",
    "parse_title",
    "require_title",
    "set_default_registry",
]
