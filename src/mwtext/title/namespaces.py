"""Namespace configuration for title parsing.

A :class:`NamespaceRegistry` holds everything the title parser needs to know
about a wiki: namespace names and aliases, the legal title character class,
and which namespaces keep the case of their first letter. It is built once
from the ``meta=siteinfo`` API response and never modified afterwards.

Registries are passed explicitly to the parsers. For applications that talk
to a single wiki, one registry can be installed as the process default with
:func:`set_default_registry`; every parser falls back to it when no registry
is given.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Literal

from pydantic import BaseModel, Field, ValidationError

from mwtext.config import load_config
from mwtext.errors import (
    RegistryAlreadyLoadedError,
    RegistryConfigError,
    RegistryNotLoadedError,
)

logger = logging.getLogger(__name__)

# Core namespace ids, identical on every MediaWiki installation
NS_MEDIA: Final[int] = -2
NS_SPECIAL: Final[int] = -1
NS_MAIN: Final[int] = 0
NS_TALK: Final[int] = 1
NS_USER: Final[int] = 2
NS_USER_TALK: Final[int] = 3
NS_PROJECT: Final[int] = 4
NS_FILE: Final[int] = 6
NS_MEDIAWIKI: Final[int] = 8
NS_TEMPLATE: Final[int] = 10
NS_HELP: Final[int] = 12
NS_CATEGORY: Final[int] = 14

# MediaWiki reports its legal characters in PHP byte terms (\x80-\xFF covers
# every UTF-8 lead and continuation byte), which means "any non-ASCII
# character" once we work on decoded text.
_HIGH_BYTE_RANGE: Final[re.Pattern[str]] = re.compile(r"\\x80-\\xff", re.IGNORECASE)
_NON_ASCII_RANGE: Final[str] = r"\u0080-\U0010FFFF"

DEFAULT_SITEINFO_PATH: Final[Path] = (
    Path(__file__).resolve().parent.parent / "data" / "siteinfo_default.json"
)


# =============================================================================
# SITEINFO PAYLOAD
# =============================================================================


class SiteInfoNamespace(BaseModel):
    """One entry of ``query.namespaces``."""

    id: int
    name: str
    canonical: str | None = None
    case: Literal["first-letter", "case-sensitive"] = "first-letter"


class SiteInfoAlias(BaseModel):
    """One entry of ``query.namespacealiases``."""

    id: int
    alias: str


class SiteInfoGeneral(BaseModel):
    """The subset of ``query.general`` used for title parsing."""

    legaltitlechars: str = Field(min_length=1)


class SiteInfoQuery(BaseModel):
    general: SiteInfoGeneral
    namespaces: dict[str, SiteInfoNamespace]
    namespacealiases: list[SiteInfoAlias] = Field(default_factory=list)


class SiteInfo(BaseModel):
    """Validated ``action=query&meta=siteinfo&siprop=general|namespaces|namespacealiases``
    response (formatversion=2)."""

    query: SiteInfoQuery


# =============================================================================
# REGISTRY
# =============================================================================


def normalize_namespace_name(name: str | None) -> str:
    """Normalize a namespace name for lookup.

    Args:
        name: Localized, canonical or alias namespace name.

    Returns:
        Lowercased name with spaces replaced by underscores.

    Examples:
        >>> normalize_namespace_name("User talk")
        'user_talk'
    """
    return (name or "").lower().replace(" ", "_")


def compile_illegal_title_pattern(legal_title_chars: str) -> re.Pattern[str]:
    """Build the pattern matching anything that may not appear in a title.

    Besides characters outside the legal class, percent-encoded sequences and
    HTML character references are rejected because they cannot round-trip.

    Args:
        legal_title_chars: Character-class body as reported by the wiki.

    Returns:
        Compiled pattern; a search hit means the title is invalid.

    Raises:
        RegistryConfigError: If the character class is empty or does not compile.
    """
    if not legal_title_chars:
        raise RegistryConfigError("legal title characters are missing")

    chars = _HIGH_BYTE_RANGE.sub(lambda _match: _NON_ASCII_RANGE, legal_title_chars)
    source = (
        f"[^{chars}]"
        r"|%[0-9A-Fa-f]{2}"
        r"|&[0-9A-Za-z\u0080-\U0010FFFF]+;"
        r"|&#[0-9]+;"
        r"|&#x[0-9A-Fa-f]+;"
    )
    try:
        return re.compile(source)
    except re.error as exc:
        raise RegistryConfigError(
            f"legal title characters do not form a valid character class: {legal_title_chars!r}"
        ) from exc


@dataclass(frozen=True, eq=False)
class NamespaceRegistry:
    """Immutable namespace configuration of one wiki.

    Attributes:
        id_to_name: Namespace id to localized name ("" for the main namespace).
        name_to_id: Normalized localized, canonical and alias names to id.
        legal_title_chars: Character-class body of legal title characters.
        case_sensitive_namespaces: Ids whose first letter is never uppercased.
        illegal_pattern: Compiled from legal_title_chars at construction.
    """

    id_to_name: Mapping[int, str]
    name_to_id: Mapping[str, int]
    legal_title_chars: str
    case_sensitive_namespaces: frozenset[int] = frozenset()
    illegal_pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id_to_name", MappingProxyType(dict(self.id_to_name)))
        object.__setattr__(self, "name_to_id", MappingProxyType(dict(self.name_to_id)))
        object.__setattr__(
            self, "case_sensitive_namespaces", frozenset(self.case_sensitive_namespaces)
        )
        object.__setattr__(
            self, "illegal_pattern", compile_illegal_title_pattern(self.legal_title_chars)
        )

    @classmethod
    def from_siteinfo(cls, payload: SiteInfo | Mapping[str, Any]) -> NamespaceRegistry:
        """Build a registry from a siteinfo API response.

        Args:
            payload: Raw response dict or an already validated SiteInfo.

        Returns:
            A new registry.

        Raises:
            RegistryConfigError: If the payload does not have the expected shape.
        """
        try:
            info = payload if isinstance(payload, SiteInfo) else SiteInfo.model_validate(payload)
        except ValidationError as exc:
            raise RegistryConfigError(f"malformed siteinfo payload: {exc}") from exc

        id_to_name: dict[int, str] = {}
        name_to_id: dict[str, int] = {}
        for ns in info.query.namespaces.values():
            id_to_name[ns.id] = ns.name
            name_to_id[normalize_namespace_name(ns.name)] = ns.id
            if ns.canonical is not None:
                name_to_id[normalize_namespace_name(ns.canonical)] = ns.id
        for alias in info.query.namespacealiases:
            name_to_id[normalize_namespace_name(alias.alias)] = alias.id

        case_sensitive = frozenset(
            ns.id for ns in info.query.namespaces.values() if ns.case == "case-sensitive"
        )

        registry = cls(
            id_to_name=id_to_name,
            name_to_id=name_to_id,
            legal_title_chars=info.query.general.legaltitlechars,
            case_sensitive_namespaces=case_sensitive,
        )
        logger.info(
            f"Built namespace registry: {len(id_to_name)} namespaces, "
            f"{len(name_to_id)} names, {len(case_sensitive)} case-sensitive"
        )
        return registry

    def namespace_id(self, name: str) -> int | None:
        """Look up a namespace id by any of its names, ignoring case.

        Examples:
            >>> registry.namespace_id("image")
            6
            >>> registry.namespace_id("Nonexistent") is None
            True
        """
        return self.name_to_id.get(normalize_namespace_name(name))

    def namespace_prefix(self, namespace: int) -> str:
        """Return the database-form prefix for a namespace.

        Args:
            namespace: A namespace id known to this registry.

        Returns:
            "" for the main namespace, otherwise e.g. "User_talk:".

        Raises:
            KeyError: If the namespace id is unknown.
        """
        if namespace == NS_MAIN:
            return ""
        return self.id_to_name[namespace].replace(" ", "_") + ":"

    def has_namespace(self, namespace: int) -> bool:
        return namespace in self.id_to_name

    def is_case_sensitive(self, namespace: int) -> bool:
        return namespace in self.case_sensitive_namespaces


def load_registry(path: str | Path) -> NamespaceRegistry:
    """Build a registry from a siteinfo JSON file.

    Args:
        path: File holding a saved ``meta=siteinfo`` response.

    Returns:
        A new registry.

    Raises:
        RegistryConfigError: If the file content is not a usable siteinfo payload.
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RegistryConfigError(f"siteinfo file {path} is not valid JSON: {exc}") from exc
    logger.debug(f"Loaded siteinfo from {path}")
    return NamespaceRegistry.from_siteinfo(payload)


def load_default_registry() -> NamespaceRegistry:
    """Build a registry from the configured siteinfo file, or the bundled one.

    The bundled file describes the namespaces of English Wikipedia.
    """
    configured = load_config().siteinfo_path
    return load_registry(configured if configured else DEFAULT_SITEINFO_PATH)


# =============================================================================
# PROCESS DEFAULT
# =============================================================================

_default_registry: NamespaceRegistry | None = None
_default_lock = threading.Lock()


def set_default_registry(registry: NamespaceRegistry, *, replace: bool = False) -> None:
    """Install the registry used when parsers are called without one.

    Args:
        registry: Registry to install.
        replace: Allow overwriting an already installed registry.

    Raises:
        RegistryAlreadyLoadedError: If a default is installed and replace is False.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is not None and not replace:
            raise RegistryAlreadyLoadedError("a default namespace registry is already installed")
        _default_registry = registry
    logger.info("Installed default namespace registry")


def get_default_registry() -> NamespaceRegistry:
    """Return the process default registry.

    Raises:
        RegistryNotLoadedError: If no default registry has been installed.
    """
    registry = _default_registry
    if registry is None:
        raise RegistryNotLoadedError(
            "namespace data unavailable: pass a registry or call set_default_registry() first"
        )
    return registry


def reset_default_registry() -> None:
    """Remove the process default registry (mainly for tests)."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def resolve_registry(registry: NamespaceRegistry | None) -> NamespaceRegistry:
    """Return registry if given, else the process default."""
    return registry if registry is not None else get_default_registry()
