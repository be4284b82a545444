"""Shared pytest fixtures for mwtext tests."""

import dataclasses
import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from mwtext.title import NamespaceRegistry, reset_default_registry

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SITEINFO_DIR = FIXTURES_DIR / "siteinfo"
WIKITEXT_DIR = FIXTURES_DIR / "wikitext"

# Namespaces that keep their first letter on a wiki with $wgCapitalLinks = false
CAPITAL_LINKS_OFF_NAMESPACES = frozenset([0, -2, 1, 4, 5, 6, 7, 10, 11, 12, 13, 14, 15])


@pytest.fixture(autouse=True)
def _clean_default_registry() -> Iterator[None]:
    """Make sure no test leaks a process-default registry into another."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_siteinfo() -> Callable[[str], dict[str, Any]]:
    """Factory fixture to load siteinfo payloads.

    Usage:
        def test_something(load_siteinfo):
            payload = load_siteinfo("test_wiki.json")
    """

    def _load(name: str) -> dict[str, Any]:
        path = SITEINFO_DIR / name
        return json.loads(path.read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def load_wikitext() -> Callable[[str], str]:
    """Factory fixture to load wikitext fixture files.

    Usage:
        def test_something(load_wikitext):
            content = load_wikitext("article.txt")
    """

    def _load(name: str) -> str:
        path = WIKITEXT_DIR / name
        return path.read_text(encoding="utf-8")

    return _load


@pytest.fixture
def siteinfo_payload(load_siteinfo: Callable[[str], dict[str, Any]]) -> dict[str, Any]:
    """Siteinfo of a small English wiki with a custom Penguins namespace (100)."""
    return load_siteinfo("test_wiki.json")


@pytest.fixture
def registry(siteinfo_payload: dict[str, Any]) -> NamespaceRegistry:
    """Registry built from the test wiki siteinfo."""
    return NamespaceRegistry.from_siteinfo(siteinfo_payload)


@pytest.fixture
def case_sensitive_registry(registry: NamespaceRegistry) -> NamespaceRegistry:
    """Test wiki registry as configured with $wgCapitalLinks = false."""
    return dataclasses.replace(registry, case_sensitive_namespaces=CAPITAL_LINKS_OFF_NAMESPACES)


@pytest.fixture
def wiktionary_registry(load_siteinfo: Callable[[str], dict[str, Any]]) -> NamespaceRegistry:
    """Registry whose case sensitivity comes from the siteinfo payload itself."""
    return NamespaceRegistry.from_siteinfo(load_siteinfo("wiktionary.json"))


# =============================================================================
# WIKITEXT FIXTURES
# =============================================================================


@pytest.fixture
def mixed_links(load_wikitext: Callable[[str], str]) -> str:
    """Plain, piped, invalid, file, category and colon-escaped links."""
    return load_wikitext("mixed_links.txt")


@pytest.fixture
def eleanor_robinson_talk(load_wikitext: Callable[[str], str]) -> str:
    """Talk page header with deeply nested WikiProject banners."""
    return load_wikitext("eleanor_robinson_talk.txt")


@pytest.fixture
def article(load_wikitext: Callable[[str], str]) -> str:
    """Short biography with an infobox, references, sections and categories."""
    return load_wikitext("article.txt")
