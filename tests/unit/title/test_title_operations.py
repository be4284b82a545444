"""Unit tests for Title rendering and derived titles."""

import pytest

from mwtext.title import (
    NS_CATEGORY,
    NS_FILE,
    NS_MAIN,
    NamespaceRegistry,
    Title,
    byte_length,
    is_talk_namespace,
    parse_title,
    php_char_to_upper,
)

IDEMPOTENCE_CASES = [
    "Sandbox",
    "user talk:example",
    "File:Foo bar.JPG",
    "Image:quux pix.jpg",
    "Foo#Some section",
    "Example#_foo_bar baz_",
    "ǆ (digraph)",
    ":Category:Example",
    "Special:RecentChanges",
    "antarctic_waterfowl:flightless_yet_cute.jpg",
    "Talk:Foo:Sandbox",
]


class TestBasicParsing:
    """Tests for the rendered forms of a title."""

    @pytest.mark.unit
    def test_file_title_forms(self, registry: NamespaceRegistry) -> None:
        title = parse_title("File:Foo_bar.JPG", registry=registry)
        assert title.namespace == NS_FILE
        assert title.namespace_prefix == "File:"
        assert title.extension == "JPG"
        assert title.dot_extension == ".JPG"
        assert title.main == "Foo_bar.JPG"
        assert title.text == "Foo bar.JPG"
        assert title.prefixed_db == "File:Foo_bar.JPG"
        assert title.prefixed_text == "File:Foo bar.JPG"

    @pytest.mark.unit
    def test_fragment_is_not_part_of_prefixed_text(self, registry: NamespaceRegistry) -> None:
        title = parse_title("Foo#bar", registry=registry)
        assert title.prefixed_text == "Foo"
        assert title.fragment == "bar"
        assert title.has_fragment()

    @pytest.mark.unit
    def test_leading_dot_title(self, registry: NamespaceRegistry) -> None:
        title = parse_title(".foo", registry=registry)
        assert title.prefixed_text == ".foo"
        assert title.extension == "foo"
        assert title.dot_extension == ".foo"
        assert title.main == ".foo"
        assert title.prefixed_db == ".foo"

    @pytest.mark.unit
    def test_str_is_database_form(self, registry: NamespaceRegistry) -> None:
        title = parse_title("Some random page", registry=registry)
        assert str(title) == title.prefixed_db == "Some_random_page"

    @pytest.mark.unit
    def test_canonical_string_keeps_fragment(self, registry: NamespaceRegistry) -> None:
        title = parse_title("help:Contents#Getting started", registry=registry)
        assert title.to_canonical_string() == "Help:Contents#Getting started"

    @pytest.mark.unit
    def test_no_fragment(self, registry: NamespaceRegistry) -> None:
        title = parse_title("Foo", registry=registry)
        assert title.fragment is None
        assert not title.has_fragment()


class TestIdempotence:
    """Tests that canonical strings parse back to the same title."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", IDEMPOTENCE_CASES)
    def test_reparse_canonical_string(self, text: str, registry: NamespaceRegistry) -> None:
        title = parse_title(text, registry=registry)
        assert title is not None
        assert parse_title(title.to_canonical_string(), registry=registry) == title

    @pytest.mark.unit
    def test_reparse_in_case_sensitive_namespace(
        self, case_sensitive_registry: NamespaceRegistry
    ) -> None:
        title = parse_title("lowercase page", registry=case_sensitive_registry)
        assert parse_title(str(title), registry=case_sensitive_registry) == title

    @pytest.mark.unit
    def test_equality_ignores_registry(
        self, registry: NamespaceRegistry, siteinfo_payload: dict
    ) -> None:
        """Should compare equal when built from equivalent registries."""
        other = NamespaceRegistry.from_siteinfo(siteinfo_payload)
        assert parse_title("Foo", registry=registry) == parse_title("Foo", registry=other)


class TestTalkAndSubjectPages:
    """Tests for talk/subject page derivation."""

    @pytest.mark.unit
    def test_user_page_round_trip(self, registry: NamespaceRegistry) -> None:
        title = parse_title("User:Foo", registry=registry)
        assert not title.is_talk_page()
        assert title.subject_page().prefixed_text == "User:Foo"

        talk = title.talk_page()
        assert talk.prefixed_text == "User talk:Foo"
        assert talk.talk_page().prefixed_text == "User talk:Foo"
        assert talk.is_talk_page()
        assert talk.subject_page().prefixed_text == "User:Foo"

    @pytest.mark.unit
    def test_special_page_has_no_talk_page(self, registry: NamespaceRegistry) -> None:
        title = parse_title("Special:AllPages", registry=registry)
        assert not title.is_talk_page()
        assert not title.can_have_talk_page()
        assert title.talk_page() is None
        assert title.subject_page().prefixed_text == "Special:AllPages"

    @pytest.mark.unit
    def test_colon_in_main_text(self, registry: NamespaceRegistry) -> None:
        """Should not reparse the main text when switching namespace."""
        title = parse_title("Category:Project:Maintenance", registry=registry)
        assert title.talk_page().prefixed_text == "Category talk:Project:Maintenance"

        title = parse_title("Category talk:Project:Maintenance", registry=registry)
        assert title.subject_page().prefixed_text == "Category:Project:Maintenance"
        assert title.subject_page().namespace == NS_CATEGORY

    @pytest.mark.unit
    def test_talk_page_drops_fragment(self, registry: NamespaceRegistry) -> None:
        title = parse_title("Foo#Caption", registry=registry)
        assert title.fragment == "Caption"
        talk = title.talk_page()
        assert talk.prefixed_text == "Talk:Foo"
        assert talk.fragment is None

    @pytest.mark.unit
    def test_talk_page_folds_case_for_target_namespace(
        self, case_sensitive_registry: NamespaceRegistry
    ) -> None:
        """Should re-apply first-letter folding of the target namespace only."""
        title = Title(namespace=2, main_text="foo", registry=case_sensitive_registry)
        assert title.talk_page().main == "Foo"

    @pytest.mark.unit
    def test_is_talk_namespace(self) -> None:
        assert is_talk_namespace(1)
        assert is_talk_namespace(101)
        assert not is_talk_namespace(NS_MAIN)
        assert not is_talk_namespace(-1)
        assert not is_talk_namespace(14)


class TestExtension:
    """Tests for extension detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("MediaWiki:Vector.js", "js"),
            ("User:Example/common.css", "css"),
            ("File:Example.longextension", "longextension"),
            ("Example/information.json", "json"),
            ("Foo.", None),
            ("Foo..", None),
            ("Foo.a.", None),
            ("Foo", None),
        ],
    )
    def test_extension(self, text: str, expected: str | None, registry: NamespaceRegistry) -> None:
        assert parse_title(text, registry=registry).extension == expected

    @pytest.mark.unit
    def test_dot_extension_without_extension(self, registry: NamespaceRegistry) -> None:
        assert parse_title("Foo", registry=registry).dot_extension == ""


class TestHelpers:
    """Tests for module-level helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abc", 3),
            ("é", 2),
            ("€", 3),
            ("\U0001d11e", 4),
            ("", 0),
        ],
    )
    def test_byte_length(self, text: str, expected: int) -> None:
        assert byte_length(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("a", "A"),
            ("A", "A"),
            ("1", "1"),
            ("ß", "ß"),
            ("ǆ", "ǅ"),
            ("é", "É"),
        ],
    )
    def test_php_char_to_upper(self, char: str, expected: str) -> None:
        assert php_char_to_upper(char) == expected
