"""Integration tests running every parser over a realistic article.

Template results are cross-checked against mwparserfromhell, a full wikitext
parser, on input where both agree on MediaWiki semantics.
"""

from __future__ import annotations

import mwparserfromhell
import pytest

from mwtext.title import NS_CATEGORY, NS_FILE, NamespaceRegistry
from mwtext.wikitext import (
    Template,
    Wikitext,
    extract_links,
    extract_sections,
    extract_templates,
    get_unique_targets,
)

ParsedTemplate = tuple[str, list[tuple[str, str]]]


def _ours(templates: list[Template]) -> list[ParsedTemplate]:
    return [(t.name, [(str(p.name), p.value) for p in t.parameters]) for t in templates]


def _reference(text: str, *, recursive: bool) -> list[ParsedTemplate]:
    code = mwparserfromhell.parse(text)
    return [
        (
            str(t.name).strip(),
            [(str(p.name).strip(), str(p.value).strip()) for p in t.params],
        )
        for t in code.filter_templates(recursive=recursive)
    ]


class TestTemplatesAgainstReference:
    """Compare template extraction with mwparserfromhell."""

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "text",
        [
            "{{foo}}",
            "{{ foo | a = b }}",
            "{{a|b=c|{{d}}|e}}",
            "{{x|{{y|a=b}}}}",
            "{{foo|[[a|b]]|c}}",
            "{{foo|[[File:X.png|thumb|caption]]}}",
            "{{foo|<nowiki>a|b</nowiki>}}",
            "{{foo|{{{1|default}}}|x}}",
            "text {{one|1}} between {{two|k=v}} after",
        ],
    )
    def test_top_level_templates(self, text: str) -> None:
        assert _ours(extract_templates(text)) == _reference(text, recursive=False)

    @pytest.mark.integration
    def test_article_templates(self, article: str) -> None:
        """Should find templates inside <ref> tags but not inside comments."""
        ours = _ours(extract_templates(article))
        assert ours == _reference(article, recursive=True)
        assert [name for name, _ in ours] == [
            "Short description",
            "Infobox athlete",
            "cite web",
            "convert",
            "Reflist",
        ]


class TestArticlePipeline:
    """End-to-end extraction from the article fixture."""

    @pytest.mark.integration
    def test_links(self, article: str, registry: NamespaceRegistry) -> None:
        result = extract_links(article, registry=registry)

        assert [link.target.prefixed_text for link in result.links] == [
            "United Kingdom",
            "Ultramarathon",
            "Ultramarathon",
            "Sri Chinmoy",
            "Category:Ultramarathon records",
            "Wikipedia:WikiProject Athletics",
        ]
        assert result.links[0].display_text == "British"
        assert result.links[4].display_text == "the records category"
        assert len(get_unique_targets(result)) == 5

    @pytest.mark.integration
    def test_files_and_categories(self, article: str, registry: NamespaceRegistry) -> None:
        result = extract_links(article, registry=registry)

        assert [(f.target.prefixed_text, f.props) for f in result.files] == [
            ("File:Eleanor Robinson 1998.jpg", "upright|Robinson in 1998"),
            ("File:Robinson finish.jpg", "thumb|Robinson at the [[Sri Chinmoy]] race finish"),
        ]
        assert all(f.target.namespace == NS_FILE for f in result.files)
        assert [(c.target.text, c.sort_key) for c in result.categories] == [
            ("1947 births", None),
            ("English ultramarathon runners", "Robinson, Eleanor"),
            ("Living people", ""),
        ]
        assert all(c.target.namespace == NS_CATEGORY for c in result.categories)

    @pytest.mark.integration
    def test_infobox_parameters(self, article: str) -> None:
        infobox = extract_templates(
            article, name_predicate=lambda name: name.startswith("Infobox")
        )[0]

        assert infobox.get_value("name") == "Eleanor Robinson"
        assert infobox.get_value("nationality") == "[[United Kingdom|British]]"
        assert infobox.get_value("image") == (
            "[[File:Eleanor Robinson 1998.jpg|upright|Robinson in 1998]]"
        )

    @pytest.mark.integration
    def test_sections(self, article: str) -> None:
        sections = extract_sections(article)

        assert [(s.level, s.header) for s in sections] == [
            (1, None),
            (2, "Career"),
            (2, "Legacy"),
            (2, "References"),
        ]
        assert sections[0].content.startswith("{{Short description|")
        assert "=== Records ===" in sections[1].content
        assert sections[3].content.endswith("[[Category:Living people|]]\n")

    @pytest.mark.integration
    def test_document_workflow(self, article: str, registry: NamespaceRegistry) -> None:
        """Should mask references, strip categories and restore the rest."""
        doc = Wikitext(article, registry=registry)
        doc.unbind("<ref[^>]*>", "</ref>")

        assert "cite web" not in [t.name for t in doc.parse_templates()]

        doc.parse_links()
        for category in doc.categories:
            doc.remove_entity(category)
        text = doc.rebind()

        assert "[[Category:1947 births]]" not in text
        assert "{{cite web|url=https://example.org/robinson|title=Profile|date=}}" in text
        assert doc.parse_links().categories == []
