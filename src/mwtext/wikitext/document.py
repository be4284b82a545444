"""Stateful wrapper around a piece of wikitext.

:class:`Wikitext` bundles the link, template and section parsers with the
masking helpers of :class:`Unbinder`, and keeps the results of the last
parse around as attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mwtext.wikitext.link import extract_links
from mwtext.wikitext.section import extract_sections
from mwtext.wikitext.template import NamePredicate, TemplatePredicate, extract_templates
from mwtext.wikitext.unbinder import Unbinder

if TYPE_CHECKING:
    from mwtext.title import NamespaceRegistry
    from mwtext.wikitext.types import (
        CategoryMembership,
        FileEmbed,
        Link,
        LinkSet,
        Section,
        Template,
    )


class Wikitext(Unbinder):
    """A wikitext document.

    Example usage::

        doc = Wikitext("A [[plain link]] in [[Category:Examples]].")
        doc.parse_links()
        doc.remove_entity(doc.categories[0])
        doc.get_text()  # 'A [[plain link]] in .'

    Attributes:
        text: Current wikitext.
        registry: Namespace configuration for link targets; None means the
            process default.
        links, files, categories: Results of the last parse_links() call.
        templates: Result of the last parse_templates() call.
        sections: Result of the last parse_sections() call.
    """

    def __init__(self, text: str, registry: NamespaceRegistry | None = None) -> None:
        super().__init__(text)
        self.registry = registry
        self.links: list[Link] = []
        self.files: list[FileEmbed] = []
        self.categories: list[CategoryMembership] = []
        self.templates: list[Template] = []
        self.sections: list[Section] = []

    def parse_links(self) -> LinkSet:
        """Parse links, file embeds and categories from the current text."""
        link_set = extract_links(self.text, registry=self.registry)
        self.links = link_set.links
        self.files = link_set.files
        self.categories = link_set.categories
        return link_set

    def parse_templates(
        self,
        *,
        recursive: bool = False,
        name_predicate: NamePredicate | None = None,
        template_predicate: TemplatePredicate | None = None,
        count: int | None = None,
    ) -> list[Template]:
        """Parse templates from the current text.

        See :func:`mwtext.wikitext.extract_templates` for the options.
        """
        self.templates = extract_templates(
            self.text,
            recursive=recursive,
            name_predicate=name_predicate,
            template_predicate=template_predicate,
            count=count,
        )
        return self.templates

    def parse_sections(self) -> list[Section]:
        """Parse sections from the current text.

        Heading syntax inside comments or nowiki spans is not skipped;
        unbind() those first.
        """
        self.sections = extract_sections(self.text)
        return self.sections

    def remove_entity(self, entity: Link | FileEmbed | CategoryMembership | Template) -> None:
        """Remove the first occurrence of an entity's wikitext from the text."""
        self.text = self.text.replace(entity.wikitext, "", 1)
