"""Structural parsers for MediaWiki wikitext.

This package extracts structure from raw wikitext without a full grammar:

- **Links**: [[links]], [[File:]] embeds and [[Category:]] memberships
- **Templates**: {{template|param|key=value}}, optionally nested ones too
- **Sections**: == headings == and the text they own

Example usage::

    from mwtext.wikitext import extract_links, extract_templates

    links = extract_links("See [[Article]].", registry=registry)
    templates = extract_templates("{{cite|url=https://example.com}}")

Public API:
    Types:
        - Link, FileEmbed, CategoryMembership, LinkSet
        - Template, Parameter
        - Section
        - Wikitext: Document object bundling the parsers
        - Unbinder: Mask and restore regions of text

    Functions:
        - extract_links: Links, file embeds and categories
        - get_unique_targets: Distinct ordinary link targets
        - extract_templates: Template transclusions
        - extract_sections: Sections split at headings
        - is_section_header, extract_section_title: Single-line helpers
        - make_link, make_template: Wikitext builders
"""

from mwtext.wikitext.builders import make_link, make_template
from mwtext.wikitext.document import Wikitext
from mwtext.wikitext.link import extract_links, get_unique_targets
from mwtext.wikitext.section import extract_section_title, extract_sections, is_section_header
from mwtext.wikitext.template import extract_templates
from mwtext.wikitext.types import (
    CategoryMembership,
    FileEmbed,
    Link,
    LinkSet,
    Parameter,
    Section,
    Template,
)
from mwtext.wikitext.unbinder import Unbinder

__all__ = [
    "CategoryMembership",
    "FileEmbed",
    "Link",
    "LinkSet",
    "Parameter",
    "Section",
    "Template",
    "Unbinder",
    "Wikitext",
    "extract_links",
    "extract_section_title",
    "extract_sections",
    "extract_templates",
    "get_unique_targets",
    "is_section_header",
    "make_link",
    "make_template",
]
