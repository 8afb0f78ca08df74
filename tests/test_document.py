"""Tests for per-note extraction: name, frontmatter, aliases, links, targets."""

from pathlib import Path

import pytest

from vaultlinks.errors import InvalidDocumentError
from vaultlinks.models import Link
from vaultlinks.vault.document import Document
from vaultlinks.vault.queries import QueryRegistry


def test_name_is_file_stem(queries: QueryRegistry):
    doc = Document(Path("notes/My Note.md"), "", queries)

    assert doc.name == "My Note"


def test_nameless_path_is_invalid(queries: QueryRegistry):
    with pytest.raises(InvalidDocumentError):
        Document(Path("."), "", queries)


def test_load_reads_file(tmp_path: Path, queries: QueryRegistry):
    path = tmp_path / "Loaded.md"
    path.write_text("Hello [[World]]\n", encoding="utf-8")

    doc = Document.load(path, queries)

    assert doc.name == "Loaded"
    assert "World" in doc.targets


def test_metadata_block_is_leading_prefix(make_document):
    doc = make_document("Alpha", "---", "aliases:", "  - A1", "---", "Body")

    assert doc.metadata_block is not None
    assert doc.metadata_block.startswith("---\naliases:")
    assert doc.content.startswith(doc.metadata_block)


def test_no_metadata_when_first_node_is_not_frontmatter(make_document):
    doc = make_document("Plain", "# Title", "", "Body with [[Foo]]", "", "---", "not: metadata", "---")

    assert doc.metadata_block is None
    assert doc.parsed_metadata is None
    assert doc.aliases == []
    assert doc.frontmatter_links == []


def test_aliases_in_declaration_order(make_document):
    doc = make_document("Gamma", "---", "aliases:", "  - G", "  - Third Letter", "---", "")

    assert doc.aliases == ["G", "Third Letter"]
    assert doc.alias_targets == ["Gamma|G", "Gamma|Third Letter"]


def test_metadata_without_aliases_key(make_document):
    doc = make_document("Tagged", "---", "tags:", "  - one", "  - two", "---", "Body")

    assert doc.parsed_metadata is not None
    assert doc.aliases == []
    assert doc.targets == ["Tagged"]


def test_quoted_frontmatter_value_contributes_links(make_document):
    doc = make_document("Linker", "---", 'related: "[[Foo]]"', 'up: "[[Bar|the bar]]"', "---", "")

    destinations = {link.destination for link in doc.frontmatter_links}

    assert destinations == {"Foo", "Bar"}
    assert Link(destination="Bar", text="the bar") in doc.frontmatter_links


def test_unquoted_frontmatter_values_are_not_reparsed(make_document):
    doc = make_document("Linker", "---", "title: plain value", "---", "")

    assert doc.frontmatter_links == []


def test_frontmatter_links_precede_body_links(make_document):
    doc = make_document("Ordered", "---", 'up: "[[First]]"', "---", "Then [[Second]].")

    assert doc.links[0].destination == "First"
    assert doc.links[-1].destination == "Second"


def test_targets_order(make_document):
    doc = make_document("Alpha", "---", "aliases:", "  - A1", "---", "See [[Beta]] and [[Beta|B2]].")

    assert doc.targets[:2] == ["Alpha", "Alpha|A1"]
    assert set(doc.targets[2:]) == {"Beta"}
    assert Link(destination="Beta", text="Beta") in doc.links
    assert Link(destination="Beta", text="B2") in doc.links


def test_targets_always_contain_name(make_document):
    doc = make_document("Empty")

    assert doc.targets == ["Empty"]
    assert doc.links == []


def test_malformed_frontmatter_is_ignored(make_document):
    doc = make_document("Broken", "---", "aliases: [unclosed, ", "  other: }", "---", "Body [[Kept]]")

    assert doc.metadata_block is not None
    assert doc.parsed_metadata is None
    assert doc.aliases == []
    assert doc.frontmatter_links == []
    assert set(doc.targets) == {"Broken", "Kept"}


def test_wikilink_label_is_split_from_destination(make_document):
    doc = make_document("Splitter", "See [[Foo|Bar]].")

    assert doc.links == [Link(destination="Foo", text="Bar")]
    assert "Foo|Bar" not in doc.targets


def test_inline_link_keeps_its_label(make_document):
    doc = make_document("Web", "[label](dest)")

    assert doc.links == [Link(destination="dest", text="label")]


def test_quoted_wikilink_becomes_frontmatter_link(make_document):
    doc = make_document("Up", "---", 'up: "[[Foo]]"', "---", "")

    assert doc.frontmatter_links == [Link(destination="Foo", text="Foo")]
    assert doc.targets == ["Up", "Foo"]
