"""Tree-sitter parsing for note bodies and frontmatter.

Markdown is parsed in two passes: the block grammar gives the document
structure, then every inline region is parsed on its own with the inline
grammar. Frontmatter is parsed with the YAML grammar.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import tree_sitter_markdown
import tree_sitter_yaml
from tree_sitter import Language, Node, Parser, QueryCursor, Range, Tree

from ..errors import MalformedDocumentError, MalformedMatchError
from ..models import Link

if TYPE_CHECKING:
    from .queries import QueryRegistry

BLOCK_LANGUAGE = Language(tree_sitter_markdown.language())
INLINE_LANGUAGE = Language(tree_sitter_markdown.inline_language())
YAML_LANGUAGE = Language(tree_sitter_yaml.language())

# Block nodes whose text belongs to the inline grammar
INLINE_KINDS = frozenset({"inline", "pipe_table_cell"})

# `---` delimited frontmatter, only ever the first child of the document
METADATA_KIND = "minus_metadata"


@dataclass
class MarkdownTree:
    """A block tree plus one inline tree per inline region, in document order."""

    block_tree: Tree
    inline_trees: list[Tree] = field(default_factory=list)

    @property
    def root_node(self) -> Node:
        return self.block_tree.root_node


def node_text(node: Node, source: bytes) -> str:
    """Decode the slice of ``source`` covered by ``node``."""
    return source[node.start_byte : node.end_byte].decode("utf-8")


def parse_markdown(source: bytes) -> MarkdownTree:
    """Parse markdown into a block tree and its inline trees.

    Inline trees are parsed against the full ``source`` restricted to the
    region's ranges, so their byte offsets index ``source`` directly.
    """
    block_tree = Parser(BLOCK_LANGUAGE).parse(source)
    inline_parser = Parser(INLINE_LANGUAGE)

    inline_trees = []
    for node in _inline_nodes(block_tree.root_node):
        ranges = _inline_ranges(node)
        if not ranges:
            continue
        inline_parser.included_ranges = ranges
        inline_trees.append(inline_parser.parse(source))

    return MarkdownTree(block_tree=block_tree, inline_trees=inline_trees)


def _inline_nodes(root: Node) -> Iterator[Node]:
    """Yield inline regions depth-first, in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in INLINE_KINDS:
            yield node
            continue
        stack.extend(reversed(node.children))


def _inline_ranges(node: Node) -> list[Range]:
    """Ranges of ``node`` minus its named children.

    Named children of an inline region are block markers (quote prefixes,
    list indentation) that the inline grammar must not see.
    """
    ranges = []
    start_byte, start_point = node.start_byte, node.start_point
    for child in node.named_children:
        if child.start_byte > start_byte:
            ranges.append(Range(start_point, child.start_point, start_byte, child.start_byte))
        start_byte, start_point = child.end_byte, child.end_point

    if node.end_byte > start_byte:
        ranges.append(Range(start_point, node.end_point, start_byte, node.end_byte))
    return ranges


def parse_yaml(source: bytes) -> Tree:
    """Parse frontmatter text with the YAML grammar.

    Raises:
        MalformedDocumentError: If the tree contains syntax errors.
    """
    tree = Parser(YAML_LANGUAGE).parse(source)
    if tree.root_node.has_error:
        raise MalformedDocumentError("frontmatter is not valid YAML")
    return tree


def resolve(destination: str | None, text: str | None) -> tuple[str, str]:
    """Fill in whichever half of a link is missing from the other.

    ``[[Foo]]`` carries a single half; ``[[Foo|Bar]]`` carries both.

    Raises:
        MalformedMatchError: If both halves are missing.
    """
    if destination is None and text is None:
        raise MalformedMatchError("link match captured neither a destination nor a text")
    if destination is None:
        destination = text
    if text is None:
        text = destination
    return destination, text


def split_wikilink(label: str) -> tuple[str | None, str | None]:
    """Split the inside of ``[[dest|text]]`` at the first ``|``.

    Without a ``|`` the label is text only and the destination is None.
    Empty halves come back as None so ``resolve`` fills them in; a bare
    ``[[|]]`` stays a text-only label.
    """
    destination, sep, text = label.partition("|")
    if not sep or not (destination or text):
        return None, label
    return destination or None, text or None


def extract_links(tree: MarkdownTree, source: bytes, queries: "QueryRegistry") -> list[Link]:
    """Extract every link from the inline trees of ``tree``.

    Captures are grouped by the link node they belong to, so a node matched
    by more than one query alternative still yields a single link.

    Args:
        tree: Parsed markdown.
        source: The bytes ``tree`` was parsed from.
        queries: Shared compiled queries.

    Returns:
        Links in inline-region order, then match order.

    Raises:
        MalformedMatchError: If a match captures neither half of a link.
    """
    links = []
    for inline_tree in tree.inline_trees:
        halves_by_link: dict[tuple[int, int], dict[str, Node]] = {}
        for _, captures in QueryCursor(queries.links).matches(inline_tree.root_node):
            nodes = {name: captures[name][-1] for name in ("destination", "text") if captures.get(name)}
            if not nodes:
                raise MalformedMatchError("link match captured neither a destination nor a text")

            owner = next(iter(nodes.values())).parent
            halves = halves_by_link.setdefault((owner.start_byte, owner.end_byte), {})
            for name, node in nodes.items():
                halves.setdefault(name, node)

        links.extend(_to_link(halves, source) for halves in halves_by_link.values())
    return links


def _to_link(halves: dict[str, Node], source: bytes) -> Link:
    destination = text = None
    if "destination" in halves:
        destination = node_text(halves["destination"], source)
    if "text" in halves:
        text = node_text(halves["text"], source)
        # The inline grammar reads [[dest|text]] as a shortcut link labelled "dest|text"
        if destination is None and _is_wikilink(halves["text"], source):
            destination, text = split_wikilink(text)
    return Link(*resolve(destination, text))


def _is_wikilink(node: Node, source: bytes) -> bool:
    before = source[max(node.start_byte - 2, 0) : node.start_byte]
    after = source[node.end_byte : node.end_byte + 2]
    return before == b"[[" and after == b"]]"
