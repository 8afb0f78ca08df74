"""A single vault note and the targets derived from it."""

import logging
from functools import cached_property
from pathlib import Path

from tree_sitter import Node, Query, QueryCursor, Tree

from ..errors import InvalidDocumentError, MalformedDocumentError
from ..models import Link
from .parser import METADATA_KIND, extract_links, node_text, parse_markdown, parse_yaml
from .queries import QueryRegistry

log = logging.getLogger(__name__)


class Document:
    """One markdown note: its text, its parsed tree, and derived views.

    The body is parsed on construction. Everything else is computed on first
    access and cached; a document never changes after it is built.
    """

    def __init__(self, path: Path, content: str, queries: QueryRegistry) -> None:
        if not path.stem:
            raise InvalidDocumentError(path, "file has no base name")

        self.path = path
        self.content = content
        self.queries = queries
        self.source = content.encode("utf-8")
        self.tree = parse_markdown(self.source)

    @classmethod
    def load(cls, path: Path, queries: QueryRegistry) -> "Document":
        """Read and parse a note from disk.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not UTF-8.
            InvalidDocumentError: If the path has no base name.
        """
        return cls(path, path.read_text(encoding="utf-8"), queries)

    def __repr__(self) -> str:
        return f"Document({str(self.path)!r})"

    @property
    def name(self) -> str:
        """Filename without extension."""
        return self.path.stem

    @cached_property
    def metadata_block(self) -> str | None:
        """Frontmatter text, delimiters included, if the note starts with one."""
        root = self.tree.root_node
        if root.child_count == 0:
            return None

        first = root.children[0]
        if first.type != METADATA_KIND:
            return None
        return node_text(first, self.source)

    @cached_property
    def parsed_metadata(self) -> Tree | None:
        """YAML tree of the frontmatter; ``None`` when absent or malformed."""
        if self.metadata_block is None:
            return None

        try:
            return parse_yaml(self.metadata_block.encode("utf-8"))
        except MalformedDocumentError as e:
            log.warning("%s: ignoring frontmatter: %s", self.path, e)
            return None

    @cached_property
    def aliases(self) -> list[str]:
        """Items of the frontmatter ``aliases`` sequence."""
        tree = self.parsed_metadata
        if tree is None:
            return []

        # Frontmatter is a prefix of the note, so YAML offsets index self.source
        aliases = []
        for captures in self._matches(self.queries.aliases, tree.root_node):
            aliases.extend(node_text(node, self.source) for node in captures.get("alias", []))
        return aliases

    @cached_property
    def alias_targets(self) -> list[str]:
        return [f"{self.name}|{alias}" for alias in self.aliases]

    @cached_property
    def frontmatter_links(self) -> list[Link]:
        """Links written inside double-quoted frontmatter values.

        Each quoted scalar is parsed as a standalone markdown body, with its
        surrounding double quotes left in the re-parsed text; the quotes are
        plain characters to the inline grammar. Scalars are never read as
        frontmatter themselves, so nesting stops here.
        """
        tree = self.parsed_metadata
        if tree is None:
            return []

        links = []
        for captures in self._matches(self.queries.quoted_scalars, tree.root_node):
            for node in captures.get("scalar", []):
                scalar = self.source[node.start_byte : node.end_byte]
                links.extend(extract_links(parse_markdown(scalar), scalar, self.queries))
        return links

    @cached_property
    def body_links(self) -> list[Link]:
        return extract_links(self.tree, self.source, self.queries)

    @property
    def links(self) -> list[Link]:
        """Frontmatter links followed by body links."""
        return self.frontmatter_links + self.body_links

    @cached_property
    def targets(self) -> list[str]:
        """Name, alias targets, then every link destination. May repeat."""
        return [self.name, *self.alias_targets, *(link.destination for link in self.links)]

    def _matches(self, query: Query, node: Node) -> list[dict[str, list[Node]]]:
        return [captures for _, captures in QueryCursor(query).matches(node)]
