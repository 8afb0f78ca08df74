"""Vault loading, parsing and target extraction."""

from .document import Document
from .loader import Vault, discover_notes, load_vault
from .parser import MarkdownTree, extract_links, parse_markdown, resolve
from .queries import QueryRegistry, get_registry

__all__ = [
    "Document",
    "MarkdownTree",
    "QueryRegistry",
    "Vault",
    "discover_notes",
    "extract_links",
    "get_registry",
    "load_vault",
    "parse_markdown",
    "resolve",
]
