"""Exceptions raised while indexing a vault.

Per-note problems (``InvalidDocumentError``, ``MalformedDocumentError``) are
caught by the loader and the note is skipped or degraded. ``RegistryError``
and ``MalformedMatchError`` mean the queries and grammars disagree, so they
abort the whole run.
"""

from pathlib import Path


class VaultLinksError(Exception):
    """Base class for vaultlinks errors."""


class RegistryError(VaultLinksError):
    """Raised when a tree-sitter query fails to compile."""


class InvalidDocumentError(VaultLinksError):
    """Raised when a note has no usable name."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class MalformedDocumentError(VaultLinksError):
    """Raised when note or frontmatter text does not parse under its grammar."""


class MalformedMatchError(VaultLinksError):
    """Raised when a link match has neither a destination nor a text capture."""
