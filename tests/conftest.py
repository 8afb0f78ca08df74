"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from vaultlinks.vault.document import Document
from vaultlinks.vault.loader import Vault, load_vault
from vaultlinks.vault.queries import QueryRegistry, get_registry


@pytest.fixture
def fixture_vault_path() -> Path:
    """Path to the minimal fixture vault."""
    return Path(__file__).parent / "fixtures" / "minimal_vault"


@pytest.fixture
def fixture_vault(fixture_vault_path: Path) -> Vault:
    """Load the minimal fixture vault."""
    return load_vault(fixture_vault_path)


@pytest.fixture
def queries() -> QueryRegistry:
    return get_registry()


@pytest.fixture
def make_document(queries: QueryRegistry) -> Callable[..., Document]:
    """Build an in-memory document from lines of text."""

    def _make(name: str, *lines: str) -> Document:
        return Document(Path(f"{name}.md"), "\n".join(lines), queries)

    return _make


@pytest.fixture
def write_note(tmp_path: Path) -> Callable[..., Path]:
    """Write a note under a temporary vault root and return its path."""
    vault = tmp_path / "vault"
    vault.mkdir()

    def _write(relative: str, *lines: str) -> Path:
        path = vault / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
