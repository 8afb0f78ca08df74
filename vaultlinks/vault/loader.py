"""Vault loading: note discovery and parallel document construction."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from ..config import NOTE_EXTENSION
from ..errors import InvalidDocumentError
from ..models import DocumentFailure, Link
from .document import Document
from .queries import QueryRegistry, get_registry

log = logging.getLogger(__name__)


@dataclass
class Vault:
    """Container for all loaded vault documents."""

    path: Path
    documents: list[Document] = field(default_factory=list)
    failures: list[DocumentFailure] = field(default_factory=list)

    # Lookup table built after loading
    _by_name: dict[str, Document] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        self._build_lookups()

    def _build_lookups(self):
        """Build name lookup; the first document wins on duplicate names."""
        self._by_name = {}
        for document in self.documents:
            self._by_name.setdefault(document.name, document)

    def get(self, name: str) -> Document | None:
        """Get a document by its exact name."""
        return self._by_name.get(name)

    def links(self) -> list[Link]:
        """Every link of every document, in document order."""
        return [link for document in self.documents for link in document.links]

    def targets(self) -> set[str]:
        """Every target of every document, deduplicated. Unordered."""
        return {target for document in self.documents for target in document.targets}


def discover_notes(vault_path: Path, extension: str = NOTE_EXTENSION) -> list[Path]:
    """Find note files under ``vault_path``, skipping hidden files and folders.

    Returns:
        Sorted list of paths.
    """
    notes = []
    for path in vault_path.rglob(f"*{extension}"):
        if any(part.startswith(".") for part in path.relative_to(vault_path).parts):
            continue
        if path.is_file():
            notes.append(path)
    return sorted(notes)


def load_document(path: Path, queries: QueryRegistry) -> Document | DocumentFailure:
    """Build one document and compute its targets.

    Unreadable and nameless files come back as a ``DocumentFailure``. Any
    other exception propagates.
    """
    try:
        document = Document.load(path, queries)
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Skipping unreadable note %s: %s", path, e)
        return DocumentFailure(path=path, kind="unreadable", message=str(e))
    except InvalidDocumentError as e:
        log.warning("Skipping invalid note %s: %s", path, e.message)
        return DocumentFailure(path=path, kind="invalid", message=e.message)

    log.debug("%s: %d targets", document.name, len(document.targets))
    return document


def load_vault(
    vault_path: Path,
    queries: QueryRegistry | None = None,
    jobs: int | None = None,
    extension: str = NOTE_EXTENSION,
) -> Vault:
    """Load every note under the vault in a thread pool.

    Args:
        vault_path: Root directory of the vault
        queries: Compiled queries (defaults to the process-wide registry)
        jobs: Worker threads (defaults to the executor's own default)
        extension: Note file suffix

    Returns:
        Vault with documents in path order and any skipped files

    Raises:
        RegistryError: If the queries fail to compile.
        MalformedMatchError: If a link match breaks the query contract.
    """
    if queries is None:
        queries = get_registry()

    paths = discover_notes(vault_path, extension)
    log.info("Loading %d notes from %s", len(paths), vault_path)

    vault = Vault(path=vault_path)
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        for result in pool.map(partial(load_document, queries=queries), paths):
            if isinstance(result, DocumentFailure):
                vault.failures.append(result)
            else:
                vault.documents.append(result)

    vault._build_lookups()
    return vault
