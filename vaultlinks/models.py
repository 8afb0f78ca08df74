"""Data models for extracted links and skipped notes."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

# Why a file could not be turned into a document
FailureKind = Literal["unreadable", "invalid"]


@dataclass(frozen=True)
class Link:
    """A reference from a note body or frontmatter value."""

    destination: str
    text: str  # display label; equals destination for [[Foo]]

    def __str__(self) -> str:
        return f"{self.text} -> {self.destination}"


@dataclass(frozen=True)
class DocumentFailure:
    """A discovered file that was skipped while loading the vault."""

    path: Path
    kind: FailureKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.upper()}: {self.path} - {self.message}"
