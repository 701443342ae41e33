"""Core data models for versions, documents and bundles."""

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional

from docsnap.config import BUNDLE_EXTENSION

OPEN_TAG = '<relay-docs relay-version="{version}">'
CLOSE_TAG = "</relay-docs>"
SEPARATOR = "\n\n"


class Version(NamedTuple):
    """A parsed ``major.minor.patch`` triple. Compares component-wise."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class VersionDirectory:
    """A ``version-v<major>.<minor>.<patch>`` folder in the source tree."""

    path: Path
    folder: str  # directory name verbatim
    version: str  # folder name without the prefix

    @property
    def bundle_filename(self) -> str:
        return f"{self.folder}{BUNDLE_EXTENSION}"


@dataclass(frozen=True)
class DocumentFile:
    """A document to be bundled. Content is only read on demand."""

    path: Path

    def read(self) -> str:
        # Decode raw bytes so line endings reach the bundle untouched
        return self.path.read_bytes().decode("utf-8")


@dataclass(frozen=True)
class Bundle:
    """The flattened text artifact for one documentation version."""

    version: str
    filename: str
    text: str

    @staticmethod
    def render(version: str, contents: list[str]) -> str:
        """Wrap document contents in the version-tagged envelope.

        The result is the opening tag, each document, and the closing tag,
        separated by blank lines. An empty ``contents`` still yields both tags.
        """
        parts = [OPEN_TAG.format(version=version), *contents, CLOSE_TAG]
        return SEPARATOR.join(parts)


@dataclass(frozen=True)
class IndexEntry:
    """A bundle filename paired with the version parsed back out of it."""

    filename: str
    version: Optional[Version] = None  # None when the label is unparseable

    @property
    def is_parsed(self) -> bool:
        return self.version is not None
