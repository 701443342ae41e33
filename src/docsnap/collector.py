"""File collection for a single version folder."""

from pathlib import Path
from typing import Iterator

from docsnap.config import DOCUMENT_EXTENSION
from docsnap.models import DocumentFile
from docsnap.utils import has_extension, walk_files


def iter_documents(directory: Path | str, extension: str = DOCUMENT_EXTENSION) -> Iterator[DocumentFile]:
    """Lazily yield every document under ``directory`` with ``extension``."""
    for path in walk_files(directory, has_extension(extension)):
        yield DocumentFile(path=path)


def collect_documents(directory: Path | str, extension: str = DOCUMENT_EXTENSION) -> list[DocumentFile]:
    """Collect every matching document under ``directory``, at any depth.

    Args:
        directory: Root of one version's documentation tree
        extension: File suffix to include (e.g. ".md")

    Returns:
        Matching documents in walk order. Empty if there are none.
    """
    return list(iter_documents(directory, extension))
