"""Data models for docsnap."""

from docsnap.models.snapshot import (
    Bundle,
    DocumentFile,
    IndexEntry,
    Version,
    VersionDirectory,
)

__all__ = ["Bundle", "DocumentFile", "IndexEntry", "Version", "VersionDirectory"]
