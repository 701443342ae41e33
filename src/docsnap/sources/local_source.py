"""Source for an already checked-out local directory."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class LocalSource:
    """Source for a working tree that already exists on disk."""

    source_type = "local"

    def can_handle(self, location: str) -> bool:
        """Check if this is an existing directory."""
        return Path(location).is_dir()

    @contextmanager
    def checkout(self, location: str, ref: str) -> Iterator[Path]:
        """Yield the directory unchanged. ``ref`` is ignored."""
        yield Path(location)
