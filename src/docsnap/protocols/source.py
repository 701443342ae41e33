"""Protocol for documentation source providers."""

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Source(Protocol):
    """Protocol for documentation source providers.

    Implementations make a repository working tree available on disk
    (local folder, git remote). Uses structural subtyping - no inheritance
    required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'git', 'local')."""
        ...

    def can_handle(self, location: str) -> bool:
        """Check if this source can provide the given location."""
        ...

    def checkout(self, location: str, ref: str) -> AbstractContextManager[Path]:
        """Provide the working tree for ``ref`` for the duration of the block.

        Anything acquired must be released when the block exits, whether it
        exits normally or with an exception.
        """
        ...
