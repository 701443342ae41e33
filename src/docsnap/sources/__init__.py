"""Documentation source providers for docsnap."""

from typing import Optional

from docsnap.protocols import Source
from docsnap.sources.git_source import GitSource
from docsnap.sources.local_source import LocalSource

# Registry of available sources
_SOURCES: list[Source] = [
    LocalSource(),
    GitSource(),
]


def get_source(location: str) -> Optional[Source]:
    """Find a source that can provide the given location.

    Args:
        location: Local directory path or git remote URL

    Returns:
        A Source instance that can handle the location, or None
    """
    for source in _SOURCES:
        if source.can_handle(location):
            return source
    return None


def register_source(source: Source) -> None:
    """Register a custom source (for plugins/extensions).

    Args:
        source: An object implementing the Source protocol
    """
    _SOURCES.append(source)


__all__ = ["get_source", "register_source", "GitSource", "LocalSource"]
