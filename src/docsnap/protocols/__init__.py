"""Protocol definitions for extensible components."""

from docsnap.protocols.source import Source

__all__ = ["Source"]
