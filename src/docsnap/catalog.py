"""Read-side view of a built snapshot directory."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docsnap.config import BUNDLE_EXTENSION, VERSION_PREFIX
from docsnap.errors import SnapshotError
from docsnap.index import collect_index_entries, sort_entries
from docsnap.models import IndexEntry


@dataclass(frozen=True)
class SearchHit:
    """A line in a bundle that matched a search query."""

    filename: str
    line_number: int
    context: str


class SnapshotCatalog:
    """Lookup over the bundles in an output directory."""

    def __init__(self, output_dir: Path | str):
        self.path = Path(output_dir)
        if not self.path.is_dir():
            raise SnapshotError(f"Snapshot directory not found: {self.path}")

    def entries(self) -> list[IndexEntry]:
        """Bundles in index order (newest version first)."""
        return sort_entries(collect_index_entries(self.path))

    def latest(self) -> Optional[IndexEntry]:
        """The newest parseable version, if any."""
        for entry in self.entries():
            if entry.is_parsed:
                return entry
        return None

    def bundle_path(self, version: str) -> Optional[Path]:
        """Resolve ``1.2.3``, ``version-v1.2.3`` or a full filename to a bundle path.

        Anything other than a plain filename (separators, ``..``) resolves to None.
        """
        name = version
        if not name or Path(name).name != name:
            return None
        if not name.startswith(VERSION_PREFIX):
            name = f"{VERSION_PREFIX}{name}"
        if not name.endswith(BUNDLE_EXTENSION):
            name = f"{name}{BUNDLE_EXTENSION}"

        path = self.path / name
        return path if path.is_file() else None

    def read_bundle(self, version: str) -> Optional[str]:
        """Return the bundle text for a version, or None if there is none."""
        path = self.bundle_path(version)
        if path is None:
            return None
        return path.read_bytes().decode("utf-8")

    def search(self, query: str, version: str = "", limit: int = 20, context: int = 1) -> list[SearchHit]:
        """Case-insensitive substring search across bundles.

        Args:
            query: Text to look for
            version: Restrict to one version (empty searches all, newest first)
            limit: Maximum number of hits
            context: Lines of surrounding text to include on each side
        """
        needle = query.lower()
        if version:
            path = self.bundle_path(version)
            paths = [path] if path else []
        else:
            paths = [self.path / entry.filename for entry in self.entries()]

        hits: list[SearchHit] = []
        for path in paths:
            lines = path.read_text(encoding="utf-8").splitlines()
            for i, line in enumerate(lines):
                if needle not in line.lower():
                    continue
                start = max(0, i - context)
                hits.append(
                    SearchHit(
                        filename=path.name,
                        line_number=i + 1,
                        context="\n".join(lines[start : i + context + 1]),
                    )
                )
                if len(hits) >= limit:
                    return hits
        return hits
