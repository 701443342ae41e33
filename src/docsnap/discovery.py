"""Version discovery: find the per-version folders of a documentation tree."""

import logging
from pathlib import Path

from docsnap.errors import SourceError
from docsnap.models import VersionDirectory
from docsnap.versioning import is_version_folder, strip_prefix

logger = logging.getLogger(__name__)


def discover_versions(root: Path | str) -> list[VersionDirectory]:
    """Return the version folders directly under ``root``.

    Only directories named ``version-v<major>.<minor>.<patch>`` qualify.
    Files and other directories are skipped without error.

    Args:
        root: Directory containing the versioned documentation trees

    Returns:
        VersionDirectory entries sorted by folder name
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise SourceError(f"Documentation root not found: {root_path}")

    versions = []
    for entry in sorted(root_path.iterdir()):
        if not entry.is_dir() or not is_version_folder(entry.name):
            logger.debug(f"Skipping {entry.name}")
            continue

        version = VersionDirectory(
            path=entry,
            folder=entry.name,
            version=strip_prefix(entry.name),
        )
        logger.debug(f"Found version {version.version}")
        versions.append(version)

    return versions
