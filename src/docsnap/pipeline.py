"""The snapshot pipeline: discover -> bundle -> index."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from docsnap.assembler import build_bundles
from docsnap.config import BUNDLE_EXTENSION, SnapshotConfig
from docsnap.discovery import discover_versions
from docsnap.errors import SnapshotError
from docsnap.index import write_index

logger = logging.getLogger(__name__)


@dataclass
class SnapshotResult:
    """What a pipeline run wrote."""

    versions: list[str] = field(default_factory=list)
    bundles: list[Path] = field(default_factory=list)
    index: Path | None = None
    removed: list[Path] = field(default_factory=list)


def clean_output(output_dir: Path, index_filename: str) -> list[Path]:
    """Delete bundles and the index left by an earlier run.

    Only files the pipeline itself produces are touched.
    """
    if not output_dir.is_dir():
        return []

    removed = []
    for entry in sorted(output_dir.iterdir()):
        if not entry.is_file():
            continue
        if entry.name.endswith(BUNDLE_EXTENSION) or entry.name == index_filename:
            try:
                entry.unlink()
            except OSError as e:
                raise SnapshotError(f"cannot remove stale output {entry}: {e}") from e
            removed.append(entry)
    return removed


def build_snapshot(config: SnapshotConfig) -> SnapshotResult:
    """Run the full pipeline for one source tree.

    Stages run strictly in sequence and the first failure propagates. Without
    ``clean_output``, bundles from earlier runs for versions no longer in the
    source tree stay in the output directory and are listed in the index.

    Args:
        config: Source tree, output directory and build options

    Returns:
        SnapshotResult describing the written artifacts
    """
    result = SnapshotResult()

    if config.clean_output:
        result.removed = clean_output(config.output_directory, config.index_filename)
        for path in result.removed:
            logger.debug(f"Removed stale {path.name}")

    versions = discover_versions(config.source_tree)
    result.versions = [v.version for v in versions]
    logger.info(f"Found {len(versions)} versions in {config.source_tree}")

    config.output_directory.mkdir(parents=True, exist_ok=True)

    result.bundles = build_bundles(versions, config.output_directory, config.extension)
    result.index = write_index(config.output_directory, config.index_filename)
    return result
