"""Bundle assembly: concatenate one version's documents into a tagged text file."""

import logging
from pathlib import Path

from docsnap.collector import collect_documents
from docsnap.config import DOCUMENT_EXTENSION
from docsnap.errors import BundleError
from docsnap.models import Bundle, VersionDirectory

logger = logging.getLogger(__name__)


def assemble_bundle(version_dir: VersionDirectory, extension: str = DOCUMENT_EXTENSION) -> Bundle:
    """Build the bundle for one version in memory.

    Documents are concatenated in full-path lexicographic order so that
    repeated runs over the same tree produce identical output.

    Args:
        version_dir: The version folder to bundle
        extension: Suffix of the document files to include

    Returns:
        The assembled Bundle

    Raises:
        BundleError: If the tree cannot be walked or any document cannot be read
    """
    try:
        documents = collect_documents(version_dir.path, extension)
    except OSError as e:
        raise BundleError(version_dir.version, f"cannot walk {version_dir.path}: {e}") from e

    documents.sort(key=lambda doc: str(doc.path))

    contents = []
    for doc in documents:
        try:
            contents.append(doc.read())
        except (OSError, UnicodeDecodeError) as e:
            raise BundleError(version_dir.version, f"cannot read {doc.path}: {e}") from e

    logger.debug(f"  {version_dir.version}: {len(documents)} documents")

    return Bundle(
        version=version_dir.version,
        filename=version_dir.bundle_filename,
        text=Bundle.render(version_dir.version, contents),
    )


def write_bundle(bundle: Bundle, output_dir: Path | str) -> Path:
    """Write a bundle into ``output_dir``, replacing any file of the same name."""
    output_path = Path(output_dir)
    target = output_path / bundle.filename
    try:
        output_path.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the bytes identical across platforms
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(bundle.text)
    except OSError as e:
        raise BundleError(bundle.version, f"cannot write {target}: {e}") from e
    return target


def build_bundles(
    versions: list[VersionDirectory],
    output_dir: Path | str,
    extension: str = DOCUMENT_EXTENSION,
) -> list[Path]:
    """Assemble and write a bundle for each version, one after another.

    The first failure stops the run. Bundles already written stay on disk.

    Returns:
        Paths of the written bundles, in the order given
    """
    written = []
    for version_dir in versions:
        bundle = assemble_bundle(version_dir, extension)
        path = write_bundle(bundle, output_dir)
        logger.info(f"  {bundle.filename}")
        written.append(path)
    return written
