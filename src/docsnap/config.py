"""Run configuration for a snapshot build."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_REPOSITORY = "https://github.com/facebook/relay.git"
DEFAULT_REF = "main"
DEFAULT_DOCS_SUBDIR = "website/versioned_docs"
DEFAULT_OUTPUT_DIR = "out"

VERSION_PREFIX = "version-v"
BUNDLE_EXTENSION = ".txt"
DOCUMENT_EXTENSION = ".md"
INDEX_FILENAME = "index.html"


@dataclass(frozen=True)
class SnapshotConfig:
    """Everything the pipeline needs, passed in at invocation time.

    Args:
        source_tree: Directory holding the ``version-v*`` folders
        output_directory: Where bundles and the index page are written
        extension: Suffix of the document files to bundle
        index_filename: Name of the navigation page inside the output directory
        clean_output: Remove bundles left over from earlier runs before building
    """

    source_tree: Path
    output_directory: Path
    extension: str = DOCUMENT_EXTENSION
    index_filename: str = INDEX_FILENAME
    clean_output: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings from callers
        object.__setattr__(self, "source_tree", Path(self.source_tree))
        object.__setattr__(self, "output_directory", Path(self.output_directory))
