"""Source for remote git repositories."""

import logging
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from docsnap.errors import SourceError

logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ("https://", "http://", "ssh://", "git://", "git@", "file://")


class GitSource:
    """Shallow-clones a branch or tag into a temporary directory."""

    source_type = "git"

    def __init__(self, git: str = "git"):
        self.git = git

    def can_handle(self, location: str) -> bool:
        """Check if this looks like a git remote."""
        return location.startswith(REMOTE_PREFIXES) or location.endswith(".git")

    @contextmanager
    def checkout(self, location: str, ref: str) -> Iterator[Path]:
        """Clone ``ref`` of ``location`` and yield the working tree.

        The clone is deleted when the block exits, including on error.

        Raises:
            SourceError: If git is missing or the clone fails
        """
        if shutil.which(self.git) is None:
            raise SourceError(f"git executable not found: {self.git}")

        with tempfile.TemporaryDirectory(prefix="docsnap-") as tmp:
            worktree = Path(tmp) / "repo"
            logger.info(f"Cloning {location} @ {ref}")
            try:
                subprocess.run(
                    [
                        self.git,
                        "clone",
                        "--depth",
                        "1",
                        "--branch",
                        ref,
                        location,
                        str(worktree),
                    ],
                    check=True,
                    capture_output=True,
                    text=True,
                )
            except subprocess.CalledProcessError as e:
                detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
                raise SourceError(f"Failed to clone {location} @ {ref}: {detail}") from e

            yield worktree
