"""CLI entry point for docsnap."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Literal, cast

from docsnap.catalog import SnapshotCatalog
from docsnap.config import (
    DEFAULT_DOCS_SUBDIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REF,
    DEFAULT_REPOSITORY,
    DOCUMENT_EXTENSION,
    SnapshotConfig,
)
from docsnap.errors import SnapshotError
from docsnap.pipeline import build_snapshot
from docsnap.sources import get_source

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def build(
    ref: str = DEFAULT_REF,
    repo: str = DEFAULT_REPOSITORY,
    docs_subdir: str = DEFAULT_DOCS_SUBDIR,
    output: str = DEFAULT_OUTPUT_DIR,
    extension: str = DOCUMENT_EXTENSION,
    clean: bool = False,
) -> None:
    """Build one bundle per documented version plus the index page.

    Args:
        ref: Branch or tag to snapshot
        repo: Git remote URL or local checkout path
        docs_subdir: Path inside the repository holding the version folders
        output: Output directory for bundles and index
        extension: Document file suffix to include
        clean: Remove bundles from earlier runs first
    """
    source = get_source(repo)
    if source is None:
        logger.error(f"Cannot process: {repo}")
        logger.error("Supported inputs: git remotes, local directories")
        sys.exit(1)

    with source.checkout(repo, ref) as worktree:
        config = SnapshotConfig(
            source_tree=worktree / docs_subdir,
            output_directory=Path(output),
            extension=extension,
            clean_output=clean,
        )
        result = build_snapshot(config)

    logger.info(f"")
    logger.info(f"Built {len(result.bundles)} bundles -> {config.output_directory}")


def info(snapshot: str) -> None:
    """Show the versions in a built snapshot.

    Args:
        snapshot: Output directory of a previous build
    """
    catalog = SnapshotCatalog(snapshot)
    entries = catalog.entries()

    print(f"Snapshot: {catalog.path}")
    print(f"")
    print(f"Versions (newest first):")
    for entry in entries:
        size = (catalog.path / entry.filename).stat().st_size
        label = str(entry.version) if entry.version else "unparseable"
        print(f"  {label:<12} {entry.filename}  ({size / 1024:.1f} KB)")
    print(f"")
    print(f"Total: {len(entries)}")


def serve(snapshot: str, transport: str = "stdio") -> None:
    """Start MCP server for a built snapshot.

    Args:
        snapshot: Output directory of a previous build
        transport: Transport protocol (stdio or sse)
    """
    snapshot_path = Path(snapshot)
    if not snapshot_path.is_dir():
        logger.error(f"Snapshot not found: {snapshot}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from docsnap.server import create_mcp_server

    logger.info(f"Serving {snapshot} via {transport}")
    mcp = create_mcp_server(snapshot_path)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsnap",
        description="docsnap - flatten versioned docs into one text bundle per version",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every discovered version and document count",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # build command
    build_parser = subparsers.add_parser(
        "build",
        help="Build version bundles and the index page",
    )
    build_parser.add_argument(
        "ref",
        nargs="?",
        default=DEFAULT_REF,
        help=f"Branch or tag to snapshot (default: {DEFAULT_REF})",
    )
    build_parser.add_argument(
        "--repo",
        default=DEFAULT_REPOSITORY,
        help="Git remote or local checkout (default: %(default)s)",
    )
    build_parser.add_argument(
        "--docs-subdir",
        default=DEFAULT_DOCS_SUBDIR,
        help="Directory holding the version-v* folders (default: %(default)s)",
    )
    build_parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory (default: %(default)s)",
    )
    build_parser.add_argument(
        "--extension",
        default=DOCUMENT_EXTENSION,
        help="Document suffix to bundle (default: %(default)s)",
    )
    build_parser.add_argument(
        "--clean",
        action="store_true",
        help="Delete bundles from earlier runs before building",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show the versions in a built snapshot",
    )
    info_parser.add_argument("snapshot", help="Snapshot output directory")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for a built snapshot",
    )
    serve_parser.add_argument("snapshot", help="Snapshot output directory")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("docsnap").setLevel(logging.DEBUG)

    try:
        if args.command == "build":
            build(
                ref=args.ref,
                repo=args.repo,
                docs_subdir=args.docs_subdir,
                output=args.output,
                extension=args.extension,
                clean=args.clean,
            )
        elif args.command == "info":
            info(args.snapshot)
        elif args.command == "serve":
            serve(args.snapshot, args.transport)
    except (SnapshotError, OSError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
