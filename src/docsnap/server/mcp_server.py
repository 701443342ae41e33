"""FastMCP server implementation for docsnap."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from docsnap.catalog import SnapshotCatalog


def format_versions(catalog: SnapshotCatalog) -> str:
    """One line per bundle, newest first: version, filename, size."""
    entries = catalog.entries()
    if not entries:
        return "No bundles in this snapshot"

    lines = []
    for entry in entries:
        size = (catalog.path / entry.filename).stat().st_size
        label = str(entry.version) if entry.version else "?"
        lines.append(f"{label:<12} {entry.filename:<40} {size / 1024:>8.1f} KB")
    return "\n".join(lines)


def read_version_text(catalog: SnapshotCatalog, version: str = "") -> str:
    """Bundle text for ``version``, or the newest bundle when it is empty."""
    if not version:
        latest = catalog.latest()
        if latest is None:
            return "Error: No versioned bundles in this snapshot"
        version = latest.filename

    text = catalog.read_bundle(version)
    if text is None:
        return f"Error: Version not found: {version}"
    return text


def format_search(catalog: SnapshotCatalog, query: str, version: str = "", limit: int = 20) -> str:
    """Numbered search hits, each with its surrounding lines indented."""
    hits = catalog.search(query, version=version, limit=limit)
    if not hits:
        return f"No results found for: {query}"

    lines = []
    for i, hit in enumerate(hits, 1):
        context = hit.context.replace("\n", "\n   ")
        lines.append(f"{i}. {hit.filename}:{hit.line_number}")
        lines.append(f"   {context}")
        lines.append("")
    return "\n".join(lines)


def create_mcp_server(snapshot_dir: Path) -> FastMCP:
    """Create an MCP server for a built snapshot directory.

    Design: 1 process = 1 snapshot. Every version bundle in the directory
    is served; nothing is rebuilt.

    Args:
        snapshot_dir: Output directory of a previous ``docsnap build``

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="docsnap",
    )

    catalog = SnapshotCatalog(snapshot_dir)

    @mcp.tool()
    def list_versions() -> str:
        """List the documentation versions in this snapshot, newest first.

        Returns:
            One bundle per line with its size
        """
        return format_versions(catalog)

    @mcp.tool()
    def read_version(version: str = "") -> str:
        """Read the full documentation bundle for one version.

        Args:
            version: Version like "13.0.0". Empty reads the newest version.

        Returns:
            The bundle text, wrapped in its relay-docs tags
        """
        return read_version_text(catalog, version)

    @mcp.tool()
    def search(query: str, version: str = "", limit: int = 20) -> str:
        """Find text across the documentation bundles.

        Args:
            query: Text to search for (case-insensitive)
            version: Optional version to restrict the search to
            limit: Maximum number of matches to return (default: 20)

        Returns:
            Matching lines with a line of context on each side
        """
        return format_search(catalog, query, version=version, limit=limit)

    return mcp
