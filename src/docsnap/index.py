"""Index page: list every bundle in the output directory, newest version first."""

import html
import logging
from pathlib import Path

from docsnap.config import BUNDLE_EXTENSION, INDEX_FILENAME
from docsnap.errors import IndexBuildError
from docsnap.models import IndexEntry
from docsnap.versioning import label_from_filename, newest_first, try_parse_version

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
<ul>
{items}
</ul>
</body>
</html>
"""

DEFAULT_TITLE = "Documentation snapshots"


def collect_index_entries(output_dir: Path | str) -> list[IndexEntry]:
    """Read bundle filenames from ``output_dir`` and parse their versions.

    Filenames are taken in ascending order. A label that does not parse is
    kept with ``version=None`` and logged, rather than failing the index.
    """
    output_path = Path(output_dir)
    filenames = sorted(
        entry.name
        for entry in output_path.iterdir()
        if entry.is_file() and entry.name.endswith(BUNDLE_EXTENSION)
    )

    entries = []
    for filename in filenames:
        version = try_parse_version(label_from_filename(filename))
        if version is None:
            logger.warning(f"Unparseable bundle name {filename}, listing it last")
        entries.append(IndexEntry(filename=filename, version=version))
    return entries


def sort_entries(entries: list[IndexEntry]) -> list[IndexEntry]:
    """Newest version first; unparseable names last."""
    return newest_first(entries)


def render_index(entries: list[IndexEntry], title: str = DEFAULT_TITLE) -> str:
    """Render the navigation page. Entries are listed in the order given."""
    items = []
    for entry in entries:
        name = html.escape(entry.filename)
        items.append(f'<li><a href="{name}">{name}</a></li>')
    return PAGE_TEMPLATE.format(title=html.escape(title), items="\n".join(items))


def write_index(output_dir: Path | str, filename: str = INDEX_FILENAME) -> Path:
    """Build the index for every bundle in ``output_dir`` and write it there.

    Returns:
        Path of the written index page

    Raises:
        IndexBuildError: If the directory cannot be listed or the page written
    """
    output_path = Path(output_dir)
    target = output_path / filename
    try:
        entries = sort_entries(collect_index_entries(output_path))
        target.write_text(render_index(entries), encoding="utf-8")
    except OSError as e:
        raise IndexBuildError(f"cannot write index {target}: {e}") from e

    logger.info(f"Indexed {len(entries)} bundles -> {target}")
    return target
