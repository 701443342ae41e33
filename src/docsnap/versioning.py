"""Version label parsing and ordering."""

import re
from typing import Optional

from docsnap.config import BUNDLE_EXTENSION, VERSION_PREFIX
from docsnap.errors import VersionParseError
from docsnap.models import IndexEntry, Version

VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")
VERSION_FOLDER_RE = re.compile(rf"{re.escape(VERSION_PREFIX)}[0-9]+\.[0-9]+\.[0-9]+")


def parse_version(label: str) -> Version:
    """Parse ``major.minor.patch`` into a Version.

    Raises:
        VersionParseError: If the label is not three dot-separated
            non-negative integers
    """
    match = VERSION_RE.fullmatch(label)
    if match is None:
        raise VersionParseError(label)
    major, minor, patch = (int(group) for group in match.groups())
    return Version(major, minor, patch)


def is_version_folder(name: str) -> bool:
    """Check if a directory name follows the ``version-v<x>.<y>.<z>`` convention."""
    return VERSION_FOLDER_RE.fullmatch(name) is not None


def strip_prefix(name: str) -> str:
    """``version-v1.2.3`` -> ``1.2.3``. Names without the prefix pass through."""
    if name.startswith(VERSION_PREFIX):
        return name[len(VERSION_PREFIX):]
    return name


def label_from_filename(filename: str) -> str:
    """Recover the dotted version label from a bundle filename."""
    if filename.endswith(BUNDLE_EXTENSION):
        filename = filename[: -len(BUNDLE_EXTENSION)]
    return strip_prefix(filename)


def try_parse_version(label: str) -> Optional[Version]:
    """Like parse_version, but returns None for unparseable labels."""
    try:
        return parse_version(label)
    except VersionParseError:
        return None


def newest_first(entries: list[IndexEntry]) -> list[IndexEntry]:
    """Order index entries by version, newest first.

    Comparison is numeric and component-wise, so 13.0.0 sorts above 2.10.0,
    which sorts above 2.0.0. Entries with no parsed version go after all
    parsed ones. The sort is stable: ties keep their incoming order.
    """
    parsed = [entry for entry in entries if entry.version is not None]
    unparsed = [entry for entry in entries if entry.version is None]
    parsed.sort(key=lambda entry: entry.version, reverse=True)
    # reverse=True keeps equal keys in their original order
    return parsed + unparsed
