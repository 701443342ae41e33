"""Exception hierarchy for docsnap."""


class SnapshotError(Exception):
    """Base class for every failure surfaced by a snapshot run."""


class SourceError(SnapshotError):
    """The documentation source could not be acquired or located."""


class BundleError(SnapshotError):
    """A version's bundle could not be read or written."""

    def __init__(self, version: str, message: str):
        super().__init__(f"{version}: {message}")
        self.version = version


class IndexBuildError(SnapshotError):
    """The index page could not be written."""


class VersionParseError(SnapshotError, ValueError):
    """A version label is not of the form <major>.<minor>.<patch>."""

    def __init__(self, label: str):
        super().__init__(f"Not a semantic version: {label!r}")
        self.label = label
