import shutil

import pytest

from docsnap.config import SnapshotConfig
from docsnap.errors import SourceError
from docsnap.pipeline import build_snapshot


def test_build_snapshot_end_to_end(docs_tree, output_dir):
    result = build_snapshot(SnapshotConfig(source_tree=docs_tree, output_directory=output_dir))

    assert sorted(result.versions) == ["13.0.0", "2.0.0", "2.10.0"]
    assert sorted(p.name for p in output_dir.iterdir()) == [
        "index.html",
        "version-v13.0.0.txt",
        "version-v2.0.0.txt",
        "version-v2.10.0.txt",
    ]
    assert (output_dir / "version-v13.0.0.txt").read_text() == (
        '<relay-docs relay-version="13.0.0">\n\nA\n\nB\n\n</relay-docs>'
    )
    assert (output_dir / "version-v2.0.0.txt").read_text() == (
        '<relay-docs relay-version="2.0.0">\n\nSetup 2.0\n\nIntro 2.0\n\n</relay-docs>'
    )

    page = result.index.read_text()
    assert page.index("version-v13.0.0.txt") < page.index("version-v2.10.0.txt")
    assert page.index("version-v2.10.0.txt") < page.index("version-v2.0.0.txt")


def test_accepts_string_paths(docs_tree, output_dir):
    config = SnapshotConfig(source_tree=str(docs_tree), output_directory=str(output_dir))
    result = build_snapshot(config)
    assert result.index == output_dir / "index.html"


def test_rerun_keeps_stale_bundles_by_default(docs_tree, output_dir):
    build_snapshot(SnapshotConfig(source_tree=docs_tree, output_directory=output_dir))

    shutil.rmtree(docs_tree / "version-v2.0.0")
    (docs_tree / "version-v3.0.0").mkdir()
    (docs_tree / "version-v3.0.0" / "new.md").write_text("three")

    build_snapshot(SnapshotConfig(source_tree=docs_tree, output_directory=output_dir))

    names = {p.name for p in output_dir.iterdir()}
    assert "version-v3.0.0.txt" in names
    # overwritten by name only; removed versions are left alone
    assert "version-v2.0.0.txt" in names
    assert "version-v2.0.0.txt" in (output_dir / "index.html").read_text()


def test_clean_output_drops_stale_bundles(docs_tree, output_dir):
    build_snapshot(SnapshotConfig(source_tree=docs_tree, output_directory=output_dir))
    (output_dir / "keep.json").write_text("{}")

    shutil.rmtree(docs_tree / "version-v2.0.0")
    (docs_tree / "version-v3.0.0").mkdir()

    result = build_snapshot(
        SnapshotConfig(source_tree=docs_tree, output_directory=output_dir, clean_output=True)
    )

    names = sorted(p.name for p in output_dir.iterdir())
    assert names == [
        "index.html",
        "keep.json",
        "version-v13.0.0.txt",
        "version-v2.10.0.txt",
        "version-v3.0.0.txt",
    ]
    assert "version-v2.0.0.txt" not in (output_dir / "index.html").read_text()
    assert output_dir / "version-v2.0.0.txt" in result.removed


def test_missing_source_tree_fails_before_writing(tmp_path, output_dir):
    with pytest.raises(SourceError):
        build_snapshot(SnapshotConfig(source_tree=tmp_path / "missing", output_directory=output_dir))
    assert not output_dir.exists()


def test_custom_extension(docs_tree, output_dir):
    build_snapshot(
        SnapshotConfig(source_tree=docs_tree, output_directory=output_dir, extension=".txt")
    )
    assert "not a document" in (output_dir / "version-v13.0.0.txt").read_text()
