import logging

import pytest

from docsnap import cli


def test_build_from_local_checkout(docs_tree, output_dir):
    cli.main(
        [
            "build",
            "--repo",
            str(docs_tree.parent),
            "--docs-subdir",
            docs_tree.name,
            "-o",
            str(output_dir),
        ]
    )

    assert (output_dir / "index.html").exists()
    assert (output_dir / "version-v13.0.0.txt").exists()


def test_build_accepts_single_ref(docs_tree, output_dir):
    cli.main(
        [
            "build",
            "v13.0.0",
            "--repo",
            str(docs_tree.parent),
            "--docs-subdir",
            docs_tree.name,
            "-o",
            str(output_dir),
        ]
    )
    assert (output_dir / "index.html").exists()


def test_two_positionals_is_usage_error(docs_tree, output_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["build", "main", "extra", "--repo", str(docs_tree.parent), "-o", str(output_dir)])

    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err
    assert not output_dir.exists()


def test_ref_defaults_to_main():
    args = cli.create_parser().parse_args(["build"])
    assert args.ref == "main"


def test_missing_docs_dir_exits_nonzero(tmp_path, output_dir, caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as exc:
            cli.main(["build", "--repo", str(tmp_path), "--docs-subdir", "nope", "-o", str(output_dir)])

    assert exc.value.code == 1
    assert "Documentation root not found" in caplog.text


def test_unknown_repo_exits_nonzero(tmp_path, output_dir):
    with pytest.raises(SystemExit) as exc:
        cli.main(["build", "--repo", str(tmp_path / "missing"), "-o", str(output_dir)])
    assert exc.value.code == 1


def test_info_lists_versions(docs_tree, output_dir, capsys):
    cli.main(["build", "--repo", str(docs_tree.parent), "--docs-subdir", docs_tree.name, "-o", str(output_dir)])
    capsys.readouterr()

    cli.main(["info", str(output_dir)])

    out = capsys.readouterr().out
    assert out.index("13.0.0") < out.index("2.10.0") < out.index("version-v2.0.0.txt")
    assert "Total: 3" in out
