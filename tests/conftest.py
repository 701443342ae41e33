import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without installing the package
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def docs_tree(tmp_path):
    """A versioned docs root with three versions and some noise."""
    root = tmp_path / "versioned_docs"
    write(root / "version-v2.0.0" / "intro.md", "Intro 2.0")
    write(root / "version-v2.0.0" / "guides" / "setup.md", "Setup 2.0")
    write(root / "version-v2.10.0" / "intro.md", "Intro 2.10")
    write(root / "version-v13.0.0" / "a.md", "A")
    write(root / "version-v13.0.0" / "nested" / "deep" / "b.md", "B")
    write(root / "version-v13.0.0" / "notes.txt", "not a document")
    write(root / "version-vX.Y.Z" / "intro.md", "malformed")
    write(root / "README.md", "top-level file")
    return root


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "out"
