import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]

src_dir = repo_root / "src"
# make the src/ layout importable without installing the package
if src_dir.exists() and str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def gomatria_home(tmp_path, monkeypatch):
    """Point the config directory at a fresh temp dir for every test."""
    home = tmp_path / "gomatria-home"
    monkeypatch.setenv("GOMATRIA_HOME", str(home))
    return home
