import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'searchpaths'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from searchpaths.cli._dispatcher import discover_commands
from searchpaths.core.stdlib_logging import reset_logging_for_tests

# Seed variables used by the default config and by tests.
_SEED_ENV_KEYS = ["SEARCH_PATH", "MYPATHS"]


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test from an empty working directory with a clean environment.

    Developer shells may export SEARCHPATHS_* overrides or a SEARCH_PATH
    seed; either would silently change lookup results.
    """
    for key in list(os.environ):
        if key.startswith("SEARCHPATHS_"):
            monkeypatch.delenv(key, raising=False)
    for key in _SEED_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    yield workdir

    reset_logging_for_tests()
    discover_commands.cache_clear()


@pytest.fixture
def make_file(tmp_path: Path):
    """Create a file (and its parent directories) under ``tmp_path``."""

    def _make(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def workdir(_isolated_environment: Path) -> Path:
    """Current working directory for the test."""
    return _isolated_environment
