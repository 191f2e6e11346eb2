from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import dispatcher` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "flatkv.tsv"


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run from a temp directory with no KV_* variables so tests never read a real local.env or ./data.
    """
    for name in ("KV_DB_PATH", "KV_LOG_LEVEL", "KV_DELETE_REPORTS_MISS", "KV_PROMPT"):
        # set-then-delete so teardown also removes anything load_dotenv() writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class FailingFileStore:
    """Loads empty; every save fails like a read-only disk."""

    def load(self, path: Path):
        from flatkv import KeyValueTable

        return KeyValueTable()

    def save(self, path: Path, table) -> None:
        from flatkv import PersistenceError

        raise PersistenceError(path, "Permission denied")


@pytest.fixture
def failing_file_store() -> FailingFileStore:
    return FailingFileStore()
