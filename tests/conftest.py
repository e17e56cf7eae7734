from __future__ import annotations

from pathlib import Path
import sys


import pytest
from fastapi.testclient import TestClient


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import kvstore...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """
    Strip every variable get_settings() reads so defaults are deterministic.
    """
    for name in ("KV_HOST", "KV_PORT", "LOG_LEVEL", "DEBUG_LOG_REQUESTS", "STRICT_MISSING_KEYS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    from settings import get_settings

    return get_settings()


@pytest.fixture
def store():
    from kvstore import KVStore

    return KVStore[str, str]()


@pytest.fixture
def client(store, settings) -> TestClient:
    import app as app_module

    return TestClient(app_module.create_app(store=store, settings=settings))
