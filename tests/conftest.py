import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from roguelike_level import create_app  # noqa: E402
from roguelike_level.routes.level_api import _level_cache, _level_cache_lock  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_level_cache():
    """Generated levels must not leak between tests through the API cache."""
    with _level_cache_lock:
        _level_cache.clear()
    yield


@pytest.fixture(autouse=True)
def _metrics_enabled(monkeypatch):
    monkeypatch.delenv("LEVEL_ENABLE_METRICS", raising=False)
