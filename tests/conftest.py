import importlib

import pytest

import config
from app import create_app


class LocalConfig(config.Config):
    HOST = '127.0.0.1'
    PORT = 0
    TESTING = True


@pytest.fixture
def app():
    return create_app(LocalConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def reload_config(monkeypatch):
    """Re-import config.py under a patched environment, restoring it afterwards."""
    def _reload(**env):
        for key, value in env.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)
