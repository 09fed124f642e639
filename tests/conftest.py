import pytest

from lessons import config


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch):
    monkeypatch.delenv("DEBUG_LOG", raising=False)
    # a local .env must not leak into the test process
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)
