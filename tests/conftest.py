import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep stray .env files and log settings out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('PWDHASH_LOG_LEVEL', raising=False)
    monkeypatch.delenv('ENVIRONMENT', raising=False)
    return tmp_path
