import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host configuration out of the tests."""
    for name in ("AUTOREST_PATH", "DEV_TOOLS_THEME", "DEV_TOOLS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Run a test from inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
