# tests/conftest.py
import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # Keep tests away from the user's real config and cache directories.
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    for name in (
        "WATCHLOG_CONFIG_PATH",
        "WATCHLOG_CACHE_DIR",
        "WATCHLOG_CACHE_ENABLED",
        "WATCHLOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
