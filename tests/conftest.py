import pytest

from src.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(tmp_path, monkeypatch):
	monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
	get_settings.cache_clear()
	yield
	get_settings.cache_clear()
