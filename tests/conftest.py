import pytest

from country_codes.directory.config import TABLE_PATH_ENV
from country_codes.directory.loader import clear_caches


@pytest.fixture(autouse=True)
def fresh_directory(monkeypatch):
    monkeypatch.delenv(TABLE_PATH_ENV, raising=False)
    clear_caches()
    yield
    clear_caches()


@pytest.fixture
def write_table(tmp_path, monkeypatch):
    def _write(text: str, name: str = "countries.yml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv(TABLE_PATH_ENV, str(path))
        clear_caches()
        return path

    return _write
