from pathlib import Path

import pytest

from country_codes.directory.config import (
    CONFIG_DIR,
    DEFAULT_TABLE_PATH,
    TABLE_PATH_ENV,
    get_directory_config,
)


def test_bundled_config():
    config = get_directory_config()
    assert config.table_path == DEFAULT_TABLE_PATH
    assert config.flag_uri_for("FR") == "flags/fr.png"
    assert config.suggestions.limit == 5
    assert config.suggestions.score_cutoff == 0.6


def test_missing_config_uses_defaults(tmp_path):
    config = get_directory_config(tmp_path / "missing.yml")
    assert config.table_path == DEFAULT_TABLE_PATH
    assert config.flag_asset_dir == "flags"
    assert config.flag_extension == "png"


def test_custom_flag_convention(tmp_path):
    path = tmp_path / "directory.yml"
    path.write_text("flag_asset_dir: assets/flags/\nflag_extension: .svg\n")
    config = get_directory_config(path)
    assert config.flag_uri_for("GB") == "assets/flags/gb.svg"


def test_relative_table_path_is_anchored_at_config_dir(tmp_path):
    path = tmp_path / "directory.yml"
    path.write_text("table_path: other.yml\n")
    assert get_directory_config(path).table_path == CONFIG_DIR / "other.yml"


def test_environment_overrides_table_path(tmp_path, monkeypatch):
    monkeypatch.setenv(TABLE_PATH_ENV, str(tmp_path / "env.yml"))
    assert get_directory_config().table_path == Path(tmp_path / "env.yml")


@pytest.mark.parametrize(
    "body",
    ["suggestions:\n  limit: 0\n", "suggestions:\n  score_cutoff: 1.5\n"],
)
def test_invalid_suggestion_settings(tmp_path, body):
    path = tmp_path / "directory.yml"
    path.write_text(body)
    with pytest.raises(ValueError):
        get_directory_config(path)
