from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
CONFIG_PATH = CONFIG_DIR / "directory.yml"
DEFAULT_TABLE_PATH = CONFIG_DIR / "countries.yml"
TABLE_PATH_ENV = "COUNTRY_CODES_TABLE"


@dataclass(frozen=True)
class SuggestionConfig:
    limit: int
    score_cutoff: float


@dataclass(frozen=True)
class DirectoryConfig:
    table_path: Path
    flag_asset_dir: str
    flag_extension: str
    suggestions: SuggestionConfig

    def flag_uri_for(self, iso_code: str) -> str:
        return f"{self.flag_asset_dir}/{iso_code.lower()}.{self.flag_extension}"


def _resolve_table_path(configured: Optional[str]) -> Path:
    env_path = os.getenv(TABLE_PATH_ENV)
    if env_path:
        return Path(env_path)
    if not configured:
        return DEFAULT_TABLE_PATH
    path = Path(configured)
    # relative paths are anchored at the bundled config directory
    return path if path.is_absolute() else CONFIG_DIR / path


def check_suggestion_settings(limit: int, score_cutoff: float) -> None:
    if limit <= 0:
        raise ValueError(f"suggestion limit must be positive, got {limit}")
    if not 0.0 <= score_cutoff <= 1.0:
        raise ValueError(f"suggestion score_cutoff must be within [0, 1], got {score_cutoff}")


@lru_cache
def get_directory_config(path: Path = CONFIG_PATH) -> DirectoryConfig:
    data = yaml.safe_load(path.read_text()) if path.exists() else {}
    data = data or {}
    suggestion_data = data.get("suggestions") or {}
    suggestions = SuggestionConfig(
        limit=int(suggestion_data.get("limit", 5)),
        score_cutoff=float(suggestion_data.get("score_cutoff", 0.6)),
    )
    check_suggestion_settings(suggestions.limit, suggestions.score_cutoff)
    return DirectoryConfig(
        table_path=_resolve_table_path(data.get("table_path")),
        flag_asset_dir=str(data.get("flag_asset_dir", "flags")).rstrip("/"),
        flag_extension=str(data.get("flag_extension", "png")).lstrip("."),
        suggestions=suggestions,
    )
