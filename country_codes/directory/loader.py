from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Tuple

import yaml
from pydantic import ValidationError

from country_codes.directory.config import get_directory_config
from country_codes.directory.models import Country
from country_codes.directory.schemas import CountryEntry

logger = logging.getLogger(__name__)


class CountryTableError(RuntimeError):
    """Raised when the source table cannot be read or has the wrong shape."""


def _read_table(path: Path) -> list:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CountryTableError(f"Country table {path} could not be read") from exc
    except yaml.YAMLError as exc:
        raise CountryTableError(f"Country table {path} is not valid YAML") from exc
    if not isinstance(raw, list):
        raise CountryTableError(
            f"Country table {path} must be a list of entries, got {type(raw).__name__}"
        )
    return raw


@lru_cache
def load_countries(path: Path) -> Tuple[Country, ...]:
    countries = []
    for index, item in enumerate(_read_table(path)):
        try:
            entry = CountryEntry.model_validate(item)
        except ValidationError as exc:
            raise CountryTableError(f"Invalid entry {index} in country table {path}") from exc
        countries.append(Country.from_entry(entry, index=index))
    logger.info("Loaded %d countries from %s", len(countries), path)
    return tuple(countries)


def get_countries() -> Tuple[Country, ...]:
    return load_countries(get_directory_config().table_path)


def clear_caches() -> None:
    load_countries.cache_clear()
    get_directory_config.cache_clear()
