"""Country directory: the static country table and its lookups."""

from country_codes.directory.config import DirectoryConfig, get_directory_config
from country_codes.directory.loader import (
    CountryTableError,
    clear_caches,
    get_countries,
    load_countries,
)
from country_codes.directory.lookup import (
    find_by_dial_code,
    find_by_iso_code,
    find_by_name,
    list_countries,
    search_countries,
    suggest_countries,
)
from country_codes.directory.models import Country

__all__ = [
    "Country",
    "CountryTableError",
    "DirectoryConfig",
    "clear_caches",
    "find_by_dial_code",
    "find_by_iso_code",
    "find_by_name",
    "get_countries",
    "get_directory_config",
    "list_countries",
    "load_countries",
    "search_countries",
    "suggest_countries",
]
