"""Country metadata lookups and accent-insensitive text normalization."""

from country_codes.directory import (
    Country,
    CountryTableError,
    DirectoryConfig,
    clear_caches,
    find_by_dial_code,
    find_by_iso_code,
    find_by_name,
    get_directory_config,
    list_countries,
    load_countries,
    search_countries,
    suggest_countries,
)
from country_codes.normalizers.text_normalizer import normalize_text

__all__ = [
    "Country",
    "CountryTableError",
    "DirectoryConfig",
    "clear_caches",
    "find_by_dial_code",
    "find_by_iso_code",
    "find_by_name",
    "get_directory_config",
    "list_countries",
    "load_countries",
    "normalize_text",
    "search_countries",
    "suggest_countries",
]
