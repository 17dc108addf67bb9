from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from rapidfuzz import fuzz, process

from country_codes.directory.config import check_suggestion_settings, get_directory_config
from country_codes.directory.loader import get_countries
from country_codes.directory.models import Country
from country_codes.normalizers.text_normalizer import normalize_text

logger = logging.getLogger(__name__)


def _first(predicate: Callable[[Country], bool], key: str, value: str) -> Optional[Country]:
    for country in get_countries():
        if predicate(country):
            return country
    logger.debug("No country with %s %r", key, value)
    return None


def _with_plus(dial_code: str) -> str:
    return dial_code if dial_code.startswith("+") else f"+{dial_code}"


def find_by_dial_code(dial_code: Optional[str]) -> Optional[Country]:
    """First country in table order using ``dial_code``; ``+`` is optional.

    Dial codes are shared (``+1`` covers the whole NANP), so the result
    depends on the table order.
    """
    if dial_code is None:
        return None
    formatted = _with_plus(dial_code)
    return _first(lambda c: c.dial_code == formatted, "dial code", formatted)


def find_by_iso_code(iso_code: Optional[str]) -> Optional[Country]:
    if iso_code is None:
        return None
    wanted = iso_code.upper()
    return _first(lambda c: c.iso_code.upper() == wanted, "ISO code", iso_code)


def find_by_name(name: Optional[str]) -> Optional[Country]:
    if name is None:
        return None
    wanted = name.lower()
    return _first(lambda c: c.name.lower() == wanted, "name", name)


def list_countries() -> Tuple[Country, ...]:
    return get_countries()


def search_countries(query: Optional[str]) -> List[Country]:
    """Filter the directory the way a picker does while the user types.

    Matches accent-insensitive substrings of the name, or a prefix of the
    ISO code or dial code. Table order is kept.
    """
    countries = get_countries()
    if not query or not query.strip():
        return list(countries)
    needle = normalize_text(query.strip())
    code_prefix = query.strip().upper()
    dial_prefix = _with_plus(query.strip())
    return [
        country
        for country in countries
        if needle in normalize_text(country.name)
        or country.iso_code.upper().startswith(code_prefix)
        or country.dial_code.startswith(dial_prefix)
    ]


def suggest_countries(
    query: Optional[str],
    limit: Optional[int] = None,
    score_cutoff: Optional[float] = None,
) -> List[Tuple[Country, float]]:
    """Fuzzy name suggestions, best first, with scores in ``[0, 1]``.

    Raises ``ValueError`` for a non-positive ``limit`` or a ``score_cutoff``
    outside ``[0, 1]``.
    """
    settings = get_directory_config().suggestions
    limit = settings.limit if limit is None else limit
    score_cutoff = settings.score_cutoff if score_cutoff is None else score_cutoff
    check_suggestion_settings(limit, score_cutoff)
    if not query or not query.strip():
        return []
    countries = get_countries()
    choices = [normalize_text(country.name) for country in countries]
    results = process.extract(
        normalize_text(query.strip()),
        choices,
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=score_cutoff * 100.0,
    )
    return [(countries[index], score / 100.0) for _, score, index in results]
