from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from country_codes.directory.config import get_directory_config
from country_codes.directory.schemas import CountryEntry

logger = logging.getLogger(__name__)

DEFAULT_NAME = "United States"
DEFAULT_ISO_CODE = "US"
DEFAULT_DIAL_CODE = "+1"

_REGIONAL_INDICATOR_A = 0x1F1E6


@dataclass(frozen=True)
class Country:
    """A single country of the directory.

    Records are immutable: use :meth:`with_` to derive a modified copy.
    ``national_significant_number`` is the digit count of a national number
    without the dial code or trunk prefix, or ``None`` when the table has no
    concrete value for the country.
    """

    name: str
    iso_code: str
    dial_code: str
    national_significant_number: Optional[int] = None

    @classmethod
    def from_entry(cls, entry: CountryEntry, index: Optional[int] = None) -> "Country":
        """Build a record from a table row, falling back to US values for missing keys."""
        defaults = {
            "name": DEFAULT_NAME,
            "code": DEFAULT_ISO_CODE,
            "dial_code": DEFAULT_DIAL_CODE,
        }
        values: Dict[str, str] = {}
        for key, default in defaults.items():
            value = getattr(entry, key)
            if value is None:
                logger.warning(
                    "Country entry %s has no %r, defaulting to %r",
                    index if index is not None else "?",
                    key,
                    default,
                )
                value = default
            values[key] = value
        return cls(
            name=values["name"],
            iso_code=values["code"],
            dial_code=values["dial_code"],
            national_significant_number=entry.national_significant_number,
        )

    @classmethod
    def from_map(cls, data: Dict[str, Any], index: Optional[int] = None) -> "Country":
        return cls.from_entry(CountryEntry.model_validate(data), index=index)

    def with_(self, **changes: Any) -> "Country":
        return replace(self, **changes)

    @property
    def flag_uri(self) -> str:
        return get_directory_config().flag_uri_for(self.iso_code)

    @property
    def flag_emoji(self) -> str:
        code = self.iso_code.upper()
        if len(code) != 2 or not all("A" <= c <= "Z" for c in code):
            return ""
        return "".join(chr(_REGIONAL_INDICATOR_A + ord(c) - ord("A")) for c in code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "code": self.iso_code,
            "dial_code": self.dial_code,
            "national_significant_number": self.national_significant_number,
        }
