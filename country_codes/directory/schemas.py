from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CountryEntry(BaseModel):
    """One row of the source table, before defaults are applied."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: Optional[str] = None
    code: Optional[str] = None
    dial_code: Optional[str] = Field(default=None, pattern=r"^\+\d+$")
    national_significant_number: Optional[int] = Field(default=None, ge=1)
