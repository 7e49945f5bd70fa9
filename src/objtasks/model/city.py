"""City record: one (country, city) pair used by the sorting helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CityRecord:
    country: str
    city: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CityRecord:
        return cls(country=data["country"], city=data["city"])

    def to_dict(self) -> dict[str, str]:
        return {"country": self.country, "city": self.city}
