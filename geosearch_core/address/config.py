"""GeoSearch Address Config - Boost Weights and Field Conventions.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from geosearch_core.address.fields import NAME


@dataclass(frozen=True)
class BoostWeights:
    """Relevance weight per address field.

    Attributes:
        state: State boost, low because states are written both in full
            and abbreviated
        county: County boost
        city: City boost
        postcode: Postal code boost
        district: District boost
        street: Street boost, high because streets outside the requested
            city are filtered
        house_number: House number boost
        house_number_unmatched: Weight for records without any house number,
            kept for tuning; the fallback clause has no scoring clause to boost
        wrong_language_factor: Factor for name matches in a language other
            than the requested one
        city_as_district_factor: Factor for a city value matched as district
    """

    state: float = 0.1
    county: float = 4.0
    city: float = 3.0
    postcode: float = 7.0
    district: float = 2.0
    street: float = 5.0
    house_number: float = 10.0
    house_number_unmatched: float = 5.0
    wrong_language_factor: float = 0.1
    city_as_district_factor: float = 0.95

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"Boost weight {f.name} must not be negative, got {value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BoostWeights":
        """Create weights from a mapping, keeping defaults for missing keys.

        Raises:
            ValueError: On unknown keys or negative weights
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown boost weights: {', '.join(sorted(unknown))}")
        return cls(**{name: float(value) for name, value in data.items()})

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class AddressQueryConfig:
    """Address query configuration.

    Attributes:
        boosts: Relevance weights per field
        collector_suffix: Suffix of the denormalized address text field
        name_field: Root of the per-language name fields
        name_subfield: Sub-field holding the normalized name
    """

    boosts: BoostWeights = field(default_factory=BoostWeights)
    collector_suffix: str = "_collector"
    name_field: str = NAME
    name_subfield: str = "raw"

    def collector_field(self, name: str) -> str:
        """Collector variant of an address field."""
        return f"{name}{self.collector_suffix}"

    def name_field_for(self, language: str) -> str:
        """Normalized name field for one language."""
        return f"{self.name_field}.{language}.{self.name_subfield}"


__all__ = ["BoostWeights", "AddressQueryConfig"]
