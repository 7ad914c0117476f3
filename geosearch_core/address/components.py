"""GeoSearch Address Components - Structured Request Compilation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Sequence

from geosearch_core.address.builder import AddressQueryBuilder
from geosearch_core.address.config import AddressQueryConfig
from geosearch_core.query.nodes import BooleanQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddressComponents:
    """Components of a structured address request.

    Blank values are normalized to ``None``.

    Attributes:
        country_code: ISO country code
        state: State name or abbreviation
        county: County name
        city: City name
        district: District or suburb name
        postcode: Postal code
        street: Street name
        house_number: House number
    """

    country_code: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    postcode: Optional[str] = None
    street: Optional[str] = None
    house_number: Optional[str] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str) and not value.strip():
                object.__setattr__(self, f.name, None)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddressComponents":
        """Create components from a mapping, ignoring unrelated keys.

        Non-string values such as numeric postcodes are converted to strings.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{
            k: v if v is None or isinstance(v, str) else str(v)
            for k, v in data.items()
            if k in known
        })

    def is_empty(self) -> bool:
        """Whether no component is present."""
        return all(getattr(self, f.name) is None for f in fields(self))

    @property
    def has_street(self) -> bool:
        return self.street is not None or self.house_number is not None

    @property
    def has_district(self) -> bool:
        return self.district is not None

    @property
    def has_postcode(self) -> bool:
        return self.postcode is not None

    @property
    def has_city_or_postcode(self) -> bool:
        return self.city is not None or self.postcode is not None


def compile_address_query(
    components: AddressComponents,
    language: str,
    languages: Sequence[str],
    lenient: bool = False,
    config: Optional[AddressQueryConfig] = None,
) -> BooleanQuery:
    """Compile structured address components into a single query.

    Components are added from the least to the most specific one so the
    city context is complete before the house number clause reads it.

    Args:
        components: Address components of the request
        language: Requested result language
        languages: All languages with name fields in the index
        lenient: Allow edit distance on postcodes and streets
        config: Boost weights and field conventions

    Returns:
        Composed boolean query
    """
    c = components
    if c.is_empty():
        logger.warning("Compiling address query without any component, query matches everything")

    below_district = c.has_street
    below_county = c.has_city_or_postcode or c.has_district or below_district
    below_state = c.county is not None or below_county

    builder = (
        AddressQueryBuilder(lenient, language, languages, config)
        .add_country_code(c.country_code)
        .add_state(c.state, below_state)
        .add_county(c.county, below_county)
        .add_city(c.city, c.has_district, c.has_street, c.has_postcode)
        .add_postal_code(c.postcode)
        .add_district(c.district, below_district)
        .add_street_and_house_number(c.street, c.house_number)
    )
    return builder.build()


__all__ = ["AddressComponents", "compile_address_query"]
