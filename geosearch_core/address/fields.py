"""GeoSearch Address Fields - Index Field Names and Object Types.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from enum import Enum

COUNTRYCODE = "countrycode"
STATE = "state"
COUNTY = "county"
CITY = "city"
DISTRICT = "district"
POSTCODE = "postcode"
STREET = "street"
HOUSENUMBER = "housenumber"
NAME = "name"
OBJECT_TYPE = "type"

# Fields whose clauses identify the city context of a house number.
CITY_CONTEXT_FIELDS = frozenset({POSTCODE, CITY, DISTRICT, COUNTY})


class ObjectType(Enum):
    """Declared object type of an address record.

    Name matches are always filtered on the record's object type, so a
    city record can never satisfy a county or district name clause.
    """

    STREET = "street"
    DISTRICT = "district"
    CITY = "city"
    COUNTY = "county"
    STATE = "state"


__all__ = [
    "COUNTRYCODE",
    "STATE",
    "COUNTY",
    "CITY",
    "DISTRICT",
    "POSTCODE",
    "STREET",
    "HOUSENUMBER",
    "NAME",
    "OBJECT_TYPE",
    "CITY_CONTEXT_FIELDS",
    "ObjectType",
]
