"""GeoSearch Address Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from geosearch_core.address.builder import AddressQueryBuilder
from geosearch_core.address.components import AddressComponents, compile_address_query
from geosearch_core.address.config import AddressQueryConfig, BoostWeights
from geosearch_core.address.fields import ObjectType

__all__ = [
    "AddressQueryBuilder",
    "AddressComponents",
    "compile_address_query",
    "AddressQueryConfig",
    "BoostWeights",
    "ObjectType",
]
