"""GeoSearch - Structured Address Query Compiler for BlackRoad OS.

Compiles the components of a structured geocoding request (country,
state, county, city, district, postcode, street, house number) into a
weighted boolean query for a full-text index of address records.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           GeoSearch Core                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                      Address Pipeline                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │ Components │→ │  Builder   │→ │ Query Tree │→ │ Query DSL  │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                      Composition Rules                              │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Name /   │  │    City    │  │  Postcode  │  │  Street +  │    │   │
│   │  │   Field    │  │ / District │  │  Fuzziness │  │ House No.  │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Multi-language name matching with wrong-language down-weighting
- Name vs. address text matching depending on request specificity
- City names accepted as district names
- House numbers restricted to the requested street and city context
- Configurable boost weights
- Rendering to the OpenSearch / Elasticsearch query DSL

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Address query compilation
from geosearch_core.address.builder import AddressQueryBuilder
from geosearch_core.address.components import (
    AddressComponents,
    compile_address_query,
)
from geosearch_core.address.config import (
    AddressQueryConfig,
    BoostWeights,
)
from geosearch_core.address.fields import ObjectType

# Query components
from geosearch_core.query.nodes import (
    QueryNode,
    Fuzziness,
    BooleanQuery,
    TermQuery,
    MatchQuery,
    MatchPhraseQuery,
    FuzzyQuery,
    ExistsQuery,
)

__all__ = [
    # Address
    "AddressQueryBuilder",
    "AddressComponents",
    "compile_address_query",
    "AddressQueryConfig",
    "BoostWeights",
    "ObjectType",
    # Query
    "QueryNode",
    "Fuzziness",
    "BooleanQuery",
    "TermQuery",
    "MatchQuery",
    "MatchPhraseQuery",
    "FuzzyQuery",
    "ExistsQuery",
]
