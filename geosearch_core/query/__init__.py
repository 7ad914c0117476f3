"""GeoSearch Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

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
    "QueryNode",
    "Fuzziness",
    "BooleanQuery",
    "TermQuery",
    "MatchQuery",
    "MatchPhraseQuery",
    "FuzzyQuery",
    "ExistsQuery",
]
