"""GeoSearch Query Nodes - Query Tree Value Types.

Structured query trees handed to the search execution layer. Each node
renders itself into the engine's JSON query DSL with ``to_dict()`` and
into a compact Lucene-like string with ``to_string()`` for log output.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Fuzziness(Enum):
    """Edit distance tolerance understood by the search engine."""

    ZERO = "0"
    AUTO = "AUTO"  # scaled by term length


@dataclass
class QueryNode(ABC):
    """Abstract base class for query nodes.

    All query types inherit from this class.
    """

    boost: float = 1.0
    field: Optional[str] = None

    @abstractmethod
    def to_string(self) -> str:
        """Convert to query string representation."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the engine's query DSL."""
        pass

    def copy(self) -> "QueryNode":
        """Return an independent deep copy of this subtree."""
        return copy.deepcopy(self)

    def _with_boost(self, body: Dict[str, Any]) -> Dict[str, Any]:
        if self.boost != 1.0:
            body["boost"] = self.boost
        return body

    def _boosted(self, result: str) -> str:
        if self.boost != 1.0:
            return f"{result}^{self.boost:g}"
        return result


@dataclass
class TermQuery(QueryNode):
    """Single term query.

    Matches documents whose field holds exactly the given value.
    """

    value: str = ""

    def to_string(self) -> str:
        return self._boosted(f"{self.field}:={self.value}")

    def to_dict(self) -> Dict[str, Any]:
        return {"term": {self.field: self._with_boost({"value": self.value})}}


@dataclass
class MatchQuery(QueryNode):
    """Analyzed match query.

    Every token of the value is matched independently, each within
    the given edit distance.
    """

    query: str = ""
    fuzziness: Optional[Fuzziness] = None

    def to_string(self) -> str:
        result = f"{self.field}:({self.query})"
        if self.fuzziness is not None:
            result = f"{result}~{self.fuzziness.value}"
        return self._boosted(result)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"query": self.query}
        if self.fuzziness is not None:
            body["fuzziness"] = self.fuzziness.value
        return {"match": {self.field: self._with_boost(body)}}


@dataclass
class MatchPhraseQuery(QueryNode):
    """Phrase query.

    Matches documents containing the phrase with terms in order.
    """

    query: str = ""

    def to_string(self) -> str:
        return self._boosted(f'{self.field}:"{self.query}"')

    def to_dict(self) -> Dict[str, Any]:
        return {"match_phrase": {self.field: self._with_boost({"query": self.query})}}


@dataclass
class FuzzyQuery(QueryNode):
    """Fuzzy query using edit distance.

    Matches a single term within the allowed edit distance.
    """

    value: str = ""
    fuzziness: Fuzziness = Fuzziness.AUTO

    def to_string(self) -> str:
        return self._boosted(f"{self.field}:{self.value}~{self.fuzziness.value}")

    def to_dict(self) -> Dict[str, Any]:
        body = {"value": self.value, "fuzziness": self.fuzziness.value}
        return {"fuzzy": {self.field: self._with_boost(body)}}


@dataclass
class ExistsQuery(QueryNode):
    """Exists query.

    Matches documents where field exists and has value.
    """

    def to_string(self) -> str:
        return f"_exists_:{self.field}"

    def to_dict(self) -> Dict[str, Any]:
        return {"exists": self._with_boost({"field": self.field})}


@dataclass
class BooleanQuery(QueryNode):
    """Boolean query combining multiple clauses.

    ``must`` and ``must_not`` decide eligibility and scoring, ``should``
    clauses only score unless ``minimum_should_match`` asks for them,
    ``filter`` decides eligibility without scoring.
    """

    must: List[QueryNode] = field(default_factory=list)
    should: List[QueryNode] = field(default_factory=list)
    must_not: List[QueryNode] = field(default_factory=list)
    filter: List[QueryNode] = field(default_factory=list)
    minimum_should_match: Optional[int] = None

    def add_must(self, query: QueryNode) -> "BooleanQuery":
        """Add a MUST clause."""
        self.must.append(query)
        return self

    def add_should(self, query: QueryNode) -> "BooleanQuery":
        """Add a SHOULD clause."""
        self.should.append(query)
        return self

    def add_must_not(self, query: QueryNode) -> "BooleanQuery":
        """Add a MUST NOT clause."""
        self.must_not.append(query)
        return self

    def add_filter(self, query: QueryNode) -> "BooleanQuery":
        """Add a FILTER clause."""
        self.filter.append(query)
        return self

    def is_empty(self) -> bool:
        """Whether no clause has been added yet."""
        return not (self.must or self.should or self.must_not or self.filter)

    def clauses(self) -> List[QueryNode]:
        """All direct child clauses."""
        return self.must + self.should + self.must_not + self.filter

    def to_string(self) -> str:
        parts = []

        for clause in self.must:
            parts.append(f"+{clause.to_string()}")

        for clause in self.filter:
            parts.append(f"#{clause.to_string()}")

        for clause in self.should:
            parts.append(clause.to_string())

        for clause in self.must_not:
            parts.append(f"-{clause.to_string()}")

        result = f"({' '.join(parts)})"
        if self.minimum_should_match is not None:
            result = f"{result}@{self.minimum_should_match}"
        return self._boosted(result)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        for name in ("must", "filter", "should", "must_not"):
            clauses = getattr(self, name)
            if clauses:
                body[name] = [c.to_dict() for c in clauses]
        if self.minimum_should_match is not None:
            body["minimum_should_match"] = str(self.minimum_should_match)
        return {"bool": self._with_boost(body)}


__all__ = [
    "QueryNode",
    "Fuzziness",
    "TermQuery",
    "MatchQuery",
    "MatchPhraseQuery",
    "FuzzyQuery",
    "ExistsQuery",
    "BooleanQuery",
]
