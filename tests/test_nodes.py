"""Tests for geosearch_core.query.nodes rendering."""

from __future__ import annotations

from geosearch_core.query import (
    BooleanQuery,
    ExistsQuery,
    Fuzziness,
    FuzzyQuery,
    MatchPhraseQuery,
    MatchQuery,
    TermQuery,
)


class TestLeafQueries:
    """DSL rendering of leaf queries."""

    def test_term(self) -> None:
        q = TermQuery(field="countrycode", value="DE")
        assert q.to_dict() == {"term": {"countrycode": {"value": "DE"}}}

    def test_match_phrase_with_boost(self) -> None:
        q = MatchPhraseQuery(field="city_collector", query="Berlin", boost=3.0)
        assert q.to_dict() == {
            "match_phrase": {"city_collector": {"query": "Berlin", "boost": 3.0}}
        }

    def test_match_with_fuzziness(self) -> None:
        q = MatchQuery(field="postcode", query="AB1 2CD", fuzziness=Fuzziness.AUTO)
        assert q.to_dict() == {
            "match": {"postcode": {"query": "AB1 2CD", "fuzziness": "AUTO"}}
        }

    def test_match_without_fuzziness(self) -> None:
        q = MatchQuery(field="postcode", query="AB1 2CD")
        assert q.to_dict() == {"match": {"postcode": {"query": "AB1 2CD"}}}

    def test_fuzzy(self) -> None:
        q = FuzzyQuery(field="postcode", value="12345", fuzziness=Fuzziness.ZERO, boost=7.0)
        assert q.to_dict() == {
            "fuzzy": {"postcode": {"value": "12345", "fuzziness": "0", "boost": 7.0}}
        }

    def test_exists(self) -> None:
        assert ExistsQuery(field="street").to_dict() == {"exists": {"field": "street"}}


class TestBooleanQuery:
    """Boolean composition."""

    def test_empty(self) -> None:
        q = BooleanQuery()
        assert q.is_empty()
        assert q.to_dict() == {"bool": {}}

    def test_clauses_and_minimum_should_match(self) -> None:
        q = (
            BooleanQuery(minimum_should_match=1, boost=2.0)
            .add_must(TermQuery(field="a", value="1"))
            .add_should(TermQuery(field="b", value="2"))
            .add_must_not(ExistsQuery(field="c"))
            .add_filter(TermQuery(field="d", value="4"))
        )
        assert not q.is_empty()
        assert len(q.clauses()) == 4
        assert q.to_dict() == {
            "bool": {
                "must": [{"term": {"a": {"value": "1"}}}],
                "filter": [{"term": {"d": {"value": "4"}}}],
                "should": [{"term": {"b": {"value": "2"}}}],
                "must_not": [{"exists": {"field": "c"}}],
                "minimum_should_match": "1",
                "boost": 2.0,
            }
        }

    def test_to_string(self) -> None:
        q = BooleanQuery(
            must=[MatchPhraseQuery(field="street", query="Main St")],
            must_not=[ExistsQuery(field="housenumber")],
            boost=5.0,
        )
        assert q.to_string() == '(+street:"Main St" -_exists_:housenumber)^5'

    def test_copy_is_independent(self) -> None:
        inner = BooleanQuery(should=[TermQuery(field="a", value="1")])
        outer = BooleanQuery(must=[inner])
        copied = outer.copy()
        inner.add_should(TermQuery(field="b", value="2"))
        assert copied == BooleanQuery(must=[BooleanQuery(should=[TermQuery(field="a", value="1")])])
        assert copied != outer
