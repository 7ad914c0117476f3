"""GeoSearch Address Query Builder - Structured Address Query Composition.

Folds the components of a structured geocoding request into a single
weighted boolean query. Each component is matched either against the
multi-language name fields of records of the matching object type, or
against the denormalized address text (collector) fields, depending on
how specific the rest of the request is.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from geosearch_core.address.config import AddressQueryConfig
from geosearch_core.address.fields import (
    CITY,
    CITY_CONTEXT_FIELDS,
    COUNTRYCODE,
    COUNTY,
    DISTRICT,
    HOUSENUMBER,
    OBJECT_TYPE,
    POSTCODE,
    STATE,
    STREET,
    ObjectType,
)
from geosearch_core.query.nodes import (
    BooleanQuery,
    ExistsQuery,
    Fuzziness,
    FuzzyQuery,
    MatchPhraseQuery,
    MatchQuery,
    QueryNode,
    TermQuery,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


class AddressQueryBuilder:
    """Fluent builder for structured address queries.

    Every ``add_*`` method ignores ``None`` values and returns the builder
    for chaining. City, postcode, district and county clauses are also
    collected in a city filter, which restricts house number matches to
    the requested city context.

    A builder serves a single request and is not thread-safe.
    """

    def __init__(
        self,
        lenient: bool,
        language: str,
        languages: Sequence[str],
        config: Optional[AddressQueryConfig] = None,
    ):
        """Initialize builder.

        Args:
            lenient: Allow edit distance on postcodes and streets
            language: Requested result language
            languages: All languages with name fields in the index
            config: Boost weights and field conventions

        Raises:
            ValueError: If no languages are given or the requested
                language is not among them
        """
        if not languages:
            raise ValueError("At least one language is required")
        if language not in languages:
            raise ValueError(f"Language {language!r} is not one of {list(languages)}")

        self.lenient = lenient
        self.language = language
        self.languages: List[str] = list(languages)
        self.config = config or AddressQueryConfig()

        self._query = BooleanQuery()
        self._city_filter: Optional[BooleanQuery] = None

    @property
    def city_filter(self) -> Optional[BooleanQuery]:
        """Copy of the city context collected so far, if any."""
        if self._city_filter is None:
            return None
        return self._city_filter.copy()

    def build(self) -> BooleanQuery:
        """Return the composed query.

        Returns:
            Independent copy of the accumulated boolean query
        """
        logger.debug(f"Built address query: {self._query.to_string()}")
        return self._query.copy()

    def add_country_code(self, country_code: Optional[str]) -> "AddressQueryBuilder":
        """Restrict results to a country.

        Args:
            country_code: ISO country code, any case

        Returns:
            Self for chaining
        """
        if country_code is None:
            return self

        self._query.add_filter(TermQuery(field=COUNTRYCODE, value=country_code.upper()))
        return self

    def add_state(self, state: Optional[str], has_more_details: bool) -> "AddressQueryBuilder":
        """Add state.

        The state clause is optional: it raises the score of matching
        records but never excludes any.

        Args:
            state: State name or abbreviation
            has_more_details: Whether more specific components are present

        Returns:
            Self for chaining
        """
        if state is None:
            return self

        state_query = self._name_or_field_query(
            STATE, state, self.config.boosts.state, ObjectType.STATE, has_more_details
        )
        self._query.add_should(state_query)
        logger.debug(f"Added state clause: {state_query.to_string()}")
        return self

    def add_county(self, county: Optional[str], has_more_details: bool) -> "AddressQueryBuilder":
        """Add county.

        Args:
            county: County name
            has_more_details: Whether more specific components are present

        Returns:
            Self for chaining
        """
        if county is None:
            return self

        self._add_name_or_field_query(
            COUNTY, county, self.config.boosts.county, ObjectType.COUNTY, has_more_details
        )
        return self

    def add_district(self, district: Optional[str], has_more_details: bool) -> "AddressQueryBuilder":
        """Add district.

        Args:
            district: District or suburb name
            has_more_details: Whether more specific components are present

        Returns:
            Self for chaining
        """
        if district is None:
            return self

        self._add_name_or_field_query(
            DISTRICT, district, self.config.boosts.district, ObjectType.DISTRICT, has_more_details
        )
        return self

    def add_city(
        self,
        city: Optional[str],
        has_district: bool,
        has_street: bool,
        has_post_code: bool,
    ) -> "AddressQueryBuilder":
        """Add city.

        Without a separate district the city value may also name a
        district, so district records and district address fields are
        accepted at a slightly lower boost.

        Args:
            city: City name
            has_district: Whether a district is part of the request
            has_street: Whether a street is part of the request
            has_post_code: Whether a postcode is part of the request

        Returns:
            Self for chaining
        """
        if city is None:
            return self

        boosts = self.config.boosts
        name_query: QueryNode = self._fuzzy_name_query(city, ObjectType.CITY, boosts.city)
        field_query: QueryNode = self._collector_query(CITY, city, boosts.city)

        if not has_district:
            district_boost = round(boosts.city_as_district_factor * boosts.city, 6)
            name_query = BooleanQuery(
                should=[name_query, self._fuzzy_name_query(city, ObjectType.DISTRICT, district_boost)],
                minimum_should_match=1,
            )
            field_query = BooleanQuery(
                should=[field_query, self._collector_query(DISTRICT, city, district_boost)],
                minimum_should_match=1,
            )

        if not has_street and not has_district:
            if has_post_code:
                # a postcode can stand for a district that carries the
                # city only in its address, not in its name
                combined_query: QueryNode = BooleanQuery(should=[name_query, field_query])
            else:
                combined_query = name_query
        else:
            combined_query = field_query

        self._add_to_city_filter(combined_query)
        self._query.add_must(combined_query)
        logger.debug(f"Added city clause: {combined_query.to_string()}")
        return self

    def add_postal_code(self, postal_code: Optional[str]) -> "AddressQueryBuilder":
        """Add postal code.

        Codes with inner whitespace are matched token by token.

        Args:
            postal_code: Postal code

        Returns:
            Self for chaining
        """
        if postal_code is None:
            return self

        fuzziness = Fuzziness.AUTO if self.lenient else Fuzziness.ZERO
        boost = self.config.boosts.postcode

        postcode_query: QueryNode
        if _WHITESPACE.search(postal_code):
            postcode_query = MatchQuery(field=POSTCODE, query=postal_code, fuzziness=fuzziness, boost=boost)
        else:
            postcode_query = FuzzyQuery(field=POSTCODE, value=postal_code, fuzziness=fuzziness, boost=boost)

        self._add_to_city_filter(postcode_query)
        self._query.add_must(postcode_query)
        logger.debug(f"Added postcode clause: {postcode_query.to_string()}")
        return self

    def add_street_and_house_number(
        self,
        street: Optional[str],
        house_number: Optional[str],
    ) -> "AddressQueryBuilder":
        """Add street and house number.

        A house number only counts when it belongs to the requested street
        inside the city context collected so far, so city, postcode and
        district should be added first. Records without a house number are
        not excluded by a requested one.

        Args:
            street: Street name
            house_number: House number

        Returns:
            Self for chaining
        """
        if street is None:
            if house_number is not None:
                # hamlets without street names only number their buildings
                hamlet_query = BooleanQuery(
                    must=[MatchPhraseQuery(field=HOUSENUMBER, query=house_number)],
                    must_not=[ExistsQuery(field=STREET)],
                )
                self._query.add_must(hamlet_query)
                logger.debug(f"Added house number clause: {hamlet_query.to_string()}")
            return self

        boosts = self.config.boosts
        street_query: QueryNode
        if self.lenient:
            street_query = BooleanQuery(
                should=[
                    self._collector_query(STREET, street),
                    self._fuzzy_name_query(street, ObjectType.STREET),
                ],
                minimum_should_match=1,
                boost=boosts.street,
            )
        else:
            street_query = self._collector_query(STREET, street, boosts.street)

        if house_number is not None:
            match_query = BooleanQuery(
                must=[MatchPhraseQuery(field=HOUSENUMBER, query=house_number)],
                filter=[self._collector_query(STREET, street)],
            )
            if self._city_filter is not None:
                match_query.add_filter(self._city_filter.copy())

            house_number_query = BooleanQuery(
                should=[
                    match_query,
                    BooleanQuery(must_not=[ExistsQuery(field=HOUSENUMBER)]),
                ],
                boost=boosts.house_number,
            )
            self._query.add_must(house_number_query)
            logger.debug(f"Added house number clause: {house_number_query.to_string()}")

        self._query.add_must(street_query)
        logger.debug(f"Added street clause: {street_query.to_string()}")
        return self

    def _add_to_city_filter(self, query: QueryNode) -> None:
        if self._city_filter is None:
            self._city_filter = BooleanQuery()
        self._city_filter.add_should(query)

    def _collector_query(self, name: str, value: str, boost: float = 1.0) -> MatchPhraseQuery:
        return MatchPhraseQuery(field=self.config.collector_field(name), query=value, boost=boost)

    def _fuzzy_name_query(self, value: str, object_type: ObjectType, boost: float = 1.0) -> BooleanQuery:
        """Match a value against the name fields of every language.

        Names in the requested language count fully, names in any other
        language only with the wrong-language factor.

        Args:
            value: Name to match
            object_type: Required object type of the record
            boost: Boost of the combined clause

        Returns:
            Boolean query with one should clause per language
        """
        wrong_language = self.config.boosts.wrong_language_factor
        name_queries: List[QueryNode] = [
            MatchPhraseQuery(
                field=self.config.name_field_for(lang),
                query=value,
                boost=1.0 if lang == self.language else wrong_language,
            )
            for lang in self.languages
        ]

        return BooleanQuery(
            should=name_queries,
            minimum_should_match=1,
            filter=[TermQuery(field=OBJECT_TYPE, value=object_type.value)],
            boost=boost,
        )

    def _name_or_field_query(
        self,
        name: str,
        value: str,
        boost: float,
        object_type: ObjectType,
        has_more_details: bool,
    ) -> QueryNode:
        if has_more_details:
            return self._collector_query(name, value)

        return self._fuzzy_name_query(value, object_type, boost)

    def _add_name_or_field_query(
        self,
        name: str,
        value: str,
        boost: float,
        object_type: ObjectType,
        has_more_details: bool,
    ) -> None:
        query = self._name_or_field_query(name, value, boost, object_type, has_more_details)
        if name in CITY_CONTEXT_FIELDS:
            self._add_to_city_filter(query)

        self._query.add_must(query)
        logger.debug(f"Added {name} clause: {query.to_string()}")


__all__ = ["AddressQueryBuilder"]
