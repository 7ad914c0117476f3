"""Tests for geosearch_core.address.config and fields."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from geosearch_core.address import AddressQueryConfig, BoostWeights, ObjectType


class TestBoostWeights:
    """Boost weight defaults and validation."""

    def test_defaults(self) -> None:
        w = BoostWeights()
        assert w.to_dict() == {
            "state": 0.1,
            "county": 4.0,
            "city": 3.0,
            "postcode": 7.0,
            "district": 2.0,
            "street": 5.0,
            "house_number": 10.0,
            "house_number_unmatched": 5.0,
            "wrong_language_factor": 0.1,
            "city_as_district_factor": 0.95,
        }

    def test_from_dict_keeps_defaults(self) -> None:
        w = BoostWeights.from_dict({"city": 4, "street": "6.5"})
        assert w.city == 4.0
        assert w.street == 6.5
        assert w.county == 4.0

    def test_from_dict_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="citty"):
            BoostWeights.from_dict({"citty": 1.0})

    def test_negative_weight(self) -> None:
        with pytest.raises(ValueError, match="postcode"):
            BoostWeights(postcode=-1.0)

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            BoostWeights().city = 1.0


class TestAddressQueryConfig:
    """Field naming conventions."""

    def test_default_fields(self) -> None:
        config = AddressQueryConfig()
        assert config.collector_field("street") == "street_collector"
        assert config.name_field_for("de") == "name.de.raw"
        assert config.boosts == BoostWeights()


class TestObjectType:
    """Closed object type enumeration."""

    def test_values_match_index_types(self) -> None:
        assert {t.value for t in ObjectType} == {"street", "district", "city", "county", "state"}
        assert ObjectType("county") is ObjectType.COUNTY

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            ObjectType("countie")
