import pytest

import catalogs


def test_lookup_is_case_insensitive():
    assert catalogs.cbo_directory("PA") == catalogs.cbo_directory("pa")
    assert len(catalogs.cbo_directory("Pa")["organizations"]) == 4


def test_unknown_keys_fall_back_to_default():
    default_cbos = catalogs.CBO_DIRECTORY[catalogs.DEFAULT_KEY]
    assert catalogs.cbo_directory("zz") == default_cbos
    assert catalogs.recommendations("xx")["recommendations"][0]["id"] == "general-preparedness"
    assert catalogs.predictive_insights("regional") == catalogs.predictive_insights("national")


def test_lookups_are_idempotent_and_isolated():
    first = catalogs.recommendations("pa")
    first["recommendations"].clear()

    again = catalogs.recommendations("pa")
    assert len(again["recommendations"]) == 4
    assert again == catalogs.recommendations("PA")


@pytest.mark.parametrize("value, code", [
    ("pa", "PA"),
    ("Pennsylvania", "PA"),
    ("new york", "NY"),
    ("NEWYORK", "NY"),
    ("north carolina", "NC"),
    ("zz", "ZZ"),
])
def test_resolve_state_code(value, code):
    assert catalogs.resolve_state_code(value) == code


def test_state_names():
    assert catalogs.state_name("ca") == "California"
    assert catalogs.state_name("texas") == "Texas"
    assert catalogs.state_name("zz") == catalogs.UNKNOWN_STATE_NAME
    assert len(catalogs.STATE_NAMES) == 50


def test_counties_for_state():
    assert len(catalogs.counties_for_state("california")) == 6
    assert catalogs.counties_for_state("TX")[0]["name"] == "Harris County"
    assert len(catalogs.counties_for_state("ohio")) == 4


def test_county_detail():
    detail = catalogs.county_detail("PA", "Allegheny")
    assert detail["name"] == "Allegheny County"
    assert len(detail["zipCodes"]) == 10


def test_county_detail_unknown_levels_are_distinct():
    with pytest.raises(catalogs.UnknownCountyError) as county_error:
        catalogs.county_detail("pa", "nonexistent")
    with pytest.raises(catalogs.UnknownStateError) as state_error:
        catalogs.county_detail("zz", "allegheny")

    assert isinstance(county_error.value, catalogs.CatalogKeyError)
    assert isinstance(state_error.value, LookupError)
    assert county_error.value.message != state_error.value.message
    assert county_error.value.key == "nonexistent"


def test_risk_ai_insights_summary_mentions_area():
    insights = catalogs.risk_ai_insights("730 sq mi")
    assert "730 sq mi" in insights["summary"]
    assert len(insights["keyInsights"]) == 3


def test_catalogued_states():
    assert catalogs.catalogued_states() == ["CA", "PA", "TX"]
