"""Continent / airline route filtering."""

from flightmap.dataset import Route
from flightmap.pipeline.filters import (
    FilterCriteria,
    available_airlines,
    available_continents,
    filter_airports,
    filter_routes,
)


def _keys(routes):
    return [r.key for r in routes]


def test_identity_criteria_returns_everything_in_order(dataset):
    criteria = FilterCriteria()
    assert criteria.is_identity
    result = filter_routes(dataset.routes, dataset.airports, criteria)
    assert result == list(dataset.routes)


def test_continent_matches_either_endpoint(dataset):
    result = filter_routes(dataset.routes, dataset.airports, FilterCriteria(continent="Asia"))
    assert _keys(result) == ["JFK-SIN", "SIN-SYD"]


def test_airline_match_is_exact_and_case_sensitive(dataset):
    assert _keys(filter_routes(dataset.routes, dataset.airports, FilterCriteria(airline="AF"))) == [
        "CDG-JFK", "CDG-LHR",
    ]
    assert filter_routes(dataset.routes, dataset.airports, FilterCriteria(airline="af")) == []


def test_both_selectors_must_pass(dataset):
    result = filter_routes(dataset.routes, dataset.airports,
                           FilterCriteria(continent="North America", airline="SQ"))
    assert _keys(result) == ["JFK-SIN"]


def test_dangling_endpoint_is_not_a_wildcard(dataset):
    # SYD-XXX: SYD is Oceania, XXX is unknown.
    oceania = filter_routes(dataset.routes, dataset.airports, FilterCriteria(continent="Oceania"))
    assert "SYD-XXX" in _keys(oceania)
    europe = filter_routes(dataset.routes, dataset.airports, FilterCriteria(continent="Europe"))
    assert "SYD-XXX" not in _keys(europe)
    orphan = [Route("YYY", "XXX", 10.0, "QF")]
    assert filter_routes(orphan, dataset.airports, FilterCriteria(continent="Oceania")) == []
    assert filter_routes(orphan, dataset.airports, FilterCriteria(airline="QF")) == orphan


def test_filter_airports_collects_endpoints(dataset):
    routes = filter_routes(dataset.routes, dataset.airports, FilterCriteria(airline="SQ"))
    assert filter_airports(routes) == frozenset({"JFK", "SIN", "SYD"})
    assert filter_airports([]) == frozenset()


def test_selector_options(dataset):
    assert available_continents(dataset.airports) == [
        "Asia", "Europe", "North America", "Oceania",
    ]
    assert available_airlines(dataset.routes) == ["AF", "BA", "QF", "SQ"]
