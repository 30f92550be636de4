"""KPI aggregation over filtered routes."""

import pytest

from flightmap.dataset import HaulBucket, RankedEntity, Route
from flightmap.pipeline.metrics import (
    MetricsSnapshot,
    average_distance,
    compute_snapshot,
    distance_ratio,
    format_number,
    long_haul_share,
    signature_routes,
    top_entities,
)


def _route(dist, tag=""):
    return Route(origin=f"O{tag}", destination=f"D{tag}", distance_km=dist, airline="XX")


# --------------------------------------------------------------------
# Long-haul share
# --------------------------------------------------------------------


def test_long_haul_share_is_percentage_of_total():
    buckets = [HaulBucket("Short-haul", 60), HaulBucket("Medium-haul", 15), HaulBucket("LONG-HAUL", 25)]
    assert long_haul_share(buckets) == pytest.approx(25.0)


def test_long_haul_share_uses_first_matching_bucket():
    buckets = [HaulBucket("Long", 10), HaulBucket("Ultra long", 30)]
    assert long_haul_share(buckets) == pytest.approx(25.0)


def test_long_haul_share_degrades_to_zero():
    assert long_haul_share([]) == 0
    assert long_haul_share([HaulBucket("Short", 10)]) == 0
    assert long_haul_share([HaulBucket("Long-haul", 0)]) == 0


# --------------------------------------------------------------------
# Averages and rankings
# --------------------------------------------------------------------


def test_average_distance():
    assert average_distance([]) == 0
    assert average_distance([_route(100), _route(300)]) == 200


def test_signature_routes_sort_is_stable():
    routes = [_route(500, "a"), _route(1500, "b"), _route(1500, "c"), _route(200, "d")]
    result = signature_routes(routes)
    assert [r.origin for r in result] == ["Ob", "Oc", "Oa", "Od"]


def test_signature_routes_truncates_to_four():
    routes = [_route(d, str(d)) for d in (1, 2, 3, 4, 5, 6)]
    assert [r.distance_km for r in signature_routes(routes)] == [6, 5, 4, 3]


def test_top_entities_truncates_without_resorting():
    entities = [RankedEntity("B", 1), RankedEntity("A", 50), RankedEntity("C", 3)]
    assert top_entities(entities, 2) == entities[:2]
    assert top_entities([], 10) == []


def test_distance_ratio_is_bounded():
    assert distance_ratio(_route(50), 200) == 0.25
    assert distance_ratio(_route(50), 0) == 1.0
    assert distance_ratio(_route(500), 200) == 1.0


def test_compute_snapshot(dataset):
    snapshot = compute_snapshot(dataset.routes, dataset.haul_distribution, dataset.top_entities)
    assert snapshot.route_count == 6
    assert snapshot.long_haul_share == pytest.approx(25.0)
    assert snapshot.average_distance == pytest.approx(sum(r.distance_km for r in dataset.routes) / 6)
    assert snapshot.longest_distance == pytest.approx(15344.4)
    assert snapshot.signature_routes[0].key == "JFK-SIN"
    assert len(snapshot.signature_routes) == 4
    assert [e.key for e in snapshot.top_entities] == list("ABCDEFGHIJ")


def test_empty_snapshot_is_all_zero():
    snapshot = compute_snapshot([], [], [])
    assert snapshot == MetricsSnapshot()
    assert snapshot.kpis() == {"route_count": 0.0, "average_distance": 0.0, "long_haul_share": 0.0}


@pytest.mark.parametrize("value, text", [
    (0, "0"), (13808.2, "13,808"), (36708, "36,708"), (2.5, "3"), (1234567.49, "1,234,567"),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_bar_scale_prefers_dataset_longest_route():
    routes = [_route(1000, "a"), _route(500, "b")]
    scaled = compute_snapshot(routes, [], [], longest_route=_route(4000, "x"))
    assert scaled.longest_distance == 1000
    assert scaled.bar_max_distance == 4000
    assert distance_ratio(scaled.signature_routes[1], scaled.bar_max_distance) == 0.125

    unscaled = compute_snapshot(routes, [], [])
    assert unscaled.bar_max_distance == 1000
    assert compute_snapshot(routes, [], [], longest_route=_route(0, "z")).bar_max_distance == 1000
