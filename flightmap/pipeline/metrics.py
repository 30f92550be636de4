"""KPI aggregation over the filtered route set.

All functions here are pure: they only read their arguments.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from flightmap.config import SIGNATURE_ROUTE_COUNT, TOP_ENTITY_COUNT
from flightmap.dataset import RankedEntity, Route

LONG_HAUL_MARKER = "long"


@dataclass(frozen=True)
class MetricsSnapshot:
    route_count: int = 0
    long_haul_share: float = 0.0
    average_distance: float = 0.0
    longest_distance: float = 0.0
    bar_max_distance: float = 0.0
    signature_routes: Tuple[Route, ...] = ()
    top_entities: Tuple[RankedEntity, ...] = ()

    def kpis(self):
        """Scalar KPIs by name, as fed to the animated presenters."""
        return {
            "route_count": float(self.route_count),
            "average_distance": self.average_distance,
            "long_haul_share": self.long_haul_share,
        }


def long_haul_share(buckets):
    """Percentage of routes in the first bucket labelled as long-haul."""
    # Matched on free-text label; renaming the bucket silently zeroes this.
    long_count = 0
    for bucket in buckets:
        if LONG_HAUL_MARKER in (bucket.label or "").lower():
            long_count = bucket.count or 0
            break
    total = sum(b.count or 0 for b in buckets) or 1
    return long_count / total * 100


def average_distance(routes):
    if not routes:
        return 0.0
    return sum(r.distance_km for r in routes) / len(routes)


def longest_distance(routes):
    return max((r.distance_km for r in routes), default=0.0)


def signature_routes(routes, n=SIGNATURE_ROUTE_COUNT):
    """The ``n`` longest routes; ties keep their original order."""
    return sorted(routes, key=lambda r: r.distance_km, reverse=True)[:n]


def top_entities(entities, n=TOP_ENTITY_COUNT):
    """First ``n`` entries of an already-ranked list."""
    return list(entities[:n])


def distance_ratio(route, max_distance):
    """Fill fraction of a route's distance bar relative to ``max_distance``."""
    if max_distance <= 0:
        return 1.0
    return max(0.0, min(1.0, route.distance_km / max_distance))


def compute_snapshot(routes, haul_distribution, ranked_entities,
                     signature_count=SIGNATURE_ROUTE_COUNT, top_count=TOP_ENTITY_COUNT,
                     longest_route=None):
    """Aggregate the filtered routes.

    Signature-route bars are scaled by the dataset-wide ``longest_route`` when
    one is known, so they keep their length as filters change; otherwise by
    the longest route in ``routes``.
    """
    routes = list(routes)
    longest = longest_distance(routes)
    if longest_route is not None and longest_route.distance_km > 0:
        bar_max = longest_route.distance_km
    else:
        bar_max = longest
    return MetricsSnapshot(
        route_count=len(routes),
        long_haul_share=long_haul_share(haul_distribution),
        average_distance=average_distance(routes),
        longest_distance=longest,
        bar_max_distance=bar_max,
        signature_routes=tuple(signature_routes(routes, signature_count)),
        top_entities=tuple(top_entities(tuple(ranked_entities), top_count)),
    )


def format_number(value):
    """Round half up to an integer and group thousands with commas."""
    return f"{math.floor(value + 0.5):,}"
