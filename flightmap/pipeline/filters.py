"""Continent / airline filtering of routes and the airports they touch."""

import logging
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger("flightmap")


@dataclass(frozen=True)
class FilterCriteria:
    """Active filter selectors. ``None`` matches everything."""

    continent: Optional[str] = None
    airline: Optional[str] = None

    @property
    def is_identity(self):
        return self.continent is None and self.airline is None


def _continent_matches(route, airports, continent):
    for code in (route.origin, route.destination):
        airport = airports.get(code)
        if airport is None:
            log.debug("Route %s references unknown airport %s", route.key, code)
            continue
        if airport.continent == continent:
            return True
    return False


def filter_routes(routes, airports, criteria):
    """Return the routes passing ``criteria``, in their original order."""
    result = []
    for route in routes:
        if criteria.airline is not None and route.airline != criteria.airline:
            continue
        if criteria.continent is not None and not _continent_matches(route, airports, criteria.continent):
            continue
        result.append(route)
    return result


def filter_airports(routes):
    """Codes of every airport that is an endpoint of one of ``routes``."""
    codes = set()
    for route in routes:
        codes.add(route.origin)
        codes.add(route.destination)
    return frozenset(codes)


def available_continents(airports):
    return sorted({a.continent for a in airports.values() if a.continent})


def available_airlines(routes):
    return sorted({r.airline for r in routes if r.airline})
