"""Mercator-style projection of lon/lat onto the fixed logical canvas."""

import logging
import math
from dataclasses import dataclass

from flightmap.config import CANVAS_HEIGHT, CANVAS_WIDTH, MAX_LATITUDE
from flightmap.dataset import Airport
from flightmap.errors import CoordinateOutOfRangeError, DanglingReferenceError

log = logging.getLogger("flightmap")


@dataclass(frozen=True)
class ProjectedAirport:
    airport: Airport
    x: float
    y: float

    @property
    def code(self):
        return self.airport.code


def project(lon, lat, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """Map (lon, lat) in degrees to canvas (x, y).

    Latitudes past the Mercator limit are clamped to it, so the poles land on
    the canvas edge instead of the asymptote. Anything outside the valid
    degree ranges raises CoordinateOutOfRangeError.
    """
    try:
        lon = float(lon)
        lat = float(lat)
    except (TypeError, ValueError):
        raise CoordinateOutOfRangeError(lon, lat) from None
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise CoordinateOutOfRangeError(lon, lat)
    if abs(lon) > 180.0 or abs(lat) > 90.0:
        raise CoordinateOutOfRangeError(lon, lat)

    lat = max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))
    phi = math.radians(lat)
    x = (lon + 180.0) * (width / 360.0)
    y = height / 2 - (height / (2 * math.pi)) * math.log(math.tan(math.pi / 4 + phi / 2))
    # Floating error at the clamp can overshoot the edge by an ulp.
    return x, max(0.0, min(height, y))


def project_airports(airports):
    """Project every airport; ones with unusable coordinates are skipped."""
    projected = {}
    skipped = 0
    for code, airport in airports.items():
        try:
            x, y = project(airport.lon, airport.lat)
        except CoordinateOutOfRangeError as exc:
            log.warning("Not placing %s on the map: %s", code, exc)
            skipped += 1
            continue
        projected[code] = ProjectedAirport(airport=airport, x=x, y=y)
    if skipped:
        log.info("Projected %d airports (%d skipped)", len(projected), skipped)
    return projected


def route_endpoints(route, projected):
    """Return the projected (origin, destination) of a route."""
    for code in (route.origin, route.destination):
        if code not in projected:
            raise DanglingReferenceError(code)
    return projected[route.origin], projected[route.destination]
