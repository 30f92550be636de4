"""Route/airport data model and dataset loading.

Two document shapes are accepted:

- the canonical one: ``routes``, ``airports``, ``haul_distribution``,
  ``top_entities``
- the analytics export consumed by the dashboard: ``routes_sample``,
  ``iata_lookup``, ``top_airlines``, ``metrics`` (whose nested
  ``longest_route`` and ``top_hub`` are lifted out), ``domestic_vs_international``

Missing sections default to empty collections and malformed items are
skipped, so a partial document still yields a usable dataset.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from flightmap.api import api_get
from flightmap.config import DATA_PATH, DATA_URL

log = logging.getLogger("flightmap")


@dataclass(frozen=True)
class Airport:
    code: str
    name: str
    city: str
    country: str
    lon: float
    lat: float
    continent: Optional[str] = None


@dataclass(frozen=True)
class Route:
    origin: str
    destination: str
    distance_km: float
    airline: str
    continent: Optional[str] = None

    @property
    def key(self):
        return f"{self.origin}-{self.destination}"


@dataclass(frozen=True)
class HaulBucket:
    label: str
    count: int


@dataclass(frozen=True)
class RankedEntity:
    key: str
    count: int


@dataclass(frozen=True)
class Dataset:
    """Immutable reference data for one session."""

    routes: Tuple[Route, ...] = ()
    airports: Mapping[str, Airport] = field(default_factory=lambda: MappingProxyType({}))
    haul_distribution: Tuple[HaulBucket, ...] = ()
    top_entities: Tuple[RankedEntity, ...] = ()
    headline: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    longest_route: Optional[Route] = None
    top_hub: Optional[RankedEntity] = None
    domestic_split: Tuple[HaulBucket, ...] = ()
    source: str = ""


def _to_float(value, default=0.0):
    if value in (None, "", "null"):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _to_int(value):
    return int(_to_float(value))


def _optional_str(value):
    if value in (None, ""):
        return None
    return str(value)


def _parse_airport(code, raw):
    if not isinstance(raw, dict):
        raise ValueError("airport entry is not an object")
    lon = raw.get("lon", raw.get("longitude"))
    lat = raw.get("lat", raw.get("latitude"))
    if lon is None or lat is None:
        raise ValueError("missing coordinates")
    return Airport(
        code=str(raw.get("code") or code),
        name=str(raw.get("name") or code),
        city=str(raw.get("city") or ""),
        country=str(raw.get("country") or ""),
        lon=float(lon),
        lat=float(lat),
        continent=_optional_str(raw.get("continent")),
    )


def _parse_route(raw):
    if not isinstance(raw, dict):
        raise ValueError("route entry is not an object")
    origin = raw.get("origin") or raw.get("src_iata")
    dest = raw.get("destination") or raw.get("dst_iata")
    if not origin or not dest:
        raise ValueError("missing endpoint")
    distance = _to_float(raw.get("distance_km", raw.get("distance")))
    if distance < 0:
        log.warning("Negative distance %.1f for %s-%s, using 0", distance, origin, dest)
        distance = 0.0
    return Route(
        origin=str(origin),
        destination=str(dest),
        distance_km=distance,
        airline=str(raw.get("airline") or ""),
        continent=_optional_str(raw.get("continent")),
    )


def _parse_airports(doc):
    raw_airports = doc.get("airports")
    if raw_airports is None:
        raw_airports = doc.get("iata_lookup")
    if isinstance(raw_airports, list):
        raw_airports = {a.get("code", ""): a for a in raw_airports if isinstance(a, dict)}
    airports = {}
    for code, raw in (raw_airports or {}).items():
        try:
            airport = _parse_airport(code, raw)
        except (TypeError, ValueError) as exc:
            log.warning("Skipping airport %s: %s", code, exc)
            continue
        airports[airport.code] = airport
    return airports


def _parse_routes(doc):
    raw_routes = doc.get("routes")
    if raw_routes is None:
        raw_routes = doc.get("routes_sample")
    routes = []
    for i, raw in enumerate(raw_routes or []):
        try:
            routes.append(_parse_route(raw))
        except (TypeError, ValueError) as exc:
            log.warning("Skipping route #%d: %s", i, exc)
    return routes


def _parse_haul(doc):
    buckets = []
    for raw in doc.get("haul_distribution") or []:
        if not isinstance(raw, dict):
            continue
        buckets.append(HaulBucket(label=str(raw.get("label") or ""), count=_to_int(raw.get("count"))))
    return buckets


def _parse_top_entities(doc):
    entities = []
    raw_top = doc.get("top_entities")
    if raw_top is not None:
        for raw in raw_top:
            if isinstance(raw, dict):
                entities.append(RankedEntity(key=str(raw.get("key") or ""), count=_to_int(raw.get("count"))))
        return entities
    for raw in doc.get("top_airlines") or []:
        if isinstance(raw, dict):
            entities.append(RankedEntity(key=str(raw.get("airline") or ""), count=_to_int(raw.get("routes"))))
    return entities


def _headline_section(doc):
    raw = doc.get("headline") or doc.get("metrics") or {}
    return raw if isinstance(raw, dict) else {}


def _parse_longest_route(doc):
    raw = doc.get("longest_route")
    if raw is None:
        raw = _headline_section(doc).get("longest_route")
    if raw is None:
        return None
    if isinstance(raw, dict) and "from" in raw:
        raw = {"origin": raw.get("from"), "destination": raw.get("to"),
               "distance_km": raw.get("distance_km"), "airline": raw.get("airline")}
    try:
        return _parse_route(raw)
    except (TypeError, ValueError) as exc:
        log.warning("Ignoring longest_route: %s", exc)
        return None


def _parse_top_hub(doc):
    raw = doc.get("top_hub")
    if raw is None:
        raw = _headline_section(doc).get("top_hub")
    if not isinstance(raw, dict):
        return None
    key = raw.get("key") or raw.get("iata")
    if not key:
        log.warning("Ignoring top_hub without an airport code")
        return None
    return RankedEntity(key=str(key), count=_to_int(raw.get("count", raw.get("connections"))))


def _parse_domestic_split(doc):
    raw_split = doc.get("domestic_split")
    if raw_split is None:
        raw_split = doc.get("domestic_vs_international")
    buckets = []
    for raw in raw_split or []:
        if not isinstance(raw, dict):
            continue
        label = raw.get("label", raw.get("name"))
        buckets.append(HaulBucket(label=str(label or ""), count=_to_int(raw.get("count", raw.get("value")))))
    return buckets


def _parse_headline(doc):
    headline = {}
    for name, value in _headline_section(doc).items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if math.isfinite(value):
            headline[name] = float(value)
    return headline


def parse_dataset(doc, source=""):
    """Build a Dataset from a decoded JSON document."""
    if not isinstance(doc, dict):
        log.warning("Dataset document from %s is not an object; using empty dataset", source or "input")
        doc = {}
    routes = _parse_routes(doc)
    airports = _parse_airports(doc)
    dataset = Dataset(
        routes=tuple(routes),
        airports=MappingProxyType(airports),
        haul_distribution=tuple(_parse_haul(doc)),
        top_entities=tuple(_parse_top_entities(doc)),
        headline=MappingProxyType(_parse_headline(doc)),
        longest_route=_parse_longest_route(doc),
        top_hub=_parse_top_hub(doc),
        domestic_split=tuple(_parse_domestic_split(doc)),
        source=source,
    )
    log.info("Loaded dataset from %s: %d routes, %d airports", source or "input", len(routes), len(airports))
    return dataset


def _read_document(source):
    if source.startswith(("http://", "https://")):
        return api_get(source)
    path = Path(source)
    if not path.exists():
        log.warning("Dataset file not found: %s", path)
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("Could not read dataset %s: %s", path, exc)
        return None


def load_dataset(source=None):
    """Load a dataset from a path or URL, falling back to the bundled sample."""
    if source is None:
        source = DATA_URL or str(DATA_PATH)
    source = str(source)
    doc = _read_document(source)
    if doc is None:
        from flightmap.fallback import FALLBACK_DATASET

        log.warning("Fallback: using bundled sample dataset instead of %s", source)
        return parse_dataset(FALLBACK_DATASET, source="fallback")
    return parse_dataset(doc, source=source)
