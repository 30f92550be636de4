"""Application state owner for the interactive route map.

MapController is the single owner of the session state (dataset, filter
criteria, viewport, selection, KPI presenters). Every user input is one
event; each event mutates only the piece of state it concerns, and the
derived sets (projected airports, filtered routes, metrics) are recomputed
lazily through memos keyed on the inputs they depend on.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from flightmap.animation import AnimatedValue, FrameScheduler
from flightmap.config import ANIMATION_DURATION_MS, MAX_RENDERED_AIRPORTS, MAX_RENDERED_ROUTES
from flightmap.dataset import Dataset
from flightmap.errors import DanglingReferenceError, FlightMapError
from flightmap.geo.projection import project_airports, route_endpoints
from flightmap.geo.viewport import Viewport, ViewportController
from flightmap.pipeline.filters import FilterCriteria, filter_airports, filter_routes
from flightmap.pipeline.memo import Memo
from flightmap.pipeline.metrics import MetricsSnapshot, compute_snapshot
from flightmap.pipeline.selection import SelectionTracker

log = logging.getLogger("flightmap")

_UNSET = object()


@dataclass(frozen=True)
class AirportMarker:
    code: str
    x: float
    y: float
    active: bool
    highlighted: bool


@dataclass(frozen=True)
class RouteSegment:
    origin: str
    destination: str
    x1: float
    y1: float
    x2: float
    y2: float
    highlighted: bool


@dataclass(frozen=True)
class RenderFrame:
    viewport: Viewport
    airports: Tuple[AirportMarker, ...]
    routes: Tuple[RouteSegment, ...]
    metrics: MetricsSnapshot
    kpis: Dict[str, float]
    selected: Optional[str] = None


class MapController:
    def __init__(self, dataset=None, scheduler=None, viewport=None,
                 animation_duration=ANIMATION_DURATION_MS):
        self.scheduler = scheduler or FrameScheduler()
        self.viewport = viewport or ViewportController()
        self.selection = SelectionTracker()
        self.criteria = FilterCriteria()
        self.animation_duration = animation_duration
        self.presenters = {}
        self.dataset = Dataset()
        self.dataset_version = 0

        self._projected = Memo(lambda ds: project_airports(ds.airports))
        self._filtered = Memo(lambda ds, c: filter_routes(ds.routes, ds.airports, c))
        self._metrics = Memo(lambda ds, routes: compute_snapshot(
            routes, ds.haul_distribution, ds.top_entities, longest_route=ds.longest_route))
        self._segments = Memo(self._build_segments)

        self._handlers = {
            "load_dataset": self.load_dataset,
            "pointer_down": self.pointer_down,
            "pointer_move": self.pointer_move,
            "pointer_up": self.pointer_up,
            "pointer_leave": self.pointer_leave,
            "zoom": self.zoom,
            "zoom_in": self.zoom_in,
            "zoom_out": self.zoom_out,
            "set_filter": self.set_filter,
            "click_airport": self.click_airport,
            "reset": self.reset,
            "tick": self.tick,
        }

        if dataset is not None:
            self.load_dataset(dataset)

    # -- events --------------------------------------------------------

    def dispatch(self, event, **payload):
        handler = self._handlers.get(event)
        if handler is None:
            raise ValueError(f"Unknown map event '{event}'. Available: {', '.join(self._handlers)}")
        return handler(**payload)

    def load_dataset(self, dataset):
        self.dataset = dataset
        self.dataset_version += 1
        log.info("Dataset v%d active (%s)", self.dataset_version, dataset.source or "in-memory")
        self._sync_kpis()

    def pointer_down(self, x, y):
        self.viewport.pointer_down(x, y)

    def pointer_move(self, x, y):
        return self.viewport.pointer_move(x, y)

    def pointer_up(self):
        self.viewport.pointer_up()

    def pointer_leave(self):
        self.viewport.pointer_leave()

    def zoom(self, factor):
        try:
            return self.viewport.zoom(factor)
        except FlightMapError as exc:
            log.warning("Ignoring zoom request: %s", exc)
            return self.viewport.viewport

    def zoom_in(self):
        return self.viewport.zoom_in()

    def zoom_out(self):
        return self.viewport.zoom_out()

    def set_filter(self, continent=_UNSET, airline=_UNSET):
        """Change one or both selectors; pass ``None`` to clear a selector."""
        changes = {}
        if continent is not _UNSET:
            changes["continent"] = continent or None
        if airline is not _UNSET:
            changes["airline"] = airline or None
        criteria = replace(self.criteria, **changes)
        if criteria == self.criteria:
            return self.criteria
        self.criteria = criteria
        log.info("Filters: continent=%s airline=%s", criteria.continent or "any", criteria.airline or "any")
        self._sync_kpis()
        return self.criteria

    def click_airport(self, code):
        return self.selection.click(code)

    def reset(self):
        self.viewport.reset()
        self.selection.reset()

    def tick(self, now=None):
        return self.scheduler.tick(now)

    def close(self):
        for presenter in self.presenters.values():
            presenter.close()

    # -- derived state -------------------------------------------------

    @property
    def projected_airports(self):
        return self._projected.get(self.dataset_version, self.dataset)

    @property
    def filtered_routes(self):
        key = (self.dataset_version, self.criteria)
        return self._filtered.get(key, self.dataset, self.criteria)

    @property
    def active_airports(self):
        return filter_airports(self.filtered_routes)

    @property
    def metrics(self):
        key = (self.dataset_version, self.criteria)
        return self._metrics.get(key, self.dataset, self.filtered_routes)

    @property
    def kpis(self):
        return {name: p.value for name, p in self.presenters.items()}

    def _sync_kpis(self):
        targets = dict(self.dataset.headline)
        targets.update(self.metrics.kpis())
        for name, target in targets.items():
            presenter = self.presenters.get(name)
            if presenter is None:
                presenter = AnimatedValue(self.scheduler, duration=self.animation_duration)
                self.presenters[name] = presenter
            presenter.set_target(target)
        for name in set(self.presenters) - set(targets):
            self.presenters.pop(name).close()

    def _build_segments(self, routes, projected, selected):
        segments = []
        dangling = 0
        for route in routes[:MAX_RENDERED_ROUTES]:
            try:
                src, dst = route_endpoints(route, projected)
            except DanglingReferenceError as exc:
                log.debug("Skipping segment %s: %s", route.key, exc)
                dangling += 1
                continue
            highlighted = selected is not None and selected in (route.origin, route.destination)
            segments.append(RouteSegment(
                origin=route.origin, destination=route.destination,
                x1=src.x, y1=src.y, x2=dst.x, y2=dst.y,
                highlighted=highlighted,
            ))
        if dangling:
            log.warning("%d routes reference airports that are not on the map", dangling)
        return tuple(segments)

    def frame(self):
        """Snapshot of everything the renderer needs for the current state."""
        routes = self.filtered_routes
        projected = self.projected_airports
        selected = self.selection.selected
        segments = self._segments.get(
            (self.dataset_version, self.criteria, selected), routes, projected, selected)

        active = self.active_airports
        touched = self.selection.touched_airports(routes)
        markers = tuple(
            AirportMarker(
                code=code, x=p.x, y=p.y,
                active=code in active,
                highlighted=code in touched,
            )
            for code, p in list(projected.items())[:MAX_RENDERED_AIRPORTS]
        )
        return RenderFrame(
            viewport=self.viewport.viewport,
            airports=markers,
            routes=segments,
            metrics=self.metrics,
            kpis=self.kpis,
            selected=selected,
        )
