"""Filtering, selection and aggregation over the route dataset."""

from flightmap.pipeline.filters import FilterCriteria, filter_airports, filter_routes
from flightmap.pipeline.metrics import MetricsSnapshot, compute_snapshot
from flightmap.pipeline.selection import SelectionTracker

__all__ = [
    "FilterCriteria", "filter_airports", "filter_routes",
    "MetricsSnapshot", "compute_snapshot",
    "SelectionTracker",
]
