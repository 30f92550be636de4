"""Canvas projection and viewport handling for the route map."""

from flightmap.geo.projection import ProjectedAirport, project, project_airports
from flightmap.geo.viewport import Viewport, ViewportBounds, ViewportController

__all__ = [
    "ProjectedAirport", "project", "project_airports",
    "Viewport", "ViewportBounds", "ViewportController",
]
