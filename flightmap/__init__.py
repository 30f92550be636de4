"""Interactive flight route map: projection, viewport, filters and KPIs."""

__version__ = "0.1.0"
