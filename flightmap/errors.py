"""Exceptions raised by the map and metrics components."""


class FlightMapError(ValueError):
    """Base class for recoverable map/pipeline errors."""


class CoordinateOutOfRangeError(FlightMapError):
    """Raised when a coordinate cannot be projected onto the canvas."""

    def __init__(self, lon, lat):
        super().__init__(f"Coordinate out of range: lon={lon!r}, lat={lat!r}")
        self.lon = lon
        self.lat = lat


class InvalidZoomFactorError(FlightMapError):
    """Raised for zoom factors that are non-positive or non-finite."""

    def __init__(self, factor):
        super().__init__(f"Invalid zoom factor: {factor!r}")
        self.factor = factor


class DanglingReferenceError(FlightMapError):
    """A route endpoint that is missing from the airport table."""

    def __init__(self, code):
        super().__init__(f"Unknown airport referenced by route: {code!r}")
        self.code = code
