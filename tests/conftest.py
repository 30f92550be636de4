"""Shared fixtures: a small hand-built dataset and a synthetic clock."""

import pytest

from flightmap.animation import FrameScheduler
from flightmap.dataset import parse_dataset


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


DOC = {
    "airports": {
        "CDG": {"name": "Charles de Gaulle", "city": "Paris", "country": "France",
                "continent": "Europe", "lon": 2.55, "lat": 49.012779},
        "LHR": {"name": "Heathrow", "city": "London", "country": "United Kingdom",
                "continent": "Europe", "lon": -0.461389, "lat": 51.4775},
        "JFK": {"name": "John F. Kennedy", "city": "New York", "country": "United States",
                "continent": "North America", "lon": -73.778925, "lat": 40.639751},
        "SIN": {"name": "Changi", "city": "Singapore", "country": "Singapore",
                "continent": "Asia", "lon": 103.994433, "lat": 1.350189},
        "SYD": {"name": "Kingsford Smith", "city": "Sydney", "country": "Australia",
                "continent": "Oceania", "lon": 151.177222, "lat": -33.946111},
    },
    "routes": [
        {"origin": "CDG", "destination": "JFK", "distance_km": 5834.0, "airline": "AF"},
        {"origin": "LHR", "destination": "JFK", "distance_km": 5540.0, "airline": "BA"},
        {"origin": "JFK", "destination": "SIN", "distance_km": 15344.4, "airline": "SQ"},
        {"origin": "SIN", "destination": "SYD", "distance_km": 6300.0, "airline": "SQ"},
        {"origin": "CDG", "destination": "LHR", "distance_km": 344.0, "airline": "AF"},
        {"origin": "SYD", "destination": "XXX", "distance_km": 1000.0, "airline": "QF"},
    ],
    "haul_distribution": [
        {"label": "Short-haul", "count": 60},
        {"label": "Medium-haul", "count": 15},
        {"label": "Long-haul", "count": 25},
    ],
    "top_entities": [{"key": k, "count": 100 - i} for i, k in enumerate("ABCDEFGHIJKL")],
}


@pytest.fixture
def doc():
    return DOC


@pytest.fixture
def dataset():
    return parse_dataset(DOC, source="test")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FrameScheduler(clock=clock)
