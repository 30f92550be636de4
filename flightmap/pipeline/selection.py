"""Focused-airport selection and route highlighting."""

import logging

log = logging.getLogger("flightmap")


class SelectionTracker:
    """Holds at most one selected airport code.

    Clicking the selected airport again clears the selection; clicking a
    different one moves the selection straight to it.
    """

    def __init__(self):
        self.selected = None

    @property
    def has_selection(self):
        return self.selected is not None

    def click(self, code):
        if self.selected == code:
            self.selected = None
        else:
            self.selected = code
        log.debug("Selection -> %s", self.selected)
        return self.selected

    def reset(self):
        self.selected = None

    def is_highlighted(self, route):
        if self.selected is None:
            return False
        return route.origin == self.selected or route.destination == self.selected

    def highlight(self, routes):
        """Pair each route with its highlight flag; membership is unchanged."""
        return [(route, self.is_highlighted(route)) for route in routes]

    def touched_airports(self, routes):
        """The selected airport plus every airport it connects to in ``routes``."""
        if self.selected is None:
            return frozenset()
        codes = {self.selected}
        for route in routes:
            if self.is_highlighted(route):
                codes.add(route.origin)
                codes.add(route.destination)
        return frozenset(codes)
