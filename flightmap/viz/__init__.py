"""Rendering of map frames to static files."""
