"""Standalone SVG snapshot of a map render frame.

Routes = straight lines between projected endpoints
Airports = circles, dimmed when no filtered route touches them
Selection = highlighted routes drawn thicker with a glow filter
"""

import logging
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from flightmap.config import CANVAS_HEIGHT, CANVAS_WIDTH
from flightmap.pipeline.metrics import format_number

log = logging.getLogger("flightmap")

ROUTE_STYLE = {"stroke": "#0ea5e9", "stroke-width": "0.6", "opacity": "0.55"}
ROUTE_HIGHLIGHT_STYLE = {
    "stroke": "#22d3ee", "stroke-width": "1.8", "opacity": "0.95", "filter": "url(#glow)",
}
AIRPORT_STYLE = {"r": "1.6", "fill": "#e0f2fe", "opacity": "1"}
AIRPORT_DIMMED_STYLE = {"r": "1.2", "fill": "#475569", "opacity": "0.5"}
AIRPORT_HIGHLIGHT_STYLE = {"r": "2.6", "fill": "#f59e0b", "opacity": "1"}


def _attrs(style):
    return " ".join(f"{k}={quoteattr(v)}" for k, v in style.items())


def _route_line(seg):
    style = ROUTE_HIGHLIGHT_STYLE if seg.highlighted else ROUTE_STYLE
    return (
        f'<line x1="{seg.x1:.2f}" y1="{seg.y1:.2f}" x2="{seg.x2:.2f}" y2="{seg.y2:.2f}" '
        f'data-route={quoteattr(f"{seg.origin}-{seg.destination}")} {_attrs(style)}/>'
    )


def _airport_circle(marker):
    if marker.highlighted:
        style = AIRPORT_HIGHLIGHT_STYLE
    elif marker.active:
        style = AIRPORT_STYLE
    else:
        style = AIRPORT_DIMMED_STYLE
    return (
        f'<circle cx="{marker.x:.2f}" cy="{marker.y:.2f}" '
        f'data-iata={quoteattr(marker.code)} {_attrs(style)}>'
        f"<title>{escape(marker.code)}</title></circle>"
    )


def _kpi_comment(frame):
    m = frame.metrics
    return (
        f"<!-- routes={m.route_count} avg_km={format_number(m.average_distance)} "
        f"long_haul={m.long_haul_share:.1f}% -->"
    )


def render_svg(frame):
    """Return the SVG document for ``frame`` as a string."""
    lines = "\n    ".join(_route_line(s) for s in frame.routes)
    circles = "\n    ".join(_airport_circle(a) for a in frame.airports)
    svg = _TEMPLATE.replace("__VIEW_BOX__", frame.viewport.as_view_box())
    svg = svg.replace("__WIDTH__", f"{CANVAS_WIDTH:g}")
    svg = svg.replace("__HEIGHT__", f"{CANVAS_HEIGHT:g}")
    svg = svg.replace("__KPIS__", _kpi_comment(frame))
    svg = svg.replace("__ROUTES__", lines)
    svg = svg.replace("__AIRPORTS__", circles)
    return svg


def build_map_svg(frame, output_path):
    """Write the frame as a standalone SVG file and return its path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_svg(frame), encoding="utf-8")
    log.info("Map written to %s (%d airports, %d routes)", output_path, len(frame.airports), len(frame.routes))
    return output_path


_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="__VIEW_BOX__" width="__WIDTH__" height="__HEIGHT__">
  __KPIS__
  <defs>
    <filter id="glow" x="-50%" y="-50%" width="200%" height="200%">
      <feGaussianBlur stdDeviation="1.5" result="blur"/>
      <feMerge><feMergeNode in="blur"/><feMergeNode in="SourceGraphic"/></feMerge>
    </filter>
  </defs>
  <rect x="0" y="0" width="__WIDTH__" height="__HEIGHT__" fill="#0f172a"/>
  <g id="routes">
    __ROUTES__
  </g>
  <g id="airports">
    __AIRPORTS__
  </g>
</svg>
"""
