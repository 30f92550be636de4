#!/usr/bin/env python3
"""CLI entry point for rendering a route map snapshot.

Usage:
    python visualize.py                               # default dataset, full map
    python visualize.py --data data/analytics.json    # local export
    python visualize.py --continent Europe --airline AF
    python visualize.py --select LHR --zoom 0.5       # focus an airport, zoom in
    python visualize.py --output my_map.svg --open    # custom path, open after build
"""

import argparse
import webbrowser
from pathlib import Path

from flightmap.config import OUTPUT_DIR, setup_logging
from flightmap.controller import MapController
from flightmap.dataset import load_dataset
from flightmap.pipeline.filters import available_airlines, available_continents
from flightmap.pipeline.metrics import distance_ratio, format_number
from flightmap.viz.svg_map import build_map_svg

log = setup_logging()


def print_summary(controller):
    dataset = controller.dataset
    metrics = controller.metrics
    log.info("=" * 50)
    log.info("ROUTE MAP SUMMARY (%s)", dataset.source)
    log.info("=" * 50)
    log.info("  %-18s %s", "continents", ", ".join(available_continents(dataset.airports)) or "-")
    log.info("  %-18s %s", "airlines", ", ".join(available_airlines(dataset.routes)) or "-")
    log.info("  %-18s %s / %s", "continent/airline",
             controller.criteria.continent or "any", controller.criteria.airline or "any")
    log.info("  %-18s %8s", "routes", format_number(metrics.route_count))
    log.info("  %-18s %8s km", "average distance", format_number(metrics.average_distance))
    log.info("  %-18s %8.1f %%", "long-haul share", metrics.long_haul_share)
    if dataset.longest_route is not None:
        log.info("  %-18s %8s km (%s)", "longest route",
                 format_number(dataset.longest_route.distance_km), dataset.longest_route.key)
    if dataset.top_hub is not None:
        log.info("  %-18s %8s connections (%s)", "top hub",
                 format_number(dataset.top_hub.count), dataset.top_hub.key)
    for bucket in dataset.domestic_split:
        log.info("  %-18s %8s routes", bucket.label.lower(), format_number(bucket.count))
    for route in metrics.signature_routes:
        bar = "#" * round(20 * distance_ratio(route, metrics.bar_max_distance))
        log.info("  %-18s %8s km %s", route.key, format_number(route.distance_km), bar)
    for entity in metrics.top_entities:
        log.info("  %-18s %8s routes", f"top:{entity.key}", format_number(entity.count))
    log.info("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Render the flight route map to SVG.")
    parser.add_argument("--data", type=str, default=None, help="Dataset path or URL")
    parser.add_argument("--continent", type=str, default=None)
    parser.add_argument("--airline", type=str, default=None)
    parser.add_argument("--select", type=str, default=None, help="Airport code to highlight")
    parser.add_argument("--zoom", type=float, action="append", default=[],
                        help="Zoom factor (<1 zooms in); may be repeated")
    parser.add_argument("--output", "-o", type=str, default=None, help="Output SVG path")
    parser.add_argument("--open", action="store_true", help="Open in browser after build")
    args = parser.parse_args()

    out_path = Path(args.output) if args.output else OUTPUT_DIR / "route_map.svg"

    controller = MapController(load_dataset(args.data))
    try:
        controller.set_filter(continent=args.continent, airline=args.airline)
        if args.select:
            controller.click_airport(args.select.upper())
        for factor in args.zoom:
            controller.zoom(factor)
        # Let the KPI presenters settle on their targets.
        controller.tick(controller.scheduler.now() + controller.animation_duration)

        path = build_map_svg(controller.frame(), out_path)
        print_summary(controller)
        if args.open:
            webbrowser.open(f"file://{path.resolve()}")
    finally:
        controller.close()


if __name__ == "__main__":
    main()
