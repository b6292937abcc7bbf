"""Module entrypoint for `python -m gui` (installed as `graphview`).

Renders a serialized line graph or pie chart to an image file.

Features:
 - Reads the JSON written by ``domain.serialization`` (``dumps_graph`` or
   ``pie_chart_to_dict``).
 - Draws it through the chart registry and exports PNG or SVG.
 - Captured log records can be written next to the image (`--log-export`).
 - Exit code 0 on success, 2 when the payload cannot be read or parsed
   or the output suffix is neither .png nor .svg.

Example:
  graphview sales.json -o sales.png --width 800 --height 400 --log-level INFO
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from config import settings
from domain.errors import GraphError
from domain.serialization import loads_graph, pie_chart_from_dict

from .charting import ChartRequest, chart_registry
from .charting.export import export_chart
from .services.logging_service import configure_logging

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="graphview", description="Render a serialized graph or pie chart")
    p.add_argument("payload", help="JSON file holding a graph (or a pie chart with --pie)")
    p.add_argument("-o", "--output", required=True, help="Image path; the suffix (.png / .svg) picks the format")
    p.add_argument("--pie", action="store_true", help="Payload is a pie chart instead of a line graph")
    p.add_argument("--width", type=int, default=640)
    p.add_argument("--height", type=int, default=360)
    p.add_argument("--title", default=None)
    p.add_argument("--no-fill", action="store_true", help="Draw line graphs without the shaded area")
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="Level for the domain/utils/gui loggers")
    p.add_argument("--log-export", default=None, help="Write captured log records to this JSONL file")
    return p.parse_args(argv)


def _request(args: argparse.Namespace, text: str) -> ChartRequest:
    size = (args.width, args.height)
    if args.pie:
        return ChartRequest("pie.basic", pie_chart_from_dict(json.loads(text)), {"size": size, "title": args.title})
    options = {"size": size, "title": args.title, "fill": not args.no_fill}
    return ChartRequest("graph.line", loads_graph(text), options)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    svc = configure_logging(args.log_level)
    output = Path(args.output)
    fmt = output.suffix.lstrip(".").lower() or "png"
    if fmt not in ("png", "svg"):
        print(f"Unsupported image format: {output.suffix}", file=sys.stderr)
        return 2
    try:
        text = Path(args.payload).read_text(encoding="utf-8")
        request = _request(args, text)
    except (OSError, ValueError, GraphError) as exc:
        log.error("cannot load %s: %s", args.payload, exc)
        print(f"Cannot load payload {args.payload}: {exc}", file=sys.stderr)
        return 2
    result = chart_registry.build(request)
    export_chart(result.widget, str(output), format=fmt)
    log.info("rendered %s to %s (%s)", request.chart_type, output, fmt)
    if args.log_export:
        svc.export_jsonl(args.log_export)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
