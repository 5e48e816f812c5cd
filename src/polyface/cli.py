"""polyface command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from .io import load_json, save_json

logger = logging.getLogger("polyface")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="polyface CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check face loops and self-intersections")
    validate.add_argument("--in", dest="input_path", required=True)
    validate.add_argument("--out", dest="output_path")
    validate.add_argument(
        "--strict", action="store_true",
        help="Also fail on non-orientable (zero-area) faces",
    )

    info = sub.add_parser("info", help="Print area, orientation and size per face")
    info.add_argument("--in", dest="input_path", required=True)
    info.add_argument("--json", dest="json_path", help="Write the full report as JSON")

    render = sub.add_parser("render", help="Render a polygon to PNG or SVG")
    render.add_argument("--in", dest="input_path", required=True)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--dpi", type=int, default=150)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        polygon = load_json(args.input_path)
    except (OSError, ValueError) as exc:
        # covers GeometryError and JSONDecodeError
        logger.error("Cannot load %s: %s", args.input_path, exc)
        raise SystemExit(1)

    if args.command == "validate":
        _cmd_validate(polygon, args)
    elif args.command == "info":
        _cmd_info(polygon, args)
    elif args.command == "render":
        _cmd_render(polygon, args)


def _cmd_validate(polygon, args) -> None:
    from .face import Orientation

    errors = polygon.validate()
    if args.strict:
        for i, face in enumerate(polygon.faces):
            if not face.is_empty() and face.orientation() is Orientation.NOT_ORIENTABLE:
                errors.append(f"Face {i}: not orientable (zero area)")
    if errors:
        for error in errors:
            print(error)
        raise SystemExit(1)
    if args.output_path:
        save_json(polygon, args.output_path)
    print("OK")


def _cmd_info(polygon, args) -> None:
    from .diagnostics import diagnostics_report

    report = diagnostics_report(polygon)
    for line in _info_lines(report):
        print(line)
    if args.json_path:
        Path(args.json_path).write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Report written to %s", args.json_path)


def _info_lines(report: dict) -> list[str]:
    lines = [
        f"faces: {report['face_count']}",
        f"edges: {report['edge_count']}",
        f"area: {report['area']:.4f}",
    ]
    for i, face in enumerate(report["faces"]):
        lines.append(f"face {i}:")
        lines.append(f"  size: {face['size']}")
        lines.append(f"  area: {face['area']:.4f}")
        lines.append(f"  orientation: {face['orientation']}")
        lines.append(f"  perimeter: {face['perimeter']:.4f}")
        lines.append(f"  simple: {face['simple']}")
    return lines


def _cmd_render(polygon, args) -> None:
    output = Path(args.output_path)
    try:
        if output.suffix.lower() == ".svg":
            from .io import save_svg
            save_svg(polygon, output)
        else:
            from .render import render_png
            render_png(polygon, output, dpi=args.dpi)
    except (ValueError, RuntimeError) as exc:
        logger.error("Cannot render: %s", exc)
        raise SystemExit(1)
    print(f"Saved {output}")


if __name__ == "__main__":
    main()
