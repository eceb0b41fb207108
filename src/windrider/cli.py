"""CLI entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from windrider.analysis.overlay import overlay_to_geojson
from windrider.config import PROVIDERS, build_provider, list_paths, load_path, load_settings
from windrider.errors import WindriderError
from windrider.models import Coordinate, CyclingPath
from windrider.pipeline import assess_path
from windrider.report.text import format_report

logger = logging.getLogger(__name__)


def _parse_point(text: str) -> Coordinate:
    try:
        lat, lon = (float(v) for v in text.split(","))
        return Coordinate(lat=lat, lon=lon)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected LAT,LON but got '{text}'") from None


def _build_path(args: argparse.Namespace, config_dir: Path | None) -> CyclingPath:
    """Build CyclingPath from CLI arguments (inline points or --path)."""
    if args.path:
        try:
            return load_path(args.path, config_dir)
        except KeyError as exc:
            print(f"Error: {exc.args[0]}")
            sys.exit(1)

    if len(args.points) < 2:
        print("Error: At least 2 LAT,LON points required (or use --path).")
        sys.exit(1)
    return CyclingPath(name="Inline path", points=args.points)


def run_analyze(args: argparse.Namespace) -> None:
    config_dir = Path(args.config_dir) if args.config_dir else None
    path = _build_path(args, config_dir)
    settings = load_settings(config_dir)

    try:
        provider = build_provider(args.provider)
        result = assess_path(path, provider, settings)
    except (WindriderError, ValueError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    if args.geojson:
        Path(args.geojson).write_text(json.dumps(overlay_to_geojson(result.segments), indent=2))
        logger.info("Wrote overlay to %s", args.geojson)

    if args.json:
        payload = {
            "analysis": result.analysis.model_dump(mode="json"),
            "score": result.score,
            "advice": result.advice.value,
            "message": result.advice.message,
        }
        print(json.dumps(payload, indent=2))
    else:
        print(format_report(result.analysis, result.score, result.advice, path.coordinates()))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="windrider",
        description="Wind and temperature impact on a cycling path",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--config-dir", help="Directory containing paths.yaml (or set WINDRIDER_CONFIG_DIR)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Fetch current wind and analyze a path"
    )
    analyze_parser.add_argument(
        "points", nargs="*", default=[], type=_parse_point, metavar="LAT,LON",
        help="Inline path points (min 2, e.g. 51.76,-1.27 51.78,-1.28)",
    )
    analyze_parser.add_argument(
        "--path", help="Named path from paths.yaml (alternative to inline points)"
    )
    analyze_parser.add_argument(
        "--provider", choices=PROVIDERS,
        help="Weather provider (default: env WINDRIDER_PROVIDER, else auto)",
    )
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print the analysis as JSON"
    )
    analyze_parser.add_argument(
        "--geojson", metavar="FILE", help="Write the colour overlay as GeoJSON"
    )

    subparsers.add_parser("paths", help="List configured paths")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "paths":
        config_dir = Path(args.config_dir) if args.config_dir else None
        for name in list_paths(config_dir):
            print(f"  {name}")
    elif args.command == "analyze":
        if not args.points and not args.path:
            print("Error: Provide LAT,LON points or --path NAME.")
            sys.exit(1)
        run_analyze(args)


if __name__ == "__main__":
    main()
