"""Command line entry point: run the API or dump generated listings."""

import argparse
import json
import logging
import sys
from pathlib import Path

from hmo_finder.config import HmoFinderConfig
from hmo_finder.generators.cities import available_cities
from hmo_finder.generators.property import PropertyGenerator
from hmo_finder.logging import setup_logging
from hmo_finder.models.property import PropertyRecord
from hmo_finder.serialization import to_dicts

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hmo-finder", description="HMO listing search service")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: HMO_HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: HMO_PORT or 8000)")
    serve.add_argument(
        "--no-auto-refresh",
        action="store_true",
        help="Disable the background refresh",
    )

    generate = sub.add_parser("generate", help="Print generated listings as JSON")
    generate.add_argument(
        "--city",
        action="append",
        help=f"City to generate for; repeatable (default: all of {', '.join(available_cities())})",
    )
    generate.add_argument("--count", type=int, default=6, help="Listings per city (default: 6)")
    generate.add_argument("--max-price", type=int, default=500_000, help="Price ceiling (default: 500000)")
    generate.add_argument("--min-size", type=int, default=90, help="Minimum size in sqm (default: 90)")
    generate.add_argument("--seed", type=int, default=None, help="Random seed")
    generate.add_argument("--output", type=Path, default=None, help="Write to file instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = HmoFinderConfig.from_env()
    setup_logging(args.log_level or config.log_level, config.log_format)

    if args.command == "serve":
        return serve(config, args)
    return generate(args)


def serve(config: HmoFinderConfig, args: argparse.Namespace) -> int:
    import uvicorn

    from hmo_finder.api.app import create_app

    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port
    if args.no_auto_refresh:
        config.refresh.enabled = False

    uvicorn.run(create_app(config), host=config.server.host, port=config.server.port)
    return 0


def generate(args: argparse.Namespace) -> int:
    generator = PropertyGenerator(seed=args.seed)
    records: list[PropertyRecord] = []
    for city in args.city or available_cities():
        batch = generator.generate_batch(city, args.count, args.max_price, args.min_size)
        records.extend(PropertyRecord.create(candidate) for candidate in batch)

    payload = json.dumps(to_dicts(records), indent=2, ensure_ascii=False)
    if args.output is None:
        sys.stdout.write(payload + "\n")
    else:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Saved %d listings to %s", len(records), args.output)
    return 0
