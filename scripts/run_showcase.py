#!/usr/bin/env python3
"""sample_types showcase runner.

Builds each demonstration type once, writes its display lines to stdout
and logs each step with structlog on stderr.

Usage:
    python scripts/run_showcase.py [options]

Options:
    --name NAME          Entity name (default: SHOWCASE_ENTITY_NAME or Alice)
    --id N               Entity identifier (default: SHOWCASE_ENTITY_ID or 1)
    --x N                Point x coordinate (default: SHOWCASE_POINT_X or 3)
    --y N                Point y coordinate (default: SHOWCASE_POINT_Y or 4)
    --environment ENV    development or production logging
"""

import argparse
import dataclasses
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from sample_types.application.services import ShowcaseService
from sample_types.config import ShowcaseConfig
from sample_types.domain.exceptions import SampleTypesError
from sample_types.infrastructure.observability import configure_structlog
from sample_types.infrastructure.stubs import CapabilityStub


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the sample_types showcase")
    parser.add_argument("--name", help="entity name")
    parser.add_argument("--id", type=int, dest="entity_id", help="entity identifier")
    parser.add_argument("--x", type=int, dest="point_x", help="point x coordinate")
    parser.add_argument("--y", type=int, dest="point_y", help="point y coordinate")
    parser.add_argument(
        "--environment",
        choices=["development", "production"],
        help="logging mode",
    )
    return parser


def build_config(args: argparse.Namespace) -> ShowcaseConfig:
    """Overlay command-line values on the environment configuration."""
    config = ShowcaseConfig.from_environment()
    overrides = {
        "entity_name": args.name,
        "entity_id": args.entity_id,
        "point_x": args.point_x,
        "point_y": args.point_y,
        "environment": args.environment,
    }
    return dataclasses.replace(
        config, **{k: v for k, v in overrides.items() if v is not None}
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = get_parser().parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_structlog(environment=config.environment)

    try:
        ShowcaseService(config, CapabilityStub()).run()
    except SampleTypesError as e:
        print(f"Showcase failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
