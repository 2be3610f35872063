"""Command line entry point.

Usage:
    content-seeder seed
    content-seeder seed --base-url http://localhost:3002 --output out/content-ids.json
    content-seeder --log-level DEBUG probe login --base-url http://localhost:3002
    content-seeder probe duplicate
    content-seeder probe password-length --expected-min 12 --client-min 6
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from content_seeder import __version__
from content_seeder.config import (
    MIN_CLIENT_PASSWORD_LENGTH,
    MIN_EXPECTED_PASSWORD_LENGTH,
    Settings,
    get_settings,
)
from content_seeder.console import SeedConsole
from content_seeder.logging_config import configure_logging
from content_seeder.probes import PROBES, run_probe
from content_seeder.seeding.runner import run_seed


def _bounded_int(minimum: int):
    """argparse type: integer no smaller than `minimum`."""

    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {number}")
        return number

    return parse


def _common_options() -> argparse.ArgumentParser:
    # SUPPRESS keeps a subcommand from resetting a value given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--base-url",
        type=str,
        default=argparse.SUPPRESS,
        help="API base URL without the version prefix (default: API_BASE_URL or http://127.0.0.1:3002)",
    )
    common.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=argparse.SUPPRESS,
        help="Override log level",
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(
        prog="content-seeder",
        description="Seed and probe an educational-content REST API",
        parents=[common],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed = subparsers.add_parser("seed", parents=[common], help="Create the medical content hierarchy")
    seed.add_argument("--output", type=str, default=None, help="Where to write the content IDs JSON")

    probe = subparsers.add_parser("probe", parents=[common], help="Run a one-shot auth probe")
    probe.add_argument("name", choices=PROBES)
    probe.add_argument(
        "--expected-min",
        type=_bounded_int(MIN_EXPECTED_PASSWORD_LENGTH),
        default=None,
        help="Server minimum password length",
    )
    probe.add_argument(
        "--client-min",
        type=_bounded_int(MIN_CLIENT_PASSWORD_LENGTH),
        default=None,
        help="Client advertised minimum password length",
    )
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    updates = {}
    base_url = getattr(args, "base_url", None)
    log_level = getattr(args, "log_level", None)
    if base_url:
        updates["api_base_url"] = base_url
    if log_level:
        updates["log_level"] = log_level
    return settings.model_copy(update=updates) if updates else settings


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(settings or get_settings(), args)

    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )
    console = SeedConsole()

    if args.command == "seed":
        outcome = asyncio.run(run_seed(settings, output_file=args.output, console=console))
        return 0 if outcome.ok else 1

    passed, _ = asyncio.run(
        run_probe(
            args.name,
            settings,
            expected_min=args.expected_min,
            client_min=args.client_min,
            console=console,
        )
    )
    return 0 if passed else 1


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())
