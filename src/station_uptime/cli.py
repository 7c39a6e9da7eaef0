"""Command-line driver.

Usage::

    station-uptime <input-file> [-v] [--summary]

Prints ``<station-id> <uptime-percent>`` per station in ascending station-id
order and exits 0.  On any failure (bad arguments, unreadable file, malformed
input) prints ``ERROR`` alone on stdout and exits 1.  Diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from station_uptime.config.runtime import ENV_LOG_LEVEL, RuntimeConfig
from station_uptime.engine.ingest import ingest_file
from station_uptime.engine.summary import summarize_results
from station_uptime.engine.uptime import compute_dataset_uptimes
from station_uptime.errors import FAILURE_TOKEN, MalformedInputError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class _UsageError(Exception):
    """Raised instead of argparse's own exit so usage errors stay uniform."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="station-uptime",
        description="Compute per-station charger uptime percentages from an availability report.",
    )
    parser.add_argument("input", help="Path to the stations / availability report file")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase diagnostic output on stderr (-v INFO, -vv DEBUG)",
    )
    parser.add_argument(
        "--summary", action="store_true",
        help="Also write a JSON fleet summary to stderr",
    )
    return parser


def configure_logging(verbosity: int, runtime: RuntimeConfig) -> None:
    """Send log records to stderr; ``-v`` flags override the configured level."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, runtime.log_level)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    try:
        args = build_parser().parse_args(argv)
    except _UsageError as exc:
        print(FAILURE_TOKEN)
        print(f"usage error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    env_error: ValidationError | None = None
    try:
        runtime = RuntimeConfig.from_env()
    except ValidationError as exc:
        env_error = exc
        runtime = RuntimeConfig()
    configure_logging(args.verbose, runtime)
    if env_error is not None:
        logger.warning(
            "Ignoring invalid %s, using %s: %s",
            ENV_LOG_LEVEL, runtime.log_level, env_error.errors()[0]["msg"],
        )

    try:
        dataset = ingest_file(args.input)
        results = compute_dataset_uptimes(dataset)
    except MalformedInputError as exc:
        logger.info("Malformed input: %s", exc)
        print(FAILURE_TOKEN)
        return EXIT_FAILURE
    except (OSError, UnicodeDecodeError) as exc:
        logger.info("Cannot read %s: %s", args.input, exc)
        print(FAILURE_TOKEN)
        return EXIT_FAILURE

    sys.stdout.write("".join(f"{r.render()}\n" for r in results))

    if args.summary:
        print(summarize_results(results).model_dump_json(indent=2), file=sys.stderr)
    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())
