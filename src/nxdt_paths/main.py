"""Main entry point for the nxdt-paths output path generator."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, Optional

from .core import PathError, PathLimits, sanitize_filename, synthesize_path, trim
from .infrastructure.config import Config, get_path_limits
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Turn raw title/content names into filesystem-safe output paths",
        epilog="""
Examples:
  # Single name under an output directory
  nxdt-paths sd:/nxdt_out --names "Some Game: Deluxe Edition" -e .nsp

  # Several names, 7-bit ASCII only
  nxdt-paths sd:/nxdt_out --names "Pokémon,Zelda" --ascii-only

  # Names from a file (one per line, '#' starts a comment)
  nxdt-paths sd:/nxdt_out --names-file titles.txt -e .xci -v

  # Using .env file for configuration
  echo 'OUTPUT_PREFIX=sd:/nxdt_out' > .env
  nxdt-paths --names "Some Game"
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "prefix",
        nargs="?",
        help="Output directory prefix (optional if using .env)",
    )
    parser.add_argument(
        "-e",
        "--extension",
        help="File extension appended to every name, including the leading dot",
    )
    parser.add_argument(
        "--names",
        metavar="NAMES",
        help="Comma-separated list of raw names (use --names-file for names containing commas)",
    )
    parser.add_argument(
        "--names-file",
        type=Path,
        metavar="FILE",
        help="Read raw names from file (one name per line)",
    )
    parser.add_argument(
        "--ascii-only",
        action="store_true",
        default=None,
        help="Replace every character outside 7-bit ASCII",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


@log_timing
def read_names_file(path: Path) -> list[str]:
    """Read names from a file, skipping blank lines and '#' comments."""
    names = []
    with open(path, encoding="utf-8", errors="surrogateescape") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.strip() and not line.lstrip().startswith("#"):
                names.append(line)
    return names


def build_output_path(
    raw_name: str,
    prefix: Optional[str],
    extension: Optional[str],
    ascii_only: bool,
    limits: PathLimits,
) -> str:
    """Trim and sanitize a raw name, then build its output path."""
    filename = sanitize_filename(trim(raw_name), ascii_only)
    return synthesize_path(prefix, filename, extension, limits)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Generate one output path per input name and print them to stdout."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            output_prefix=args.prefix,
            extension=args.extension,
            ascii_only=args.ascii_only,
            verbose=args.verbose,
        )
        limits = get_path_limits()
        config.validate(limits.separator)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Output prefix: {config.output_prefix!r}")
    logger.debug(f"Extension: {config.extension!r}")
    logger.debug(f"Limits: {limits}")

    names: list[str] = []
    if args.names and args.names_file:
        logger.error("Cannot use both --names and --names-file options")
        sys.exit(1)
    elif args.names:
        names = [n for n in args.names.split(",") if n.strip()]
    elif args.names_file:
        try:
            names = read_names_file(args.names_file)
            logger.info(f"Read {len(names)} names from {args.names_file}")
        except OSError as e:
            logger.error(f"Error reading names file: {e}")
            sys.exit(1)
    else:
        logger.error("Must provide either --names or --names-file option")
        sys.exit(1)

    if not names:
        logger.error("No names provided")
        sys.exit(1)

    tracker = ProgressTracker(logger)
    failed_names: list[tuple[str, str]] = []

    with tracker.track_operation("generate paths"):
        for name in names:
            try:
                with tracker.track_name(name):
                    path = build_output_path(
                        name, config.output_prefix, config.extension, config.ascii_only, limits
                    )
            except PathError as e:
                logger.error(f"[FAILED] {name!r}: {e}")
                failed_names.append((name, str(e)))
                continue

            logger.debug(f"[SUCCESS] {name!r} -> {path!r}")
            print(path)

    tracker.log_memory_usage()
    tracker.report_summary()

    if failed_names:
        logger.info("Failed names:")
        for name, error in failed_names:
            logger.info(f"  - {name!r}: {error}")

    sys.exit(0 if not failed_names else 1)


if __name__ == "__main__":
    main()
