"""webmonitor CLI — inspect pattern tables and classify urls.

Entry point registered as ``webmonitor`` in ``pyproject.toml``::

    [project.scripts]
    webmonitor = "webmonitor.cli:main"
"""

import argparse
import logging
import sys

from webmonitor.config import LOG_LEVELS, MonitorConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``webmonitor`` command."""
    parser = argparse.ArgumentParser(
        prog="webmonitor",
        description="webmonitor — per-endpoint request metrics keyed by url pattern.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=MonitorConfig().log_level,
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- webmonitor classify ----------------------------------------------
    classify_parser = subparsers.add_parser("classify", help="Classify urls against a pattern file")
    classify_parser.add_argument("patterns", help="Pattern file, one pattern per line")
    classify_parser.add_argument("urls", nargs="+", help="Request urls to classify")

    # -- webmonitor patterns ----------------------------------------------
    patterns_parser = subparsers.add_parser("patterns", help="Show how a pattern file is partitioned")
    patterns_parser.add_argument("patterns", help="Pattern file, one pattern per line")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "classify":
        from webmonitor.cli._classify import run_classify

        run_classify(args)
    elif args.command == "patterns":
        from webmonitor.cli._patterns import run_patterns

        run_patterns(args)
