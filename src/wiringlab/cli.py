from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from wiringlab.presentation import declarative_annotation, declarative_xml, dynamic, static
from wiringlab.settings import WiringLabSettings

_DESCRIPTION = "Wire a calculator to a data source and print the computed result."

_STRATEGIES: dict[str, Callable[[WiringLabSettings], None]] = {
    "static": lambda _settings: static.main(),
    "dynamic": lambda settings: dynamic.main(settings),
    "xml": lambda settings: declarative_xml.main(settings),
    "annotation": lambda settings: declarative_annotation.main(settings),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wiringlab", description=_DESCRIPTION)
    parser.add_argument(
        "strategy",
        choices=sorted(_STRATEGIES),
        help="Wiring strategy used to assemble the calculator.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=(
            "Resource for the selected strategy: the two-line type names file for "
            "'dynamic', the XML definitions for 'xml'. Ignored by other strategies."
        ),
    )
    parser.add_argument(
        "--scan",
        action="append",
        default=None,
        metavar="MODULE",
        help="Module scanned by the 'annotation' strategy. Repeat to scan several.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level for diagnostics written to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.config is not None:
        overrides["definitions_path" if args.strategy == "xml" else "wiring_config_path"] = args.config
    if args.scan:
        overrides["scan_modules"] = tuple(args.scan)
    settings = WiringLabSettings(**overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _STRATEGIES[args.strategy](settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
