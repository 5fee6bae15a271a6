"""Command-line entry point for splitting and resolving selector-request targets."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import yaml

from selector_request.load_config import LOG_LEVELS, OUTPUT_FORMATS, load_config
from selector_request.selector_request_parser import SelectorRequestParser

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from selector_request.parsed_target import ParsedTarget


def iter_targets(args: argparse.Namespace, stdin: TextIO) -> Iterable[str]:
    """Yield targets from the command line, or non-blank stdin lines."""
    if args.targets:
        yield from args.targets
        return
    for line in stdin:
        line = line.strip()
        if line:
            yield line


def format_result(target: str, parsed: ParsedTarget, output: dict[str, Any]) -> str:
    """Render one parsed target in the configured output format."""
    if output["format"] == "text":
        return f"{parsed.href or ''}\t{parsed.selector or ''}"
    return json.dumps({"target": target, **parsed.as_dict()}, indent=output["indent"])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        description=(
            "Split targets such as '/page#(selector=tr:nth-child(2))' into an "
            "href and a CSS selector, resolving relative hrefs against a base URL."
        ),
    )
    ap.add_argument(
        "targets",
        nargs="*",
        help="Targets to parse (default: read one per line from stdin)",
    )
    ap.add_argument(
        "--base",
        help=(
            "Base URL for relative hrefs "
            "(default: config or $SELECTOR_REQUEST_BASE_URL)"
        ),
    )
    ap.add_argument(
        "--split-only",
        action="store_true",
        help="Only split targets, do not resolve hrefs",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: json)",
    )
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostics (default: WARNING)",
    )
    return ap


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Parse each target and print the result."""
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        ap.error(f"invalid config: {e}")
    if args.base:
        config["base_url"] = args.base
    if args.format:
        config["output"]["format"] = args.format
    if args.log_level:
        config["log_level"] = args.log_level

    logging.basicConfig(
        level=config["log_level"],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.split_only and not config["base_url"]:
        ap.error("a base URL is required unless --split-only is given")

    parser = SelectorRequestParser.from_config(config)
    out = stdout or sys.stdout
    for target in iter_targets(args, stdin or sys.stdin):
        if args.split_only:
            parsed = parser.split(target)
        else:
            parsed = parser.parse_and_resolve(target)
        print(format_result(target, parsed, config["output"]), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
