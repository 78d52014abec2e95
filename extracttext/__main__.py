"""CLI entry point: python -m extracttext [FILE] -s NAME=SELECTOR [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from extracttext.errors import ExtractTextError
from extracttext.extractor import HTMLExtractText
from extracttext.selector_files import load_selectors, parse_selector_args

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extracttext",
        description=(
            "Extract named text fragments from an HTML document using CSS selectors.\n"
            "Results are printed as JSON."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", default="-", metavar="FILE",
                        help="HTML file to read (default: stdin)")
    parser.add_argument("-s", "--select", action="append", default=[],
                        metavar="NAME=SELECTOR",
                        help="Name and CSS selector to extract (repeatable)")
    parser.add_argument("--selectors", default=None, metavar="PATH",
                        help="YAML or JSON file mapping names to selectors")
    join = parser.add_mutually_exclusive_group()
    join.add_argument("--separator", default=None, metavar="SEP",
                      help="Join multiple matches with SEP (default: newline)")
    join.add_argument("--no-join", action="store_true", default=False,
                      help="Return every match as a separate list item")
    parser.add_argument("--strict", action="store_true", default=False,
                        help="Treat selectors that match nothing as errors")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _read_html(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        selectors = load_selectors(args.selectors) if args.selectors else {}
        selectors.update(parse_selector_args(args.select))
    except (OSError, ExtractTextError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if not selectors:
        print("ERROR: no selectors given (use -s NAME=SELECTOR or --selectors PATH)",
              file=sys.stderr)
        return 2

    options: dict[str, object] = {"ignore_not_found": not args.strict}
    if args.no_join:
        options["separator"] = None
    elif args.separator is not None:
        options["separator"] = args.separator

    try:
        html = _read_html(args.file)
    except OSError as exc:
        print(f"ERROR: Could not read {args.file}: {exc}", file=sys.stderr)
        return 2

    extractor = HTMLExtractText(**options)
    logger.info("Running %d selector(s) against %s", len(selectors), args.file)
    ok = extractor.extract(selectors, html) is not None

    results = extractor.last_results()
    if results is not None:
        print(json.dumps(dict(results), indent=2, ensure_ascii=False))
    if not ok:
        print(f"ERROR: {extractor.error()}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
