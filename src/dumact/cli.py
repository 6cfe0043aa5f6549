"""Command line entry point.

    dumact report/assets/templates.html -o report/renderer/components.py
    dumact templates.html --list
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dumact import __version__
from dumact.config import CompilerConfig
from dumact.environment import Environment, FileSystemLoader
from dumact.exceptions import DumactError

logger = logging.getLogger("dumact")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dumact",
        description="Compile HTML <template> elements into Python DOM construction code",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("source", help="HTML document containing <template id=...> elements")
    parser.add_argument(
        "-o",
        "--output",
        help="write the generated module here (default: stdout)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="print component identifiers and function names instead of code",
    )
    parser.add_argument(
        "--strip-interior-whitespace",
        action="store_true",
        help="also drop whitespace-only text between sibling nodes",
    )
    parser.add_argument(
        "--preserve",
        action="append",
        metavar="TAG",
        help="tag whose text keeps its whitespace (repeatable; default: pre, style)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> CompilerConfig:
    overrides = {}
    if args.strip_interior_whitespace:
        overrides["strip_interior_whitespace"] = True
    if args.preserve:
        overrides["preserve_whitespace_tags"] = frozenset(args.preserve)
    return CompilerConfig(**overrides)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = Path(args.source)
    env = Environment(
        loader=FileSystemLoader(source.parent),
        config=_config_from_args(args),
    )
    try:
        document = env.get_document(source.name)
    except DumactError as exc:
        print(exc.format_compact(), file=sys.stderr)
        return 1

    if args.list:
        for unit in document.units:
            print(f"{unit.name}\t{unit.function_name}")
        return 0

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document.source, encoding="utf-8")
        logger.info(f"Wrote {len(document.units)} components to {output}")
    else:
        sys.stdout.write(document.source)
    return 0
