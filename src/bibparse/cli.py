"""Command-line interface for the bibparse grammar engine."""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from .config import DEFAULT_MAX_DEPTH, ParserConfig
from .exceptions import BibparseError
from .export import to_json, write_bibtex
from .loader import load
from .model import Comment, Document, Entry, Preamble, StringMacro
from .writer import render_document


def setup_logging(verbosity: int = 0) -> None:
    """Configure logging for the CLI application.

    Args:
        verbosity: Logging verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s:%(lineno)d – %(message)s",
    )


def _config_from_args(args: argparse.Namespace) -> ParserConfig:
    return ParserConfig(strict=args.strict, max_depth=args.max_depth)


def _emit(output: str | None, content: str) -> None:
    """Write ``content`` to ``output`` or to stdout when no path is given."""
    if output is None:
        sys.stdout.write(content)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)
    logging.getLogger(__name__).info(f"✓ Saved to: {output_path}")


def cmd_json(args: argparse.Namespace) -> None:
    """Parse a bibliography file and emit its items as JSON."""
    logger = logging.getLogger(__name__)

    try:
        items = load(args.file, _config_from_args(args))
        _emit(args.output, to_json(items).decode("utf-8") + "\n")
        logger.info(f"✓ Converted {len(items)} items to JSON")
        sys.exit(0)

    except (BibparseError, OSError, ValueError) as e:
        logger.error(f"JSON conversion error: {e}")
        sys.exit(1)


def cmd_format(args: argparse.Namespace) -> None:
    """Parse a bibliography file and re-render it as BibTeX."""
    logger = logging.getLogger(__name__)

    try:
        items = load(args.file, _config_from_args(args))
        content = write_bibtex(items) if args.bibtexparser else render_document(items)
        _emit(args.output, content)
        logger.info(f"✓ Formatted {len(items)} items")
        sys.exit(0)

    except (BibparseError, OSError, ValueError) as e:
        logger.error(f"Format error: {e}")
        sys.exit(1)


def summarize(items: Document) -> dict[str, int]:
    """Count items per kind, and entries per entry type."""
    counts: Counter[str] = Counter()
    for item in items:
        if isinstance(item, Entry):
            counts[f"entry:{item.entry_type}"] += 1
        elif isinstance(item, StringMacro):
            counts["string"] += 1
        elif isinstance(item, Preamble):
            counts["preamble"] += 1
        elif isinstance(item, Comment):
            counts["comment"] += 1
    return dict(sorted(counts.items()))


def cmd_summary(args: argparse.Namespace) -> None:
    """Report how many items of each kind a bibliography file holds."""
    logger = logging.getLogger(__name__)

    try:
        items = load(args.file, _config_from_args(args))
        counts = summarize(items)
        for name, count in counts.items():
            print(f"{name}\t{count}")
        logger.info(f"✓ Parsed {len(items)} items")
        sys.exit(0)

    except (BibparseError, ValueError) as e:
        logger.error(f"Summary error: {e}")
        sys.exit(1)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bibparse",
        description="Parse BibTeX-like bibliography files into structured items.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use -v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unrecognized trailing content instead of discarding it",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum delimiter nesting depth inside values (default: {DEFAULT_MAX_DEPTH})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # json subcommand
    json_parser = subparsers.add_parser("json", help="Convert a bibliography file to JSON")
    json_parser.add_argument("file", type=str, help="Path to the .bib file")
    json_parser.add_argument("-o", "--output", type=str, help="Output file path (default: stdout)")
    json_parser.set_defaults(func=cmd_json)

    # format subcommand
    format_parser = subparsers.add_parser("format", help="Re-render a bibliography file as BibTeX")
    format_parser.add_argument("file", type=str, help="Path to the .bib file")
    format_parser.add_argument(
        "-o", "--output", type=str, help="Output file path (default: stdout)"
    )
    format_parser.add_argument(
        "--bibtexparser",
        action="store_true",
        help="Write through bibtexparser's writer instead of the built-in renderer",
    )
    format_parser.set_defaults(func=cmd_format)

    # summary subcommand
    summary_parser = subparsers.add_parser(
        "summary", help="Count items per kind and entries per type"
    )
    summary_parser.add_argument("file", type=str, help="Path to the .bib file")
    summary_parser.set_defaults(func=cmd_summary)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the bibparse CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging based on verbosity
    setup_logging(args.verbose)

    # Handle case where no subcommand is provided
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
