"""Command-line entry point.

Reads tagdown source from a file (or stdin), renders it and writes the
result to a file (or stdout).

Usage:
    tagdown page.td -o page.html
    tagdown --format json < page.td
    python -m tagdown page.td --attributes --highlight
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tagdown import __version__, parse
from tagdown.config import ParseConfig
from tagdown.errors import TagdownError
from tagdown.renderers import HtmlTransformer, JsonTransformer, TextTransformer, Transformer
from tagdown.utils.logger import get_logger

logger = get_logger(__name__)

DESCRIPTION = "Render tagdown markup to HTML, plain text or a JSON AST."


def build_argument_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(prog="tagdown", description=DESCRIPTION)
    argument_parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    argument_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        metavar="FILE",
        help="source file to read ('-' or omitted reads stdin)",
    )
    argument_parser.add_argument(
        "-o",
        "--output",
        metavar="OUTPUT",
        help="file to write (stdout when omitted)",
    )
    argument_parser.add_argument(
        "-f",
        "--format",
        choices=("html", "json", "text"),
        default="html",
        help="output format (default: html)",
    )
    argument_parser.add_argument(
        "--attributes",
        action="store_true",
        help="emit tag attributes as HTML attributes",
    )
    argument_parser.add_argument(
        "--no-escape",
        dest="escape",
        action="store_false",
        help="write text content verbatim instead of HTML-escaping it",
    )
    argument_parser.add_argument(
        "--highlight",
        action="store_true",
        help="syntax-highlight code-block tags that carry a lang attribute",
    )
    argument_parser.add_argument(
        "--strict-attributes",
        action="store_true",
        help="reject repeated attribute names on a tag",
    )
    argument_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log pipeline details to stderr",
    )
    return argument_parser


def _make_transformer(args: argparse.Namespace) -> Transformer[str]:
    match args.format:
        case "json":
            return JsonTransformer(indent=2)
        case "text":
            return TextTransformer()
        case _:
            return HtmlTransformer(
                escape=args.escape,
                emit_attributes=args.attributes,
                highlight=args.highlight,
            )


def _read_source(name: str) -> tuple[bytes, str | None]:
    if name == "-":
        return sys.stdin.buffer.read(), None
    return Path(name).read_bytes(), name


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line. Returns the process exit status."""
    args = build_argument_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source, source_file = _read_source(args.input)
        doc = parse(
            source,
            source_file=source_file,
            config=ParseConfig(strict_attributes=args.strict_attributes),
        )
        output = _make_transformer(args).transform(doc)
    except (TagdownError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", len(output), args.output)
    else:
        sys.stdout.write(output)
        if output and not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0
