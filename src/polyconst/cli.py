"""
Command-line entry point.

Reads a JSON document (stdin by default), prints the constant term as a
decimal string on stdout. On failure prints a single ``error: ...`` line on
stderr and exits non-zero without writing to stdout.

Usage:
    polyconst < roots.json
    polyconst roots.json --explain -v
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Union

from polyconst import __version__
from polyconst.core.config import DEFAULT_GROUPING_SEPARATOR, ReconstructionConfig
from polyconst.core.contracts import load_document
from polyconst.core.errors import ConstantTermError, InvalidInputFormat
from polyconst.core.math import format_base_n, reconstruct

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyconst",
        description=(
            "Reconstruct the constant term of a monic polynomial from roots "
            "encoded as digit strings in bases 2-36."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON document path (default: '-' reads stdin)",
    )
    parser.add_argument(
        "--separator",
        default=DEFAULT_GROUPING_SEPARATOR,
        help=f"grouping character ignored inside digit strings (default: {DEFAULT_GROUPING_SEPARATOR!r})",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="print degree, selected roots, product and sign to stderr",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v INFO, -vv DEBUG)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _read_input(path: str, stdin: TextIO) -> Union[str, bytes]:
    """Сырой вход; байты декодирует load_document (ошибки UTF-8 → InvalidInputFormat)."""
    if path == "-":
        buffer = getattr(stdin, "buffer", None)
        return buffer.read() if buffer is not None else stdin.read()
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InvalidInputFormat(f"cannot read {path}: {e.strerror or e}") from e


def run(
    args: argparse.Namespace,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    try:
        config = ReconstructionConfig(grouping_separator=args.separator)
    except ValueError as e:
        print(f"error: {e}", file=stderr)
        return EXIT_ERROR

    try:
        document = load_document(_read_input(args.input, stdin))
        result = reconstruct(document, config)
    except ConstantTermError as e:
        _logger.debug("reconstruction failed", exc_info=True)
        print(f"error: {e}", file=stderr)
        return e.exit_code

    _logger.info(
        "constant term computed: degree=%d, roots=%s", result.degree, list(result.used_identifiers)
    )

    if args.explain:
        print(f"k={result.k} degree={result.degree}", file=stderr)
        print(f"roots used: {list(result.used_identifiers)}", file=stderr)
        print(f"product: {result.product} (hex {format_base_n(result.product, 16)})", file=stderr)
        print(f"sign: {result.sign:+d}", file=stderr)

    print(result.constant_term, file=stdout)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    _configure_logging(args.verbose)

    # Произведение корней может быть длиннее лимита int -> str по умолчанию
    sys.set_int_max_str_digits(0)

    return run(args, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
