"""CLI: тонкая обёртка над pipeline.

usage: radixconv [OPTION]... SRC_BASE TGT_BASE NUM

Коды выхода:
- 0: успешная конверсия
- 1: ошибка конверсии (UnknownBase, MalformedNumber)
- 2: ошибка разбора аргументов (argparse)
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from src.converter.pipeline import run_conversion
from src.core.contracts import ConversionResultValidator
from src.core.domain.conversion import ConversionRequest
from src.core.domain.errors import MalformedNumber, UnknownBase

logger = logging.getLogger(__name__)

# Корневой logger пакета: все модули логируют в src.*
package_logger = logging.getLogger(__package__.split(".")[0])

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

PROG = "radixconv"

EXIT_OK = 0
EXIT_CONVERSION_ERROR = 1

EXAMPLES = f"""\
examples:
  {PROG} hex dec 0xDEADBEEF               --> 3735928559
  {PROG} dec bin 3735928559               --> 11011110101011011011111011101111
  {PROG} dec oct 3735928559               --> 33653337357
  {PROG} -g 4 dec hex 3735928559          --> DEAD BEEF
  {PROG} -g 4 -w 12 dec hex 3735928559    --> 0000 DEAD BEEF
"""


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="convert between numbers in decimal, binary, octal, or hexadecimal",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "src_base",
        metavar="SRC_BASE",
        help="input number base, one of 'bin', 'dec', 'oct', or 'hex'",
    )
    parser.add_argument(
        "tgt_base",
        metavar="TGT_BASE",
        help="output number base, one of 'bin', 'dec', 'oct', or 'hex'",
    )
    parser.add_argument("number", metavar="NUM", help="an arbitrarily large positive integer")
    parser.add_argument(
        "-g",
        "--grouping",
        type=_non_negative_int,
        default=0,
        help="how to visually group the digits in the output number "
        "(default behavior is to concatenate all digits)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=_non_negative_int,
        default=0,
        help="minimum number of digits in the output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the full conversion result as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    """Один stderr handler на logger пакета, DEBUG при --verbose."""
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _print_error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)
    print(f"try '{PROG} --help' for more information", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose)

    try:
        request = ConversionRequest.from_labels(
            args.src_base,
            args.tgt_base,
            args.number,
            width=args.width,
            grouping=args.grouping,
        )
        result = run_conversion(request)
    except UnknownBase as e:
        logger.debug("Rejected request: %s", e)
        _print_error(f"invalid base value '{e.label}'")
        return EXIT_CONVERSION_ERROR
    except MalformedNumber as e:
        logger.debug("Rejected request: %s", e)
        _print_error(f"invalid number format, check input and arg nums ({e})")
        return EXIT_CONVERSION_ERROR

    if args.json:
        payload = ConversionResultValidator().validate_model(result)
        print(json.dumps(payload, indent=2))
    else:
        print(result.formatted)

    return EXIT_OK


def run() -> None:
    """Entry point для console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
