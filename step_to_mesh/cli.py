#!/usr/bin/env python3
"""
STEP to Mesh - Command Line Interface

Lists the solids of a STEP file or converts a selection of them into a
triangle mesh (binary or ASCII STL).
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .errors import UsageError
from .selection import parse_selection
from .step_to_stl import check_format, convert_step_to_stl, list_contents
from .units import available_units, set_unit

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Report usage errors as exceptions so they share the exit code of every other failure."""

    def error(self, message):
        raise UsageError(message)


def unit_choices() -> List[str]:
    """Units for the help text. An empty list when the kernel cannot enumerate them."""
    try:
        return available_units()
    except Exception as e:
        logger.warning("Could not list output units: %s", e)
        return []


def build_parser(units: List[str]) -> ArgumentParser:
    parser = ArgumentParser(
        prog="step-to-mesh",
        description="STEP to triangle mesh conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
Examples:
  %(prog)s -c -i assembly.step
  %(prog)s -i assembly.step -o assembly.stl -l 0.1 -a 5
  %(prog)s -i assembly.step -o parts.stl -l 0.1 -a 5 -s 1,/Assembly/Bolt -f stl_ascii -u m
        """
    )

    parser.add_argument("-i", "--in", dest="input", help="Input file")
    parser.add_argument("-o", "--out", dest="output", help="Output file")
    parser.add_argument(
        "-f", "--format",
        default=config.DEFAULT_FORMAT,
        help=f"Output file format ({' or '.join(config.SUPPORTED_FORMATS)})"
    )
    parser.add_argument("-c", "--content", action="store_true", help="List content (solids)")
    parser.add_argument(
        "-s", "--select",
        action="append",
        help="Select solids by name or index (comma separated list, index starts with 1)"
    )
    parser.add_argument("-l", "--linear", type=float, help="Linear deflection")
    parser.add_argument("-a", "--angular", type=float, help="Angular deflection (degrees)")
    parser.add_argument(
        "-u", "--unit",
        default=config.DEFAULT_UNIT,
        help=f"Output unit (one of {', '.join(units)})" if units else "Output unit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to standard error")
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )


def run(args: argparse.Namespace, parser: ArgumentParser) -> None:
    set_unit(args.unit)

    if args.content:
        if not args.input:
            raise UsageError("Missing option 'in'")
        for name in list_contents(args.input):
            print(name)
    elif args.input and args.output:
        if args.linear is None:
            raise UsageError("Missing option 'linear'")
        if args.angular is None:
            raise UsageError("Missing option 'angular'")
        check_format(args.format)
        convert_step_to_stl(
            args.input,
            args.output,
            args.linear,
            args.angular,
            selection=parse_selection(args.select),
            file_format=args.format,
        )
    else:
        print(parser.format_help())


def main(argv: Optional[List[str]] = None) -> int:
    """Main command line interface. Returns the process exit code."""
    try:
        parser = build_parser(unit_choices())
        args = parser.parse_args(argv)
        setup_logging(args.verbose)
        if args.help:
            print(parser.format_help())
            return 0
        run(args, parser)
        return 0
    except Exception as e:
        sys.stderr.write(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
