import argparse
import sys

from resumekit import __version__
from resumekit.cmd import cmd_generate, cmd_validate
from resumekit.shared import DEFAULT_INPUT, DEFAULT_OUTPUT, RENDER_TIMEOUT
from resumekit.resume.generator import FONT_FAMILIES
from resumekit.validation.rules import RULE_SETS


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input",
        default=str(DEFAULT_INPUT),
        help=f"Resume data file, .json or .yaml (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--profile",
        default="standard",
        choices=sorted(RULE_SETS),
        help="Validation profile (default: standard)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print stack traces on failure"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resumekit", description="Validate resume data and render it to PDF."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Check resume data for required fields")
    _add_common_arguments(validate_parser)
    validate_parser.add_argument(
        "--json", action="store_true", help="Output the result in JSON format"
    )

    generate_parser = subparsers.add_parser("generate", help="Render resume data to PDF")
    _add_common_arguments(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        default=str(DEFAULT_OUTPUT),
        help=f"Output PDF path (default: {DEFAULT_OUTPUT})",
    )
    generate_parser.add_argument("-s", "--size", default="A4", help="Page size (default: A4)")
    generate_parser.add_argument(
        "--font",
        default="helvetica",
        choices=sorted(FONT_FAMILIES),
        help="Base font family (default: helvetica)",
    )
    generate_parser.add_argument(
        "--timeout",
        type=float,
        default=RENDER_TIMEOUT,
        help=f"Seconds to wait for PDF rendering (default: {RENDER_TIMEOUT:g})",
    )
    generate_parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the resume data before rendering",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate":
        return cmd_validate(args)
    elif args.command == "generate":
        return cmd_generate(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
