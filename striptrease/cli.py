#!/usr/bin/env python3
"""
Strips annotations from tree strings.

Reads Newick or Nexus tree files with one tree statement per line and
removes bracketed annotations such as BEAST's [&posterior=1.0,...], keeping
only the node support value unless -all is given.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from striptrease.config import RunConfig, default_output_path
from striptrease.constants import (
    AFFILIATION,
    AUTHOR,
    CONTACT,
    PROGRAM_NAME,
    RELEASE_DATE,
    VERSION,
)
from striptrease.exceptions import OutputFileError, TreeFileError
from striptrease.io import (
    check_valid_input_file,
    check_valid_output_file,
    process_trees,
    write_error_report,
)
from striptrease.logger import SummaryTableLogger, configure_logging
from striptrease.models import OutputFormat, StripMode, StripPolicy

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def print_program_info() -> None:
    border = "*" * 48
    lines = [
        f"{PROGRAM_NAME} version {VERSION}",
        AUTHOR,
        AFFILIATION,
        f"Complaints: {CONTACT}",
        RELEASE_DATE,
    ]
    print()
    print(border)
    for line in lines:
        print(line.center(len(border)).rstrip())
    print(border)
    print()


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser.

    Options keep their single-dash spelling (-in, -out, -nexus, -all).

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="striptrease",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "treefile",
        nargs="?",
        help="File containing tree(s) to be processed",
    )
    parser.add_argument(
        "-in",
        dest="input_file",
        metavar="treefile",
        help="File containing tree(s) to be processed",
    )
    parser.add_argument(
        "-out",
        dest="output_file",
        metavar="outname",
        help="File to write stripped trees to (default: Stripped-<treefile>)",
    )

    strip_group = parser.add_argument_group("stripping options")
    strip_group.add_argument(
        "-nexus",
        help="Output trees in Nexus format (default: newick)",
        action="store_true",
    )
    strip_group.add_argument(
        "-all",
        dest="strip_all",
        help="Remove all annotations (default: preserve node support values)",
        action="store_true",
    )
    strip_group.add_argument(
        "-strict",
        help="Leave trees with unbalanced or nested brackets unmodified",
        action="store_true",
    )

    output_group = parser.add_argument_group("logging options")
    output_group.add_argument(
        "-log",
        dest="log_file",
        metavar="logfile",
        help="Also write a debug log to this file",
        type=Path,
    )
    output_group.add_argument(
        "-v",
        "-verbose",
        dest="verbose",
        help="Show debug messages on the console",
        action="store_true",
    )
    output_group.add_argument(
        "-h",
        "-help",
        action="help",
        help="Print this help and exit",
    )

    return parser


def parse_arguments(
    argv: Optional[List[str]] = None,
) -> Tuple[argparse.ArgumentParser, argparse.Namespace]:
    """
    Parse the command line, exiting with status 0 on unknown arguments.
    """
    parser = setup_argument_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        print(f"Unknown command-line argument '{unknown[0]}' encountered.")
        print()
        print("Usage:")
        parser.print_help()
        sys.exit(0)
    return parser, args


def strip_mode_from_args(args: argparse.Namespace) -> StripMode:
    return StripMode(
        output_format=OutputFormat.NEXUS if args.nexus else OutputFormat.NEWICK,
        strip_policy=(
            StripPolicy.REMOVE_ALL if args.strip_all else StripPolicy.KEEP_SUPPORT_VALUE
        ),
        strict=args.strict,
    )


def resolve_output_path(output_path: Path, prompt: Prompt = input) -> Path:
    """
    Ask before overwriting an existing output file.

    Answering 0 asks for a new name (which is checked again), 1 overwrites.

    Args:
        output_path: Proposed output path.
        prompt: Callable used to ask the user; defaults to ``input``.

    Returns:
        The accepted output path.
    """
    while output_path.exists():
        answer = prompt(
            f"\nDefault output file '{output_path}' exists!  "
            "Change name (0) or overwrite (1)? "
        ).strip()
        if answer == "1":
            logger.info(f"Overwriting existing file '{output_path}'.")
            break
        if answer == "0":
            output_path = Path(prompt("Enter new output file name: ").strip())
        else:
            logger.warning(f"Please answer 0 or 1, not '{answer}'.")
    return output_path


def build_run_config(args: argparse.Namespace, prompt: Prompt = input) -> RunConfig:
    """
    Turn parsed arguments into a RunConfig, prompting where needed.

    Raises:
        InputFileError: If the input file cannot be opened
        OutputFileError: If the output file cannot be created
    """
    input_name = args.input_file or args.treefile
    if not input_name:
        input_name = prompt("Enter the name of the tree file to be processed: ").strip()
    input_path = check_valid_input_file(input_name)

    if args.output_file:
        output_path = Path(args.output_file)
    else:
        output_path = default_output_path(input_path)
    output_path = resolve_output_path(output_path, prompt)
    if output_path.resolve() == input_path.resolve():
        raise OutputFileError(output_path, "same file as the input")
    output_path = check_valid_output_file(output_path)

    return RunConfig(
        input_path=input_path,
        output_path=output_path,
        mode=strip_mode_from_args(args),
    )


def main(argv: Optional[List[str]] = None, prompt: Prompt = input) -> int:
    """Main entry point for the CLI."""
    print_program_info()
    _, args = parse_arguments(argv)
    configure_logging(log_file=args.log_file, verbose=args.verbose)

    try:
        config = build_run_config(args, prompt)
        logger.debug(f"Run configuration: {config}")
        result = process_trees(config.input_path, config.output_path, config.mode)
    except TreeFileError as e:
        report_path = write_error_report(e)
        logger.error(f"\n{PROGRAM_NAME} analysis failed.\nError: {e}")
        logger.debug(f"Error report written to {report_path}")
        return 1
    except EOFError:
        logger.error(f"\n{PROGRAM_NAME} analysis failed.\nError: no answer given")
        return 1

    SummaryTableLogger().table(
        result.summary_rows(), headers=["lines", "count"], title="Summary"
    )
    print()
    print("Fin.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
