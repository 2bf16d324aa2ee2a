import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from striptrease.config import Config
from striptrease.constants import (
    PROGRAM_NAME,
    TREE_FILE_ENCODING,
    TREE_FILE_ERRORS,
)
from striptrease.exceptions import InputFileError, OutputFileError, TreeFileError
from striptrease.models import LineKind, StatementShape, StripMode, TreeLine
from striptrease.parser.line_classifier import classify, is_blank, make_tree_line
from striptrease.parser.statement_dispatcher import dispatch
from striptrease.result import ProcessingResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def check_valid_input_file(path: PathLike) -> Path:
    """
    Make sure the input tree file can be opened for reading.

    Raises:
        InputFileError: If the file cannot be opened
    """
    input_path = Path(path)
    try:
        with open(input_path):
            pass
    except OSError as e:
        raise InputFileError(input_path, e.strerror or "") from e
    logger.info(f"Successfully opened file '{input_path}'.")
    return input_path


def check_valid_output_file(path: PathLike) -> Path:
    """
    Make sure the output tree file can be created.

    The file is created if it does not exist yet; existing content is kept.

    Raises:
        OutputFileError: If the file cannot be created
    """
    output_path = Path(path)
    try:
        with open(output_path, mode="a"):
            pass
    except OSError as e:
        raise OutputFileError(output_path, e.strerror or "") from e
    return output_path


def write_error_report(
    error: TreeFileError, report_path: Optional[PathLike] = None
) -> Path:
    """Write the fixed-name error report for a fatal file error."""
    path = Path(report_path) if report_path is not None else Config.ERROR_REPORT
    with open(path, mode="w") as f:
        f.write(f"{PROGRAM_NAME} analysis failed.\n")
        f.write(f"Error: unable to open file '{error.path}'\n")
    return path


def read_tree_lines(f: IO[str]) -> Iterator[TreeLine]:
    for raw in f:
        yield make_tree_line(raw)


def process_lines(
    lines: Iterable[TreeLine],
    out: IO[str],
    mode: StripMode,
    result: ProcessingResult,
) -> ProcessingResult:
    """
    Strip annotations line by line and write the output.

    Blank lines are skipped. Tree statements are rewritten; other lines are
    dropped in Newick output and copied verbatim in Nexus output.

    Args:
        lines: Input lines in file order
        out: Writable text stream
        mode: Active strip mode
        result: Counters to update

    Returns:
        The updated result
    """
    for tree_line in lines:
        if is_blank(tree_line.raw):
            result.blank_lines += 1
            continue

        if classify(tree_line.raw) is LineKind.TREE_STATEMENT:
            if StatementShape.from_token_count(len(tree_line.tokens)) is None:
                result.unsupported_statements += 1
            out.write(dispatch(tree_line.tokens, mode, line=tree_line.raw) + "\n")
            result.num_trees += 1
        elif mode.is_nexus:
            out.write(tree_line.raw + "\n")
            result.passed_through_lines += 1
        else:
            result.dropped_lines += 1

    return result


def process_trees(
    input_path: PathLike, output_path: PathLike, mode: StripMode
) -> ProcessingResult:
    """
    Strip annotations from every tree in a file.

    Args:
        input_path: File with one tree statement per line
        output_path: File to write the stripped trees to (overwritten)
        mode: Active strip mode

    Returns:
        Counts of what was processed

    Raises:
        InputFileError: If the input cannot be opened
        OutputFileError: If the output cannot be created
    """
    result = ProcessingResult(
        input_path=Path(input_path), output_path=Path(output_path)
    )

    try:
        tree_input = open(
            result.input_path, encoding=TREE_FILE_ENCODING, errors=TREE_FILE_ERRORS
        )
    except OSError as e:
        raise InputFileError(result.input_path, e.strerror or "") from e

    with tree_input:
        try:
            stripped_trees = open(
                result.output_path,
                mode="w",
                encoding=TREE_FILE_ENCODING,
                errors=TREE_FILE_ERRORS,
            )
        except OSError as e:
            raise OutputFileError(result.output_path, e.strerror or "") from e
        with stripped_trees:
            process_lines(read_tree_lines(tree_input), stripped_trees, mode, result)

    logger.info(result.summary_message())
    return result
