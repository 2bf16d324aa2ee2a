from typing import List

from striptrease.constants import TREE_KEYWORD
from striptrease.exceptions import EmptyTokenSequenceError
from striptrease.models import LineKind, TreeLine


def tokenize(line: str) -> List[str]:
    """
    Split a line on runs of whitespace.

    Args:
        line: A single line of input text

    Returns:
        Ordered list of tokens; empty for an empty or all-whitespace line
    """
    return line.split()


def is_blank(line: str) -> bool:
    return not line.strip()


def first_token(line: str) -> str:
    """
    Return the first whitespace-delimited token of a line.

    Raises:
        EmptyTokenSequenceError: If the line holds no tokens
    """
    tokens = tokenize(line)
    if not tokens:
        raise EmptyTokenSequenceError(f"no tokens in line {line!r}")
    return tokens[0]


def classify(line: str) -> LineKind:
    """
    A line is a tree statement iff its first token is exactly ``tree``.

    Blank lines are classified as pass-through; callers skip them first.
    """
    if is_blank(line):
        return LineKind.PASS_THROUGH
    if first_token(line) == TREE_KEYWORD:
        return LineKind.TREE_STATEMENT
    return LineKind.PASS_THROUGH


def make_tree_line(raw: str) -> TreeLine:
    """Build a TreeLine from raw text, dropping the trailing line terminator."""
    text = raw.rstrip("\r\n")
    return TreeLine(raw=text, tokens=tokenize(text))
