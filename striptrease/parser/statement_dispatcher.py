"""
Reassembly of tree statements around their cleaned treestring.

Expected statement shapes:

    tree treename = [&rooting] treestring;   (5 tokens)
    tree treename = treestring;              (4 tokens)
    treestring;                              (1 token)
"""

import logging
from typing import List, Optional

from striptrease.exceptions import MalformedAnnotationError
from striptrease.models import StatementShape, StripMode
from striptrease.parser.annotation_stripper import strip_annotations
from striptrease.parser.line_classifier import tokenize

logger = logging.getLogger(__name__)


def dispatch(tokens: List[str], mode: StripMode, line: Optional[str] = None) -> str:
    """
    Strip the treestring token of a tree statement and reassemble the line.

    In Newick output only the cleaned treestring is returned. In Nexus output
    the preamble tokens are re-joined with single spaces ahead of it.

    Args:
        tokens: Whitespace-delimited tokens of the statement
        mode: Active strip mode
        line: Original line, returned as-is when the statement is not handled

    Returns:
        The rewritten line, or the original line for unsupported shapes and
        (in strict mode) malformed annotations
    """
    original = line if line is not None else " ".join(tokens)

    shape = StatementShape.from_token_count(len(tokens))
    if shape is None:
        logger.warning(f"Don't know how to deal with {len(tokens)} elements.")
        return original

    index = shape.treestring_index
    try:
        cleaned = strip_annotations(
            tokens[index], mode.strip_policy, strict=mode.strict
        )
    except MalformedAnnotationError as e:
        logger.warning(f"Leaving tree statement unmodified: {e}")
        return original

    preamble = tokens[:index]
    if mode.is_nexus and preamble:
        return " ".join(preamble) + " " + cleaned
    return cleaned


def rewrite_tree_line(line: str, mode: StripMode) -> str:
    """Tokenize a tree statement line and dispatch it."""
    return dispatch(tokenize(line), mode, line=line)
