"""
Removal of bracketed annotations from Newick treestrings.

Annotations such as ``[&height_95%_HPD={0.19,0.35},posterior=1.0]`` (BEAST)
or ``[&label=85]`` (FigTree) are either dropped entirely or reduced to the
bare support value they carry. All other Newick syntax is left untouched.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from striptrease.constants import ANNOTATION_CLOSE, ANNOTATION_OPEN
from striptrease.exceptions import MalformedAnnotationError
from striptrease.models import AnnotationBlock, StripPolicy

logger = logging.getLogger(__name__)

Range = Tuple[int, int]


# ===================================================================
# 1. BLOCK SCANNING
# ===================================================================


def find_annotation_blocks(
    treestring: str, strict: bool = False
) -> List[AnnotationBlock]:
    """
    Locate every closed annotation block in a treestring.

    Scans left to right keeping a single inside/outside state. An opening
    bracket while outside starts a block; the first closing bracket while
    inside ends it. Brackets are assumed non-nested: a ``[`` inside a block
    is plain content and a ``]`` outside a block is plain text. A block
    still open at the end of the string is not reported.

    Args:
        treestring: Newick treestring, possibly with annotations
        strict: Raise on nested, unmatched or unclosed brackets instead of
            tolerating them

    Returns:
        Blocks in order of appearance

    Raises:
        MalformedAnnotationError: In strict mode, on the first bracket problem
    """
    blocks: List[AnnotationBlock] = []
    inside = False
    start = 0

    for index, char in enumerate(treestring):
        if inside:
            if char == ANNOTATION_CLOSE:
                inside = False
                block = AnnotationBlock(
                    start=start, end=index, text=treestring[start : index + 1]
                )
                logger.debug(f"Annotation: {block.text}")
                blocks.append(block)
            elif char == ANNOTATION_OPEN and strict:
                raise MalformedAnnotationError("nested '['", index)
        else:
            if char == ANNOTATION_OPEN:
                inside = True
                start = index
            elif char == ANNOTATION_CLOSE and strict:
                raise MalformedAnnotationError("unmatched ']'", index)

    if inside and strict:
        raise MalformedAnnotationError("unclosed '['", start)

    return blocks


# ===================================================================
# 2. RANGE SELECTION AND EXCISION
# ===================================================================


def removal_ranges(block: AnnotationBlock, policy: StripPolicy) -> List[Range]:
    """
    Half-open treestring ranges to delete for one block.

    REMOVE_ALL deletes the block with its brackets. KEEP_SUPPORT_VALUE
    deletes everything around the support value, or the whole block when
    it has none.
    """
    whole_block = (block.start, block.end + 1)
    if policy is StripPolicy.REMOVE_ALL:
        return [whole_block]

    span = block.support_span
    if span is None:
        return [whole_block]

    value_start = block.start + span[0]
    value_end = block.start + span[1]
    return [(block.start, value_start), (value_end, block.end + 1)]


def excise_ranges(text: str, ranges: Sequence[Range]) -> str:
    """
    Copy text while skipping the given half-open ranges.

    Args:
        text: Source string
        ranges: ``(start, end)`` pairs to drop; overlaps are merged

    Returns:
        The retained spans joined in order
    """
    pieces: List[str] = []
    cursor = 0
    for start, end in sorted(ranges):
        if start > cursor:
            pieces.append(text[cursor:start])
        cursor = max(cursor, end)
    pieces.append(text[cursor:])
    return "".join(pieces)


# ===================================================================
# 3. PUBLIC API FUNCTIONS
# ===================================================================


def strip_annotations(
    treestring: str, policy: StripPolicy, strict: bool = False
) -> str:
    """
    Remove annotations from a treestring, optionally keeping support values.

    Example:
        ``(A:1.0,B[&posterior=0.88]:2.0);`` becomes ``(A:1.0,B0.88:2.0);``
        under KEEP_SUPPORT_VALUE and ``(A:1.0,B:2.0);`` under REMOVE_ALL.

    Args:
        treestring: Newick treestring
        policy: What to do with each annotation block
        strict: Raise MalformedAnnotationError on bracket problems

    Returns:
        The cleaned treestring
    """
    blocks = find_annotation_blocks(treestring, strict=strict)
    if not blocks:
        return treestring

    ranges: List[Range] = []
    for block in blocks:
        ranges.extend(removal_ranges(block, policy))

    return excise_ranges(treestring, ranges)


def extract_support_values(
    treestring: str, strict: bool = False
) -> List[Optional[str]]:
    """Support value kept for each annotation block, None where there is none."""
    return [
        block.support_value
        for block in find_annotation_blocks(treestring, strict=strict)
    ]
