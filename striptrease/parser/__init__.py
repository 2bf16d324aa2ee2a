"""
Tree statement parsing and annotation stripping.

This module classifies input lines, picks the treestring out of Newick and
Nexus tree statements, and removes bracketed annotations from it.
"""

from .line_classifier import (
    tokenize,
    first_token,
    classify,
    is_blank,
    make_tree_line,
)
from .annotation_stripper import (
    find_annotation_blocks,
    removal_ranges,
    excise_ranges,
    strip_annotations,
    extract_support_values,
)
from .statement_dispatcher import dispatch, rewrite_tree_line

__all__ = [
    "tokenize",
    "first_token",
    "classify",
    "is_blank",
    "make_tree_line",
    "find_annotation_blocks",
    "removal_ranges",
    "excise_ranges",
    "strip_annotations",
    "extract_support_values",
    "dispatch",
    "rewrite_tree_line",
]
