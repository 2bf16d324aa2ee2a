"""Strip bracketed annotations from Newick and Nexus tree files."""

from striptrease.constants import VERSION
from striptrease.models import (
    AnnotationBlock,
    OutputFormat,
    StripMode,
    StripPolicy,
    SupportKey,
)
from striptrease.parser import strip_annotations, rewrite_tree_line
from striptrease.io import process_trees
from striptrease.result import ProcessingResult

__version__ = VERSION

__all__ = [
    "AnnotationBlock",
    "OutputFormat",
    "StripMode",
    "StripPolicy",
    "SupportKey",
    "strip_annotations",
    "rewrite_tree_line",
    "process_trees",
    "ProcessingResult",
]
