"""Data models for tree lines, annotation blocks and strip modes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from striptrease.constants import SUPPORT_VALUE_CHARACTERS


class OutputFormat(Enum):
    """How a cleaned tree statement is reassembled."""

    NEWICK = 1
    NEXUS = 2


class StripPolicy(Enum):
    """What happens to the contents of each annotation block."""

    REMOVE_ALL = 1
    KEEP_SUPPORT_VALUE = 2


class LineKind(Enum):
    """Classification of a single input line."""

    TREE_STATEMENT = 1
    PASS_THROUGH = 2


class SupportKey(Enum):
    """
    Annotation keys that carry a nodal support value.

    Each member holds the key text and the offset from the start of the
    match to the first character of the value (the key plus its ``=``).
    Members are listed in search order.
    """

    POSTERIOR = ("posterior", 10)  # BEAST
    LABEL = ("label", 6)  # trees saved by FigTree

    def __init__(self, keyword: str, offset: int):
        self.keyword = keyword
        self.offset = offset


class StatementShape(Enum):
    """
    Structural shape of a tree statement, keyed by its token count.

    BARE:   treestring;
    NAMED:  tree name = treestring;
    ROOTED: tree name = [&rooting] treestring;
    """

    BARE = 1
    NAMED = 4
    ROOTED = 5

    @property
    def treestring_index(self) -> int:
        """Index of the treestring token; all tokens before it are preamble."""
        return self.value - 1

    @classmethod
    def from_token_count(cls, count: int) -> Optional["StatementShape"]:
        for shape in cls:
            if shape.value == count:
                return shape
        return None


@dataclass(frozen=True)
class StripMode:
    """Run-wide settings for the annotation stripper.

    Built once from the command line and passed to every call that needs it.
    """

    output_format: OutputFormat = OutputFormat.NEWICK
    strip_policy: StripPolicy = StripPolicy.KEEP_SUPPORT_VALUE
    strict: bool = False

    @property
    def is_nexus(self) -> bool:
        return self.output_format is OutputFormat.NEXUS


@dataclass
class TreeLine:
    """A single line of input text and its whitespace-delimited tokens."""

    raw: str
    tokens: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnnotationBlock:
    """
    A bracketed annotation inside a treestring.

    Attributes:
        start: Offset of the opening ``[`` in the treestring.
        end: Offset of the closing ``]`` (inclusive).
        text: The block including both brackets.
    """

    start: int
    end: int
    text: str

    @property
    def support_span(self) -> Optional[Tuple[int, int]]:
        """
        Half-open offsets of the support value relative to ``start``.

        The first key found (in ``SupportKey`` order) decides where the value
        begins; the value is the run of digits and dots from there. Returns
        None when no key is present or the run is empty.
        """
        for support_key in SupportKey:
            found = self.text.find(support_key.keyword)
            if found == -1:
                continue
            value_start = found + support_key.offset
            value_end = value_start
            while (
                value_end < len(self.text)
                and self.text[value_end] in SUPPORT_VALUE_CHARACTERS
            ):
                value_end += 1
            if value_end == value_start:
                return None
            return value_start, value_end
        return None

    @property
    def support_value(self) -> Optional[str]:
        span = self.support_span
        if span is None:
            return None
        return self.text[span[0] : span[1]]
