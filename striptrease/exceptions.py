"""
Custom exceptions for tree annotation stripping.
"""

from pathlib import Path
from typing import Union


class StripTreaseError(Exception):
    """Base exception for StripTrease errors."""

    pass


class EmptyTokenSequenceError(StripTreaseError):
    """Raised when the first token of an empty or all-whitespace line is requested."""

    pass


class MalformedAnnotationError(StripTreaseError):
    """Raised in strict mode when brackets in a treestring are unbalanced or nested."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class TreeFileError(StripTreaseError):
    """Raised when a tree file cannot be opened for reading or writing."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"unable to open file '{path}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InputFileError(TreeFileError):
    """Raised when the input tree file cannot be opened."""

    pass


class OutputFileError(TreeFileError):
    """Raised when the output tree file cannot be created."""

    pass
