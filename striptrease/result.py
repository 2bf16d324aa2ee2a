"""Processing result dataclass."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List


@dataclass
class ProcessingResult:
    """Result from stripping annotations from one tree file."""

    input_path: Path
    """Path of the file that was read."""

    output_path: Path
    """Path of the file the stripped trees were written to."""

    num_trees: int = 0
    """Number of tree statements processed."""

    passed_through_lines: int = 0
    """Non-tree lines copied verbatim (Nexus output)."""

    dropped_lines: int = 0
    """Non-tree lines left out (Newick output)."""

    unsupported_statements: int = 0
    """Tree statements whose shape was not recognized and were emitted unmodified."""

    blank_lines: int = 0
    """Blank lines skipped."""

    @property
    def found_trees(self) -> bool:
        return self.num_trees > 0

    def summary_message(self) -> str:
        """One-line tree count, e.g. ``Processed 3 trees.``"""
        if self.num_trees == 0:
            return "No trees found."
        if self.num_trees == 1:
            return "Processed 1 tree."
        return f"Processed {self.num_trees} trees."

    def summary_rows(self) -> List[List[Any]]:
        return [
            ["trees", self.num_trees],
            ["passed through", self.passed_through_lines],
            ["dropped", self.dropped_lines],
            ["unsupported statements", self.unsupported_statements],
            ["blank lines", self.blank_lines],
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            "num_trees": self.num_trees,
            "passed_through_lines": self.passed_through_lines,
            "dropped_lines": self.dropped_lines,
            "unsupported_statements": self.unsupported_statements,
            "blank_lines": self.blank_lines,
        }
