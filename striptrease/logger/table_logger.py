"""Table display for run summaries."""

import logging
from typing import Any, List, Optional, Sequence

from tabulate import tabulate


class SummaryTableLogger:
    """Renders small tables through a standard logger.

    Attributes:
        disabled: When True nothing is rendered.
    """

    def __init__(self, name: str = "striptrease"):
        self.disabled = False
        self.logger = logging.getLogger(name)

    def render(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        tablefmt: str = "grid",
        colalign: Optional[Sequence[Optional[str]]] = None,
    ) -> str:
        return tabulate(
            data,
            headers=headers or [],
            tablefmt=tablefmt,
            colalign=colalign,
            showindex=False,
        )

    def table(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None,
        tablefmt: str = "grid",
        colalign: Optional[Sequence[Optional[str]]] = None,
    ) -> None:
        """Display data as a formatted table."""
        if self.disabled:
            return

        if title:
            self.logger.info(f"\n{title}:")
        self.logger.info(self.render(data, headers, tablefmt, colalign))
