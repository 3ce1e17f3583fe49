"""Output sink port: formatting and printing of summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class OutputSinkPort(Protocol):
    """Contract for final-summary output.

    Sink receives values exactly as the reporter holds them, including
    empty ones, and decides how (and whether) to print them.
    """

    def write(self, text: str) -> None:
        """Write raw text."""
        ...

    def print_browser_errors(self, errors: Sequence[Any]) -> None:
        """Print run-level browser errors."""
        ...

    def print_test_failures(self, data: Any, stats: Any, suppress_error_report: bool) -> None:
        """Print the run summary and, unless suppressed, the failures."""
        ...

    def print_browser_logs(self, logs: Mapping[Any, Any]) -> None:
        """Print log lines grouped per browser."""
        ...
