"""Lifecycle reporter port: the host integration surface.

Hosts (test runners) drive a reporter through these hooks in the order
events happen. Method names, argument order and arity are the contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nyanreporter.domain.events import LifecycleEvent


class LifecycleReporterProtocol(Protocol):
    """Contract between a host runner and a reporter."""

    def on_run_start(self, browsers: Sequence[Any] | None = None) -> None:
        """Run starts. Resets all run-scoped state."""
        ...

    def on_browser_start(self, browser: Any) -> None:
        """Browser connected."""
        ...

    def on_browser_log(self, browser: Any, message: str, log_type: Any) -> None:
        """Browser emitted a log line."""
        ...

    def on_spec_complete(self, browser: Any, result: Any) -> None:
        """Browser finished a spec."""
        ...

    def on_browser_error(self, browser: Any, error: Any) -> None:
        """Browser reported a run-level error."""
        ...

    def on_run_complete(self) -> None:
        """Run finished, also on early termination."""
        ...

    def handle(self, event: LifecycleEvent) -> None:
        """Dispatch one event to the matching hook."""
        ...
