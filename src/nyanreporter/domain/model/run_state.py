"""Run-scoped aggregate state of the reporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from nyanreporter.domain.model.options import ReporterOptions
from nyanreporter.domain.model.results import BrowserResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from nyanreporter.domain.ports import ColorStreamPort, DrawSurfacePort, ResultStorePort


class RunPhase(Enum):
    """Reporter lifecycle phase."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass(slots=True)
class LogBucket:
    """Log lines collected for one browser.

    Attributes:
        name: Browser name at the time of the first line.
        messages: Lines in arrival order.
    """

    name: str
    messages: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class BrowserError:
    """Run-level error reported by one browser."""

    browser: Any
    error: Any


@dataclass(slots=True)
class RunState:
    """Mutable aggregate owned by exactly one reporter.

    Lifetime fields (options, adapters, adapter_messages) survive
    reset(); everything else is run-scoped.
    Collaborator references stay None until the first reset().
    """

    options: ReporterOptions
    adapters: tuple[Callable[[str], None], ...] = ()
    adapter_messages: list[str] = field(default_factory=list)

    phase: RunPhase = RunPhase.IDLE
    browsers: list[Any] = field(default_factory=list)
    number_of_browsers: int = 0
    browser_logs: dict[Any, LogBucket] = field(default_factory=dict)
    browser_errors: list[BrowserError] = field(default_factory=list)
    stats: Any = field(default_factory=BrowserResult)
    color_index: int = 0
    total_time: float = 0
    number_of_slow_tests: int = 0

    data_store: ResultStorePort | None = None
    draw_surface: DrawSurfacePort | None = None
    color_stream: ColorStreamPort | None = None

    def clear_run(self) -> None:
        """Re-initialize every run-scoped container and counter."""
        self.browsers = []
        self.number_of_browsers = 0
        self.browser_logs = {}
        self.browser_errors = []
        self.stats = BrowserResult()
        self.color_index = 0
        self.total_time = 0
        self.number_of_slow_tests = 0
