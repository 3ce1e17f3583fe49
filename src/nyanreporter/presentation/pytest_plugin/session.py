"""pytest host: translates pytest hooks into reporter lifecycle events.

One pytest process is reported as one browser. Translation helpers are
plain functions so they can be tested without a pytest session.
"""

from __future__ import annotations

import os
import platform
import time
from dataclasses import replace
from typing import TYPE_CHECKING

import pytest

from nyanreporter.domain.events import (
    BrowserErrored,
    BrowserLogged,
    BrowserStarted,
    RunCompleted,
    RunStarted,
    SpecCompleted,
)
from nyanreporter.domain.model.browser import Browser
from nyanreporter.domain.model.results import BrowserResult, SpecResult

if TYPE_CHECKING:
    from collections.abc import Iterator

    from nyanreporter.domain.ports import LifecycleReporterProtocol

# Captured sections each terminal report owns (sections accumulate per item).
_SECTION_PHASES: dict[str, tuple[str, ...]] = {
    "setup": ("setup",),
    "call": ("setup", "call"),
    "teardown": ("teardown",),
}


def current_browser() -> Browser:
    """Browser handle for this Python process."""
    return Browser(id=f"python-{os.getpid()}", name=f"Python {platform.python_version()}")


def is_terminal_report(report: pytest.TestReport) -> bool:
    """Check if report decides the test outcome.

    Terminal: every call report, a failed or skipped setup, a failed
    teardown. Passing setup/teardown reports are bookkeeping only.
    """
    if report.when == "call":
        return True
    if report.when == "setup":
        return not report.passed
    return report.failed


def spec_result_from_report(report: pytest.TestReport) -> SpecResult:
    """Convert a terminal test report into a SpecResult.

    Suite path is the node id split on "::" without the test name,
    e.g. "tests/test_a.py::TestX::test_y" → ("tests/test_a.py", "TestX").
    """
    *suite, description = report.nodeid.split("::")
    return SpecResult(
        description=description or report.nodeid,
        suite=tuple(suite),
        success=report.passed,
        skipped=report.skipped,
        time=max(report.duration, 0.0),
        log=(report.longreprtext,) if report.failed else (),
    )


def captured_lines(report: pytest.TestReport) -> Iterator[tuple[str, str]]:
    """Yield (log_type, line) for output captured in the report's phases.

    Section titles look like "Captured stdout call"; log_type is the
    middle word (stdout, stderr, log).
    """
    phases = _SECTION_PHASES.get(report.when or "", ())
    for title, content in report.sections:
        words = title.split()
        if len(words) != 3 or words[0] != "Captured" or words[2] not in phases:
            continue
        for line in content.splitlines():
            yield words[1], line


def advance(snapshot: BrowserResult, result: SpecResult) -> BrowserResult:
    """New rolling snapshot with one more finished spec."""
    return replace(
        snapshot,
        success=snapshot.success + int(result.success),
        failed=snapshot.failed + int(result.failed),
        skipped=snapshot.skipped + int(result.skipped),
        net_time=snapshot.net_time + result.time,
    )


class NyanSession:
    """pytest plugin object driving one reporter through one session.

    Registered by pytest_configure when --nyan is given.
    """

    def __init__(self, reporter: LifecycleReporterProtocol, browser: Browser | None = None) -> None:
        """Initialize session.

        Args:
            reporter: Reporter to drive.
            browser: Browser handle. None = current_browser().
        """
        self._reporter = reporter
        self._browser = browser or current_browser()
        self._started_at: float | None = None

    @property
    def browser(self) -> Browser:
        return self._browser

    def pytest_sessionstart(self, session: pytest.Session) -> None:
        del session  # Unused
        self._started_at = time.perf_counter()
        self._reporter.handle(RunStarted(browsers=[self._browser]))
        self._reporter.handle(BrowserStarted(self._browser))

    def pytest_collection_modifyitems(self, items: list[pytest.Item]) -> None:
        self._browser.last_result = replace(self._browser.last_result, total=len(items))

    def pytest_runtest_logreport(self, report: pytest.TestReport) -> None:
        if not is_terminal_report(report):
            return

        for log_type, line in captured_lines(report):
            self._reporter.handle(BrowserLogged(self._browser, line, log_type))

        result = spec_result_from_report(report)
        self._browser.last_result = advance(self._browser.last_result, result)
        self._reporter.handle(SpecCompleted(self._browser, result))

    def pytest_collectreport(self, report: pytest.CollectReport) -> None:
        if report.failed:
            error = f"{report.nodeid}: {report.longreprtext}"
            self._reporter.handle(BrowserErrored(self._browser, error))

    def pytest_internalerror(self, excrepr: object, excinfo: object) -> None:
        del excinfo  # Unused
        self._browser.last_result = replace(self._browser.last_result, error=True)
        self._reporter.handle(BrowserErrored(self._browser, str(excrepr)))

    @pytest.hookimpl(tryfirst=True)
    def pytest_report_teststatus(
        self,
        report: pytest.TestReport,
        config: pytest.Config,
    ) -> tuple[str, str, str] | None:
        """Keep pytest's category, drop its progress letters."""
        del config  # Unused
        if hasattr(report, "wasxfail"):
            category = "xfailed" if report.skipped else "xpassed"
        elif report.when == "call":
            category = report.outcome
        elif report.failed:
            category = "error"
        elif report.skipped:
            category = "skipped"
        else:
            return None
        return category, "", ""

    def pytest_sessionfinish(self, session: pytest.Session, exitstatus: int) -> None:
        del session  # Unused
        elapsed = time.perf_counter() - self._started_at if self._started_at is not None else 0.0
        self._browser.last_result = replace(
            self._browser.last_result,
            total_time=elapsed,
            error=self._browser.last_result.error or exitstatus == pytest.ExitCode.INTERNAL_ERROR,
            disconnected=exitstatus == pytest.ExitCode.INTERRUPTED,
        )
        self._reporter.handle(RunCompleted())
