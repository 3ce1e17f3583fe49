"""Domain model: value objects and the reporter aggregate."""

from nyanreporter.domain.model.browser import Browser
from nyanreporter.domain.model.failures import FailedBrowser, FailedSuite, FailedTest
from nyanreporter.domain.model.options import REPORTER_SECTION, ReporterOptions
from nyanreporter.domain.model.results import BrowserResult, SpecResult
from nyanreporter.domain.model.run_state import BrowserError, LogBucket, RunPhase, RunState

__all__ = [
    "REPORTER_SECTION",
    # Host values
    "Browser",
    "BrowserResult",
    "SpecResult",
    # Failure tree
    "FailedBrowser",
    "FailedSuite",
    "FailedTest",
    # Options
    "ReporterOptions",
    # Aggregate
    "BrowserError",
    "LogBucket",
    "RunPhase",
    "RunState",
]
