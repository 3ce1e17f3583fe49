"""Lifecycle events delivered by the host runner.

Tagged union: one frozen dataclass per event kind. Reporter.handle()
dispatches on the concrete type with structural pattern matching.
Payloads (browsers, results, errors) are opaque to the domain.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class RunStarted:
    """Host starts a run. browsers=None means unknown count."""

    browsers: Sequence[Any] | None = None


@dataclass(frozen=True, slots=True)
class BrowserStarted:
    """Browser connected and began executing."""

    browser: Any


@dataclass(frozen=True, slots=True)
class BrowserLogged:
    """Browser emitted one log line. log_type is passed through untouched."""

    browser: Any
    message: str
    log_type: Any = None


@dataclass(frozen=True, slots=True)
class SpecCompleted:
    """Browser finished one spec. browser.last_result is already updated."""

    browser: Any
    result: Any


@dataclass(frozen=True, slots=True)
class BrowserErrored:
    """Browser reported a run-level error."""

    browser: Any
    error: Any


@dataclass(frozen=True, slots=True)
class RunCompleted:
    """Host finished the run (also on early termination)."""


LifecycleEvent: TypeAlias = (
    RunStarted | BrowserStarted | BrowserLogged | SpecCompleted | BrowserErrored | RunCompleted
)
