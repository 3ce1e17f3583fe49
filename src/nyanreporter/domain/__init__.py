"""nyanreporter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from nyanreporter.domain.events import (
    BrowserErrored,
    BrowserLogged,
    BrowserStarted,
    LifecycleEvent,
    RunCompleted,
    RunStarted,
    SpecCompleted,
)
from nyanreporter.domain.exceptions import (
    ConfigurationError,
    NyanReporterError,
    RunNotStartedError,
    UnknownEventError,
)
from nyanreporter.domain.model import (
    Browser,
    BrowserError,
    BrowserResult,
    LogBucket,
    ReporterOptions,
    RunPhase,
    RunState,
    SpecResult,
)

__all__ = [
    # Exceptions
    "NyanReporterError",
    "ConfigurationError",
    "RunNotStartedError",
    "UnknownEventError",
    # Events
    "LifecycleEvent",
    "RunStarted",
    "BrowserStarted",
    "BrowserLogged",
    "SpecCompleted",
    "BrowserErrored",
    "RunCompleted",
    # Model
    "Browser",
    "BrowserError",
    "BrowserResult",
    "LogBucket",
    "ReporterOptions",
    "RunPhase",
    "RunState",
    "SpecResult",
]
