"""Nyan reporter: run-scoped state and lifecycle hooks.

The reporter is purely reactive. Every hook runs synchronously to
completion in the order the host delivers events; rendering, persistence
and printing are delegated to injected collaborators.

State machine:
    IDLE --on_run_start--> RUNNING --on_run_complete--> IDLE

on_run_start is the only transition that resets run-scoped state.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from nyanreporter.domain.events import (
    BrowserErrored,
    BrowserLogged,
    BrowserStarted,
    RunCompleted,
    RunStarted,
    SpecCompleted,
)
from nyanreporter.domain.exceptions import RunNotStartedError, UnknownEventError
from nyanreporter.domain.model.options import ReporterOptions
from nyanreporter.domain.model.run_state import BrowserError, LogBucket, RunPhase, RunState

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from nyanreporter.application.reporters.collaborators import Collaborators
    from nyanreporter.domain.events import LifecycleEvent
    from nyanreporter.domain.ports import ColorStreamPort, DrawSurfacePort, ResultStorePort

logger = logging.getLogger(__name__)


class NyanReporter:
    """Host-driven reporter that animates progress and prints summaries.

    Owns exactly one RunState. Callers only ever see read-only views of
    it through the properties below.

    Contracts:
        - Exactly one adapter, installed at construction
        - on_spec_complete triggers exactly one draw tick
        - on_run_complete shows the cursor before anything else
    """

    def __init__(
        self,
        collaborators: Collaborators,
        config: Mapping[str, object] | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            collaborators: Injected collaborators and accessors.
            config: Host configuration. Only
                config["nyan_reporter"]["suppress_error_report"] is read.

        Raises:
            ConfigurationError: Reporter section of config is malformed.
        """
        self._collaborators = collaborators
        self._state = RunState(options=ReporterOptions.from_config(config))
        self._state.adapters = (self._record_adapter_message,)

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def options(self) -> ReporterOptions:
        return self._state.options

    @property
    def adapters(self) -> tuple[Callable[[str], None], ...]:
        return self._state.adapters

    @property
    def adapter_messages(self) -> tuple[str, ...]:
        return tuple(self._state.adapter_messages)

    @property
    def phase(self) -> RunPhase:
        return self._state.phase

    @property
    def browsers(self) -> tuple[Any, ...]:
        return tuple(self._state.browsers)

    @property
    def number_of_browsers(self) -> int:
        return self._state.number_of_browsers

    @property
    def browser_logs(self) -> Mapping[Any, LogBucket]:
        return MappingProxyType(self._state.browser_logs)

    @property
    def browser_errors(self) -> tuple[BrowserError, ...]:
        return tuple(self._state.browser_errors)

    @property
    def stats(self) -> Any:
        """Last stats snapshot seen (same object the host handed in)."""
        return self._state.stats

    @property
    def color_index(self) -> int:
        return self._state.color_index

    @property
    def total_time(self) -> float:
        return self._state.total_time

    @property
    def number_of_slow_tests(self) -> int:
        return self._state.number_of_slow_tests

    @property
    def data_store(self) -> ResultStorePort | None:
        return self._state.data_store

    @property
    def draw_surface(self) -> DrawSurfacePort | None:
        return self._state.draw_surface

    @property
    def color_stream(self) -> ColorStreamPort | None:
        return self._state.color_stream

    # -------------------------------------------------------------------------
    # State lifecycle
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Re-acquire collaborators and clear all run-scoped state.

        Lifetime fields (options, adapters, adapter_messages) are kept.
        """
        state = self._state
        state.data_store = self._collaborators.result_store()
        state.draw_surface = self._collaborators.draw_surface()
        state.color_stream = self._collaborators.color_stream()
        state.clear_run()

    # -------------------------------------------------------------------------
    # Lifecycle hooks
    # -------------------------------------------------------------------------

    def on_run_start(self, browsers: Sequence[Any] | None = None) -> None:
        """Start a fresh run.

        Args:
            browsers: Browsers expected in this run. None = unknown (0).
        """
        if self._state.phase is RunPhase.RUNNING:
            logger.warning("Run started while previous run still active; starting fresh")

        self._collaborators.terminal.cursor.hide()
        self.reset()
        self._collaborators.output.write("\n")
        self._state.number_of_browsers = len(browsers) if browsers is not None else 0
        self._enter(RunPhase.RUNNING)

    def on_browser_start(self, browser: Any) -> None:
        """Register a browser. number_of_browsers follows the registry."""
        self._warn_if_idle("on_browser_start")
        self._state.browsers.append(browser)
        self._state.number_of_browsers = len(self._state.browsers)

    def on_browser_log(self, browser: Any, message: str, log_type: Any = None) -> None:
        """Append a log line to the browser's bucket.

        Args:
            browser: Handle with id and name.
            message: Log line.
            log_type: Accepted for the host contract, not interpreted.
        """
        del log_type  # Unused
        self._warn_if_idle("on_browser_log")

        bucket = self._state.browser_logs.get(browser.id)
        if bucket is None:
            bucket = LogBucket(name=browser.name)
            self._state.browser_logs[browser.id] = bucket
        bucket.messages.append(message)

    def on_spec_complete(self, browser: Any, result: Any) -> None:
        """Take the browser's latest snapshot, persist, draw one tick.

        Args:
            browser: Handle with last_result (rolling snapshot).
            result: Finished spec, forwarded to the result store.

        Raises:
            RunNotStartedError: No run was ever started.
        """
        self._warn_if_idle("on_spec_complete")
        self._state.stats = browser.last_result

        if not self._state.options.suppress_error_report:
            self._require_data_store().save(browser, result)

        self.draw()

    def on_browser_error(self, browser: Any, error: Any) -> None:
        """Record a run-level browser error for the final summary."""
        self._warn_if_idle("on_browser_error")
        self._state.browser_errors.append(BrowserError(browser=browser, error=error))

    def on_run_complete(self) -> None:
        """Restore the cursor and flush the summaries.

        Cursor is shown first, unconditionally.

        Raises:
            RunNotStartedError: No run was ever started (cursor still shown).
        """
        self._collaborators.terminal.cursor.show()

        state = self._state
        output = self._collaborators.output
        data_store = self._require_data_store()

        if state.browser_errors:
            output.print_browser_errors(self.browser_errors)
        output.print_test_failures(
            data_store.get_data(),
            state.stats,
            state.options.suppress_error_report,
        )
        output.print_browser_logs(self.browser_logs)

        self._enter(RunPhase.IDLE)

    def handle(self, event: LifecycleEvent) -> None:
        """Dispatch one lifecycle event to the matching hook.

        Raises:
            UnknownEventError: event is not a lifecycle event.
        """
        match event:
            case RunStarted(browsers=browsers):
                self.on_run_start(browsers)
            case BrowserStarted(browser=browser):
                self.on_browser_start(browser)
            case BrowserLogged(browser=browser, message=message, log_type=log_type):
                self.on_browser_log(browser, message, log_type)
            case SpecCompleted(browser=browser, result=result):
                self.on_spec_complete(browser, result)
            case BrowserErrored(browser=browser, error=error):
                self.on_browser_error(browser, error)
            case RunCompleted():
                self.on_run_complete()
            case _:
                raise UnknownEventError(type(event))

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self) -> None:
        """Render one animation frame and flip the frame parity.

        Raises:
            RunNotStartedError: No draw surface acquired yet.
        """
        surface = self._state.draw_surface
        if surface is None:
            raise RunNotStartedError("draw_surface")

        stats = self._state.stats
        surface.append_rainbow()
        surface.draw_scoreboard(stats)
        surface.draw_rainbow()
        surface.draw_nyan_cat(stats)
        surface.toggle_tick()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _record_adapter_message(self, message: str) -> None:
        """The single adapter: keeps every message for later inspection."""
        self._state.adapter_messages.append(message)
        logger.debug("adapter: %s", message)

    def _require_data_store(self) -> ResultStorePort:
        data_store = self._state.data_store
        if data_store is None:
            raise RunNotStartedError("data_store")
        return data_store

    def _enter(self, phase: RunPhase) -> None:
        logger.debug("phase %s -> %s", self._state.phase.value, phase.value)
        self._state.phase = phase

    def _warn_if_idle(self, hook: str) -> None:
        if self._state.phase is RunPhase.IDLE:
            logger.warning("%s received outside of a run", hook)
