"""Tests for domain/events.py."""

import pytest

from nyanreporter.domain.events import (
    BrowserErrored,
    BrowserLogged,
    BrowserStarted,
    RunCompleted,
    RunStarted,
    SpecCompleted,
)


class TestEvents:
    """Tests for lifecycle event dataclasses."""

    def test_run_started_defaults_to_unknown_browsers(self) -> None:
        assert RunStarted().browsers is None

    def test_browser_logged_defaults_log_type(self) -> None:
        assert BrowserLogged("b", "msg").log_type is None

    def test_events_are_frozen(self) -> None:
        event = BrowserStarted("b")
        with pytest.raises(AttributeError):
            event.browser = "other"  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert SpecCompleted("b", "r") == SpecCompleted("b", "r")
        assert RunCompleted() == RunCompleted()

