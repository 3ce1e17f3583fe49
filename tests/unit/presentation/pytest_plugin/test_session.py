"""Tests for presentation/pytest_plugin/session.py."""

import os
from unittest.mock import MagicMock

import pytest

from nyanreporter.domain.events import (
    BrowserErrored,
    BrowserLogged,
    BrowserStarted,
    RunCompleted,
    RunStarted,
    SpecCompleted,
)
from nyanreporter.domain.model.results import BrowserResult
from nyanreporter.presentation.pytest_plugin.session import (
    NyanSession,
    advance,
    captured_lines,
    current_browser,
    is_terminal_report,
    spec_result_from_report,
)
from tests.factories import make_browser, make_spec_result


def make_report(
    nodeid: str = "tests/test_math.py::TestAdd::test_adds",
    outcome: str = "passed",
    when: str = "call",
    *,
    longrepr: str | None = None,
    sections: tuple[tuple[str, str], ...] = (),
    duration: float = 0.5,
    **extra: object,
) -> pytest.TestReport:
    """Create a TestReport for hook tests."""
    return pytest.TestReport(
        nodeid=nodeid,
        location=("tests/test_math.py", 0, "test_adds"),
        keywords={},
        outcome=outcome,
        longrepr=longrepr,
        when=when,
        sections=list(sections),
        duration=duration,
        **extra,
    )


def handled(reporter: MagicMock) -> list[object]:
    return [call.args[0] for call in reporter.handle.call_args_list]


class TestCurrentBrowser:
    """Tests for current_browser()."""

    def test_identifies_process(self) -> None:
        browser = current_browser()
        assert browser.id == f"python-{os.getpid()}"
        assert browser.name.startswith("Python ")
        assert browser.last_result == BrowserResult()


class TestIsTerminalReport:
    """Tests for is_terminal_report()."""

    @pytest.mark.parametrize(
        ("when", "outcome", "expected"),
        [
            ("call", "passed", True),
            ("call", "failed", True),
            ("setup", "passed", False),
            ("setup", "failed", True),
            ("setup", "skipped", True),
            ("teardown", "passed", False),
            ("teardown", "failed", True),
        ],
    )
    def test_terminal(self, when: str, outcome: str, expected: bool) -> None:
        longrepr = "boom" if outcome == "failed" else None
        assert is_terminal_report(make_report(when=when, outcome=outcome, longrepr=longrepr)) is expected


class TestSpecResultFromReport:
    """Tests for spec_result_from_report()."""

    def test_suite_from_node_id(self) -> None:
        result = spec_result_from_report(make_report())
        assert result.description == "test_adds"
        assert result.suite == ("tests/test_math.py", "TestAdd")
        assert result.success is True
        assert result.time == 0.5
        assert result.log == ()

    def test_failed_carries_longrepr(self) -> None:
        result = spec_result_from_report(make_report(outcome="failed", longrepr="assert 1 == 2"))
        assert result.failed is True
        assert result.log == ("assert 1 == 2",)

    def test_skipped(self) -> None:
        result = spec_result_from_report(make_report(outcome="skipped", longrepr=("f.py", 1, "Skipped: no")))
        assert result.skipped is True
        assert result.success is False
        assert result.log == ()

    def test_module_level_test(self) -> None:
        result = spec_result_from_report(make_report(nodeid="test_a.py::test_b"))
        assert result.suite == ("test_a.py",)


class TestCapturedLines:
    """Tests for captured_lines()."""

    def test_call_report_owns_setup_and_call(self) -> None:
        report = make_report(
            sections=(
                ("Captured stdout setup", "s1\n"),
                ("Captured stdout call", "c1\nc2\n"),
                ("Captured stderr call", "e1\n"),
                ("Captured log teardown", "t1\n"),
            ),
        )
        assert list(captured_lines(report)) == [
            ("stdout", "s1"),
            ("stdout", "c1"),
            ("stdout", "c2"),
            ("stderr", "e1"),
        ]

    def test_ignores_foreign_sections(self) -> None:
        report = make_report(sections=(("custom section", "x\n"),))
        assert list(captured_lines(report)) == []


class TestAdvance:
    """Tests for advance()."""

    def test_counts_each_outcome(self) -> None:
        snapshot = BrowserResult(total=3)
        snapshot = advance(snapshot, make_spec_result(time=0.25))
        snapshot = advance(snapshot, make_spec_result(success=False))
        snapshot = advance(snapshot, make_spec_result(success=False, skipped=True))
        assert (snapshot.success, snapshot.failed, snapshot.skipped) == (1, 1, 1)
        assert snapshot.total == 3
        assert snapshot.net_time == 0.25


class TestNyanSession:
    """Tests for NyanSession hooks."""

    def make_session(self) -> tuple[NyanSession, MagicMock]:
        reporter = MagicMock()
        return NyanSession(reporter, make_browser(name="Python 3")), reporter

    def test_default_browser(self) -> None:
        assert NyanSession(MagicMock()).browser.name.startswith("Python ")

    def test_sessionstart(self) -> None:
        session, reporter = self.make_session()
        session.pytest_sessionstart(MagicMock())
        assert handled(reporter) == [RunStarted(browsers=[session.browser]), BrowserStarted(session.browser)]

    def test_collection_sets_total(self) -> None:
        session, _ = self.make_session()
        session.pytest_collection_modifyitems([MagicMock(), MagicMock()])
        assert session.browser.last_result.total == 2

    def test_logreport_emits_logs_then_spec(self) -> None:
        session, reporter = self.make_session()
        report = make_report(sections=(("Captured stdout call", "hello\n"),))

        session.pytest_runtest_logreport(report)

        logged, completed = handled(reporter)
        assert logged == BrowserLogged(session.browser, "hello", "stdout")
        assert isinstance(completed, SpecCompleted)
        assert completed.result.description == "test_adds"
        assert session.browser.last_result.success == 1

    def test_logreport_snapshot_updated_before_event(self) -> None:
        session, reporter = self.make_session()
        seen: list[BrowserResult] = []
        reporter.handle.side_effect = lambda event: seen.append(event.browser.last_result)

        session.pytest_runtest_logreport(make_report(outcome="failed", longrepr="boom"))

        assert seen[0].failed == 1

    def test_logreport_ignores_passing_setup(self) -> None:
        session, reporter = self.make_session()
        session.pytest_runtest_logreport(make_report(when="setup"))
        reporter.handle.assert_not_called()

    def test_collect_error(self) -> None:
        session, reporter = self.make_session()
        report = pytest.CollectReport("tests/test_bad.py", "failed", "SyntaxError", [])

        session.pytest_collectreport(report)

        (event,) = handled(reporter)
        assert isinstance(event, BrowserErrored)
        assert event.error == "tests/test_bad.py: SyntaxError"

    def test_collect_success_ignored(self) -> None:
        session, reporter = self.make_session()
        session.pytest_collectreport(pytest.CollectReport("tests/test_ok.py", "passed", None, []))
        reporter.handle.assert_not_called()

    def test_internalerror(self) -> None:
        session, reporter = self.make_session()
        session.pytest_internalerror("INTERNALERROR> boom", MagicMock())
        assert session.browser.last_result.error is True
        assert handled(reporter) == [BrowserErrored(session.browser, "INTERNALERROR> boom")]

    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({"outcome": "passed"}, ("passed", "", "")),
            ({"outcome": "failed", "longrepr": "x"}, ("failed", "", "")),
            ({"outcome": "failed", "when": "setup", "longrepr": "x"}, ("error", "", "")),
            ({"outcome": "skipped", "when": "setup", "longrepr": ("f", 1, "s")}, ("skipped", "", "")),
            ({"outcome": "skipped", "longrepr": ("f", 1, "s"), "wasxfail": ""}, ("xfailed", "", "")),
            ({"outcome": "passed", "wasxfail": ""}, ("xpassed", "", "")),
            ({"outcome": "passed", "when": "teardown"}, None),
        ],
    )
    def test_report_teststatus(self, kwargs: dict[str, object], expected: object) -> None:
        session, _ = self.make_session()
        assert session.pytest_report_teststatus(make_report(**kwargs), MagicMock()) == expected

    def test_sessionfinish(self) -> None:
        session, reporter = self.make_session()
        session.pytest_sessionstart(MagicMock())
        reporter.reset_mock()

        session.pytest_sessionfinish(MagicMock(), pytest.ExitCode.OK)

        assert handled(reporter) == [RunCompleted()]
        assert session.browser.last_result.total_time >= 0
        assert session.browser.last_result.error is False
        assert session.browser.last_result.disconnected is False

    def test_sessionfinish_internal_error(self) -> None:
        session, _ = self.make_session()
        session.pytest_sessionfinish(MagicMock(), pytest.ExitCode.INTERNAL_ERROR)
        assert session.browser.last_result.error is True

    def test_sessionfinish_interrupted_marks_disconnected(self) -> None:
        session, reporter = self.make_session()
        session.pytest_sessionfinish(MagicMock(), pytest.ExitCode.INTERRUPTED)
        assert session.browser.last_result.disconnected is True
        assert handled(reporter) == [RunCompleted()]
