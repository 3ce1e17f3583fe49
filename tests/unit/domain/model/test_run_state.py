"""Tests for domain/model/run_state.py."""

from nyanreporter.domain.model.options import ReporterOptions
from nyanreporter.domain.model.results import BrowserResult
from nyanreporter.domain.model.run_state import BrowserError, LogBucket, RunPhase, RunState


class TestRunState:
    """Tests for RunState."""

    def test_initial_state(self) -> None:
        state = RunState(options=ReporterOptions())
        assert state.phase is RunPhase.IDLE
        assert state.browsers == []
        assert state.browser_logs == {}
        assert state.stats == BrowserResult()
        assert state.data_store is None

    def test_clear_run_keeps_lifetime_fields(self) -> None:
        state = RunState(options=ReporterOptions(suppress_error_report=True))
        state.adapter_messages.append("kept")
        state.browsers.append("b")
        state.number_of_browsers = 1
        state.browser_logs["b"] = LogBucket("B", ["line"])
        state.browser_errors.append(BrowserError("b", "e"))
        state.stats = BrowserResult(failed=2)
        state.color_index = 7
        state.total_time = 1.5
        state.number_of_slow_tests = 2

        state.clear_run()

        assert state.adapter_messages == ["kept"]
        assert state.options.suppress_error_report is True
        assert state.browsers == []
        assert state.number_of_browsers == 0
        assert state.browser_logs == {}
        assert state.browser_errors == []
        assert state.stats == BrowserResult()
        assert (state.color_index, state.total_time, state.number_of_slow_tests) == (0, 0, 0)

    def test_clear_run_creates_new_containers(self) -> None:
        state = RunState(options=ReporterOptions())
        logs = state.browser_logs
        state.clear_run()
        assert state.browser_logs is not logs
