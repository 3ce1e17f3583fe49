"""pytest plugin for nyanreporter.

Replaces pytest's progress letters with the nyan cat animation and
prints a failure tree at the end of the session.

Usage:
    pytest --nyan

Configuration (command line, pytest.ini or pyproject.toml):
    --nyan-suppress-error-report: Skip the failure tree in the summary
    nyan_suppress_error_report: Same, as ini option (default: false)
"""

from __future__ import annotations

import pytest
from rich.console import Console

from nyanreporter.domain.model.options import REPORTER_SECTION
from nyanreporter.presentation.factory import create_reporter
from nyanreporter.presentation.pytest_plugin.session import NyanSession

__all__ = ["NyanSession", "quiet_terminal_reporter", "reporter_config"]

PLUGIN_NAME = "nyanreporter-session"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command line and ini options."""
    group = parser.getgroup("nyan", "nyan cat reporting")
    group.addoption(
        "--nyan",
        action="store_true",
        default=False,
        help="Report progress with the nyan cat animation.",
    )
    group.addoption(
        "--nyan-suppress-error-report",
        action="store_true",
        default=False,
        help="Do not print the failure tree after the run.",
    )
    parser.addini(
        "nyan_suppress_error_report",
        type="bool",
        default=False,
        help="Do not print the failure tree after the run.",
    )


def reporter_config(config: pytest.Config) -> dict[str, object]:
    """Build reporter configuration from pytest options.

    Command line flag wins; otherwise the ini value is used.
    """
    suppress = bool(config.getoption("nyan_suppress_error_report")) or bool(
        config.getini("nyan_suppress_error_report"),
    )
    return {REPORTER_SECTION: {"suppress_error_report": suppress}}


def quiet_terminal_reporter(config: pytest.Config) -> None:
    """Stop pytest's terminal reporter from writing per-test progress.

    Module paths, and per-test location lines under -v, would land inside
    the block the animation keeps repainting. Summary sections are kept.
    """
    terminal = config.pluginmanager.get_plugin("terminalreporter")
    if terminal is None:
        return
    terminal.showfspath = False
    if config.option.verbose > 0:
        config.option.verbose = 0


@pytest.hookimpl(trylast=True)
def pytest_configure(config: pytest.Config) -> None:
    """Register the session plugin when --nyan is given.

    Runs last so pytest's terminal reporter is already registered.
    """
    if not config.getoption("nyan"):
        return
    # xdist workers report through the controller.
    if hasattr(config, "workerinput"):
        return

    quiet_terminal_reporter(config)
    reporter = create_reporter(reporter_config(config), console=Console())
    config.pluginmanager.register(NyanSession(reporter), PLUGIN_NAME)
