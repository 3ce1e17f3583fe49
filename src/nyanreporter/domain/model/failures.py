"""Failure tree accumulated by the result store.

Suites nest by name; each failed test lists the browsers it failed in
together with their failure messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class FailedBrowser:
    """Failure of one test in one browser."""

    name: str
    errors: tuple[str, ...] = ()


@dataclass(slots=True)
class FailedTest:
    """Test that failed in at least one browser."""

    name: str
    browsers: list[FailedBrowser] = field(default_factory=list)


@dataclass(slots=True)
class FailedSuite:
    """Suite node. Children keep insertion order."""

    name: str
    suites: list[FailedSuite] = field(default_factory=list)
    tests: list[FailedTest] = field(default_factory=list)

    def child(self, name: str) -> FailedSuite:
        """Get or create the nested suite with this name."""
        for suite in self.suites:
            if suite.name == name:
                return suite
        suite = FailedSuite(name=name)
        self.suites.append(suite)
        return suite

    def test(self, name: str) -> FailedTest:
        """Get or create the test with this name."""
        for test in self.tests:
            if test.name == name:
                return test
        test = FailedTest(name=name)
        self.tests.append(test)
        return test

    @property
    def failure_count(self) -> int:
        """Failed (test, browser) pairs in this subtree."""
        own = sum(len(test.browsers) for test in self.tests)
        return own + sum(suite.failure_count for suite in self.suites)
