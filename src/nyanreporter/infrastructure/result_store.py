"""In-memory result store keeping failed specs as a suite tree."""

from __future__ import annotations

import logging
from typing import Any

from nyanreporter.domain.model.failures import FailedBrowser, FailedSuite

logger = logging.getLogger(__name__)


class MemoryResultStore:
    """ResultStorePort implementation.

    Only failures are kept: passed and skipped specs, and specs without
    a suite path, are dropped. Failures of the same test in several
    browsers end up under one FailedTest.
    """

    __slots__ = ("_suites",)

    def __init__(self) -> None:
        self._suites: list[FailedSuite] = []

    def save(self, browser: Any, result: Any) -> None:
        """Record a finished spec if it failed.

        Args:
            browser: Handle with name.
            result: SpecResult-like object (description, suite, success,
                skipped, log).
        """
        if result.success or result.skipped or not result.suite:
            return

        root_name, *nested = result.suite
        node = self._root(root_name)
        for name in nested:
            node = node.child(name)

        node.test(result.description).browsers.append(
            FailedBrowser(name=browser.name, errors=tuple(result.log)),
        )
        logger.debug("stored failure %s in %s", result.description, browser.name)

    def get_data(self) -> tuple[FailedSuite, ...]:
        """Top-level failed suites in insertion order."""
        return tuple(self._suites)

    def clear(self) -> None:
        """Forget everything stored."""
        self._suites = []

    def _root(self, name: str) -> FailedSuite:
        for suite in self._suites:
            if suite.name == name:
                return suite
        suite = FailedSuite(name=name)
        self._suites.append(suite)
        return suite
