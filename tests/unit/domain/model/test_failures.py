"""Tests for domain/model/failures.py."""

from nyanreporter.domain.model.failures import FailedBrowser, FailedSuite


class TestFailedSuite:
    """Tests for FailedSuite."""

    def test_child_is_get_or_create(self) -> None:
        suite = FailedSuite("root")
        first = suite.child("nested")
        assert suite.child("nested") is first
        assert [s.name for s in suite.suites] == ["nested"]

    def test_test_is_get_or_create(self) -> None:
        suite = FailedSuite("root")
        test = suite.test("should work")
        assert suite.test("should work") is test
        assert len(suite.tests) == 1

    def test_children_keep_insertion_order(self) -> None:
        suite = FailedSuite("root")
        suite.child("b")
        suite.child("a")
        assert [s.name for s in suite.suites] == ["b", "a"]

    def test_failure_count_spans_subtree(self) -> None:
        suite = FailedSuite("root")
        suite.test("t1").browsers.append(FailedBrowser("Chrome"))
        suite.test("t1").browsers.append(FailedBrowser("Firefox"))
        suite.child("nested").test("t2").browsers.append(FailedBrowser("Chrome"))
        assert suite.failure_count == 3
