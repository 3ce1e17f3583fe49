"""Rich output sink: end-of-run summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from rich.console import Console

    from nyanreporter.domain.model.failures import FailedSuite


def _count(stats: Any, name: str) -> int:
    return getattr(stats, name, 0) or 0


class RichOutputSink:
    """OutputSinkPort implementation printing to a rich Console.

    Each print_* method prints nothing for empty input.
    """

    __slots__ = ("_console",)

    def __init__(self, console: Console) -> None:
        self._console = console

    def write(self, text: str) -> None:
        """Write text as-is (no markup, no highlighting)."""
        self._console.out(text, end="", highlight=False)

    def print_browser_errors(self, errors: Sequence[Any]) -> None:
        if not errors:
            return

        console = self._console
        console.print()
        console.print("[bold red]BROWSER ERRORS:[/bold red]")
        for entry in errors:
            name = getattr(entry.browser, "name", entry.browser)
            console.print(Text.assemble("  ", (str(name), "yellow"), ": ", str(entry.error)))

    def print_test_failures(self, data: Any, stats: Any, suppress_error_report: bool) -> None:
        """Print the run summary, then the failure tree unless suppressed.

        Args:
            data: Failed suites from the result store.
            stats: Last stats snapshot.
            suppress_error_report: Skip the failure tree.
        """
        console = self._console
        console.print()
        console.print(f"[green]✔ {_count(stats, 'success')} tests completed[/green]")

        failed = _count(stats, "failed")
        if failed:
            console.print(f"[red]✖ {failed} tests failed[/red]")
        skipped = _count(stats, "skipped")
        if skipped:
            console.print(f"[cyan]{skipped} tests skipped[/cyan]")
        if getattr(stats, "error", False):
            console.print("[bold red]✖ test run error[/bold red]")
        if getattr(stats, "disconnected", False):
            console.print("[bold red]✖ browser disconnected before the run finished[/bold red]")

        if suppress_error_report or not data:
            return

        console.print()
        console.print("[bold red]FAILED TESTS:[/bold red]")
        for suite in data:
            console.print(self._suite_tree(suite))

    def print_browser_logs(self, logs: Mapping[Any, Any]) -> None:
        if not logs:
            return

        console = self._console
        for bucket in logs.values():
            console.print()
            console.rule(Text(f"LOG MESSAGES FOR: {bucket.name}"), align="left")
            for message in bucket.messages:
                console.print(Text(f"    {message}"), soft_wrap=True)
        console.print()

    def _suite_tree(self, suite: FailedSuite, parent: Tree | None = None) -> Tree:
        label = Text.assemble((suite.name, "bold"), f" ({suite.failure_count})")
        node = Tree(label) if parent is None else parent.add(label)

        for test in suite.tests:
            test_node = node.add(Text(f"✖ {test.name}", style="red"))
            for browser in test.browsers:
                browser_node = test_node.add(Text(browser.name, style="yellow"))
                self._add_lines(browser_node, browser.errors)

        for child in suite.suites:
            self._suite_tree(child, node)
        return node

    @staticmethod
    def _add_lines(node: Tree, errors: Iterable[str]) -> None:
        for error in errors:
            for line in str(error).splitlines() or [""]:
                node.add(Text(line, style="dim"))
