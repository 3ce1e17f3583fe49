"""Terminal control on top of a rich Console."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console


class RichWindow:
    """Window geometry read from the console."""

    __slots__ = ("_console",)

    def __init__(self, console: Console) -> None:
        self._console = console

    @property
    def width(self) -> int:
        """Console width in columns (re-read on every access)."""
        return self._console.width


class RichCursor:
    """Cursor visibility through console control codes.

    No-op when the console is not a terminal (rich decides).
    """

    __slots__ = ("_console",)

    def __init__(self, console: Console) -> None:
        self._console = console

    def show(self) -> None:
        self._console.show_cursor(True)

    def hide(self) -> None:
        self._console.show_cursor(False)


class RichTerminal:
    """TerminalControlPort implementation sharing one console."""

    __slots__ = ("_cursor", "_window")

    def __init__(self, console: Console) -> None:
        self._window = RichWindow(console)
        self._cursor = RichCursor(console)

    @property
    def window(self) -> RichWindow:
        return self._window

    @property
    def cursor(self) -> RichCursor:
        return self._cursor
