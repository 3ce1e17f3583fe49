"""Terminal control port: geometry and cursor visibility."""

from __future__ import annotations

from typing import Protocol


class WindowPort(Protocol):
    """Terminal window geometry."""

    @property
    def width(self) -> int:
        """Terminal width in columns."""
        ...


class CursorPort(Protocol):
    """Cursor visibility control."""

    def show(self) -> None:
        """Make the cursor visible."""
        ...

    def hide(self) -> None:
        """Hide the cursor."""
        ...


class TerminalControlPort(Protocol):
    """Contract for terminal control: window + cursor."""

    @property
    def window(self) -> WindowPort:
        """Window geometry."""
        ...

    @property
    def cursor(self) -> CursorPort:
        """Cursor control."""
        ...
